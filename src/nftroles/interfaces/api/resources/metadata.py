"""Role metadata API resources."""

import falcon.asgi

from nftroles.application.dto.role_metadata import RoleDescriptor, parse_role_metadata
from nftroles.domain.exceptions import ValidationError
from nftroles.domain.value_objects import RoleId


def _descriptor_to_dict(r: RoleDescriptor) -> dict:
    return {
        "id": r.id,
        "name": r.name,
        "description": r.description,
        "supportsMultipleAssignments": r.supports_multiple_assignments,
        "inputs": [i.model_dump(exclude_defaults=True) for i in r.inputs],
        "id_matches_name": r.id_matches_name,
    }


class RoleMetadataResource:
    """POST /v1/metadata/roles - validate a role metadata document.

    With ?role=<id>, answer only the descriptor of that role.
    """

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Validate and return normalised roles."""
        body = await req.get_media()
        try:
            role_param = req.get_param("role")
            role = RoleId.from_hex(role_param) if role_param else None
            document = parse_role_metadata(body)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        if role is not None:
            descriptor = document.get(role)
            if descriptor is None:
                resp.status = falcon.HTTP_404
                resp.media = {"error": f"Role {role} not described"}
                return
            resp.media = _descriptor_to_dict(descriptor)
            resp.status = falcon.HTTP_200
            return

        resp.media = {"roles": [_descriptor_to_dict(r) for r in document.roles]}
        resp.status = falcon.HTTP_200


class RoleIdsResource:
    """GET /v1/role-ids?name=... - derive role id from readable name."""

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        name = req.get_param("name") or ""
        try:
            role_id = RoleId.from_name(name)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = {"name": name, "id": role_id.hex}
        resp.status = falcon.HTTP_200
