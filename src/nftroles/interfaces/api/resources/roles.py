"""Role registry API resources."""

import falcon.asgi

from nftroles.application.dto.role_dto import GrantRoleInput
from nftroles.application.use_cases.role.get_role_assignment import GetRoleAssignmentUseCase
from nftroles.application.use_cases.role.grant_role import GrantRoleUseCase
from nftroles.application.use_cases.role.has_role import HasRoleUseCase
from nftroles.application.use_cases.role.revoke_role import RevokeRoleUseCase
from nftroles.application.use_cases.role.role_data import RoleDataUseCase
from nftroles.application.use_cases.role.role_expiration_date import (
    RoleExpirationDateUseCase,
)
from nftroles.domain.exceptions import InvalidExpirationDate, ValidationError
from nftroles.domain.value_objects import RoleId
from nftroles.interfaces.api.encoding import parse_hex_bytes, parse_uint, to_hex


class RoleGrantsResource:
    """POST /v1/roles/{role}/grants - grant role, caller is grantor."""

    def __init__(self, grant_role: GrantRoleUseCase) -> None:
        self._grant = grant_role

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: str,
    ) -> None:
        """Grant role on token to grantee."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            body = await req.get_media()
            input_data = GrantRoleInput(
                role=RoleId.from_hex(role),
                grantee=body["grantee"],
                token_address=body["token_address"],
                token_id=parse_uint(body["token_id"], "token_id"),
                expiration_date=parse_uint(body["expiration_date"], "expiration_date"),
                data=parse_hex_bytes(body.get("data", "0x"), "data"),
            )
        except KeyError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": f"Missing required field: {e}"}
            return
        except (TypeError, ValidationError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            assignment = await self._grant.execute(user.account, input_data)
        except InvalidExpirationDate as e:
            resp.status = falcon.HTTP_422
            resp.media = {"error": str(e), "code": "expiration_in_past"}
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        key = assignment.key
        resp.media = {
            "role": key.role.hex,
            "grantor": key.grantor,
            "grantee": key.grantee,
            "token_address": key.token_address,
            "token_id": key.token_id,
            "expiration_date": assignment.expiration_date,
            "data": to_hex(assignment.data),
        }
        resp.status = falcon.HTTP_201


class RoleRevokeResource:
    """DELETE /v1/roles/{role}/tokens/{token_address}/{token_id}/grantees/{grantee}."""

    def __init__(self, revoke_role: RevokeRoleUseCase) -> None:
        self._revoke = revoke_role

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: str,
        token_address: str,
        token_id: str,
        grantee: str,
    ) -> None:
        """Revoke role granted by caller."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        try:
            await self._revoke.execute(
                user.account,
                RoleId.from_hex(role),
                grantee,
                token_address,
                parse_uint(token_id, "token_id"),
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.status = falcon.HTTP_204


class RoleAssignmentResource:
    """GET /v1/roles/{role}/grantors/{grantor}/tokens/{token_address}/{token_id}/grantees/{grantee}.

    Suffixed routes: /has-role, /data, /expiration-date.
    """

    def __init__(
        self,
        get_assignment: GetRoleAssignmentUseCase,
        has_role: HasRoleUseCase,
        role_data: RoleDataUseCase,
        role_expiration_date: RoleExpirationDateUseCase,
    ) -> None:
        self._get_assignment = get_assignment
        self._has_role = has_role
        self._role_data = role_data
        self._role_expiration_date = role_expiration_date

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: str,
        grantor: str,
        token_address: str,
        token_id: str,
        grantee: str,
    ) -> None:
        """Combined view of one assignment key."""
        try:
            view = await self._get_assignment.execute(
                RoleId.from_hex(role),
                grantor,
                grantee,
                token_address,
                parse_uint(token_id, "token_id"),
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = {
            "has_role": view.has_role,
            "has_unique_role": view.has_unique_role,
            "expiration_date": view.expiration_date,
            "data": to_hex(view.data),
        }
        resp.status = falcon.HTTP_200

    async def on_get_has_role(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: str,
        grantor: str,
        token_address: str,
        token_id: str,
        grantee: str,
    ) -> None:
        """hasRole; ?supports_multiple_assignments=false for unique roles."""
        supports_multiple = req.get_param_as_bool(
            "supports_multiple_assignments", default=True
        )
        try:
            result = await self._has_role.execute(
                RoleId.from_hex(role),
                grantor,
                grantee,
                token_address,
                parse_uint(token_id, "token_id"),
                supports_multiple_assignments=supports_multiple,
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = {"has_role": result}
        resp.status = falcon.HTTP_200

    async def on_get_data(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: str,
        grantor: str,
        token_address: str,
        token_id: str,
        grantee: str,
    ) -> None:
        """roleData - stored payload, 0x if absent."""
        try:
            data = await self._role_data.execute(
                RoleId.from_hex(role),
                grantor,
                grantee,
                token_address,
                parse_uint(token_id, "token_id"),
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = {"data": to_hex(data)}
        resp.status = falcon.HTTP_200

    async def on_get_expiration_date(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role: str,
        grantor: str,
        token_address: str,
        token_id: str,
        grantee: str,
    ) -> None:
        """roleExpirationDate - stored timestamp, 0 if absent."""
        try:
            expiration_date = await self._role_expiration_date.execute(
                RoleId.from_hex(role),
                grantor,
                grantee,
                token_address,
                parse_uint(token_id, "token_id"),
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        resp.media = {"expiration_date": expiration_date}
        resp.status = falcon.HTTP_200
