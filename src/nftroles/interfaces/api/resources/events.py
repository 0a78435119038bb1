"""Role event feed API resource."""

import falcon.asgi

from nftroles.application.use_cases.event.list_role_events import ListRoleEventsUseCase
from nftroles.domain.entities import RoleEvent
from nftroles.domain.exceptions import ValidationError
from nftroles.domain.value_objects import RoleEventType, RoleId
from nftroles.interfaces.api.encoding import parse_uint, to_hex


def _event_to_dict(event: RoleEvent) -> dict:
    item = {
        "id": event.id,
        "event": event.event_type.value,
        "role": event.role.hex,
        "token_address": event.token_address,
        "token_id": event.token_id,
        "grantor": event.grantor,
        "grantee": event.grantee,
        "created_at": event.created_at.isoformat(),
    }
    if event.event_type == RoleEventType.GRANTED:
        item["expiration_date"] = event.expiration_date
        item["data"] = to_hex(event.data or b"")
    return item


class EventsResource:
    """GET /v1/events - RoleGranted/RoleRevoked log for indexers."""

    def __init__(self, list_events: ListRoleEventsUseCase) -> None:
        self._list_events = list_events

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List events after cursor, optionally filtered by role or token."""
        try:
            limit = req.get_param_as_int("limit", default=100)
            limit = min(max(limit, 1), 1000)
            cursor = req.get_param("cursor")
            role = req.get_param("role")
            token_id = req.get_param("token_id")
            events, next_cursor = await self._list_events.execute(
                after_id=parse_uint(cursor, "cursor") if cursor else None,
                limit=limit,
                role=RoleId.from_hex(role) if role else None,
                token_address=req.get_param("token_address"),
                token_id=parse_uint(token_id, "token_id") if token_id else None,
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "items": [_event_to_dict(e) for e in events],
            "next_cursor": str(next_cursor) if next_cursor is not None else None,
        }
        resp.status = falcon.HTTP_200
