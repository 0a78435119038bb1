"""PostgreSQL role event repository implementation."""

from psycopg import AsyncConnection

from nftroles.domain.entities import RoleEvent
from nftroles.domain.value_objects import RoleEventType, RoleId

_COLUMNS = (
    "id, event_type, role, token_address, token_id, grantor, grantee, "
    "expiration_date, data, created_at"
)


def _row_to_event(r: tuple) -> RoleEvent:
    return RoleEvent(
        id=r[0],
        event_type=RoleEventType(r[1]),
        role=RoleId(bytes(r[2])),
        token_address=r[3],
        token_id=int(r[4]),
        grantor=r[5],
        grantee=r[6],
        expiration_date=int(r[7]) if r[7] is not None else None,
        data=bytes(r[8]) if r[8] is not None else None,
        created_at=r[9],
    )


class PostgresRoleEventRepository:
    """Role event repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def append(self, event: RoleEvent) -> RoleEvent:
        """Append event; id is assigned by the sequence."""
        cur = await self._conn.execute(
            "INSERT INTO role_event "
            "(event_type, role, token_address, token_id, grantor, grantee, "
            "expiration_date, data, created_at) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s) RETURNING id",
            (
                event.event_type.value,
                event.role.value,
                event.token_address,
                event.token_id,
                event.grantor,
                event.grantee,
                event.expiration_date,
                event.data,
                event.created_at,
            ),
        )
        r = await cur.fetchone()
        event.id = r[0]
        return event

    async def list(
        self,
        *,
        after_id: int | None = None,
        limit: int = 100,
        role: RoleId | None = None,
        token_address: str | None = None,
        token_id: int | None = None,
    ) -> tuple[list[RoleEvent], int | None]:
        """List events in id order with cursor pagination."""
        conditions = []
        _params: list[object] = []
        if after_id is not None:
            conditions.append("id > %s")
            _params.append(after_id)
        if role is not None:
            conditions.append("role = %s")
            _params.append(role.value)
        if token_address is not None:
            conditions.append("token_address = %s")
            _params.append(token_address)
        if token_id is not None:
            conditions.append("token_id = %s")
            _params.append(token_id)
        where = (" WHERE " + " AND ".join(conditions)) if conditions else ""
        params = tuple(_params) + (limit + 1,)
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM role_event{where} ORDER BY id LIMIT %s",
            params,
        )
        rows = await cur.fetchall()
        events = [_row_to_event(r) for r in rows[:limit]]
        next_cursor = events[-1].id if len(rows) > limit else None
        return events, next_cursor
