"""PostgreSQL role assignment repository implementation."""

from psycopg import AsyncConnection

from nftroles.domain.entities import RoleAssignment, RoleAssignmentKey
from nftroles.domain.value_objects import RoleId

_KEY_WHERE = (
    "role = %s AND grantor = %s AND grantee = %s AND token_address = %s AND token_id = %s"
)


def _key_params(key: RoleAssignmentKey) -> tuple:
    return (key.role.value, key.grantor, key.grantee, key.token_address, key.token_id)


class PostgresRoleAssignmentRepository:
    """Role assignment repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get(self, key: RoleAssignmentKey) -> RoleAssignment | None:
        """Get assignment by full key."""
        cur = await self._conn.execute(
            f"SELECT expiration_date, data, granted_at FROM role_assignment WHERE {_KEY_WHERE}",
            _key_params(key),
        )
        r = await cur.fetchone()
        if not r:
            return None
        return RoleAssignment(
            key=key,
            expiration_date=int(r[0]),
            data=bytes(r[1]),
            granted_at=r[2],
        )

    async def upsert(self, assignment: RoleAssignment) -> None:
        """Create assignment or overwrite expiration and data of existing one."""
        await self._conn.execute(
            "INSERT INTO role_assignment "
            "(role, grantor, grantee, token_address, token_id, expiration_date, data, granted_at) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s) "
            "ON CONFLICT (role, grantor, grantee, token_address, token_id) DO UPDATE SET "
            "expiration_date = EXCLUDED.expiration_date, data = EXCLUDED.data, "
            "granted_at = EXCLUDED.granted_at",
            _key_params(assignment.key)
            + (assignment.expiration_date, assignment.data, assignment.granted_at),
        )

    async def delete(self, key: RoleAssignmentKey) -> bool:
        """Delete assignment. Returns whether a row existed."""
        cur = await self._conn.execute(
            f"DELETE FROM role_assignment WHERE {_KEY_WHERE}",
            _key_params(key),
        )
        return cur.rowcount > 0

    async def get_latest_grantee(
        self, role: RoleId, grantor: str, token_address: str, token_id: int
    ) -> str | None:
        """Get grantee of the most recent grant for (role, grantor, token)."""
        cur = await self._conn.execute(
            "SELECT grantee FROM role_latest_grant "
            "WHERE role = %s AND grantor = %s AND token_address = %s AND token_id = %s",
            (role.value, grantor, token_address, token_id),
        )
        r = await cur.fetchone()
        return r[0] if r else None

    async def set_latest_grantee(self, key: RoleAssignmentKey) -> None:
        """Point (role, grantor, token) at key.grantee."""
        await self._conn.execute(
            "INSERT INTO role_latest_grant (role, grantor, token_address, token_id, grantee) "
            "VALUES (%s, %s, %s, %s, %s) "
            "ON CONFLICT (role, grantor, token_address, token_id) DO UPDATE SET "
            "grantee = EXCLUDED.grantee",
            (key.role.value, key.grantor, key.token_address, key.token_id, key.grantee),
        )
