"""Role assignment repository port."""

from typing import Protocol

from nftroles.domain.entities import RoleAssignment, RoleAssignmentKey
from nftroles.domain.value_objects import RoleId


class RoleAssignmentRepository(Protocol):
    """Port for role assignment persistence and latest-grant bookkeeping."""

    async def get(self, key: RoleAssignmentKey) -> RoleAssignment | None: ...

    async def upsert(self, assignment: RoleAssignment) -> None: ...

    async def delete(self, key: RoleAssignmentKey) -> bool: ...

    async def get_latest_grantee(
        self, role: RoleId, grantor: str, token_address: str, token_id: int
    ) -> str | None: ...

    async def set_latest_grantee(self, key: RoleAssignmentKey) -> None: ...
