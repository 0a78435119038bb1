"""Role event repository port."""

from typing import Protocol

from nftroles.domain.entities import RoleEvent
from nftroles.domain.value_objects import RoleId


class RoleEventRepository(Protocol):
    """Port for the append-only role event log."""

    async def append(self, event: RoleEvent) -> RoleEvent: ...

    async def list(
        self,
        *,
        after_id: int | None = None,
        limit: int = 100,
        role: RoleId | None = None,
        token_address: str | None = None,
        token_id: int | None = None,
    ) -> tuple[list[RoleEvent], int | None]: ...
