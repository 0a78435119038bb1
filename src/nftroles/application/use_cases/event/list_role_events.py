"""List role events use case - feed for off-chain indexers."""

from nftroles.domain.entities import RoleEvent
from nftroles.domain.value_objects import RoleId, check_uint, normalize_account


class ListRoleEventsUseCase:
    """Page through the event log in emission order."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        *,
        after_id: int | None = None,
        limit: int = 100,
        role: RoleId | None = None,
        token_address: str | None = None,
        token_id: int | None = None,
    ) -> tuple[list[RoleEvent], int | None]:
        """Return events with id > after_id and the cursor for the next page."""
        if token_address is not None:
            token_address = normalize_account(token_address, "token_address")
        if token_id is not None:
            check_uint(token_id, 256, "token_id")
        async with self._uow_factory() as uow:
            return await uow.events.list(
                after_id=after_id,
                limit=limit,
                role=role,
                token_address=token_address,
                token_id=token_id,
            )
