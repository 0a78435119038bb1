"""Role data use case."""

from nftroles.domain.entities import RoleAssignmentKey
from nftroles.domain.value_objects import RoleId


class RoleDataUseCase:
    """Return the payload stored with an assignment, empty if absent."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        role: RoleId,
        grantor: str,
        grantee: str,
        token_address: str,
        token_id: int,
    ) -> bytes:
        key = RoleAssignmentKey.create(role, grantor, grantee, token_address, token_id)
        async with self._uow_factory() as uow:
            assignment = await uow.assignments.get(key)
        return assignment.data if assignment else b""
