"""Has role use case."""

from nftroles.application.ports import Clock, UnitOfWork
from nftroles.domain.entities import RoleAssignment, RoleAssignmentKey
from nftroles.domain.value_objects import RoleId


async def is_latest_grantee(uow: UnitOfWork, key: RoleAssignmentKey) -> bool:
    """True if no later grant to another grantee has superseded key.grantee."""
    latest = await uow.assignments.get_latest_grantee(
        key.role, key.grantor, key.token_address, key.token_id
    )
    return latest == key.grantee


async def evaluate_has_role(
    uow: UnitOfWork,
    key: RoleAssignmentKey,
    assignment: RoleAssignment | None,
    now: int,
    supports_multiple_assignments: bool,
) -> bool:
    """Apply expiration and, for unique roles, the last-grant-wins rule."""
    if assignment is None or not assignment.is_active(now):
        return False
    if supports_multiple_assignments:
        return True
    return await is_latest_grantee(uow, key)


class HasRoleUseCase:
    """Check whether grantee currently holds role from grantor on a token."""

    def __init__(self, unit_of_work_factory: type, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def execute(
        self,
        role: RoleId,
        grantor: str,
        grantee: str,
        token_address: str,
        token_id: int,
        supports_multiple_assignments: bool = True,
    ) -> bool:
        key = RoleAssignmentKey.create(role, grantor, grantee, token_address, token_id)
        now = self._clock.now()
        async with self._uow_factory() as uow:
            assignment = await uow.assignments.get(key)
            return await evaluate_has_role(
                uow, key, assignment, now, supports_multiple_assignments
            )
