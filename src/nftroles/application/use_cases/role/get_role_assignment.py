"""Get role assignment use case - combined read view."""

from nftroles.application.dto.role_dto import RoleAssignmentView
from nftroles.application.ports import Clock
from nftroles.application.use_cases.role.has_role import evaluate_has_role
from nftroles.domain.entities import RoleAssignmentKey
from nftroles.domain.value_objects import RoleId


class GetRoleAssignmentUseCase:
    """Read data, expiration and both has-role answers in one transaction."""

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
    ) -> RoleAssignmentView:
        key = RoleAssignmentKey.create(role, grantor, grantee, token_address, token_id)
        now = self._clock.now()
        async with self._uow_factory() as uow:
            assignment = await uow.assignments.get(key)
            has_role = await evaluate_has_role(uow, key, assignment, now, True)
            has_unique_role = await evaluate_has_role(uow, key, assignment, now, False)

        return RoleAssignmentView(
            has_role=has_role,
            has_unique_role=has_unique_role,
            expiration_date=assignment.expiration_date if assignment else 0,
            data=assignment.data if assignment else b"",
        )
