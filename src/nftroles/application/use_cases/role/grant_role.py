"""Grant role use case."""

import logging
from datetime import UTC, datetime

from nftroles.application.dto.role_dto import GrantRoleInput
from nftroles.application.ports import Clock
from nftroles.domain.entities import RoleAssignment, RoleAssignmentKey, RoleEvent
from nftroles.domain.exceptions import InvalidExpirationDate
from nftroles.domain.value_objects import check_uint

logger = logging.getLogger(__name__)


class GrantRoleUseCase:
    """Grant role on an NFT from the caller (grantor) to a grantee."""

    def __init__(self, unit_of_work_factory: type, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def execute(self, grantor: str, input_data: GrantRoleInput) -> RoleAssignment:
        """Create or overwrite the assignment and emit RoleGranted.

        No ownership check is made against the token: the caller decides
        which grantor to trust when querying.
        """
        key = RoleAssignmentKey.create(
            role=input_data.role,
            grantor=grantor,
            grantee=input_data.grantee,
            token_address=input_data.token_address,
            token_id=input_data.token_id,
        )
        expiration_date = check_uint(input_data.expiration_date, 64, "expiration_date")
        now = self._clock.now()
        if expiration_date < now:
            logger.warning(
                "Rejected grant of %s on %s/%s to %s: expiration %d before %d",
                key.role,
                key.token_address,
                key.token_id,
                key.grantee,
                expiration_date,
                now,
            )
            raise InvalidExpirationDate(expiration_date, now)

        granted_at = datetime.fromtimestamp(now, UTC)
        assignment = RoleAssignment(
            key=key,
            expiration_date=expiration_date,
            data=bytes(input_data.data),
            granted_at=granted_at,
        )
        async with self._uow_factory() as uow:
            await uow.assignments.upsert(assignment)
            await uow.assignments.set_latest_grantee(key)
            await uow.events.append(RoleEvent.granted(assignment, granted_at))

        logger.info(
            "Granted %s on %s/%s from %s to %s until %d",
            key.role,
            key.token_address,
            key.token_id,
            key.grantor,
            key.grantee,
            expiration_date,
        )
        return assignment
