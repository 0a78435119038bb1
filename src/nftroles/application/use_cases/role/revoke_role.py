"""Revoke role use case."""

import logging
from datetime import UTC, datetime

from nftroles.application.ports import Clock
from nftroles.domain.entities import RoleAssignmentKey, RoleEvent
from nftroles.domain.value_objects import RoleId

logger = logging.getLogger(__name__)


class RevokeRoleUseCase:
    """Revoke role previously granted by the caller."""

    def __init__(self, unit_of_work_factory: type, clock: Clock) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def execute(
        self,
        grantor: str,
        role: RoleId,
        grantee: str,
        token_address: str,
        token_id: int,
    ) -> bool:
        """Clear grantee's standing and emit RoleRevoked.

        Always permitted, whatever the expiration state. The latest-grant
        pointer is left untouched, so revoking the latest grantee leaves the
        unique role without a holder. Returns whether a record was removed.
        """
        key = RoleAssignmentKey.create(
            role=role,
            grantor=grantor,
            grantee=grantee,
            token_address=token_address,
            token_id=token_id,
        )
        revoked_at = datetime.fromtimestamp(self._clock.now(), UTC)
        async with self._uow_factory() as uow:
            removed = await uow.assignments.delete(key)
            await uow.events.append(RoleEvent.revoked(key, revoked_at))

        logger.info(
            "Revoked %s on %s/%s from %s by %s (existed=%s)",
            key.role,
            key.token_address,
            key.token_id,
            key.grantee,
            key.grantor,
            removed,
        )
        return removed
