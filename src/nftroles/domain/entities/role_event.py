"""Role event entity - notification for off-chain indexers."""

from dataclasses import dataclass
from datetime import datetime

from nftroles.domain.entities.role_assignment import RoleAssignment, RoleAssignmentKey
from nftroles.domain.value_objects import RoleEventType, RoleId


@dataclass
class RoleEvent:
    """Entry of the ordered event log. id is assigned on append."""

    event_type: RoleEventType
    role: RoleId
    token_address: str
    token_id: int
    grantor: str
    grantee: str
    created_at: datetime
    expiration_date: int | None = None
    data: bytes | None = None
    id: int | None = None

    @classmethod
    def granted(cls, assignment: RoleAssignment, created_at: datetime) -> "RoleEvent":
        key = assignment.key
        return cls(
            event_type=RoleEventType.GRANTED,
            role=key.role,
            token_address=key.token_address,
            token_id=key.token_id,
            grantor=key.grantor,
            grantee=key.grantee,
            created_at=created_at,
            expiration_date=assignment.expiration_date,
            data=assignment.data,
        )

    @classmethod
    def revoked(cls, key: RoleAssignmentKey, created_at: datetime) -> "RoleEvent":
        return cls(
            event_type=RoleEventType.REVOKED,
            role=key.role,
            token_address=key.token_address,
            token_id=key.token_id,
            grantor=key.grantor,
            grantee=key.grantee,
            created_at=created_at,
        )
