"""Role assignment entity - role granted on an NFT."""

from dataclasses import dataclass
from datetime import datetime

from nftroles.domain.value_objects import (
    RoleId,
    check_uint,
    normalize_account,
)


@dataclass(frozen=True)
class RoleAssignmentKey:
    """Composite key (role, grantor, grantee, token_address, token_id)."""

    role: RoleId
    grantor: str
    grantee: str
    token_address: str
    token_id: int

    @classmethod
    def create(
        cls,
        role: RoleId,
        grantor: str,
        grantee: str,
        token_address: str,
        token_id: int,
    ) -> "RoleAssignmentKey":
        """Build key with normalised accounts and validated token id."""
        return cls(
            role=role,
            grantor=normalize_account(grantor, "grantor"),
            grantee=normalize_account(grantee, "grantee"),
            token_address=normalize_account(token_address, "token_address"),
            token_id=check_uint(token_id, 256, "token_id"),
        )


@dataclass
class RoleAssignment:
    """Assignment record - valid while now <= expiration_date."""

    key: RoleAssignmentKey
    expiration_date: int
    data: bytes
    granted_at: datetime | None = None

    def __post_init__(self) -> None:
        check_uint(self.expiration_date, 64, "expiration_date")

    def is_active(self, now: int) -> bool:
        """Expired is a read-time condition, never stored."""
        return now <= self.expiration_date
