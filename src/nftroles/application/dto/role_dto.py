"""Role assignment DTOs."""

from dataclasses import dataclass

from nftroles.domain.value_objects import RoleId


@dataclass
class GrantRoleInput:
    """Input for granting a role. Grantor is the caller, passed separately."""

    role: RoleId
    grantee: str
    token_address: str
    token_id: int
    expiration_date: int
    data: bytes = b""


@dataclass
class RoleAssignmentView:
    """Read-side view of one assignment key."""

    has_role: bool
    has_unique_role: bool
    expiration_date: int
    data: bytes
