"""Domain entities."""

from nftroles.domain.entities.role_assignment import RoleAssignment, RoleAssignmentKey
from nftroles.domain.entities.role_event import RoleEvent

__all__ = [
    "RoleAssignment",
    "RoleAssignmentKey",
    "RoleEvent",
]
