"""Repository ports."""

from nftroles.application.ports.repositories.role_assignment_repository import (
    RoleAssignmentRepository,
)
from nftroles.application.ports.repositories.role_event_repository import (
    RoleEventRepository,
)

__all__ = [
    "RoleAssignmentRepository",
    "RoleEventRepository",
]
