"""Domain value objects."""

from nftroles.domain.value_objects.account import normalize_account
from nftroles.domain.value_objects.role_event_type import RoleEventType
from nftroles.domain.value_objects.role_id import RoleId
from nftroles.domain.value_objects.uint import UINT64_MAX, check_uint

__all__ = [
    "UINT64_MAX",
    "RoleEventType",
    "RoleId",
    "check_uint",
    "normalize_account",
]
