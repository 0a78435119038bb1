"""Notification event kinds."""

from enum import StrEnum


class RoleEventType(StrEnum):
    """Events emitted by state-changing registry calls."""

    GRANTED = "RoleGranted"
    REVOKED = "RoleRevoked"
