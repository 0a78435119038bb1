"""Unsigned integer ranges used by the registry."""

from nftroles.domain.exceptions import ValidationError

UINT64_MAX = 2**64 - 1


def check_uint(value: int, bits: int, field: str) -> int:
    """Validate value is an unsigned integer of at most `bits` bits."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be an integer")
    if value < 0 or value > 2**bits - 1:
        raise ValidationError(f"{field} must be in range 0..2**{bits}-1")
    return value
