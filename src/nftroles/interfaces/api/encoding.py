"""JSON encoding helpers - bytes as 0x-hex, unsigned integers as numbers."""

from nftroles.domain.exceptions import ValidationError


def to_hex(value: bytes) -> str:
    return "0x" + value.hex()


def parse_hex_bytes(value: object, field: str) -> bytes:
    """Parse 0x-prefixed hex string into bytes. "0x" and "" give b""."""
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a hex string")
    raw = value[2:] if value[:2].lower() == "0x" else value
    try:
        return bytes.fromhex(raw)
    except ValueError as e:
        raise ValidationError(f"{field} is not valid hex") from e


def parse_uint(value: object, field: str) -> int:
    """Accept JSON integer or decimal string (large token ids)."""
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be an unsigned integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    raise ValidationError(f"{field} must be an unsigned integer")
