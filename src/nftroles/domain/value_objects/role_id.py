"""Role identifier - 32 opaque bytes."""

import hashlib
from dataclasses import dataclass

from nftroles.domain.exceptions import ValidationError


@dataclass(frozen=True)
class RoleId:
    """32-byte role identifier, conventionally the hash of a readable name."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != 32:
            raise ValidationError("Role id must be 32 bytes")

    @classmethod
    def from_hex(cls, text: str) -> "RoleId":
        """Parse 0x-prefixed (or bare) hex string."""
        raw = text[2:] if text[:2].lower() == "0x" else text
        try:
            return cls(bytes.fromhex(raw))
        except ValueError as e:
            raise ValidationError(f"Invalid role id: {text!r}") from e

    @classmethod
    def from_name(cls, name: str) -> "RoleId":
        """Derive role id as sha3_256 of the UTF-8 name."""
        if not name:
            raise ValidationError("Role name must not be empty")
        return cls(hashlib.sha3_256(name.encode("utf-8")).digest())

    @property
    def hex(self) -> str:
        return "0x" + self.value.hex()

    def __str__(self) -> str:
        return self.hex
