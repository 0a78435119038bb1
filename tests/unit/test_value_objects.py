"""Unit tests for domain value objects."""

import hashlib

import pytest

from nftroles.domain.entities import RoleAssignment, RoleAssignmentKey
from nftroles.domain.exceptions import ValidationError
from nftroles.domain.value_objects import (
    UINT64_MAX,
    RoleId,
    check_uint,
    normalize_account,
)


def test_role_id_valid() -> None:
    """RoleId accepts 32 bytes."""
    role = RoleId(b"\x01" * 32)
    assert role.value == b"\x01" * 32


def test_role_id_invalid_length() -> None:
    """RoleId rejects anything but 32 bytes."""
    with pytest.raises(ValidationError, match="32 bytes"):
        RoleId(b"\x01" * 31)


def test_role_id_from_name_is_sha3_256() -> None:
    role = RoleId.from_name("USER_ROLE")
    assert role.value == hashlib.sha3_256(b"USER_ROLE").digest()


def test_role_id_from_name_empty() -> None:
    with pytest.raises(ValidationError):
        RoleId.from_name("")


def test_role_id_hex_round_trip_accepts_bare_and_prefixed() -> None:
    role = RoleId.from_name("USER_ROLE")
    assert role.hex.startswith("0x") and len(role.hex) == 66
    assert RoleId.from_hex(role.hex) == role
    assert RoleId.from_hex(role.hex[2:].upper()) == role


@pytest.mark.parametrize("text", ["0xzz", "0x1234", ""])
def test_role_id_from_hex_invalid(text: str) -> None:
    with pytest.raises(ValidationError):
        RoleId.from_hex(text)


def test_normalize_account_lowercases_evm_address() -> None:
    checksummed = "0x52908400098527886E0F7030069857D2E4169EE7"
    assert normalize_account(checksummed) == checksummed.lower()


def test_normalize_account_keeps_opaque_identifiers() -> None:
    """Non-hex accounts are opaque; only whitespace is trimmed."""
    assert normalize_account("  User-42  ") == "User-42"


@pytest.mark.parametrize("value", ["", "   ", "x" * 256, None, 5])
def test_normalize_account_invalid(value) -> None:
    with pytest.raises(ValidationError):
        normalize_account(value)


def test_check_uint_bounds() -> None:
    assert check_uint(0, 64, "n") == 0
    assert check_uint(UINT64_MAX, 64, "n") == UINT64_MAX
    with pytest.raises(ValidationError):
        check_uint(UINT64_MAX + 1, 64, "n")
    with pytest.raises(ValidationError):
        check_uint(-1, 64, "n")


@pytest.mark.parametrize("value", [True, 1.0, "1"])
def test_check_uint_rejects_non_integers(value) -> None:
    with pytest.raises(ValidationError):
        check_uint(value, 256, "token_id")


def test_role_assignment_is_active_inclusive() -> None:
    """Assignment is valid while now <= expiration_date."""
    key = RoleAssignmentKey.create(RoleId.from_name("R"), "a", "b", "c", 1)
    assignment = RoleAssignment(key=key, expiration_date=100, data=b"")
    assert assignment.is_active(99)
    assert assignment.is_active(100)
    assert not assignment.is_active(101)


def test_role_assignment_key_equality_after_normalization() -> None:
    role = RoleId.from_name("R")
    a = RoleAssignmentKey.create(role, "0x" + "AB" * 20, "g", "t", 1)
    b = RoleAssignmentKey.create(role, "0x" + "ab" * 20, "g", "t", 1)
    assert a == b
    assert hash(a) == hash(b)
