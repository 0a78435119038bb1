"""Account and token address normalisation."""

import re

from nftroles.domain.exceptions import ValidationError

_EVM_ADDRESS = re.compile(r"^0x[0-9a-fA-F]{40}$")

MAX_ACCOUNT_LENGTH = 255


def normalize_account(value: str, field: str = "account") -> str:
    """Return canonical form of an account or contract reference.

    Accounts are opaque. EVM-style hex addresses are lower-cased so that
    checksummed spellings address the same record.
    """
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    value = value.strip()
    if not value:
        raise ValidationError(f"{field} must not be empty")
    if len(value) > MAX_ACCOUNT_LENGTH:
        raise ValidationError(f"{field} is too long")
    if _EVM_ADDRESS.match(value):
        return value.lower()
    return value
