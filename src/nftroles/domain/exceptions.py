"""Domain exceptions."""


class RoleRegistryError(Exception):
    """Base exception for the role registry."""

    pass


class ValidationError(RoleRegistryError):
    """Validation failed for input data."""

    pass


class InvalidExpirationDate(ValidationError):
    """Expiration date lies before the registry's current time."""

    def __init__(self, expiration_date: int, now: int) -> None:
        super().__init__(
            f"Expiration date {expiration_date} is before current time {now}"
        )
        self.expiration_date = expiration_date
        self.now = now
