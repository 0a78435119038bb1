"""Clock port - the registry's notion of current time."""

from typing import Protocol


class Clock(Protocol):
    """Source of current time in whole seconds since epoch."""

    def now(self) -> int: ...
