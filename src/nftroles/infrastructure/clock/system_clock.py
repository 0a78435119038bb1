"""System clock - wall time in whole seconds."""

import time


class SystemClock:
    """Clock backed by time.time()."""

    def now(self) -> int:
        return int(time.time())
