"""Wall-clock source, in whole epoch seconds."""

import time
from collections.abc import Callable
from typing import TypeAlias

# Zero-argument callable returning the current epoch second
Clock: TypeAlias = Callable[[], int]


def now() -> int:
    """Return the current time as integer epoch seconds."""
    return int(time.time())
