"""Collection configuration.

CookieConfig is a frozen dataclass — immutable after creation, passed to
collections explicitly instead of read from globals.
"""

from dataclasses import dataclass

from biscuit._internal.clock import Clock, now
from biscuit.errors import ConfigurationError

# 60 * 60 * 24 * 3
THREE_DAYS = 259_200


@dataclass(frozen=True, slots=True)
class CookieConfig:
    """Collection configuration. Immutable after creation.

    Override what you need::

        config = CookieConfig(clock=lambda: 1_700_000_000)
    """

    # Seconds subtracted from the clock when a cookie is deleted
    expired_offset: int = THREE_DAYS

    # Time source for deletion and relative expiry
    clock: Clock = now

    def __post_init__(self) -> None:
        if isinstance(self.expired_offset, bool) or not isinstance(self.expired_offset, int):
            msg = f"expired_offset must be an int, got {type(self.expired_offset).__name__}"
            raise ConfigurationError(msg)
        if self.expired_offset < 0:
            msg = f"expired_offset must not be negative, got {self.expired_offset}"
            raise ConfigurationError(msg)
        if not callable(self.clock):
            msg = "clock must be a zero-argument callable returning epoch seconds"
            raise ConfigurationError(msg)
