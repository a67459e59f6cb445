"""Biscuit exception hierarchy.

Every module raises from this one tree so callers can catch
``BiscuitError`` at the edge, or the narrow type where it matters.
"""


class BiscuitError(Exception):
    """Base for all biscuit-specific errors."""


class ConfigurationError(BiscuitError):
    """Raised when a ``CookieConfig`` is invalid."""


class InvalidArgument(BiscuitError, TypeError):  # noqa: N818 — mirrors the wire-level contract name
    """A value of the wrong type (or an unparsable one) was supplied.

    Raised by cookie setters, the collection constructor, ``get``,
    ``set`` and ``parse_header``. Indicates a bug at the call site.
    """


class CookieNotFound(BiscuitError, KeyError):  # noqa: N818 — conventional lookup-miss name
    """``get`` or ``delete`` referenced a cookie that is not in the collection.

    Subclasses ``KeyError`` so mapping-style callers can keep catching that.
    """

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Cookie {self.name!r} not found"


class UnexpectedValue(BiscuitError, RuntimeError):  # noqa: N818
    """A collection entry is not a ``Cookie``.

    Unreachable through the public API; seeing it means the backing
    store was corrupted from outside.
    """
