"""A single HTTP cookie as a validated, mutable value object.

Every attribute is a property whose setter checks the type before
assigning, so a failed assignment never leaves a half-updated cookie.
``to_cookie_header()`` renders the ``Set-Cookie`` header value.
"""

from __future__ import annotations

import math
import re
from typing import Any

from biscuit._internal.clock import Clock, now
from biscuit.errors import InvalidArgument
from biscuit.http.cookies import format_expires, urlencode

# 9999-12-31 23:59:59 GMT, the last instant an expires date can render
MAX_EXPIRE = 253_402_300_799

_INTEGER_LITERAL = re.compile(r"\s*[+-]?[0-9]+\s*")


def _type_name(value: object) -> str:
    return type(value).__name__


def _check_encodable(value: str, field: str) -> str:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        msg = f"Cookie {field} must be valid UTF-8 text, lone surrogate given"
        raise InvalidArgument(msg) from None
    return value


def _coerce_text(value: Any, field: str) -> str:
    """``None`` and ``False`` mean empty; anything else must already be a str."""
    if value is None or value is False:
        return ""
    if not isinstance(value, str):
        msg = f"Cookie {field} must be a string, {_type_name(value)} given"
        raise InvalidArgument(msg)
    return _check_encodable(value, field)


def _coerce_flag(value: Any, field: str) -> bool:
    if not isinstance(value, bool):
        msg = f"Cookie {field} must be a boolean, {_type_name(value)} given"
        raise InvalidArgument(msg)
    return value


def _coerce_seconds(value: Any, field: str) -> int:
    """Return an integral number of seconds, sign preserved.

    Accepts ints, integral floats and ASCII integer literals in strings.
    Booleans are rejected even though they are ints, and so is any
    magnitude beyond ``MAX_EXPIRE``.
    """
    seconds: int | None = None
    if isinstance(value, bool):
        pass
    elif isinstance(value, int):
        seconds = value
    elif isinstance(value, float):
        if math.isfinite(value) and value.is_integer():
            seconds = int(value)
    elif isinstance(value, str):
        if _INTEGER_LITERAL.fullmatch(value):
            seconds = int(value)
    if seconds is None:
        msg = f"Cookie {field} must be an integer, {_type_name(value)} given"
        raise InvalidArgument(msg)
    if abs(seconds) > MAX_EXPIRE:
        msg = f"Cookie {field} must be an integer no larger than {MAX_EXPIRE}, got {seconds}"
        raise InvalidArgument(msg)
    return seconds


class Cookie:
    """One named cookie and its ``Set-Cookie`` attributes.

    ``expire == 0`` marks a session cookie: no ``expires`` attribute is
    emitted and the client drops it when the browsing session ends.
    """

    __slots__ = ("_clock", "_domain", "_expire", "_httponly", "_name", "_path", "_secure", "_value")

    def __init__(
        self,
        name: str,
        value: str | None = "",
        expire: int | float | str = 0,
        path: str | None = "",
        domain: str | None = "",
        secure: bool = False,
        httponly: bool = False,
        *,
        clock: Clock = now,
    ) -> None:
        if not isinstance(name, str):
            msg = f"Cookie name must be a string, {_type_name(name)} given"
            raise InvalidArgument(msg)
        self._name = _check_encodable(name, "name")
        self._clock = clock
        self.value = value
        self.path = path
        self.expire = expire
        self.domain = domain
        self.secure = secure
        self.httponly = httponly

    # -- Attributes --

    @property
    def name(self) -> str:
        """The cookie name. Fixed at construction, case-sensitive."""
        return self._name

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str | None) -> None:
        self._value = _coerce_text(value, "value")

    @property
    def expire(self) -> int:
        """Absolute expiry in epoch seconds; ``0`` for a session cookie."""
        return self._expire

    @expire.setter
    def expire(self, expire: int | float | str) -> None:
        # Only the magnitude is stored; the sign is dropped
        self._expire = abs(_coerce_seconds(expire, "expire"))

    @property
    def path(self) -> str:
        return self._path

    @path.setter
    def path(self, path: str | None) -> None:
        self._path = _coerce_text(path, "path")

    @property
    def domain(self) -> str:
        return self._domain

    @domain.setter
    def domain(self, domain: str | None) -> None:
        self._domain = _coerce_text(domain, "domain")

    @property
    def secure(self) -> bool:
        return self._secure

    @secure.setter
    def secure(self, secure: bool) -> None:
        self._secure = _coerce_flag(secure, "secure")

    @property
    def httponly(self) -> bool:
        return self._httponly

    @httponly.setter
    def httponly(self, httponly: bool) -> None:
        self._httponly = _coerce_flag(httponly, "httponly")

    @property
    def is_session(self) -> bool:
        """True if no explicit expiry is set."""
        return self._expire == 0

    # -- Operations --

    def expire_after(self, seconds: int | float | str) -> None:
        """Expire *seconds* from now.

        Accepts the same values as ``expire``, but the sign is kept:
        ``expire_after(-60)`` expires the cookie a minute ago.
        """
        expire = self._clock() + _coerce_seconds(seconds, "expire_after")
        if expire > MAX_EXPIRE:
            msg = f"Cookie expire_after lands past {MAX_EXPIRE}, got {expire}"
            raise InvalidArgument(msg)
        self._expire = expire

    def to_cookie_header(self) -> str:
        """Serialize to a ``Set-Cookie`` header value string.

        Attribute order is fixed: path, domain, expires, secure, HttpOnly.
        """
        header = f"{urlencode(self._name)}={urlencode(self._value)}"
        if self._path:
            header += f"; path={urlencode(self._path)}"
        if self._domain:
            header += f"; domain={urlencode(self._domain)}"
        if self._expire > 0:
            header += f"; expires={urlencode(format_expires(self._expire))}"
        if self._secure:
            header += "; secure"
        if self._httponly:
            header += "; HttpOnly"
        return header

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return (
            f"Cookie(name={self._name!r}, value={self._value!r}, expire={self._expire}, "
            f"path={self._path!r}, domain={self._domain!r}, "
            f"secure={self._secure}, httponly={self._httponly})"
        )
