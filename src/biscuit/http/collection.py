"""A named collection of cookies.

The collection owns its ``Cookie`` objects, keyed by cookie name, in
insertion order. Deleting a cookie is logical: its expiry is pushed
into the past so the client purges it, while the entry stays
addressable. Only ``remove()`` / ``del`` drops the entry itself.

Not safe for concurrent mutation from multiple threads.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from biscuit.config import CookieConfig
from biscuit.errors import CookieNotFound, InvalidArgument, UnexpectedValue
from biscuit.http.cookie import Cookie
from biscuit.http.cookies import parse_header

logger = logging.getLogger("biscuit.cookies")


class CookieCollection:
    """Cookies keyed by name.

    Accepts ``Cookie`` objects or plain values::

        cookies = CookieCollection({"theme": "dark", "sid": Cookie("sid", "abc", httponly=True)})
        cookies.set("lang", "en", path="/")
        cookies.delete("theme")
        response_headers = cookies.to_headers()

    A ``Cookie`` entry is keyed by its own ``name``, not by the mapping
    key it was supplied under.
    """

    __slots__ = ("_config", "_cookies")

    parse_header = staticmethod(parse_header)

    def __init__(
        self,
        cookies: Mapping[str, Cookie | str | None] | None = None,
        *,
        config: CookieConfig | None = None,
    ) -> None:
        self._config = config if config is not None else CookieConfig()
        self._cookies: dict[str, Cookie] = {}
        for key, cookie in (cookies or {}).items():
            if isinstance(cookie, Cookie):
                self._cookies[cookie.name] = cookie
                continue
            if isinstance(key, int) and not isinstance(key, bool):
                key = str(key)
            if not isinstance(key, str):
                msg = f"Cookie name {key!r} must be a string, {type(key).__name__} given"
                raise InvalidArgument(msg)
            if cookie is None or cookie is False:
                cookie = ""
            if not isinstance(cookie, str):
                msg = f"Cookie value for {key!r} must be a string, {type(cookie).__name__} given"
                raise InvalidArgument(msg)
            self._cookies[key] = Cookie(key, cookie, clock=self._config.clock)

    @property
    def config(self) -> CookieConfig:
        return self._config

    @property
    def cookies(self) -> Mapping[str, Cookie]:
        """Read-only live view of the backing store."""
        return MappingProxyType(self._cookies)

    def get(self, name: str | int | float) -> Cookie:
        """Return the cookie called *name*.

        Numeric names are converted to strings first.

        Raises:
            InvalidArgument: If *name* is neither a string nor a number.
            CookieNotFound: If no such cookie exists.
            UnexpectedValue: If the stored entry is not a ``Cookie``.
        """
        if isinstance(name, (int, float)) and not isinstance(name, bool):
            name = str(name)
        if not isinstance(name, str):
            msg = f"Cookie name must be a string, {type(name).__name__} given"
            raise InvalidArgument(msg)
        if name not in self._cookies:
            raise CookieNotFound(name)
        cookie = self._cookies[name]
        if not isinstance(cookie, Cookie):
            msg = f"Cookie for {name!r} has invalid value {type(cookie).__name__}"
            raise UnexpectedValue(msg)
        return cookie

    def set(
        self,
        name: str,
        value: str | None = "",
        expire: int | float | str = 0,
        path: str | None = "",
        domain: str | None = "",
        secure: bool = False,
        httponly: bool = False,
    ) -> Cookie:
        """Store a new cookie under *name*, replacing any existing one."""
        cookie = Cookie(
            name,
            value,
            expire=expire,
            path=path,
            domain=domain,
            secure=secure,
            httponly=httponly,
            clock=self._config.clock,
        )
        self._cookies[name] = cookie
        return cookie

    def delete(self, name: str) -> None:
        """Expire *name* in the past so the client discards it.

        The cookie remains in the collection and keeps rendering a
        ``Set-Cookie`` header.

        Raises:
            CookieNotFound: If no such cookie exists.
        """
        cookie = self.get(name)
        cookie.expire = self._config.clock() - self._config.expired_offset
        logger.debug("Expired cookie %r at %d", cookie.name, cookie.expire)

    def exists(self, name: Any) -> bool:
        """True if a cookie called *name* is present. No name coercion."""
        if not isinstance(name, str):
            return False
        return name in self._cookies

    def remove(self, name: str) -> None:
        """Drop *name* from the collection entirely. Missing names are ignored."""
        self._cookies.pop(name, None)

    # -- Export --

    def to_headers(self) -> dict[str, str]:
        """Return ``{name: Set-Cookie header value}`` for every cookie."""
        return {key: cookie.to_cookie_header() for key, cookie in self._cookies.items()}

    def to_cookie_params(self) -> dict[str, str]:
        """Return ``{name: value}`` for every cookie."""
        return {key: cookie.value for key, cookie in self._cookies.items()}

    # -- Container protocol --

    def __len__(self) -> int:
        return len(self._cookies)

    def __contains__(self, name: object) -> bool:
        return self.exists(name)

    def __getitem__(self, name: str) -> Cookie:
        return self.get(name)

    def __setitem__(self, name: str, value: str | None) -> None:
        self.set(name, value)

    def __delitem__(self, name: str) -> None:
        self.remove(name)

    def __iter__(self) -> Iterator[Cookie]:
        """Iterate over the ``Cookie`` objects (not the names) in insertion order."""
        return iter(list(self._cookies.values()))

    def __repr__(self) -> str:
        names = ", ".join(repr(name) for name in self._cookies)
        return f"{type(self).__name__}([{names}])"
