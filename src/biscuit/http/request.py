"""Request-side cookie collections.

Built from whatever the inbound request already parsed: a plain
name-value mapping, a request object carrying one, a raw ``Cookie``
header, or an ASGI scope. Nothing is read from process globals.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, Self, runtime_checkable

from biscuit.config import CookieConfig
from biscuit.http.collection import CookieCollection
from biscuit.http.cookies import parse_header


@runtime_checkable
class CookieSource(Protocol):
    """Anything exposing the request's parsed cookies as ``name -> value``.

    A frozen framework ``Request`` with a ``cookies`` field satisfies
    this without adaptation.
    """

    @property
    def cookies(self) -> Mapping[str, str]: ...


class RequestCookieCollection(CookieCollection):
    """Cookies received with a request.

    Each ``with_*`` call returns a new collection; the receiver is
    left untouched.
    """

    __slots__ = ()

    # -- Factories --

    @classmethod
    def from_cookie_params(cls, params: Mapping[str, str], *, config: CookieConfig | None = None) -> Self:
        """Create a collection from a plain ``name -> value`` mapping."""
        return cls(params, config=config)

    @classmethod
    def from_header(cls, header: str | Sequence[str], *, config: CookieConfig | None = None) -> Self:
        """Create a collection from a raw ``Cookie`` header value."""
        return cls.from_cookie_params(parse_header(header), config=config)

    @classmethod
    def from_asgi(cls, scope: Mapping[str, Any], *, config: CookieConfig | None = None) -> Self:
        """Create a collection from the ``cookie`` headers of an ASGI scope.

        HTTP/2 clients may split cookies across several ``cookie``
        headers; they are joined with ``"; "`` before parsing.
        """
        values = [
            value.decode("latin-1")
            for name, value in scope.get("headers", ())
            if name.lower() == b"cookie"
        ]
        return cls.from_header("; ".join(values), config=config)

    # -- Transformations --

    def with_cookie_params(self, params: Mapping[str, str]) -> Self:
        """Return a new collection built from *params*, sharing this config."""
        return type(self).from_cookie_params(params, config=self._config)

    def with_server_request(self, request: CookieSource) -> Self:
        """Return a new collection built from ``request.cookies``."""
        return self.with_cookie_params(request.cookies)
