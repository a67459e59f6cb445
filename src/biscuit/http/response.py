"""Response-side export of a cookie collection.

One ``Set-Cookie`` header per cookie, in collection order, shaped for
the two places a response writer wants them: ``(name, value)`` string
pairs for a response object, raw byte pairs for an ASGI ``send``.
"""

from biscuit.http.collection import CookieCollection


def set_cookie_headers(cookies: CookieCollection) -> tuple[tuple[str, str], ...]:
    """Return ``("Set-Cookie", value)`` pairs for every cookie."""
    return tuple(("Set-Cookie", header) for header in cookies.to_headers().values())


def raw_set_cookie_headers(cookies: CookieCollection) -> list[tuple[bytes, bytes]]:
    """Return ``(b"set-cookie", value)`` pairs for an ASGI response start message."""
    return [
        (b"set-cookie", header.encode("latin-1")) for header in cookies.to_headers().values()
    ]
