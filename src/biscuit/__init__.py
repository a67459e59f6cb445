"""Biscuit — HTTP cookies as typed, validated value objects.

Build, render, parse, and expire cookies::

    from biscuit import CookieCollection, RequestCookieCollection

    incoming = RequestCookieCollection.from_header("sid=abc; theme=dark")
    incoming.get("theme").value  # "dark"

    outgoing = CookieCollection()
    outgoing.set("sid", "xyz", path="/", secure=True, httponly=True)
    outgoing.delete("sid")
    outgoing.to_headers()  # {"sid": "sid=xyz; path=%2F; expires=...; secure; HttpOnly"}
"""

__version__ = "0.1.0"
__all__ = [
    "BiscuitError",
    "Cookie",
    "CookieCollection",
    "CookieConfig",
    "CookieNotFound",
    "CookieSource",
    "InvalidArgument",
    "RequestCookieCollection",
    "UnexpectedValue",
    "parse_header",
    "raw_set_cookie_headers",
    "set_cookie_headers",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "BiscuitError": "biscuit.errors",
    "Cookie": "biscuit.http.cookie",
    "CookieCollection": "biscuit.http.collection",
    "CookieConfig": "biscuit.config",
    "CookieNotFound": "biscuit.errors",
    "CookieSource": "biscuit.http.request",
    "InvalidArgument": "biscuit.errors",
    "RequestCookieCollection": "biscuit.http.request",
    "UnexpectedValue": "biscuit.errors",
    "parse_header": "biscuit.http.cookies",
    "raw_set_cookie_headers": "biscuit.http.response",
    "set_cookie_headers": "biscuit.http.response",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import biscuit`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
