"""Cookie wire format: ``Cookie`` header parsing and Set-Cookie encoding.

Consolidates the read side (parse_header, used by the collections) and
the encoding helpers the write side (Cookie.to_cookie_header) relies on.
"""

import logging
import re
import time
from collections.abc import Sequence
from urllib.parse import quote_plus, unquote_plus

from biscuit.errors import InvalidArgument

logger = logging.getLogger("biscuit.cookies")

_PIECE_SEPARATOR = re.compile(r";\s*")

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def urlencode(text: str) -> str:
    """Percent-encode *text* for a cookie header.

    Spaces become ``+``; everything except ``A-Z a-z 0-9 - _ .`` is
    percent-encoded (``~`` included).
    """
    return quote_plus(text, safe="").replace("~", "%7E")


def urldecode(text: str) -> str:
    """Inverse of :func:`urlencode`; ``+`` decodes to a space."""
    return unquote_plus(text)


def format_expires(timestamp: int) -> str:
    """Format epoch seconds as ``Dow, DD-Mon-YYYY HH:MM:SS GMT``.

    Day and month names are fixed English abbreviations, never locale
    dependent.
    """
    t = time.gmtime(timestamp)
    return (
        f"{_WEEKDAYS[t.tm_wday]}, {t.tm_mday:02d}-{_MONTHS[t.tm_mon - 1]}-{t.tm_year:04d} "
        f"{t.tm_hour:02d}:{t.tm_min:02d}:{t.tm_sec:02d} GMT"
    )


def parse_header(header: str | Sequence[str]) -> dict[str, str]:
    """Parse a ``Cookie`` header value into a name-value dict.

    A list or tuple of header values contributes only its first element
    (or ``""`` when empty). Pieces without ``=`` are dropped, keys and
    values are url-decoded, and the first occurrence of a key wins::

        >>> parse_header("a=1; noequals; a=2; b=x%20y")
        {'a': '1', 'b': 'x y'}

    Raises:
        InvalidArgument: If the header is not a string.
    """
    if isinstance(header, (list, tuple)):
        header = header[0] if header else ""
    if not isinstance(header, str):
        msg = f"Cannot parse Cookie data. Header value must be a string, got {type(header).__name__}"
        raise InvalidArgument(msg)

    cookies: dict[str, str] = {}
    for piece in _PIECE_SEPARATOR.split(header.rstrip("\r\n")):
        parts = piece.split("=", 1)
        if len(parts) != 2:
            if piece:
                logger.debug("Dropping malformed cookie piece %r", piece)
            continue
        key = urldecode(parts[0])
        if key in cookies:
            logger.debug("Ignoring duplicate cookie %r", key)
            continue
        cookies[key] = urldecode(parts[1])
    return cookies
