"""Tests for biscuit.http.response — Set-Cookie header export."""

from biscuit.http.collection import CookieCollection
from biscuit.http.response import raw_set_cookie_headers, set_cookie_headers


def _collection() -> CookieCollection:
    cookies = CookieCollection({"b": "2"})
    cookies.set("a", "1", path="/", secure=True)
    return cookies


class TestSetCookieHeaders:
    def test_pairs_in_insertion_order(self) -> None:
        assert set_cookie_headers(_collection()) == (
            ("Set-Cookie", "b=2"),
            ("Set-Cookie", "a=1; path=%2F; secure"),
        )

    def test_empty(self) -> None:
        assert set_cookie_headers(CookieCollection()) == ()


class TestRawSetCookieHeaders:
    def test_byte_pairs(self) -> None:
        assert raw_set_cookie_headers(_collection()) == [
            (b"set-cookie", b"b=2"),
            (b"set-cookie", b"a=1; path=%2F; secure"),
        ]

    def test_non_ascii_values_are_encoded(self) -> None:
        raw = raw_set_cookie_headers(CookieCollection({"name": "é"}))
        assert raw == [(b"set-cookie", b"name=%C3%A9")]
