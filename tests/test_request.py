"""Tests for biscuit.http.request — request-side cookie collections."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from biscuit.config import CookieConfig
from biscuit.http.collection import CookieCollection
from biscuit.http.request import CookieSource, RequestCookieCollection


@dataclass(frozen=True, slots=True)
class _FakeRequest:
    """Stand-in for a framework request carrying parsed cookies."""

    cookies: Mapping[str, str] = field(default_factory=dict)


def _make_scope(*headers: tuple[bytes, bytes]) -> dict[str, object]:
    """Build a minimal ASGI HTTP scope."""
    return {"type": "http", "method": "GET", "path": "/", "headers": list(headers)}


class TestFactories:
    def test_from_cookie_params(self) -> None:
        cookies = RequestCookieCollection.from_cookie_params({"sid": "abc", "theme": "dark"})

        assert isinstance(cookies, RequestCookieCollection)
        assert isinstance(cookies, CookieCollection)
        assert cookies.to_cookie_params() == {"sid": "abc", "theme": "dark"}

    def test_from_cookie_params_keeps_config(self) -> None:
        config = CookieConfig(expired_offset=10)
        cookies = RequestCookieCollection.from_cookie_params({}, config=config)
        assert cookies.config is config

    def test_from_header(self) -> None:
        cookies = RequestCookieCollection.from_header("sid=abc; sid=dup; theme=dark%20mode")
        assert cookies.to_cookie_params() == {"sid": "abc", "theme": "dark mode"}

    def test_from_header_list(self) -> None:
        cookies = RequestCookieCollection.from_header(["a=1", "b=2"])
        assert cookies.to_cookie_params() == {"a": "1"}


class TestFromASGI:
    def test_single_cookie_header(self) -> None:
        scope = _make_scope((b"host", b"example.com"), (b"cookie", b"sid=abc; theme=dark"))
        cookies = RequestCookieCollection.from_asgi(scope)
        assert cookies.to_cookie_params() == {"sid": "abc", "theme": "dark"}

    def test_split_cookie_headers_are_joined(self) -> None:
        scope = _make_scope((b"cookie", b"a=1"), (b"Cookie", b"b=2"), (b"cookie", b"a=3"))
        cookies = RequestCookieCollection.from_asgi(scope)
        assert cookies.to_cookie_params() == {"a": "1", "b": "2"}

    def test_no_cookie_header(self) -> None:
        cookies = RequestCookieCollection.from_asgi(_make_scope((b"accept", b"*/*")))
        assert len(cookies) == 0

    def test_missing_headers_key(self) -> None:
        assert len(RequestCookieCollection.from_asgi({"type": "http"})) == 0


class TestTransformations:
    def test_with_cookie_params_returns_new_instance(self) -> None:
        original = RequestCookieCollection.from_cookie_params({"a": "1"})
        updated = original.with_cookie_params({"b": "2"})

        assert updated is not original
        assert original.to_cookie_params() == {"a": "1"}
        assert updated.to_cookie_params() == {"b": "2"}

    def test_with_cookie_params_shares_config(self) -> None:
        config = CookieConfig(expired_offset=10)
        original = RequestCookieCollection(config=config)
        assert original.with_cookie_params({}).config is config

    def test_with_server_request(self) -> None:
        request = _FakeRequest(cookies={"sid": "abc"})
        cookies = RequestCookieCollection().with_server_request(request)

        assert isinstance(cookies, RequestCookieCollection)
        assert cookies.get("sid").value == "abc"

    def test_fake_request_satisfies_protocol(self) -> None:
        assert isinstance(_FakeRequest(), CookieSource)

    def test_subclass_type_is_preserved(self) -> None:
        class Custom(RequestCookieCollection):
            __slots__ = ()

        cookies = Custom.from_cookie_params({"a": "1"}).with_cookie_params({"b": "2"})
        assert type(cookies) is Custom
