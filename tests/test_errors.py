"""Tests for biscuit.errors — exception hierarchy and error messages."""

import pytest

from biscuit.errors import (
    BiscuitError,
    ConfigurationError,
    CookieNotFound,
    InvalidArgument,
    UnexpectedValue,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "error", [ConfigurationError, CookieNotFound, InvalidArgument, UnexpectedValue]
    )
    def test_all_are_biscuit_errors(self, error: type[Exception]) -> None:
        assert issubclass(error, BiscuitError)

    def test_invalid_argument_is_type_error(self) -> None:
        assert issubclass(InvalidArgument, TypeError)

    def test_not_found_is_key_error(self) -> None:
        assert issubclass(CookieNotFound, KeyError)

    def test_unexpected_value_is_runtime_error(self) -> None:
        assert issubclass(UnexpectedValue, RuntimeError)


class TestCookieNotFound:
    def test_carries_name(self) -> None:
        err = CookieNotFound("sid")
        assert err.name == "sid"

    def test_str(self) -> None:
        assert str(CookieNotFound("sid")) == "Cookie 'sid' not found"
