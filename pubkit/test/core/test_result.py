"""Tests for pubkit.core.result module."""

import pytest

from pubkit.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    def test_unwrap(self) -> None:
        assert Ok("1.2.4").unwrap() == "1.2.4"

    def test_unwrap_or_ignores_default(self) -> None:
        assert Ok("1.2.4").unwrap_or("0.0.0") == "1.2.4"

    def test_map(self) -> None:
        assert Ok(21).map(lambda x: x * 2) == Ok(42)

    def test_map_err_is_noop(self) -> None:
        assert Ok(1).map_err(str) == Ok(1)

    def test_flags(self) -> None:
        assert Ok(None).is_ok() is True
        assert Ok(None).is_err() is False


class TestErr:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("boom").unwrap()

    def test_unwrap_or_returns_default(self) -> None:
        assert Err("boom").unwrap_or(3) == 3

    def test_map_is_noop(self) -> None:
        assert Err("boom").map(lambda x: x * 2) == Err("boom")

    def test_map_err_wraps_error(self) -> None:
        assert Err("boom").map_err(lambda e: f"wrapped: {e}") == Err("wrapped: boom")


def test_type_guards() -> None:
    ok: Result[int, str] = Ok(1)
    err: Result[int, str] = Err("x")

    assert is_ok(ok) and not is_err(ok)
    assert is_err(err) and not is_ok(err)


def test_pattern_matching() -> None:
    def describe(r: Result[str, str]) -> str:
        match r:
            case Ok(value):
                return f"ok:{value}"
            case Err(error):
                return f"err:{error}"

    assert describe(Ok("a")) == "ok:a"
    assert describe(Err("b")) == "err:b"
