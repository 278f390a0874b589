"""Tests for Option and Result."""

import pytest

import rune
from rune import NONE, Err, Ok, Some


def test_option_states() -> None:
    """Test Some and NONE report their state, Some(None) included."""
    assert Some(None).is_some()
    assert not Some(0).is_none()
    assert NONE.is_none()
    assert not NONE.is_some()
    assert rune.NoneOption().is_none()


def test_option_unwrapping() -> None:
    """Test unwrap, expect and unwrap_or on both states."""
    assert Some(3).unwrap() == 3
    assert Some(3).expect("missing") == 3
    assert NONE.unwrap_or(7) == 7
    assert Some(None).unwrap_or(7) is None
    with pytest.raises(rune.OptionUnwrapError, match="exhausted"):
        NONE.unwrap()
    with pytest.raises(rune.OptionUnwrapError, match="^missing$"):
        NONE.expect("missing")


def test_option_map() -> None:
    """Test map applies to Some and leaves NONE untouched."""
    assert Some("ab").map(len) == Some(2)
    assert NONE.map(len) is NONE


def test_result_states() -> None:
    """Test Ok and Err report their state."""
    assert Ok(1).is_ok()
    assert not Ok(1).is_err()
    assert Err("x").is_err()
    assert not Err("x").is_ok()


def test_result_unwrapping() -> None:
    """Test unwrapping the wrong side raises ResultUnwrapError with the carried value."""
    assert Ok(1).unwrap() == 1
    assert Err("boom").unwrap_err() == "boom"
    with pytest.raises(rune.ResultUnwrapError, match="got Err\\('boom'\\)"):
        Err("boom").unwrap()
    with pytest.raises(rune.ResultUnwrapError, match="got Ok\\(1\\)"):
        Ok(1).unwrap_err()
    with pytest.raises(rune.ResultUnwrapError, match="^no range: Must provide"):
        rune.iterx.range(None, 3).expect("no range")


def test_result_map_and_default() -> None:
    """Test map only touches Ok, and unwrap_or falls back on Err."""
    assert Ok(2).map(str) == Ok("2")
    error = Err(ValueError("bad"))
    assert error.map(str) is error
    assert error.unwrap_or(0) == 0
    assert Ok(5).unwrap_or(0) == 5


def test_results_match_by_state() -> None:
    """Test Option and Result values destructure in match statements."""
    match rune.Array([4]).pop():
        case Ok(value):
            assert value == 4
        case Err():
            pytest.fail("pop on a non-empty Array failed")
    match rune.HashMap().remove("k"):
        case Some():
            pytest.fail("removed a missing key")
        case _:
            pass
