import pytest

from argbind import ArgbindError, ParseRejected, ParseResult


def test_ok_result():
    result = ParseResult.ok({"a": 1})
    assert result
    assert result.accepted
    assert result.unwrap() == {"a": 1}


def test_rejected_result():
    result = ParseResult.rejected()
    assert not result
    assert result.value is None
    with pytest.raises(ParseRejected) as excinfo:
        result.unwrap()
    assert isinstance(excinfo.value, ArgbindError)
    assert str(excinfo.value) == "Parsing failed."


def test_ok_result_may_hold_falsy_record():
    result = ParseResult.ok(None)
    assert result
    assert result.unwrap() is None
