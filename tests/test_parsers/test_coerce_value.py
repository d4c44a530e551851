from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal, Optional

import pytest

from argbind.parser.utils import (
    coerce_enum_name,
    coerce_value,
    collection_info,
    unwrap_optional,
)


class Mode(Enum):
    DEV = "dev"
    PROD = "prod"


class Status(Enum):
    SUCCESS = 0
    FAILURE = 1


# --- Tests ---
@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int, 42),
        ("3.14", float, 3.14),
        ("True", bool, True),
        ("hello", str, "hello"),
        ("", str, ""),
        ("False", bool, False),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int | float, 42),
        ("3.14", int | float, 3.14),
        ("hello", str | int, "hello"),
        ("1", bool | str, True),
    ],
)
def test_coerce_value_union_success(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


def test_coerce_value_union_failure():
    with pytest.raises(ValueError) as excinfo:
        coerce_value("abc", int | float)
    assert "could not be coerced" in str(excinfo.value)


def test_literal_coercion():
    assert coerce_value("dev", Literal["dev", "prod"]) == "dev"
    with pytest.raises(ValueError):
        coerce_value("staging", Literal["dev", "prod"])


def test_enum_coercion_uses_uppercased_member_names():
    assert coerce_value("dev", Mode) == Mode.DEV
    assert coerce_value("Dev", Mode) == Mode.DEV
    assert coerce_enum_name("success", Status) == Status.SUCCESS
    assert coerce_enum_name(Status.FAILURE, Status) == Status.FAILURE

    with pytest.raises(ValueError) as excinfo:
        coerce_enum_name("0", Status)
    assert "success, failure" in str(excinfo.value)


def test_path_coercion():
    result = coerce_value("/tmp/test.txt", Path)
    assert isinstance(result, Path)
    assert str(result) == "/tmp/test.txt"


def test_datetime_coercion():
    result = coerce_value("2023-10-01T13:00:00", datetime)
    assert isinstance(result, datetime)
    assert result.year == 2023 and result.month == 10

    with pytest.raises(ValueError):
        coerce_value("not-a-date", datetime)


def test_bool_coercion():
    assert coerce_value("true", bool) is True
    assert coerce_value("0", bool) is False
    assert coerce_value("", bool) is False
    assert coerce_value("yes", bool) is True
    assert coerce_value("off", bool) is False


def test_unwrap_optional():
    assert unwrap_optional(Optional[int]) is int
    assert unwrap_optional(int | None) is int
    assert unwrap_optional(str) is str
    assert unwrap_optional(int | str) == int | str


@pytest.mark.parametrize(
    "annotation, expected",
    [
        (list[int], (list, int)),
        (set[str], (set, str)),
        (tuple[float, ...], (tuple, float)),
        (list, (list, str)),
        (list[Mode], (list, Mode)),
        (str, None),
        (int, None),
        (dict[str, str], None),
    ],
)
def test_collection_info(annotation, expected):
    assert collection_info(annotation) == expected
