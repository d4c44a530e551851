from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import pytest

from argbind.exceptions import ParseRejected, TypeBindingError
from argbind.parser import (
    ArgumentMeta,
    OptionMeta,
    SpecBuilder,
    argument,
    option,
    parse,
    spec_from_dataclass,
)


class Color(Enum):
    RED = 1
    GREEN = 2


def build(*fields_):
    builder = SpecBuilder()
    for name, annotation, kwargs in fields_:
        builder.add_field(name, annotation, **kwargs)
    return builder.build()


def test_empty_spec_accepts_no_tokens():
    result = parse(SpecBuilder().build(), [])
    assert result.accepted
    assert vars(result.unwrap()) == {}


def test_empty_spec_rejects_surplus_token():
    assert not parse(SpecBuilder().build(), ["extra"])


@pytest.mark.parametrize("required", [1, 2, 3])
def test_required_positional_count(required):
    spec = build(
        *[
            (f"arg{i}", str, {"argument": ArgumentMeta(index=i)})
            for i in range(required)
        ],
        ("extra", str, {"argument": ArgumentMeta(index=99, optional=True)}),
    )
    tokens = [f"t{i}" for i in range(required + 1)]

    for count in range(required):
        assert not parse(spec, tokens[:count])
    assert parse(spec, tokens[:required])
    result = parse(spec, tokens)
    assert result
    assert result.value.extra == f"t{required}"
    assert not parse(spec, tokens + ["surplus"])


def test_autonomous_option_overrides_missing_positionals():
    spec = build(
        ("name", str, {"argument": ArgumentMeta(index=0)}),
        ("help", bool, {"option": OptionMeta(autonomous=True)}),
    )
    assert not parse(spec, [])
    result = parse(spec, ["--help"])
    assert result
    assert result.value.help is True
    assert result.value.name is None


def test_autonomous_option_overrides_surplus_tokens():
    spec = build(
        ("name", str, {"argument": ArgumentMeta(index=0)}),
        ("help", bool, {"option": OptionMeta(autonomous=True)}),
    )
    assert not parse(spec, ["a", "b", "c"])
    assert parse(spec, ["a", "b", "c", "-h"])
    assert parse(spec, ["-h", "a", "b", "c"])


def test_collection_option_is_greedy_until_next_option():
    spec = build(
        ("tags", list[str], {"option": OptionMeta()}),
        ("verbose", bool, {"option": OptionMeta()}),
    )
    result = parse(spec, ["--tags", "a", "b", "--verbose"])
    assert result
    assert result.value.tags == ["a", "b"]
    assert result.value.verbose is True


def test_collection_option_never_yields_tokens_to_positionals():
    spec = build(
        ("name", str, {"argument": ArgumentMeta(index=0)}),
        ("tags", list[str], {"option": OptionMeta()}),
    )
    assert not parse(spec, ["--tags", "a", "b"])
    result = parse(spec, ["x", "--tags", "a", "b"])
    assert result.value.name == "x"
    assert result.value.tags == ["a", "b"]


def test_collection_option_accumulates_across_occurrences():
    spec = build(
        ("tags", list[str], {"option": OptionMeta()}),
        ("verbose", bool, {"option": OptionMeta()}),
    )
    result = parse(spec, ["-t", "a", "-v", "-t", "b", "c"])
    assert result.value.tags == ["a", "b", "c"]


def test_trailing_collection_positional_absorbs_remaining_tokens():
    spec = build(
        ("first", str, {"argument": ArgumentMeta(index=0)}),
        ("rest", list[str], {"argument": ArgumentMeta(index=1)}),
    )
    result = parse(spec, ["x", "p", "q", "r"])
    assert result
    assert result.value.first == "x"
    assert result.value.rest == ["p", "q", "r"]


def test_collection_positional_continues_after_option():
    spec = build(
        ("files", list[str], {"argument": ArgumentMeta(index=0)}),
        ("verbose", bool, {"option": OptionMeta()}),
    )
    result = parse(spec, ["a", "-v", "b"])
    assert result.value.files == ["a", "b"]
    assert result.value.verbose is True


def test_required_collection_positional_needs_one_value():
    spec = build(("files", list[str], {"argument": ArgumentMeta(index=0)}))
    assert not parse(spec, [])
    assert parse(spec, ["a"]).value.files == ["a"]


def test_missing_option_value_rejects():
    spec = build(("output", str, {"option": OptionMeta()}))
    assert not parse(spec, ["--output"])
    assert parse(spec, ["--output", "out.txt"]).value.output == "out.txt"


def test_option_takes_next_token_even_if_option_name():
    spec = build(
        ("output", str, {"option": OptionMeta()}),
        ("verbose", bool, {"option": OptionMeta()}),
    )
    result = parse(spec, ["--output", "--verbose"])
    assert result.value.output == "--verbose"
    assert result.value.verbose is False


def test_missing_value_on_autonomous_option_still_accepts():
    spec = build(
        ("name", str, {"argument": ArgumentMeta(index=0)}),
        ("version", str, {"option": OptionMeta(autonomous=True)}),
    )
    assert parse(spec, ["--version"])


def test_enum_positional_resolves_case_insensitively():
    spec = build(("color", Color, {"argument": ArgumentMeta(index=0)}))
    assert parse(spec, ["green"]).value.color is Color.GREEN
    assert parse(spec, ["RED"]).value.color is Color.RED


def test_unresolvable_enum_aborts_immediately():
    spec = build(
        ("color", Color, {"argument": ArgumentMeta(index=0)}),
        ("help", bool, {"option": OptionMeta(autonomous=True)}),
    )
    assert not parse(spec, ["BLUE"])
    # The autonomous option after the bad token is never reached.
    assert not parse(spec, ["BLUE", "--help"])
    assert parse(spec, ["--help", "BLUE"]) == parse(spec, ["BLUE"])


def test_unresolvable_enum_option_value_aborts():
    spec = build(("color", Color, {"option": OptionMeta()}))
    assert not parse(spec, ["--color", "blue"])
    assert parse(spec, ["--color", "red"]).value.color is Color.RED


def test_enum_collection_positional():
    spec = build(("colors", list[Color], {"argument": ArgumentMeta(index=0)}))
    assert parse(spec, ["red", "green"]).value.colors == [Color.RED, Color.GREEN]
    assert not parse(spec, ["red", "blue"])


def test_scalar_values_are_coerced_to_field_type():
    spec = build(
        ("count", int, {"argument": ArgumentMeta(index=0)}),
        ("ratio", float, {"option": OptionMeta()}),
        ("path", Path, {"option": OptionMeta()}),
    )
    result = parse(spec, ["3", "-r", "0.5", "-p", "/tmp/x"])
    assert result.value.count == 3
    assert result.value.ratio == 0.5
    assert result.value.path == Path("/tmp/x")


def test_type_binding_error_stops_scan():
    spec = build(
        ("count", int, {"argument": ArgumentMeta(index=0)}),
        ("help", bool, {"option": OptionMeta(autonomous=True)}),
    )
    with pytest.raises(TypeBindingError, match="'count'") as excinfo:
        parse(spec, ["many", "--help"])
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_type_binding_error_on_option_value():
    spec = build(
        ("count", int, {"option": OptionMeta()}),
        ("help", bool, {"option": OptionMeta(autonomous=True)}),
    )
    assert parse(spec, ["--count", "4"]).value.count == 4
    with pytest.raises(TypeBindingError, match="'many' to 'count'"):
        parse(spec, ["--count", "many", "--help"])


def test_type_binding_error_inside_collection_option_sweep():
    spec = build(
        ("nums", list[int], {"option": OptionMeta()}),
        ("help", bool, {"option": OptionMeta(autonomous=True)}),
    )
    assert parse(spec, ["--nums", "1", "2", "3", "--help"]).value.nums == [1, 2, 3]
    with pytest.raises(TypeBindingError, match="'x' to 'nums'") as excinfo:
        parse(spec, ["--nums", "1", "x", "3", "--help"])
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_unwrap_rejected_result_raises():
    spec = build(("name", str, {"argument": ArgumentMeta(index=0)}))
    with pytest.raises(ParseRejected, match="Parsing failed."):
        parse(spec, []).unwrap()


def test_spec_is_reusable_across_parses():
    spec = build(
        ("files", list[str], {"argument": ArgumentMeta(index=0)}),
    )
    first = parse(spec, ["a", "b"]).value
    second = parse(spec, ["c"]).value
    assert first.files == ["a", "b"]
    assert second.files == ["c"]
    assert first.files is not second.files


@dataclass
class Args:
    name: str = argument(0)
    tags: set[str] = argument(1, optional=True, default_factory=set)
    verbose: bool = option("Print more output.", default=False)
    count: int = option("How many.", default=1)
    note: str = "untouched"
    extras: list[str] = field(default_factory=list)


def test_parse_into_dataclass():
    spec = spec_from_dataclass(Args)
    result = parse(spec, ["x", "a", "b", "a", "-v", "--count", "4"])
    assert result
    assert result.value == Args(
        name="x", tags={"a", "b"}, verbose=True, count=4, note="untouched"
    )


def test_parse_into_dataclass_keeps_defaults():
    record = parse(spec_from_dataclass(Args), ["x"]).unwrap()
    assert record == Args(name="x")
    assert record.tags == set()


def test_autonomous_dataclass_fills_required_fields_with_none():
    @dataclass
    class Cli:
        source: str = argument(0)
        help: bool = option("Show help.", autonomous=True, default=False)

    record = parse(spec_from_dataclass(Cli), ["-h"]).unwrap()
    assert record.source is None
    assert record.help is True


def test_record_construction_error_is_type_binding_error():
    @dataclass
    class Strict:
        count: int = argument(0)

        def __post_init__(self):
            if self.count < 0:
                raise ValueError("count must be positive")

    spec = spec_from_dataclass(Strict)
    assert parse(spec, ["2"]).value.count == 2
    with pytest.raises(TypeBindingError):
        parse(spec, ["-3"])
