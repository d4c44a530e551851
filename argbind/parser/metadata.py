# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Declaration helpers that attach option/argument metadata to dataclass fields.

Example:
    @dataclass
    class Args:
        source: str = argument(0)
        targets: list[str] = argument(1, optional=True, default_factory=list)
        verbose: bool = option("Print more output.", default=False)
        help: bool = option("Show this message.", autonomous=True, default=False)

`spec_from_dataclass(Args)` reads the metadata back under the `OPTION` and
`ARGUMENT` keys. Raw dicts stored under those keys are accepted as well and
validated with the same pydantic models.
"""
from __future__ import annotations

from dataclasses import MISSING, field
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, field_validator

OPTION = "argbind.option"
ARGUMENT = "argbind.argument"


class OptionMeta(BaseModel):
    """Metadata for a field exposed as an option."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    description: str = ""
    alias: str | None = None
    short_name: str | None = None
    autonomous: bool = False

    @field_validator("alias")
    @classmethod
    def validate_alias(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            raise ValueError("alias must not be empty")
        if value.startswith("-"):
            raise ValueError("alias must be given without leading dashes")
        if any(char.isspace() for char in value):
            raise ValueError("alias must not contain whitespace")
        return value

    @field_validator("short_name")
    @classmethod
    def validate_short_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        name = value[1:] if value.startswith("-") else value
        if len(name) != 1 or name == "-" or name.isspace():
            raise ValueError(f"short_name must be a single character, got {value!r}")
        return f"-{name}"


class ArgumentMeta(BaseModel):
    """Metadata for a field exposed as a positional argument."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    index: int
    optional: bool = False


def option_metadata(
    description: str = "",
    *,
    alias: str | None = None,
    short_name: str | None = None,
    autonomous: bool = False,
) -> dict[str, OptionMeta]:
    return {
        OPTION: OptionMeta(
            description=description,
            alias=alias,
            short_name=short_name,
            autonomous=autonomous,
        )
    }


def argument_metadata(index: int, *, optional: bool = False) -> dict[str, ArgumentMeta]:
    return {ARGUMENT: ArgumentMeta(index=index, optional=optional)}


def option(
    description: str = "",
    *,
    alias: str | None = None,
    short_name: str | None = None,
    autonomous: bool = False,
    default: Any = MISSING,
    default_factory: Any = MISSING,
    metadata: Mapping[str, Any] | None = None,
) -> Any:
    """
    Declare a dataclass field as an option.

    Args:
        description (str): Help text shown in the usage output.
        alias (str | None): Long name; defaults to the field name.
        short_name (str | None): Single-character override for the short form.
        autonomous (bool): If True, the option alone satisfies a parse
            (help/version style flags).
        default: Field default, passed to `dataclasses.field`.
        default_factory: Field default factory, passed to `dataclasses.field`.
        metadata (Mapping | None): Extra metadata to merge, e.g. from
            `argument_metadata()` to also expose the field positionally.
    """
    merged = dict(metadata or {})
    merged.update(
        option_metadata(
            description, alias=alias, short_name=short_name, autonomous=autonomous
        )
    )
    return field(default=default, default_factory=default_factory, metadata=merged)


def argument(
    index: int,
    *,
    optional: bool = False,
    default: Any = MISSING,
    default_factory: Any = MISSING,
    metadata: Mapping[str, Any] | None = None,
) -> Any:
    """
    Declare a dataclass field as a positional argument.

    Args:
        index (int): Sort key among positionals; must be unique per record.
        optional (bool): True if the argument may be omitted.
        default: Field default, passed to `dataclasses.field`.
        default_factory: Field default factory, passed to `dataclasses.field`.
        metadata (Mapping | None): Extra metadata to merge, e.g. from
            `option_metadata()` to also expose the field as an option.
    """
    merged = dict(metadata or {})
    merged.update(argument_metadata(index, optional=optional))
    return field(default=default, default_factory=default_factory, metadata=merged)


def read_metadata(
    metadata: Mapping[str, Any],
) -> tuple[OptionMeta | None, ArgumentMeta | None]:
    """Return the validated option and argument metadata of a field, if any."""
    option_meta = metadata.get(OPTION)
    argument_meta = metadata.get(ARGUMENT)
    if option_meta is not None and not isinstance(option_meta, OptionMeta):
        option_meta = OptionMeta.model_validate(option_meta)
    if argument_meta is not None and not isinstance(argument_meta, ArgumentMeta):
        argument_meta = ArgumentMeta.model_validate(argument_meta)
    return option_meta, argument_meta
