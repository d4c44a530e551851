# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Type introspection and value coercion utilities for Argbind.

These helpers turn declared field annotations into binding facts (is it a
collection, what is its element type, is it an enum) and convert raw string
tokens into the Python values stored on the record.

Functions:
- unwrap_optional: Strip `None` from `Optional[X]` / `X | None`.
- collection_info: Detect collection annotations and their element type.
- is_enum_type: Check whether a type is an `Enum` subclass.
- coerce_bool: Convert a string to a boolean.
- coerce_enum_name: Resolve a token against an Enum's member names, uppercased.
- coerce_value: General-purpose coercion to a target type.
"""
from __future__ import annotations

import types
from collections import abc
from datetime import datetime
from enum import Enum, EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

COLLECTION_CONTAINERS: dict[Any, type] = {
    list: list,
    set: set,
    frozenset: frozenset,
    tuple: tuple,
    abc.Collection: list,
    abc.Iterable: list,
    abc.Sequence: list,
    abc.MutableSequence: list,
    abc.Set: frozenset,
    abc.MutableSet: set,
}


def _is_union(annotation: Any) -> bool:
    return isinstance(annotation, types.UnionType) or get_origin(annotation) is Union


def unwrap_optional(annotation: Any) -> Any:
    """Return `X` for `Optional[X]` or `X | None`, otherwise the annotation unchanged."""
    if not _is_union(annotation):
        return annotation
    members = [arg for arg in get_args(annotation) if arg is not type(None)]
    if len(members) == 1:
        return members[0]
    return annotation


def collection_info(annotation: Any) -> tuple[type, Any] | None:
    """
    Describe a collection annotation.

    Args:
        annotation (Any): A field annotation, already unwrapped from Optional.

    Returns:
        tuple[type, Any] | None: `(container, element_type)` for collection
        annotations such as `list[int]` or `set`, otherwise None. Bare
        collections default to `str` elements.
    """
    origin = get_origin(annotation) or annotation
    try:
        container = COLLECTION_CONTAINERS.get(origin)
    except TypeError:
        return None
    if container is None:
        return None
    args = [arg for arg in get_args(annotation) if arg is not Ellipsis]
    element = unwrap_optional(args[0]) if args else str
    return container, element


def is_enum_type(target_type: Any) -> bool:
    return isinstance(target_type, type) and issubclass(target_type, Enum)


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off'.
    """
    if isinstance(value, bool):
        return value
    value = value.strip().lower()
    if value in {"true", "t", "1", "yes", "on"}:
        return True
    elif value in {"false", "f", "0", "no", "off"}:
        return False
    return bool(value)


def coerce_enum_name(value: str, enum_type: EnumMeta) -> Any:
    """
    Resolve a token against the member names of an Enum.

    The token is uppercased first, so `red` and `Red` both resolve to `RED`.

    Raises:
        ValueError: If no member carries that name.
    """
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type[value.upper()]  # type: ignore[index]
    except KeyError:
        names = [member.name.lower() for member in enum_type]  # type: ignore[attr-defined]
        raise ValueError(f"'{value}' should be one of {{{', '.join(names)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Handles Union, Literal, Enum (by member name), bool and datetime; any other
    type is called with the string.

    Raises:
        ValueError: If conversion fails or the value is invalid.
        TypeError: If the target type cannot be called with a string.
    """
    if target_type is Any or target_type is str:
        return value

    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ValueError(
                f"Value '{value}' is not a valid literal for type {target_type}"
            )
        return value

    if _is_union(target_type):
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except (TypeError, ValueError):
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum_name(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(f"Value '{value}' could not be parsed as a datetime") from error

    return target_type(value)
