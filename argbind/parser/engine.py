# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the parser engine: a single left-to-right scan that
binds a token list onto the fields described by a `ParserSpec`.

Matching rules, in priority order for each token:
1. A token equal to a registered option name (short or long) is an option.
   Flags bind True. Value options take the next token; collection options
   then keep taking tokens until the next registered option name.
2. Otherwise the token fills the current positional. A collection positional
   keeps the cursor in place and absorbs every later non-option token.
3. Otherwise the token is surplus: the parse is marked invalid but the scan
   goes on.

An enum token that names no member stops the scan at once and rejects the
parse. A value that cannot be converted to its field type raises
`TypeBindingError`; that is a declaration problem, not a user error.

Acceptance: an autonomous option anywhere in the input accepts the parse.
Otherwise the scan must be valid and the number of filled positionals must
lie between the required count and the declared count.
"""
from __future__ import annotations

from typing import Any, Sequence

from argbind.exceptions import TypeBindingError
from argbind.logger import logger
from argbind.parser.entries import FieldSlot, OptionEntry
from argbind.parser.parser_types import ScanState
from argbind.parser.spec import ParserSpec
from argbind.parser.utils import coerce_enum_name, coerce_value
from argbind.result import ParseResult


class UnresolvedEnumToken(Exception):
    """Raised internally when a token names no member of its enum type."""


def _type_name(target_type: Any) -> str:
    return getattr(target_type, "__name__", str(target_type))


def _convert(slot: FieldSlot, token: str) -> Any:
    if slot.is_enum:
        try:
            return coerce_enum_name(token, slot.value_type)
        except ValueError as error:
            raise UnresolvedEnumToken(f"'{slot.name}': {error}") from error
    try:
        return coerce_value(token, slot.value_type)
    except (TypeError, ValueError) as error:
        raise TypeBindingError(
            f"Cannot bind {token!r} to '{slot.name}' "
            f"({_type_name(slot.value_type)}): {error}"
        ) from error


def _bind(values: dict[str, Any], slot: FieldSlot, value: Any) -> None:
    if slot.is_collection:
        container = values.get(slot.name)
        if container is None:
            container = values[slot.name] = []
        container.append(value)
    else:
        values[slot.name] = value


def _consume_option(
    spec: ParserSpec,
    entry: OptionEntry,
    tokens: Sequence[str],
    i: int,
    state: ScanState,
    values: dict[str, Any],
) -> int:
    """Consume an option token (and its values) at `i`; return the next index."""
    slot = entry.slot
    if not entry.has_value:
        _bind(values, slot, True)
        i += 1
    else:
        i += 1
        if i >= len(tokens):
            logger.debug("Option '%s' expects a value.", tokens[i - 1])
            state.invalidate()
        else:
            _bind(values, slot, _convert(slot, tokens[i]))
            i += 1
            if slot.is_collection:
                while i < len(tokens) and not spec.is_option(tokens[i]):
                    _bind(values, slot, _convert(slot, tokens[i]))
                    i += 1

    if entry.autonomous:
        state.force_valid = True
    return i


def _scan(
    spec: ParserSpec,
    tokens: Sequence[str],
    state: ScanState,
    values: dict[str, Any],
) -> None:
    i = 0
    while i < len(tokens):
        token = tokens[i]
        entry = spec.lookup(token)
        if entry is not None:
            i = _consume_option(spec, entry, tokens, i, state, values)
        elif state.cursor < len(spec.positionals):
            argument = spec.positionals[state.cursor]
            _bind(values, argument.slot, _convert(argument.slot, token))
            if argument.slot.is_collection:
                state.saw_collection_positional = True
            else:
                state.cursor += 1
            i += 1
        else:
            # Soft failure: an autonomous option later on still accepts the parse.
            logger.debug("Unexpected token '%s': no positional left.", token)
            state.invalidate()
            i += 1


def parse(spec: ParserSpec, tokens: Sequence[str]) -> ParseResult[Any]:
    """
    Parse `tokens` against `spec`.

    Args:
        spec (ParserSpec): The immutable descriptor set.
        tokens (Sequence[str]): Argument vector, without the program name.

    Returns:
        ParseResult: Accepted with the populated record, or rejected.

    Raises:
        TypeBindingError: If a matched value cannot be bound to its field.
    """
    state = ScanState()
    values: dict[str, Any] = {}
    try:
        _scan(spec, tokens, state, values)
    except UnresolvedEnumToken as error:
        logger.debug("Parse rejected, unresolved enum value for %s", error)
        return ParseResult.rejected()

    state.close_collection()
    if not state.is_accepted(len(spec.positionals), spec.non_optional_count):
        logger.debug(
            "Parse rejected: valid=%s, positionals filled=%d, required=%d, declared=%d.",
            state.valid,
            state.cursor,
            spec.non_optional_count,
            len(spec.positionals),
        )
        return ParseResult.rejected()

    try:
        record = spec.record_factory(values)
    except (TypeError, ValueError) as error:
        raise TypeBindingError(f"Cannot build record from parsed values: {error}") from error
    return ParseResult.ok(record)
