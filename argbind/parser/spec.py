# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the descriptor builder: it turns field declarations into
an immutable `ParserSpec` shared by the parser engine and the usage formatter.

Key Features:
- Kind derivation from declared types (`bool`, collections, enums, scalars)
- Short-name assignment: `-` + lowercase first letter of the alias, retried
  with the uppercase letter on collision
- Both option forms (`-x`, `--alias`) resolve to one shared `OptionEntry`
- Positionals sorted once, stably, by their declared index
- `spec_from_dataclass()` for dataclasses declared with `option()` / `argument()`

Example Usage:
    builder = SpecBuilder()
    builder.add_field("name", str, argument=ArgumentMeta(index=0))
    builder.add_field("verbose", bool, option=OptionMeta(description="Talk more."))
    spec = builder.build()

    spec.lookup("-v") is spec.lookup("--verbose")  # True

Every failure here raises `SpecConflictError` before any parse is attempted.
"""
from __future__ import annotations

import re
from dataclasses import MISSING, dataclass, field, fields, is_dataclass
from types import MappingProxyType, SimpleNamespace
from typing import Any, Callable, Mapping, get_type_hints

from argbind.exceptions import SpecConflictError
from argbind.logger import logger
from argbind.parser.entries import ArgumentEntry, FieldSlot, OptionEntry
from argbind.parser.field_kind import FieldKind
from argbind.parser.metadata import ArgumentMeta, OptionMeta, read_metadata

RecordFactory = Callable[[dict[str, Any]], Any]


def unbound_value(slot: FieldSlot | None) -> Any:
    """Value stored for a declared field that received no token."""
    if slot is not None and slot.kind is FieldKind.FLAG:
        return False
    return None


def finish_value(slot: FieldSlot, value: Any) -> Any:
    """Convert the accumulated list of a collection slot to its container type."""
    if slot.is_collection and slot.container is not list:
        return slot.container(value)
    return value


class NamespaceRecordFactory:
    """Builds a `SimpleNamespace` holding every slot of a hand-built spec."""

    def __init__(self, slots: list[FieldSlot]) -> None:
        self.slots = list(slots)

    def __call__(self, values: dict[str, Any]) -> SimpleNamespace:
        data = {}
        for slot in self.slots:
            if slot.name in values:
                data[slot.name] = finish_value(slot, values[slot.name])
            else:
                data[slot.name] = unbound_value(slot)
        return SimpleNamespace(**data)


class DataclassRecordFactory:
    """
    Builds an instance of a dataclass from bound values.

    Unbound fields keep their dataclass defaults; unbound fields without a
    default receive `None` (`False` for flags).
    """

    def __init__(self, record_type: type, slots: list[FieldSlot]) -> None:
        self.record_type = record_type
        self.slots = {slot.name: slot for slot in slots}

    def __call__(self, values: dict[str, Any]) -> Any:
        kwargs: dict[str, Any] = {}
        for record_field in fields(self.record_type):
            if not record_field.init:
                continue
            slot = self.slots.get(record_field.name)
            if slot is not None and record_field.name in values:
                kwargs[record_field.name] = finish_value(slot, values[record_field.name])
            elif (
                record_field.default is MISSING
                and record_field.default_factory is MISSING
            ):
                kwargs[record_field.name] = unbound_value(slot)
        return self.record_type(**kwargs)


@dataclass(frozen=True, eq=False)
class ParserSpec:
    """
    Immutable descriptor set for one record type.

    Attributes:
        option_entries (tuple[OptionEntry, ...]): Distinct options in declaration order.
        option_index (Mapping[str, int]): Short and long names mapped to a
            position in `option_entries`.
        positionals (tuple[ArgumentEntry, ...]): Positionals sorted by index.
        non_optional_count (int): Number of positionals that are not optional.
        record_factory (RecordFactory): Builds the record from bound values.
    """

    option_entries: tuple[OptionEntry, ...] = ()
    option_index: Mapping[str, int] = field(
        default_factory=lambda: MappingProxyType({})
    )
    positionals: tuple[ArgumentEntry, ...] = ()
    non_optional_count: int = 0
    record_factory: RecordFactory = field(
        default_factory=lambda: NamespaceRecordFactory([])
    )

    @property
    def options(self) -> Mapping[str, OptionEntry]:
        """Name → entry view; both forms of an option map to the same entry."""
        return MappingProxyType(
            {name: self.option_entries[i] for name, i in self.option_index.items()}
        )

    def lookup(self, token: str) -> OptionEntry | None:
        position = self.option_index.get(token)
        if position is None:
            return None
        return self.option_entries[position]

    def is_option(self, token: str) -> bool:
        return token in self.option_index

    def __str__(self) -> str:
        return (
            f"ParserSpec(options={len(self.option_entries)}, "
            f"positional={len(self.positionals)}, required={self.non_optional_count})"
        )

    def __repr__(self) -> str:
        return str(self)


class SpecBuilder:
    """
    Collects field declarations and produces a `ParserSpec`.

    Fields are added in declaration order; that order decides which option
    keeps the lowercase short name when two aliases share a first letter.
    """

    def __init__(self, record_factory: RecordFactory | None = None) -> None:
        self.record_factory: RecordFactory | None = record_factory
        self._slots: list[FieldSlot] = []
        self._option_entries: list[OptionEntry] = []
        self._option_index: dict[str, int] = {}
        self._positionals: list[ArgumentEntry] = []
        self._indices: dict[int, str] = {}
        self._non_optional_count: int = 0

    @property
    def slots(self) -> list[FieldSlot]:
        return list(self._slots)

    def add_field(
        self,
        name: str,
        annotation: Any,
        option: OptionMeta | Mapping[str, Any] | None = None,
        argument: ArgumentMeta | Mapping[str, Any] | None = None,
    ) -> FieldSlot:
        """Derive a slot from `annotation` and register it."""
        slot = FieldSlot.from_annotation(name, annotation)
        return self.add_slot(slot, option=option, argument=argument)

    def add_slot(
        self,
        slot: FieldSlot,
        option: OptionMeta | Mapping[str, Any] | None = None,
        argument: ArgumentMeta | Mapping[str, Any] | None = None,
    ) -> FieldSlot:
        """Register an already derived slot as an option and/or a positional."""
        if any(existing.name == slot.name for existing in self._slots):
            raise SpecConflictError(f"Field '{slot.name}' is already declared.")
        if option is not None and not isinstance(option, OptionMeta):
            option = OptionMeta.model_validate(option)
        if argument is not None and not isinstance(argument, ArgumentMeta):
            argument = ArgumentMeta.model_validate(argument)

        if option is not None:
            self._register_option(slot, option)
        if argument is not None:
            self._register_argument(slot, argument)
        self._slots.append(slot)
        return slot

    def _resolve_short_name(self, alias: str, override: str | None) -> str:
        if override is not None:
            if override in self._option_index:
                raise SpecConflictError(
                    f"Option {override} is already used, choose a different "
                    f"short name for option '{alias}'."
                )
            return override
        first = alias[0]
        short_name = f"-{first.lower()}"
        if short_name in self._option_index:
            short_name = f"-{first.upper()}"
        if short_name in self._option_index:
            raise SpecConflictError(
                f"Options -{first.lower()} and -{first.upper()} are already used, "
                f"choose a different alias for option '{alias}'."
            )
        return short_name

    def _register_option(self, slot: FieldSlot, meta: OptionMeta) -> None:
        alias = meta.alias or slot.name
        long_name = f"--{alias}"
        if long_name in self._option_index:
            raise SpecConflictError(f"Option {long_name} is already declared.")
        short_name = self._resolve_short_name(alias, meta.short_name)

        entry = OptionEntry(
            slot=slot,
            alias=alias,
            short_name=short_name,
            description=meta.description,
            autonomous=meta.autonomous,
        )
        position = len(self._option_entries)
        self._option_entries.append(entry)
        self._option_index[short_name] = position
        self._option_index[long_name] = position
        logger.debug(
            "Registered option %s, %s for field '%s' (%s).",
            short_name,
            long_name,
            slot.name,
            slot.kind,
        )

    def _register_argument(self, slot: FieldSlot, meta: ArgumentMeta) -> None:
        if meta.index in self._indices:
            raise SpecConflictError(
                f"Arguments '{self._indices[meta.index]}' and '{slot.name}' "
                f"share index {meta.index}."
            )
        self._indices[meta.index] = slot.name
        self._positionals.append(
            ArgumentEntry(slot=slot, index=meta.index, optional=meta.optional)
        )
        if not meta.optional:
            self._non_optional_count += 1
        logger.debug(
            "Registered argument '%s' at index %d (optional=%s).",
            slot.name,
            meta.index,
            meta.optional,
        )

    def build(self) -> ParserSpec:
        """Sort the positionals and freeze everything into a `ParserSpec`."""
        positionals = sorted(self._positionals, key=lambda entry: entry.index)
        return ParserSpec(
            option_entries=tuple(self._option_entries),
            option_index=MappingProxyType(dict(self._option_index)),
            positionals=tuple(positionals),
            non_optional_count=self._non_optional_count,
            record_factory=self.record_factory or NamespaceRecordFactory(self._slots),
        )


def _resolve_hints(record_type: type, localns: Mapping[str, Any] | None) -> dict[str, Any]:
    try:
        return get_type_hints(record_type, localns=dict(localns) if localns else None)
    except (NameError, TypeError) as error:
        missing = getattr(error, "name", None)
        culprit = next(
            (
                record_field.name
                for record_field in fields(record_type)
                if isinstance(record_field.type, str)
                and missing
                and re.search(rf"\b{re.escape(missing)}\b", record_field.type)
            ),
            None,
        )
        where = record_type.__name__
        if culprit:
            where = f"field '{culprit}' of {where}"
        raise SpecConflictError(
            f"Cannot resolve the annotation of {where}: {error}. "
            "Pass the local types through `localns`."
        ) from error


def spec_from_dataclass(
    record_type: type,
    localns: Mapping[str, Any] | None = None,
) -> ParserSpec:
    """
    Build a `ParserSpec` from a dataclass declared with `option()` / `argument()`.

    Fields without Argbind metadata are ignored by the parser; on construction
    they keep their defaults (or receive None).

    Annotations are resolved against the module of `record_type`. Types defined
    inside a function are only visible through `localns`, e.g. `locals()`.

    Raises:
        TypeError: If `record_type` is not a dataclass type.
        SpecConflictError: If the declarations conflict or an annotation
            cannot be resolved.
    """
    if not (isinstance(record_type, type) and is_dataclass(record_type)):
        raise TypeError(f"{record_type!r} is not a dataclass type")

    hints = _resolve_hints(record_type, localns)
    builder = SpecBuilder()
    for record_field in fields(record_type):
        option_meta, argument_meta = read_metadata(record_field.metadata)
        if option_meta is None and argument_meta is None:
            continue
        if not record_field.init:
            raise SpecConflictError(
                f"Field '{record_field.name}' is declared with init=False and cannot be bound."
            )
        builder.add_field(
            record_field.name,
            hints[record_field.name],
            option=option_meta,
            argument=argument_meta,
        )
    builder.record_factory = DataclassRecordFactory(record_type, builder.slots)
    return builder.build()
