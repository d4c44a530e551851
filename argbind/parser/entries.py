# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the descriptor model shared by the parser engine and the usage formatter.

- `FieldSlot`: one bindable field of the target record, with its derived kind.
- `OptionEntry`: a slot exposed as a named option (`-x` / `--alias`).
- `ArgumentEntry`: a slot exposed as a positional argument.

All three are frozen. They are created once by `SpecBuilder` and shared
read-only by every parse call afterwards.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from argbind.parser.field_kind import FieldKind
from argbind.parser.utils import collection_info, is_enum_type, unwrap_optional


@dataclass(frozen=True)
class FieldSlot:
    """
    Represents one bindable field of the target record.

    Attributes:
        name (str): Field name, used for display and as the default option alias.
        kind (FieldKind): FLAG, SCALAR or COLLECTION.
        value_type (Any): Scalar type, or element type for collections.
        container (type): Concrete container built for COLLECTION fields.
        is_enum (bool): True if `value_type` is an Enum.
    """

    name: str
    kind: FieldKind
    value_type: Any = str
    container: type = list
    is_enum: bool = False

    @classmethod
    def from_annotation(cls, name: str, annotation: Any) -> FieldSlot:
        """Derive a slot from a declared type annotation."""
        annotation = unwrap_optional(annotation)
        if annotation is bool:
            return cls(name=name, kind=FieldKind.FLAG, value_type=bool)
        collection = collection_info(annotation)
        if collection is not None:
            container, element = collection
            return cls(
                name=name,
                kind=FieldKind.COLLECTION,
                value_type=element,
                container=container,
                is_enum=is_enum_type(element),
            )
        return cls(
            name=name,
            kind=FieldKind.SCALAR,
            value_type=annotation,
            is_enum=is_enum_type(annotation),
        )

    @property
    def is_collection(self) -> bool:
        return self.kind is FieldKind.COLLECTION


@dataclass(frozen=True)
class OptionEntry:
    """
    Represents a field exposed as an option.

    Attributes:
        slot (FieldSlot): The bound field.
        alias (str): Long name without dashes (`--alias`).
        short_name (str): Short form including its dash (`-a`).
        description (str): Help text for the usage output.
        autonomous (bool): If True, the option alone makes a parse succeed.
    """

    slot: FieldSlot
    alias: str
    short_name: str
    description: str = ""
    autonomous: bool = False

    @property
    def has_value(self) -> bool:
        return self.slot.kind is not FieldKind.FLAG

    @property
    def long_name(self) -> str:
        return f"--{self.alias}"

    @property
    def flags(self) -> tuple[str, str]:
        return (self.short_name, self.long_name)


@dataclass(frozen=True)
class ArgumentEntry:
    """
    Represents a field exposed as a positional argument.

    Attributes:
        slot (FieldSlot): The bound field.
        index (int): Sort key among positionals.
        optional (bool): True if the argument may be omitted.
    """

    slot: FieldSlot
    index: int
    optional: bool = False

    @property
    def name(self) -> str:
        return self.slot.name

    def get_usage_text(self) -> str:
        """Return the usage-line fragment for this argument."""
        text = f"[{self.name}]" if self.optional else f"<{self.name}>"
        if self.slot.is_collection:
            text += " [...]"
        return text
