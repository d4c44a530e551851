# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FieldKind`, the binding category of a record field.

The kind is derived once from the field's declared type when a spec is built
and decides how the parser engine consumes tokens for that field:

- FLAG: presence-only, bound to True when its option name is seen.
- SCALAR: takes exactly one value (strings, numbers, enums, paths, ...).
- COLLECTION: takes zero or more values of an element type.
"""
from __future__ import annotations

from enum import Enum


class FieldKind(Enum):
    """Binding category of a `FieldSlot`."""

    FLAG = "flag"
    SCALAR = "scalar"
    COLLECTION = "collection"

    def __str__(self) -> str:
        return self.value
