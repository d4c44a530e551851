"""
Argbind CLI Binder

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .engine import parse
from .entries import ArgumentEntry, FieldSlot, OptionEntry
from .field_kind import FieldKind
from .metadata import (
    ARGUMENT,
    OPTION,
    ArgumentMeta,
    OptionMeta,
    argument,
    argument_metadata,
    option,
    option_metadata,
)
from .spec import ParserSpec, SpecBuilder, spec_from_dataclass
from .usage import UsageFormatter, format_usage, print_usage

__all__ = [
    "ARGUMENT",
    "OPTION",
    "ArgumentEntry",
    "ArgumentMeta",
    "FieldKind",
    "FieldSlot",
    "OptionEntry",
    "OptionMeta",
    "ParserSpec",
    "SpecBuilder",
    "UsageFormatter",
    "argument",
    "argument_metadata",
    "format_usage",
    "option",
    "option_metadata",
    "parse",
    "print_usage",
    "spec_from_dataclass",
]
