"""
Argbind CLI Binder

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .binder import ArgumentBinder
from .config import UsageConfig
from .exceptions import ArgbindError, ParseRejected, SpecConflictError, TypeBindingError
from .parser import (
    ParserSpec,
    SpecBuilder,
    argument,
    format_usage,
    option,
    parse,
    spec_from_dataclass,
)
from .result import ParseResult

__version__ = "0.1.0"

__all__ = [
    "ArgbindError",
    "ArgumentBinder",
    "ParseRejected",
    "ParseResult",
    "ParserSpec",
    "SpecBuilder",
    "SpecConflictError",
    "TypeBindingError",
    "UsageConfig",
    "argument",
    "format_usage",
    "option",
    "parse",
    "spec_from_dataclass",
]
