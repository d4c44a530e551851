# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argbind.

The hierarchy separates programmer errors (a broken declaration, a field type
that cannot hold a matched value) from the single user-input failure raised
when a rejected parse result is unwrapped.

All exceptions inherit from `ArgbindError`, the base exception for the package.

Exception Hierarchy:
- ArgbindError
    ├── SpecConflictError
    ├── TypeBindingError
    └── ParseRejected
"""


class ArgbindError(Exception):
    """Base exception for Argbind."""


class SpecConflictError(ArgbindError):
    """Exception raised when field declarations cannot form a valid parser spec."""


class TypeBindingError(ArgbindError):
    """Exception raised when a matched value cannot be bound to its field type."""


class ParseRejected(ArgbindError):
    """Exception raised when a rejected parse result is unwrapped."""

    def __init__(self, message: str = "Parsing failed."):
        super().__init__(message)
