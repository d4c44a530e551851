# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseResult`, the outcome of a single parse call.

A result is either accepted and carries the populated record, or rejected and
carries nothing. Rejection is opaque: the caller learns that the
tokens did not fit the `ParserSpec`, not which rule they broke.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from argbind.exceptions import ParseRejected

T = TypeVar("T")


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """
    Represents the result of parsing a token list against a `ParserSpec`.

    Attributes:
        accepted (bool): True if the tokens satisfied the `ParserSpec`.
        value (T | None): The populated record when accepted, otherwise None.
    """

    accepted: bool
    value: T | None = None

    @classmethod
    def ok(cls, value: T) -> ParseResult[T]:
        return cls(accepted=True, value=value)

    @classmethod
    def rejected(cls) -> ParseResult[T]:
        return cls(accepted=False)

    def unwrap(self) -> T:
        """Return the record or raise `ParseRejected`."""
        if not self.accepted:
            raise ParseRejected()
        return self.value  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.accepted
