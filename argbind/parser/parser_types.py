# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Scan state used by the parser engine.

`ScanState` is created fresh for every parse call, so a `ParserSpec` can be
shared by concurrent callers without any of them seeing another's progress.
"""
from dataclasses import dataclass


@dataclass
class ScanState:
    """
    Tracks the progress of a single left-to-right scan.

    Attributes:
        cursor (int): Index of the next positional to fill.
        valid (bool): Cleared by soft failures (missing option value, surplus token).
        force_valid (bool): Set once an autonomous option has been consumed.
        saw_collection_positional (bool): Set once a collection positional took a value.
    """

    cursor: int = 0
    valid: bool = True
    force_valid: bool = False
    saw_collection_positional: bool = False

    def invalidate(self) -> None:
        self.valid = False

    def close_collection(self) -> None:
        """Count a filled collection positional as one consumed slot."""
        if self.saw_collection_positional:
            self.cursor += 1

    def is_accepted(self, positional_count: int, non_optional_count: int) -> bool:
        if self.force_valid:
            return True
        return self.valid and non_optional_count <= self.cursor <= positional_count
