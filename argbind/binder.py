# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgumentBinder`, the entry point applications use.

An `ArgumentBinder` wraps one dataclass record type: it builds the
`ParserSpec` once, then parses token lists and renders usage on demand.

Example Usage:
    @dataclass
    class Args:
        path: str = argument(0)
        verbose: bool = option("Print more output.", default=False)

    binder = ArgumentBinder(Args, app_name="tool.py")
    args = binder.parse_or_exit()
"""
from __future__ import annotations

import sys
from typing import Any, Generic, Mapping, Sequence, TypeVar

from rich.console import Console

from argbind.config import UsageConfig
from argbind.console import error_console
from argbind.logger import logger
from argbind.parser.engine import parse
from argbind.parser.spec import ParserSpec, spec_from_dataclass
from argbind.parser.usage import UsageFormatter, print_usage
from argbind.result import ParseResult
from argbind.utils import get_program_name

T = TypeVar("T")

EXIT_USAGE = 2


class ArgumentBinder(Generic[T]):
    """
    Binds command-line tokens onto instances of a dataclass.

    Args:
        record_type (type[T]): Dataclass declared with `option()` / `argument()`.
        app_name (str | None): Name shown in usage; defaults to the running program.
        usage_config (UsageConfig | None): Usage rendering settings.
        localns (Mapping[str, Any] | None): Extra names for resolving annotations
            that refer to types defined inside a function.
    """

    def __init__(
        self,
        record_type: type[T],
        app_name: str | None = None,
        usage_config: UsageConfig | None = None,
        localns: Mapping[str, Any] | None = None,
    ) -> None:
        self.record_type: type[T] = record_type
        self.app_name: str = app_name or get_program_name()
        self.formatter: UsageFormatter = UsageFormatter(usage_config)
        self.spec: ParserSpec = spec_from_dataclass(record_type, localns=localns)

    def parse(self, tokens: Sequence[str]) -> ParseResult[T]:
        return parse(self.spec, tokens)

    def format_usage(self) -> str:
        return self.formatter.format(self.spec, self.app_name)

    def print_usage(self, console: Console | None = None) -> None:
        print_usage(
            self.spec,
            self.app_name,
            console=console or error_console,
            config=self.formatter.config,
        )

    def parse_or_exit(
        self,
        tokens: Sequence[str] | None = None,
        console: Console | None = None,
    ) -> T:
        """
        Parse `tokens` (default `sys.argv[1:]`) or print usage and exit.

        Raises:
            SystemExit: With status 2 when the tokens are rejected.
        """
        if tokens is None:
            tokens = sys.argv[1:]
        result = self.parse(tokens)
        if not result:
            logger.debug("Rejected arguments for %s: %s", self.app_name, list(tokens))
            self.print_usage(console)
            raise SystemExit(EXIT_USAGE)
        return result.unwrap()

    def __str__(self) -> str:
        return (
            f"ArgumentBinder(record={self.record_type.__name__}, "
            f"options={len(self.spec.option_entries)}, "
            f"positional={len(self.spec.positionals)}, "
            f"required={self.spec.non_optional_count})"
        )

    def __repr__(self) -> str:
        return str(self)
