# Argbind CLI Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the usage formatter, which renders plain help text from
the same `ParserSpec` the parser engine consumes.

Layout:
    Usage: <invocation> <app> [options] <required> [optional] [...]
    Colors                       <- one block per enum positional
      red
      green
    Options
      -v, --verbose Print more output.
      -o, --output  Description wrapped to the configured line width, with
                    continuation lines aligned under the description column.

The description column starts at `OPTION_PREFIX_WIDTH + longest alias`, the
prefix being `"  -x, --"` plus the separating space. Descriptions are cut at
the last space that fits the remaining width, or hard-cut when a word is
longer than the whole budget.
"""
from __future__ import annotations

from rich.console import Console

from argbind.config import UsageConfig
from argbind.console import console as default_console
from argbind.parser.spec import ParserSpec

OPTION_PREFIX_WIDTH = 9


def pluralize(name: str) -> str:
    """Pluralize a field name: trailing `y` becomes `ies`, anything else gets `s`."""
    if name.endswith("y"):
        return name[:-1] + "ies"
    return name + "s"


def capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def wrap_description(description: str, budget: int) -> list[str]:
    """
    Cut `description` into lines of at most `budget` characters.

    Each cut happens at the last space at or before the budget; the space
    itself is dropped. Without such a space the text is hard-cut.
    """
    budget = max(budget, 1)
    lines: list[str] = []
    remaining = description
    while len(remaining) > budget:
        cut = remaining.rfind(" ", 0, budget + 1)
        if cut == -1:
            lines.append(remaining[:budget])
            remaining = remaining[budget:]
        else:
            lines.append(remaining[:cut])
            remaining = remaining[cut + 1 :]
    lines.append(remaining)
    return lines


class UsageFormatter:
    """
    Renders usage text for a `ParserSpec`.

    The output is deterministic for a given spec, application name and
    `UsageConfig`, and every line (including the last) ends with a newline.
    """

    def __init__(self, config: UsageConfig | None = None) -> None:
        self.config: UsageConfig = config or UsageConfig()

    def get_usage_line(self, spec: ParserSpec, app_name: str) -> str:
        parts = ["Usage:"]
        if self.config.invocation:
            parts.append(self.config.invocation)
        parts.append(app_name)
        if spec.option_entries:
            parts.append("[options]")
        parts.extend(argument.get_usage_text() for argument in spec.positionals)
        return " ".join(parts)

    def get_enum_lines(self, spec: ParserSpec) -> list[str]:
        lines = []
        for argument in spec.positionals:
            if not argument.slot.is_enum:
                continue
            lines.append(capitalize(pluralize(argument.name)))
            for member in argument.slot.value_type:
                lines.append(f"  {member.name.lower()}")
        return lines

    def get_option_lines(self, spec: ParserSpec) -> list[str]:
        if not spec.option_entries:
            return []
        max_alias_length = max(len(entry.alias) for entry in spec.option_entries)
        budget = self.config.line_width - OPTION_PREFIX_WIDTH - max_alias_length
        indent = " " * (OPTION_PREFIX_WIDTH + max_alias_length)

        lines = ["Options"]
        for entry in spec.option_entries:
            padding = " " * (max_alias_length - len(entry.alias) + 1)
            first, *rest = wrap_description(entry.description, budget)
            lines.append(f"  {entry.short_name}, --{entry.alias}{padding}{first}")
            lines.extend(f"{indent}{line}" for line in rest)
        return lines

    def format(self, spec: ParserSpec, app_name: str) -> str:
        lines = [self.get_usage_line(spec, app_name)]
        lines.extend(self.get_enum_lines(spec))
        lines.extend(self.get_option_lines(spec))
        return "\n".join(lines) + "\n"


def format_usage(
    spec: ParserSpec,
    app_name: str,
    line_width: int | None = None,
    invocation: str | None = None,
) -> str:
    """Render usage text with an ad-hoc `UsageConfig`."""
    settings = {}
    if line_width is not None:
        settings["line_width"] = line_width
    if invocation is not None:
        settings["invocation"] = invocation
    return UsageFormatter(UsageConfig(**settings)).format(spec, app_name)


def print_usage(
    spec: ParserSpec,
    app_name: str,
    console: Console | None = None,
    config: UsageConfig | None = None,
) -> None:
    """Write usage text to a rich console, verbatim."""
    text = UsageFormatter(config).format(spec, app_name)
    (console or default_console).print(
        text,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
        end="",
    )
