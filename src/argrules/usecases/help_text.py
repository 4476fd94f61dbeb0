"""src/argrules/usecases/help_text.py
What: Render terminal help text from registered command, input, and option rules.
Why: Help output derives only from metadata, so it lives apart from parsing.
"""

from __future__ import annotations

import textwrap
from collections.abc import Iterable, Sequence
from typing import Final

from argrules.config.settings import ParserSettings
from argrules.domain.models import InputRule, OptionRule
from argrules.usecases.scanner import END_OF_OPTIONS, OPTION_PREFIX

# Labels wider than this get their description on the following line.
MAX_LABEL_WIDTH: Final[int] = 24
COLUMN_GAP: Final[int] = 2


def format_variant(variant: str) -> str:
    """Prefix a bare variant: ``o`` becomes ``-o``, ``output`` becomes ``--output``."""

    prefix = OPTION_PREFIX if len(variant) == 1 else END_OF_OPTIONS
    return f"{prefix}{variant}"


def option_label(rule: OptionRule) -> str:
    label = ", ".join(format_variant(variant) for variant in rule.variants)
    if rule.type.placeholder:
        label = f"{label} {rule.type.placeholder}"
    return label


def usage_line(name: str, inputs: Sequence[InputRule], has_options: bool) -> str:
    parts = [f"Usage: {name}"]
    if has_options:
        parts.append("[options]")
    parts.extend(f"<{rule.name}>" for rule in inputs)
    return " ".join(parts)


def _render_entries(
    entries: Iterable[tuple[str, str]], settings: ParserSettings
) -> list[str]:
    """Lay out ``(label, description)`` pairs in two aligned columns."""

    pairs = list(entries)
    indent = " " * settings.help_indent
    fitting = [len(label) for label, _ in pairs if len(label) <= MAX_LABEL_WIDTH]
    label_width = max(fitting, default=0)
    column = settings.help_indent + label_width + COLUMN_GAP
    wrap_width = max(settings.help_width - column, 10)
    padding = " " * column

    lines: list[str] = []
    for label, description in pairs:
        wrapped = textwrap.wrap(description, width=wrap_width) or [""]
        if len(label) > MAX_LABEL_WIDTH:
            lines.append(f"{indent}{label}")
            lines.extend(f"{padding}{chunk}".rstrip() for chunk in wrapped)
            continue
        first = f"{indent}{label.ljust(label_width)}{' ' * COLUMN_GAP}{wrapped[0]}"
        lines.append(first.rstrip())
        lines.extend(f"{padding}{chunk}" for chunk in wrapped[1:])
    return lines


def render_help(
    name: str,
    description: str,
    inputs: Sequence[InputRule],
    options: Sequence[OptionRule],
    settings: ParserSettings,
) -> str:
    """Build the full help text.

    Args:
        name: Command name.
        description: Command description.
        inputs: Inputs in registration order.
        options: Options in registration order.
        settings: Layout settings.

    Returns:
        str: Multi-line help text without a trailing newline.
    """
    lines: list[str] = [usage_line(name, inputs, bool(options)), ""]

    lines.append(name)
    lines.extend(
        textwrap.wrap(
            description,
            width=settings.help_width,
            initial_indent=" " * settings.help_indent,
            subsequent_indent=" " * settings.help_indent,
        )
    )

    if inputs:
        lines.extend(["", "Inputs:"])
        lines.extend(
            _render_entries(((rule.name, rule.description) for rule in inputs), settings)
        )

    if options:
        lines.extend(["", "Options:"])
        lines.extend(
            _render_entries(
                ((option_label(rule), rule.description) for rule in options), settings
            )
        )

    return "\n".join(lines)


__all__ = ["format_variant", "option_label", "render_help", "usage_line"]
