"""src/argrules/ui/cli/runner.py
What: Parse ``sys.argv`` for a script, printing errors and help to the terminal.
Why: Scripts share one exit-code and output convention for argument failures.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Final

from rich.console import Console

from argrules.parser import HELP_OPTION_NAME, ArgumentParser
from argrules.platform.logging import logger

EXIT_HELP: Final[int] = 0
EXIT_USAGE: Final[int] = 2


def parse_or_exit(
    parser: ArgumentParser,
    arguments: Sequence[str] | None = None,
    *,
    help_option: str | None = HELP_OPTION_NAME,
    console: Console | None = None,
    error_console: Console | None = None,
) -> ArgumentParser:
    """Parse arguments or terminate the process with a usage message.

    Args:
        parser: Parser with its rules registered.
        arguments: Tokens to parse; defaults to ``sys.argv[1:]``.
        help_option: Name of a boolean option that requests help, if any.
        console: Destination for help output requested by the user.
        error_console: Destination for error output.

    Returns:
        ArgumentParser: The same parser, ready for value queries.

    Raises:
        SystemExit: With ``EXIT_USAGE`` on a parse failure, or ``EXIT_HELP``
            after printing requested help.
    """
    tokens = list(sys.argv[1:] if arguments is None else arguments)
    out = console or Console(soft_wrap=True)
    err = error_console or Console(stderr=True, soft_wrap=True)

    result = parser.parse_arguments(tokens)
    if not result.success:
        assert result.error is not None
        logger.debug("Argument parsing failed for %s: %s", parser.name, result.error)
        err.print(f"error: {result.error.message}", markup=False, highlight=False)
        err.print("", markup=False)
        err.print(parser.help_info(), markup=False, highlight=False)
        sys.exit(EXIT_USAGE)

    if help_option and parser.value_for_boolean_option(help_option):
        out.print(parser.help_info(), markup=False, highlight=False)
        sys.exit(EXIT_HELP)

    return parser


__all__ = ["EXIT_HELP", "EXIT_USAGE", "parse_or_exit"]
