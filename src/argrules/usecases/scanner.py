"""
Summary: Scan a flat argument list into option values and positional inputs.
Why: Keep the tokenizing rules independent of the parser's registration state.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Final

from argrules.config.settings import ParserSettings
from argrules.domain.errors import (
    MissingOptionValueError,
    UnexpectedInputError,
    UnknownOptionError,
)
from argrules.domain.models import (
    ExtraInputPolicy,
    InputRule,
    OptionRule,
    OptionType,
    ParsedState,
)

OPTION_PREFIX: Final[str] = "-"
END_OF_OPTIONS: Final[str] = "--"


def strip_prefix(token: str) -> str:
    """Remove a leading ``-`` or ``--`` from an option token."""

    if token.startswith(END_OF_OPTIONS):
        return token[len(END_OF_OPTIONS):]
    return token[len(OPTION_PREFIX):]


def is_option_token(token: str) -> bool:
    """Return whether ``token`` references an option rather than an input.

    A lone ``-`` is the conventional stand-in for standard input and is
    treated as positional.
    """

    return token.startswith(OPTION_PREFIX) and token != OPTION_PREFIX


def find_option(options: Iterable[OptionRule], variant: str) -> OptionRule | None:
    """Return the first option whose variants include ``variant``."""

    for rule in options:
        if rule.matches(variant):
            return rule
    return None


def scan_arguments(
    arguments: Sequence[str],
    options: Mapping[str, OptionRule],
    inputs: Sequence[InputRule],
    settings: ParserSettings,
) -> ParsedState:
    """Resolve ``arguments`` against the registered rules.

    Args:
        arguments: Raw tokens, excluding the program name.
        options: Registered options keyed by name.
        inputs: Registered inputs in positional order.
        settings: Parser behaviour switches.

    Returns:
        ParsedState: Fresh state holding every resolved value.

    Raises:
        UnknownOptionError: A dash-prefixed token matched no variant.
        MissingOptionValueError: A string option had no following token.
        UnexpectedInputError: Too many positional tokens under the reject policy.
    """
    flags: set[str] = set()
    strings: dict[str, str] = {}
    positional: list[str] = []
    options_ended = False

    index = 0
    while index < len(arguments):
        token = arguments[index]
        index += 1

        if not options_ended and settings.end_of_options_marker and token == END_OF_OPTIONS:
            options_ended = True
            continue

        if options_ended or not is_option_token(token):
            if len(positional) < len(inputs):
                positional.append(token)
            elif settings.extra_inputs is ExtraInputPolicy.REJECT:
                raise UnexpectedInputError(token)
            continue

        rule = find_option(options.values(), strip_prefix(token))
        if rule is None:
            raise UnknownOptionError(token)

        if rule.type is OptionType.BOOLEAN:
            flags.add(rule.name)
            continue

        if index >= len(arguments):
            raise MissingOptionValueError(rule.name, token)
        strings[rule.name] = arguments[index]
        index += 1

    return ParsedState(flags=frozenset(flags), strings=strings, inputs=tuple(positional))


__all__ = [
    "END_OF_OPTIONS",
    "OPTION_PREFIX",
    "find_option",
    "is_option_token",
    "scan_arguments",
    "strip_prefix",
]
