"""argrules: declarative command line argument parsing with generated help."""

from argrules.config.settings import ParserSettings
from argrules.domain.errors import (
    ArgumentParseError,
    DuplicateVariantError,
    MissingOptionValueError,
    RuleRegistrationError,
    UnexpectedInputError,
    UnknownOptionError,
)
from argrules.domain.models import ExtraInputPolicy, OptionType, ParseResult
from argrules.parser import ArgumentParser
from argrules.ui.cli.runner import parse_or_exit

__all__ = [
    "ArgumentParseError",
    "ArgumentParser",
    "DuplicateVariantError",
    "ExtraInputPolicy",
    "MissingOptionValueError",
    "OptionType",
    "ParseResult",
    "ParserSettings",
    "RuleRegistrationError",
    "UnexpectedInputError",
    "UnknownOptionError",
    "parse_or_exit",
]
