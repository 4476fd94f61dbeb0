"""
Summary: Domain types for argument rules, parse state, and parse errors.
Why: Offer one import path for the value objects shared by the parser layers.
"""

from __future__ import annotations

from .errors import (
    ArgumentParseError,
    DuplicateVariantError,
    MissingOptionValueError,
    RuleRegistrationError,
    UnexpectedInputError,
    UnknownOptionError,
)
from .models import (
    ExtraInputPolicy,
    InputRule,
    OptionRule,
    OptionType,
    ParsedState,
    ParseResult,
)

__all__ = [
    "ArgumentParseError",
    "DuplicateVariantError",
    "ExtraInputPolicy",
    "InputRule",
    "MissingOptionValueError",
    "OptionRule",
    "OptionType",
    "ParseResult",
    "ParsedState",
    "RuleRegistrationError",
    "UnexpectedInputError",
    "UnknownOptionError",
]
