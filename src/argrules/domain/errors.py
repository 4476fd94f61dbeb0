"""
Summary: Exception types raised while registering rules or parsing arguments.
Why: Give callers a typed taxonomy to branch on instead of matching messages.
"""

from __future__ import annotations


class ArgumentParseError(Exception):
    """Base class for failures detected while scanning an argument list."""

    message: str

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UnknownOptionError(ArgumentParseError):
    """A dash-prefixed token matched no registered variant."""

    token: str

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown option: {token}")
        self.token = token


class MissingOptionValueError(ArgumentParseError):
    """A string option was the final token, leaving no value to consume."""

    option_name: str
    token: str

    def __init__(self, option_name: str, token: str) -> None:
        super().__init__(f"Option '{token}' expects a value for '{option_name}'")
        self.option_name = option_name
        self.token = token


class UnexpectedInputError(ArgumentParseError):
    """More positional tokens were supplied than inputs were registered."""

    token: str

    def __init__(self, token: str) -> None:
        super().__init__(f"Unexpected input: {token}")
        self.token = token


class RuleRegistrationError(ValueError):
    """A rule was registered with malformed arguments."""


class DuplicateVariantError(RuleRegistrationError):
    """A variant token is already claimed by a differently named option."""

    variant: str
    existing_name: str

    def __init__(self, variant: str, existing_name: str) -> None:
        super().__init__(
            f"Variant '{variant}' is already registered for option '{existing_name}'"
        )
        self.variant = variant
        self.existing_name = existing_name


__all__ = [
    "ArgumentParseError",
    "DuplicateVariantError",
    "MissingOptionValueError",
    "RuleRegistrationError",
    "UnexpectedInputError",
    "UnknownOptionError",
]
