"""Declarative command line argument parser."""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from argrules.config.settings import ParserSettings
from argrules.domain.errors import (
    ArgumentParseError,
    DuplicateVariantError,
    RuleRegistrationError,
)
from argrules.domain.models import (
    InputRule,
    OptionRule,
    OptionType,
    ParsedState,
    ParseResult,
)
from argrules.platform.logging import logger
from argrules.usecases.help_text import render_help
from argrules.usecases.scanner import OPTION_PREFIX, scan_arguments

HELP_OPTION_NAME = "help"
HELP_OPTION_VARIANTS: tuple[str, ...] = ("h", "help")


@final
class ArgumentParser:
    """Register option and input rules, parse arguments, and query the results.

    Options are keyed by name and replaced on re-registration. Inputs are
    matched positionally in registration order. Every successful parse
    replaces the previous state; a failed parse leaves it untouched.
    """

    _name: str
    _description: str
    _settings: ParserSettings
    _options: dict[str, OptionRule]
    _inputs: list[InputRule]
    _state: ParsedState

    def __init__(
        self,
        name: str,
        description: str,
        settings: ParserSettings | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            name: Command name shown in help text.
            description: Command description shown in help text.
            settings: Behaviour switches; defaults apply when omitted.
        """
        self._name = name
        self._description = description
        self._settings = settings or ParserSettings()
        self._options = {}
        self._inputs = []
        self._state = ParsedState()

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def settings(self) -> ParserSettings:
        return self._settings

    @property
    def options(self) -> tuple[OptionRule, ...]:
        """Registered options in registration order."""
        return tuple(self._options.values())

    @property
    def inputs(self) -> tuple[InputRule, ...]:
        """Registered inputs in positional order."""
        return tuple(self._inputs)

    def register_option(
        self,
        name: str,
        type: OptionType,
        variants: Sequence[str],
        description: str,
    ) -> None:
        """Register an option, replacing any option previously registered as ``name``.

        Args:
            name: Key used to retrieve the value after parsing.
            type: How the option resolves.
            variants: Accepted tokens without dash prefix, e.g. ``["o", "output"]``.
            description: Text shown in help output.

        Raises:
            RuleRegistrationError: If the name or variants are malformed.
            DuplicateVariantError: If a variant belongs to another option.
        """
        if not name:
            raise RuleRegistrationError("Option name cannot be empty")
        if not isinstance(type, OptionType):
            raise RuleRegistrationError(f"Unsupported option type: {type!r}")
        if isinstance(variants, str):
            raise RuleRegistrationError("Option variants must be a sequence of tokens")

        normalized = tuple(dict.fromkeys(variants))
        if not normalized:
            raise RuleRegistrationError(f"Option '{name}' needs at least one variant")
        for variant in normalized:
            if not variant or variant.startswith(OPTION_PREFIX):
                raise RuleRegistrationError(
                    f"Option variant {variant!r} must be non-empty and have no dash prefix"
                )
            for existing in self._options.values():
                if existing.name != name and existing.matches(variant):
                    raise DuplicateVariantError(variant, existing.name)

        self._options[name] = OptionRule(
            name=name,
            type=type,
            variants=normalized,
            description=description,
        )
        logger.debug("Registered %s option '%s' (%s)", type.value, name, ", ".join(normalized))

    def register_help_option(
        self,
        name: str = HELP_OPTION_NAME,
        variants: Sequence[str] = HELP_OPTION_VARIANTS,
        description: str = "Show this help message",
    ) -> None:
        """Register a boolean option meant to trigger help display."""

        self.register_option(name, OptionType.BOOLEAN, variants, description)

    def register_input(self, name: str, description: str) -> None:
        """Append a positional input.

        Registering the same name twice adds a second positional slot.

        Raises:
            RuleRegistrationError: If ``name`` is empty.
        """
        if not name:
            raise RuleRegistrationError("Input name cannot be empty")
        self._inputs.append(InputRule(name=name, description=description))
        logger.debug("Registered input '%s' at position %d", name, len(self._inputs))

    def parse_arguments(self, arguments: Sequence[str]) -> ParseResult:
        """Parse ``arguments`` against the registered rules.

        Args:
            arguments: Raw tokens, excluding the program name.

        Returns:
            ParseResult: Success, or failure carrying the error. State from a
            previous successful parse survives a failure.
        """
        try:
            state = scan_arguments(
                list(arguments),
                self._options,
                self._inputs,
                self._settings,
            )
        except ArgumentParseError as error:
            return ParseResult.failed(error)

        self._state = state
        logger.debug(
            "Parsed %d argument(s): %d option(s), %d input(s)",
            len(arguments),
            len(state.flags) + len(state.strings),
            len(state.inputs),
        )
        return ParseResult.ok()

    def _rule_of_type(self, name: str, type: OptionType) -> OptionRule | None:
        rule = self._options.get(name)
        if rule is None or rule.type is not type:
            return None
        return rule

    def value_for_string_option(self, name: str) -> str | None:
        """Return the captured value of a string option, or ``None``."""

        if self._rule_of_type(name, OptionType.STRING) is None:
            return None
        return self._state.strings.get(name)

    def value_for_boolean_option(self, name: str) -> bool:
        """Return whether a boolean option was present in the last parse."""

        if self._rule_of_type(name, OptionType.BOOLEAN) is None:
            return False
        return name in self._state.flags

    def value_for_input(self, name: str) -> str | None:
        """Return the value of the first filled input slot called ``name``."""

        for rule, value in zip(self._inputs, self._state.inputs):
            if rule.name == name:
                return value
        return None

    def help_info(self) -> str:
        """Help text built from the registered rules."""

        return render_help(
            self._name,
            self._description,
            self._inputs,
            tuple(self._options.values()),
            self._settings,
        )


__all__ = ["ArgumentParser", "HELP_OPTION_NAME", "HELP_OPTION_VARIANTS"]
