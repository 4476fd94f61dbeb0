"""Data structures that describe registered argument rules and parse outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from .errors import ArgumentParseError


class OptionType(str, Enum):
    """Represent how an option is resolved from the command line."""

    BOOLEAN = "boolean"
    STRING = "string"

    @property
    def consumes_value(self) -> bool:
        """Whether the option takes the following token as its value."""

        return self is OptionType.STRING

    @property
    def placeholder(self) -> str:
        """Value placeholder shown next to the option in help text."""

        return "<value>" if self.consumes_value else ""


class ExtraInputPolicy(str, Enum):
    """Represent how positional tokens beyond the registered inputs are handled."""

    REJECT = "reject"
    IGNORE = "ignore"

    @staticmethod
    def from_user_input(value: str) -> "ExtraInputPolicy":
        """Translate a raw configuration value into the matching policy."""

        normalized = value.strip().lower()
        for policy in ExtraInputPolicy:
            if policy.value == normalized:
                return policy
        valid: Final[str] = ", ".join(p.value for p in ExtraInputPolicy)
        msg = f"Unsupported extra input policy '{value}'. Valid options: {valid}"
        raise ValueError(msg)


@dataclass(slots=True, frozen=True)
class OptionRule:
    """Describe a registered option and the tokens that select it."""

    name: str
    type: OptionType
    variants: tuple[str, ...]
    description: str

    def matches(self, token: str) -> bool:
        """Return whether ``token`` (already stripped of dashes) selects this option."""

        return token in self.variants


@dataclass(slots=True, frozen=True)
class InputRule:
    """Describe a positional input slot."""

    name: str
    description: str


@dataclass(slots=True, frozen=True)
class ParsedState:
    """Resolved values produced by a single successful parse."""

    flags: frozenset[str] = frozenset()
    strings: dict[str, str] = field(default_factory=dict)
    inputs: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class ParseResult:
    """Capture whether a parse succeeded and, if not, why."""

    success: bool
    error: ArgumentParseError | None = None

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("A successful parse result cannot carry an error")
        if not self.success and self.error is None:
            raise ValueError("A failed parse result must carry an error")

    @classmethod
    def ok(cls) -> "ParseResult":
        return cls(success=True)

    @classmethod
    def failed(cls, error: ArgumentParseError) -> "ParseResult":
        return cls(success=False, error=error)

    def __bool__(self) -> bool:
        return self.success

    def raise_for_error(self) -> None:
        """Re-raise the carried error when the parse failed."""

        if self.error is not None:
            raise self.error


__all__ = [
    "ExtraInputPolicy",
    "InputRule",
    "OptionRule",
    "OptionType",
    "ParseResult",
    "ParsedState",
]
