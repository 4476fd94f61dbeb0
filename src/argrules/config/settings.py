"""Where: src/argrules/config/settings.py
What: Tunable parser behaviour and help layout, optionally loaded from TOML.
Why: Keep policy choices out of the scanning and rendering code paths.
"""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Final

from argrules.domain.models import ExtraInputPolicy

HELP_WIDTH_DEFAULT: Final[int] = 80
HELP_WIDTH_MINIMUM: Final[int] = 40
HELP_INDENT_DEFAULT: Final[int] = 2


@dataclass(slots=True, frozen=True)
class ParserSettings:
    """Behaviour switches shared by a parser instance."""

    # Column at which help descriptions wrap
    help_width: int = HELP_WIDTH_DEFAULT

    # Leading spaces before each help entry
    help_indent: int = HELP_INDENT_DEFAULT

    # What to do with positional tokens once every input is filled
    extra_inputs: ExtraInputPolicy = ExtraInputPolicy.REJECT

    # Treat a bare "--" as the end of options
    end_of_options_marker: bool = True

    def __post_init__(self) -> None:
        if self.help_width < HELP_WIDTH_MINIMUM:
            msg = f"help_width must be at least {HELP_WIDTH_MINIMUM}; received {self.help_width}"
            raise ValueError(msg)
        if self.help_indent < 0:
            msg = f"help_indent cannot be negative; received {self.help_indent}"
            raise ValueError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ParserSettings":
        """Build settings from raw key/value pairs such as a parsed TOML table.

        Args:
            data: Mapping of setting names to raw values.

        Returns:
            ParserSettings: Validated settings.

        Raises:
            ValueError: If a key is unknown or a value has the wrong type.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown parser settings: {', '.join(unknown)}")

        values: dict[str, Any] = dict(data)
        for key in ("help_width", "help_indent"):
            if key in values and (
                isinstance(values[key], bool) or not isinstance(values[key], int)
            ):
                raise ValueError(f"{key} must be an integer; received {values[key]!r}")

        raw_policy = values.get("extra_inputs")
        if raw_policy is not None and not isinstance(raw_policy, ExtraInputPolicy):
            if not isinstance(raw_policy, str):
                raise ValueError(f"extra_inputs must be a string; received {raw_policy!r}")
            values["extra_inputs"] = ExtraInputPolicy.from_user_input(raw_policy)

        if "end_of_options_marker" in values and not isinstance(
            values["end_of_options_marker"], bool
        ):
            raise ValueError(
                f"end_of_options_marker must be a boolean; received {values['end_of_options_marker']!r}"
            )

        return cls(**values)

    @classmethod
    def load(cls, path: Path | str, *, table: str | None = None) -> "ParserSettings":
        """Load settings from a TOML file.

        Args:
            path: File to read.
            table: Optional dotted table name holding the settings, for
                example ``"tool.argrules"`` inside a ``pyproject.toml``.

        Returns:
            ParserSettings: Settings found in the file, defaults elsewhere.
        """
        with open(Path(path).expanduser(), "rb") as f:
            document: dict[str, Any] = tomllib.load(f)

        section: Any = document
        if table:
            for part in table.split("."):
                if not isinstance(section, dict) or part not in section:
                    return cls()
                section = section[part]
        if not isinstance(section, dict):
            raise ValueError(f"Settings table '{table}' must be a TOML table")
        return cls.from_mapping(section)


__all__ = [
    "HELP_INDENT_DEFAULT",
    "HELP_WIDTH_DEFAULT",
    "HELP_WIDTH_MINIMUM",
    "ParserSettings",
]
