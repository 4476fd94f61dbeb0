"""
Summary: Exercise the token scanning rules directly against rule collections.
Why: Pin option matching and positional assignment independent of the facade.
"""

from __future__ import annotations

import pytest

from argrules.config.settings import ParserSettings
from argrules.domain import (
    ExtraInputPolicy,
    InputRule,
    MissingOptionValueError,
    OptionRule,
    OptionType,
    UnexpectedInputError,
    UnknownOptionError,
)
from argrules.usecases.scanner import (
    find_option,
    is_option_token,
    scan_arguments,
    strip_prefix,
)

OPTIONS: dict[str, OptionRule] = {
    "verbose": OptionRule("verbose", OptionType.BOOLEAN, ("v", "verbose"), "Verbose"),
    "output": OptionRule("output", OptionType.STRING, ("o", "output"), "Output"),
}
INPUTS: list[InputRule] = [InputRule("first", "First"), InputRule("second", "Second")]


@pytest.mark.parametrize(
    ("token", "expected"),
    [("-v", "v"), ("--verbose", "verbose"), ("---x", "-x"), ("--", "")],
)
def test_strip_prefix_removes_at_most_two_dashes(token: str, expected: str) -> None:
    assert strip_prefix(token) == expected


def test_lone_dash_is_positional() -> None:
    assert not is_option_token("-")
    assert not is_option_token("file")
    assert is_option_token("-v")
    assert is_option_token("--verbose")


def test_find_option_matches_any_variant() -> None:
    assert find_option(OPTIONS.values(), "o") is OPTIONS["output"]
    assert find_option(OPTIONS.values(), "verbose") is OPTIONS["verbose"]
    assert find_option(OPTIONS.values(), "missing") is None


def test_scan_resolves_options_and_inputs() -> None:
    state = scan_arguments(
        ["a", "-v", "--output", "report.txt", "b"], OPTIONS, INPUTS, ParserSettings()
    )

    assert state.flags == frozenset({"verbose"})
    assert state.strings == {"output": "report.txt"}
    assert state.inputs == ("a", "b")


def test_string_option_consumes_dash_prefixed_value() -> None:
    state = scan_arguments(["-o", "-v"], OPTIONS, INPUTS, ParserSettings())

    assert state.strings == {"output": "-v"}
    assert state.flags == frozenset()


def test_repeated_string_option_keeps_last_value() -> None:
    state = scan_arguments(["-o", "one", "--output", "two"], OPTIONS, INPUTS, ParserSettings())

    assert state.strings == {"output": "two"}


def test_short_variant_accepts_long_prefix() -> None:
    """Either dash prefix may precede any variant."""

    state = scan_arguments(["--v", "-verbose"], OPTIONS, INPUTS, ParserSettings())

    assert state.flags == frozenset({"verbose"})


def test_unknown_option_carries_raw_token() -> None:
    with pytest.raises(UnknownOptionError) as excinfo:
        _ = scan_arguments(["--bogus"], OPTIONS, INPUTS, ParserSettings())

    assert excinfo.value.token == "--bogus"


def test_trailing_string_option_is_missing_value() -> None:
    with pytest.raises(MissingOptionValueError) as excinfo:
        _ = scan_arguments(["a", "--output"], OPTIONS, INPUTS, ParserSettings())

    assert excinfo.value.option_name == "output"
    assert excinfo.value.token == "--output"


def test_extra_input_rejected_by_default() -> None:
    with pytest.raises(UnexpectedInputError) as excinfo:
        _ = scan_arguments(["a", "b", "c"], OPTIONS, INPUTS, ParserSettings())

    assert excinfo.value.token == "c"


def test_extra_input_ignored_when_configured() -> None:
    settings = ParserSettings(extra_inputs=ExtraInputPolicy.IGNORE)

    state = scan_arguments(["a", "b", "c", "-v"], OPTIONS, INPUTS, settings)

    assert state.inputs == ("a", "b")
    assert state.flags == frozenset({"verbose"})


def test_end_of_options_marker_makes_rest_positional() -> None:
    state = scan_arguments(["-v", "--", "-o", "--"], OPTIONS, INPUTS, ParserSettings())

    assert state.flags == frozenset({"verbose"})
    assert state.strings == {}
    assert state.inputs == ("-o", "--")


def test_end_of_options_marker_can_be_disabled() -> None:
    settings = ParserSettings(end_of_options_marker=False)

    with pytest.raises(UnknownOptionError) as excinfo:
        _ = scan_arguments(["--"], OPTIONS, INPUTS, settings)

    assert excinfo.value.token == "--"


def test_unfilled_inputs_are_left_out() -> None:
    state = scan_arguments(["only"], OPTIONS, INPUTS, ParserSettings())

    assert state.inputs == ("only",)
