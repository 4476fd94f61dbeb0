"""tests/test_package_exports.py
What: Validate packages expose the names callers import.
Why: Prevent regressions when moving modules between layers.
"""

from importlib import import_module


def test_top_level_exports() -> None:
    """The package root should expose the full public surface."""

    package = import_module("argrules")

    expected_names = {
        "ArgumentParser",
        "OptionType",
        "ParseResult",
        "ParserSettings",
        "ExtraInputPolicy",
        "ArgumentParseError",
        "UnknownOptionError",
        "MissingOptionValueError",
        "UnexpectedInputError",
        "RuleRegistrationError",
        "DuplicateVariantError",
        "parse_or_exit",
    }

    for name in expected_names:
        assert hasattr(package, name), f"Missing export: {name}"


def test_usecases_package_exports() -> None:
    usecases = import_module("argrules.usecases")

    for name in ("scan_arguments", "render_help", "format_variant"):
        assert hasattr(usecases, name), f"Missing export: {name}"
