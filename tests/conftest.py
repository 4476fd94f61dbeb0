"""Shared pytest fixtures for parser tests."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from argrules import ArgumentParser, OptionType


@pytest.fixture
def parser() -> ArgumentParser:
    """Provide a parser with a boolean option, a string option, and two inputs."""

    instance = ArgumentParser("copytool", "Copy a file to a destination.")
    instance.register_option("verbose", OptionType.BOOLEAN, ["v", "verbose"], "Show progress")
    instance.register_option("output", OptionType.STRING, ["o", "output"], "Write a report to a file")
    instance.register_input("source", "File to copy")
    instance.register_input("destination", "Where to copy the file")
    return instance


@pytest.fixture
def buffer_console() -> Console:
    """Provide a console that renders into memory without colour codes."""

    return Console(file=StringIO(), force_terminal=False, color_system=None, width=120)
