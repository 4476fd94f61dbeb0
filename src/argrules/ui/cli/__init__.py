"""Terminal helpers for scripts that use ``ArgumentParser``."""

from argrules.ui.cli.runner import EXIT_HELP, EXIT_USAGE, parse_or_exit

__all__ = ["EXIT_HELP", "EXIT_USAGE", "parse_or_exit"]
