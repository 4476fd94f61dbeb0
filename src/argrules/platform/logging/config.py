"""Logger configuration bootstrap.

Where: platform/logging/config.py
What: Expose the shared package logger and an opt-in handler setup.
Why: Library imports must not attach output handlers on their own.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME: Final[str] = "argrules"


def setup_logger(
    log_file: Path | None = None,
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
    console: Console | None = None,
) -> logging.Logger:
    """Set up and configure the package logger.

    Existing handlers are closed and replaced, so repeated calls do not
    duplicate output.

    Args:
        log_file: Optional rotating log file destination.
        console_level: Threshold for the Rich console handler.
        file_level: Threshold for the file handler.
        console: Console to render to; a stderr console is created when omitted.

    Returns:
        logging.Logger: The configured ``argrules`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    rich_console = console or Console(stderr=True, soft_wrap=True)
    console_handler = RichHandler(console=rich_console, show_path=False)
    console_handler.setLevel(console_level)
    logger.addHandler(console_handler)

    if log_file is not None:
        resolved_log_file = Path(log_file).expanduser().resolve()
        os.makedirs(resolved_log_file.parent, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            resolved_log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(file_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    return logger


logger: Final[logging.Logger] = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


__all__ = ["LOGGER_NAME", "setup_logger", "logger"]
