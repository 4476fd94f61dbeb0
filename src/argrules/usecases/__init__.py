"""Parsing and help rendering use cases."""

from __future__ import annotations

from .help_text import format_variant, render_help
from .scanner import scan_arguments

__all__ = ["format_variant", "render_help", "scan_arguments"]
