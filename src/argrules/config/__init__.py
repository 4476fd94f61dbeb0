"""Parser configuration exports."""

from argrules.config.settings import ParserSettings

__all__ = ["ParserSettings"]
