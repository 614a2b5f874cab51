"""Typed exception hierarchy for CLI-related errors."""

from typing import Optional

from gis_docs.scraper.errors import DocsParserError


class CLIError(DocsParserError):
    """Base exception for all CLI-related errors."""
    pass


class ConfigError(CLIError):
    """Raised when a configuration setting is missing or invalid."""

    def __init__(self, message: str, setting: Optional[str] = None):
        if setting:
            full_message = f"Configuration error in setting '{setting}': {message}"
        else:
            full_message = f"Configuration error: {message}"
        super().__init__(full_message)
        self.setting = setting
        self.original_message = message
