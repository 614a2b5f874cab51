"""Command-line interface for the 2GIS documentation parser.

This package provides the `gis-docs` CLI tool: configuration loading,
the ParseCommand orchestrator that drives fetching, conversion and saving
for every catalog entry, and Rich-based terminal output.
"""

from .parse_command import ParseCommand
from .config import load_config
from .models import ExitCode, Config, RunSummary
from .output import OutputHandler
from .errors import CLIError, ConfigError

__all__ = [
    'ParseCommand',
    'load_config',
    'ExitCode',
    'Config',
    'RunSummary',
    'OutputHandler',
    'CLIError',
    'ConfigError',
]
