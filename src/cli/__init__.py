"""Command-line interface for the mobile page export.

This package provides the `mobile-pack` CLI tool that prints the page
documents read by the mobile application and edits the options that hide
pages or replace their content.
"""

from .config import ConfigLoader
from .models import AppConfig, ExitCode
from .output import OutputHandler
from .errors import (
    CLIError,
    ConfigError,
    ConfigFilesystemError,
    ConfigNotFoundError,
)

__all__ = [
    'ConfigLoader',
    'AppConfig',
    'ExitCode',
    'OutputHandler',
    'CLIError',
    'ConfigError',
    'ConfigFilesystemError',
    'ConfigNotFoundError',
]
