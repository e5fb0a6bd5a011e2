"""Persisted plugin options: hidden pages and categories, edited page content."""

from .errors import OptionsError, OptionsFilesystemError
from .models import PluginOptions, STATUS_ACTIVE, STATUS_INACTIVE
from .options_store import OptionsStore
from .status_editor import StatusEditor

__all__ = [
    'OptionsError',
    'OptionsFilesystemError',
    'PluginOptions',
    'STATUS_ACTIVE',
    'STATUS_INACTIVE',
    'OptionsStore',
    'StatusEditor',
]
