"""Options file loading and saving.

This module persists the plugin options (hidden pages, hidden categories and
edited page content) in a YAML file. A missing or empty file is treated as
fresh options with nothing hidden and nothing overridden.

Options file structure:
    inactive_pages: [12, 15]
    inactive_categories: [3]
    page_content:
      12: "<p>Text edited for the mobile app</p>"
"""

import logging
import os
from typing import Any, Dict, FrozenSet

import yaml

from .errors import OptionsError, OptionsFilesystemError
from .models import PluginOptions

logger = logging.getLogger(__name__)


class OptionsStore:
    """Handles options file loading, validation, and saving.

    Each call to load() reads the file again and returns an immutable
    snapshot, so one export request sees one consistent view of the options.

    Example:
        >>> store = OptionsStore(".mobile-pack/options.yaml")
        >>> options = store.load()
        >>> options.get_inactive_page_ids()
        frozenset()
    """

    DEFAULT_OPTIONS_PATH = '.mobile-pack/options.yaml'

    def __init__(self, path: str = DEFAULT_OPTIONS_PATH):
        self.path = path

    def load(self) -> PluginOptions:
        """Load and parse options from the YAML file.

        Returns:
            PluginOptions snapshot

        Raises:
            OptionsFilesystemError: If file cannot be read (except FileNotFoundError)
            OptionsError: If the options file is invalid or malformed
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            logger.debug(f"No options file at {self.path}, using defaults")
            return PluginOptions()
        except PermissionError:
            raise OptionsFilesystemError(self.path, 'read', 'Permission denied')
        except OSError as e:
            raise OptionsFilesystemError(self.path, 'read', str(e))

        if not content.strip():
            return PluginOptions()

        try:
            options_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise OptionsError(f"Invalid YAML syntax: {str(e)}")

        if options_dict is None:
            return PluginOptions()

        if not isinstance(options_dict, dict):
            raise OptionsError(
                f"Options must be a YAML dictionary, got {type(options_dict).__name__}"
            )

        return self._parse_options(options_dict)

    def save(self, options: PluginOptions) -> None:
        """Save options to the YAML file.

        Args:
            options: PluginOptions to persist

        Raises:
            OptionsFilesystemError: If file cannot be written
        """
        options_dict = {
            'inactive_pages': sorted(options.inactive_pages),
            'inactive_categories': sorted(options.inactive_categories),
            'page_content': {
                page_id: options.page_content[page_id]
                for page_id in sorted(options.page_content)
            },
        }

        yaml_str = yaml.safe_dump(
            options_dict,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False
        )

        options_dir = os.path.dirname(self.path)
        if options_dir:
            try:
                os.makedirs(options_dir, exist_ok=True)
            except OSError as e:
                raise OptionsFilesystemError(options_dir, 'create_directory', str(e))

        try:
            with open(self.path, 'w', encoding='utf-8') as f:
                f.write(yaml_str)
        except PermissionError:
            raise OptionsFilesystemError(self.path, 'write', 'Permission denied')
        except OSError as e:
            raise OptionsFilesystemError(self.path, 'write', str(e))

        logger.debug(f"Saved options to {self.path}")

    @classmethod
    def _parse_options(cls, options_dict: Dict[str, Any]) -> PluginOptions:
        """Parse and validate the options dictionary.

        Raises:
            OptionsError: If a field has the wrong shape
        """
        inactive_pages = cls._parse_id_set(options_dict, 'inactive_pages')
        inactive_categories = cls._parse_id_set(options_dict, 'inactive_categories')

        page_content_raw = options_dict.get('page_content') or {}
        if not isinstance(page_content_raw, dict):
            raise OptionsError(
                f"Field 'page_content' must be a dictionary, got {type(page_content_raw).__name__}",
                'page_content'
            )

        page_content: Dict[int, str] = {}
        for page_id, content in page_content_raw.items():
            try:
                key = int(page_id)
            except (TypeError, ValueError):
                raise OptionsError(
                    f"Field 'page_content' keys must be page ids, got {page_id!r}",
                    'page_content'
                )
            if content is None:
                continue
            if not isinstance(content, str):
                raise OptionsError(
                    f"Field 'page_content' values must be strings, got {type(content).__name__}",
                    'page_content'
                )
            page_content[key] = content

        return PluginOptions(
            inactive_pages=inactive_pages,
            inactive_categories=inactive_categories,
            page_content=page_content,
        )

    @staticmethod
    def _parse_id_set(options_dict: Dict[str, Any], name: str) -> FrozenSet[int]:
        raw = options_dict.get(name)
        if raw is None:
            return frozenset()
        if not isinstance(raw, list):
            raise OptionsError(
                f"Field '{name}' must be a list, got {type(raw).__name__}",
                name
            )
        try:
            return frozenset(int(item_id) for item_id in raw)
        except (TypeError, ValueError) as e:
            raise OptionsError(f"Field '{name}' must contain ids: {e}", name)
