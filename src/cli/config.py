"""YAML configuration loading and validation.

Configuration file structure:
    site_url: "https://example.com"
    post_type: page
    options_path: .mobile-pack/options.yaml
    source_path: ./pages.yaml      # optional, export from a page dump
    timeout: 30
    per_page: 100
    orderby: id
"""

import logging
import os
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigError, ConfigFilesystemError, ConfigNotFoundError
from .models import AppConfig

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Handles configuration file loading and validation."""

    DEFAULT_CONFIG_PATH = '.mobile-pack/config.yaml'

    KNOWN_FIELDS = {
        'site_url', 'post_type', 'options_path', 'source_path',
        'timeout', 'per_page', 'orderby',
    }

    VALID_ORDERBY = {'id', 'date', 'title', 'slug', 'menu_order', 'modified'}

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> AppConfig:
        """Load configuration from a YAML file.

        With no explicit path the default location is tried and defaults are
        used when it does not exist.

        Args:
            config_path: Explicit configuration file path

        Returns:
            AppConfig object with parsed configuration

        Raises:
            ConfigNotFoundError: If an explicit config_path does not exist
            ConfigFilesystemError: If file cannot be read
            ConfigError: If configuration is invalid or malformed
        """
        path = config_path or cls.DEFAULT_CONFIG_PATH

        try:
            with open(path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            if config_path:
                raise ConfigNotFoundError(config_path)
            logger.debug(f"No configuration file at {path}, using defaults")
            return AppConfig()
        except PermissionError:
            raise ConfigFilesystemError(path, 'read', 'Permission denied')
        except OSError as e:
            raise ConfigFilesystemError(path, 'read', str(e))

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML syntax: {str(e)}")

        if config_dict is None:
            return AppConfig()

        if not isinstance(config_dict, dict):
            raise ConfigError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        logger.debug(f"Loaded configuration from {path}")
        return cls._parse_config(config_dict)

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> AppConfig:
        """Parse and validate configuration dictionary.

        Raises:
            ConfigError: If configuration is invalid
        """
        unknown = set(config_dict) - cls.KNOWN_FIELDS
        if unknown:
            logger.warning(f"Ignoring unknown configuration field(s): {', '.join(sorted(unknown))}")

        defaults = AppConfig()

        site_url = config_dict.get('site_url')
        if site_url is not None:
            site_url = str(site_url).strip()
            if not site_url.startswith(('http://', 'https://')):
                raise ConfigError(
                    f"Field 'site_url' must be an http(s) URL, got '{site_url}'",
                    'site_url'
                )

        post_type = str(config_dict.get('post_type', defaults.post_type)).strip()
        if not post_type:
            raise ConfigError("Field 'post_type' cannot be empty", 'post_type')

        options_path = str(config_dict.get('options_path', defaults.options_path)).strip()
        if not options_path:
            raise ConfigError("Field 'options_path' cannot be empty", 'options_path')

        source_path = config_dict.get('source_path')
        if source_path is not None:
            source_path = os.path.expanduser(str(source_path))

        try:
            timeout = int(config_dict.get('timeout', defaults.timeout))
            per_page = int(config_dict.get('per_page', defaults.per_page))
        except (ValueError, TypeError) as e:
            raise ConfigError(f"Invalid field type for numeric field: {str(e)}")

        if timeout < 1:
            raise ConfigError(f"Field 'timeout' must be at least 1, got {timeout}", 'timeout')
        if not 1 <= per_page <= 100:
            raise ConfigError(f"Field 'per_page' must be between 1 and 100, got {per_page}", 'per_page')

        orderby = str(config_dict.get('orderby', defaults.orderby))
        if orderby not in cls.VALID_ORDERBY:
            raise ConfigError(
                f"Field 'orderby' must be one of {', '.join(sorted(cls.VALID_ORDERBY))}, got '{orderby}'",
                'orderby'
            )

        return AppConfig(
            site_url=site_url,
            post_type=post_type,
            options_path=options_path,
            source_path=source_path,
            timeout=timeout,
            per_page=per_page,
            orderby=orderby,
        )
