"""Data models for CLI operations.

All models use dataclasses, following the patterns established in
src/content_store/models.py.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Operation completed successfully
    - GENERAL_ERROR (1): Configuration, data or validation failure
    - AUTH_ERROR (3): WordPress rejected or is missing credentials
    - NETWORK_ERROR (4): WordPress unreachable or API failure

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    AUTH_ERROR = 3
    NETWORK_ERROR = 4


@dataclass
class AppConfig:
    """Configuration of the exporter, read from .mobile-pack/config.yaml.

    Attributes:
        site_url: WordPress site URL (falls back to WP_URL from the environment)
        post_type: Post type exported as pages
        options_path: YAML file holding hidden pages and edited content
        source_path: YAML page dump read instead of the live site, if set
        timeout: HTTP timeout in seconds
        per_page: Page size when listing pages through the REST API
        orderby: REST orderby parameter defining the retrieval order
    """
    site_url: Optional[str] = None
    post_type: str = "page"
    options_path: str = ".mobile-pack/options.yaml"
    source_path: Optional[str] = None
    timeout: int = 30
    per_page: int = 100
    orderby: str = "id"
