"""Test fixtures for the mobile page export.

This module provides test fixtures for:
- Page records and page trees
- YAML page dumps and options files
- wp/v2 REST records and mocked HTTP responses
"""

from .sample_pages import (
    make_page,
    get_two_roots_same_order,
    get_two_roots_explicit_order,
    get_roots_with_child,
    get_roots_with_protected_child,
    SAMPLE_IMAGE,
    SAMPLE_PAGE_DUMP,
    SAMPLE_PAGE_DUMP_INVALID_YAML,
    SAMPLE_PAGE_DUMP_MISSING_ID,
    SAMPLE_OPTIONS,
    SAMPLE_OPTIONS_INVALID_TYPE,
)
from .sample_rest import rest_page, rest_media, mock_response

__all__ = [
    "make_page",
    "get_two_roots_same_order",
    "get_two_roots_explicit_order",
    "get_roots_with_child",
    "get_roots_with_protected_child",
    "SAMPLE_IMAGE",
    "SAMPLE_PAGE_DUMP",
    "SAMPLE_PAGE_DUMP_INVALID_YAML",
    "SAMPLE_PAGE_DUMP_MISSING_ID",
    "SAMPLE_OPTIONS",
    "SAMPLE_OPTIONS_INVALID_TYPE",
    "rest_page",
    "rest_media",
    "mock_response",
]
