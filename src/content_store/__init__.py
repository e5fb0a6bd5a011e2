"""Content store library for the page exporter.

This package provides read access to WordPress pages: through the REST API
for a live site, or from a YAML page dump. Every store exposes the same
get_page / list_pages / get_featured_image methods.
"""

from .errors import (
    MobilePackError,
    ContentStoreError,
    InvalidCredentialsError,
    PageNotFoundError,
    APIUnreachableError,
    APIAccessError,
    InvalidPageDataError,
)
from .models import Page, FeaturedImage
from .memory_store import MemoryContentStore
from .file_store import FileContentStore
from .wordpress_store import WordPressContentStore

__all__ = [
    "MobilePackError",
    "ContentStoreError",
    "InvalidCredentialsError",
    "PageNotFoundError",
    "APIUnreachableError",
    "APIAccessError",
    "InvalidPageDataError",
    "Page",
    "FeaturedImage",
    "MemoryContentStore",
    "FileContentStore",
    "WordPressContentStore",
]
