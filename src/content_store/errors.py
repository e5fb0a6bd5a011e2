"""Typed exception hierarchy for content store errors.

This module defines all custom exceptions raised while reading pages from
WordPress or from a local page dump. All exceptions inherit from
ContentStoreError, which in turn inherits from MobilePackError so callers
can catch any application-level error from a single base class.
"""

from typing import Optional


class MobilePackError(Exception):
    """Base exception for all mobile-pack errors.

    Use this to catch any application-level error from the exporter.
    """
    pass


class ContentStoreError(MobilePackError):
    """Base exception for all content store errors."""
    pass


class InvalidCredentialsError(ContentStoreError):
    """Raised when WordPress credentials are missing, invalid or rejected."""

    def __init__(self, user: str, endpoint: str):
        super().__init__(
            f"WordPress credentials are invalid (user: {user}, endpoint: {endpoint})"
        )
        self.user = user
        self.endpoint = endpoint


class PageNotFoundError(ContentStoreError):
    """Raised when a requested page or attachment does not exist."""

    def __init__(self, page_id: str):
        super().__init__(f"Page {page_id} not found")
        self.page_id = page_id


class APIUnreachableError(ContentStoreError):
    """Raised when the WordPress REST API is not available or unreachable."""

    def __init__(self, endpoint: str):
        super().__init__(f"API is not available at {endpoint}")
        self.endpoint = endpoint


class APIAccessError(ContentStoreError):
    """Raised when API access fails after retries or due to access restrictions."""

    def __init__(self, message: str = "WordPress API failure (after 3 retries)"):
        super().__init__(message)


class InvalidPageDataError(ContentStoreError):
    """Raised when a page record cannot be mapped to a Page."""

    def __init__(self, message: str, source: Optional[str] = None):
        if source:
            full_message = f"Invalid page data in {source}: {message}"
        else:
            full_message = f"Invalid page data: {message}"
        super().__init__(full_message)
        self.source = source
        self.original_message = message
