"""Typed exception hierarchy for page export errors."""

from typing import Iterable

from src.content_store.errors import MobilePackError


class ExportError(MobilePackError):
    """Base exception for all page export errors."""
    pass


class PageTreeCycleError(ExportError):
    """Raised when parent references form a cycle and pages cannot be ordered."""

    def __init__(self, page_ids: Iterable[int]):
        self.page_ids = sorted(page_ids)
        super().__init__(
            f"Parent references form a cycle between pages: "
            f"{', '.join(str(page_id) for page_id in self.page_ids)}"
        )
