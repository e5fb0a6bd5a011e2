"""Data models for persisted plugin options."""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Optional


# Values accepted by the activate / deactivate toggle
STATUS_ACTIVE = "active"
STATUS_INACTIVE = "inactive"

ITEM_PAGE = "page"
ITEM_CATEGORY = "category"


@dataclass(frozen=True)
class PluginOptions:
    """Read-only snapshot of the plugin options taken at the start of a request.

    Attributes:
        inactive_pages: Page ids hidden by the site operator
        inactive_categories: Category ids hidden by the site operator
        page_content: Replacement content keyed by page id

    Example:
        >>> options = PluginOptions(inactive_pages=frozenset({12}))
        >>> options.is_page_inactive(12)
        True
    """
    inactive_pages: FrozenSet[int] = frozenset()
    inactive_categories: FrozenSet[int] = frozenset()
    page_content: Dict[int, str] = field(default_factory=dict)

    def get_inactive_page_ids(self) -> FrozenSet[int]:
        return self.inactive_pages

    def get_override_content(self, page_id: int) -> Optional[str]:
        """Return the replacement content for a page, or None if there is none."""
        return self.page_content.get(page_id)

    def is_page_inactive(self, page_id: int) -> bool:
        return page_id in self.inactive_pages
