"""In-memory content store.

Holds a fixed list of pages in retrieval order. Used for page dumps loaded
from disk and as a lightweight stand-in for WordPress in tests.
"""

from typing import Iterable, List, Optional

from .models import DEFAULT_POST_TYPE, FeaturedImage, Page


class MemoryContentStore:
    """Content store over an ordered sequence of pages."""

    def __init__(self, pages: Iterable[Page] = ()):
        self._pages: List[Page] = list(pages)

    def add(self, page: Page) -> Page:
        self._pages.append(page)
        return page

    def get_page(self, page_id: int, post_type: Optional[str] = None) -> Optional[Page]:
        """Return the first page with the id (and post type, when given)."""
        for page in self._pages:
            if page.page_id != page_id:
                continue
            if post_type is not None and page.post_type != post_type:
                return None
            return page
        return None

    def list_pages(self, post_type: str = DEFAULT_POST_TYPE) -> List[Page]:
        return [page for page in self._pages if page.post_type == post_type]

    def get_featured_image(self, page_id: int) -> Optional[FeaturedImage]:
        page = self.get_page(page_id)
        return page.featured_image if page else None
