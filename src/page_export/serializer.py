"""Serializer mapping pages to their exported JSON shape."""

import logging
from typing import Optional

from src.content_store.models import Page
from src.options.models import PluginOptions
from .models import ExportedImage, ExportedPage

logger = logging.getLogger(__name__)


class PageSerializer:
    """Converts a Page into an ExportedPage.

    The single-page export carries the body markup, the page list does not.
    has_content is computed from the same effective content in both cases,
    so the list can tell the app which pages are worth opening without
    shipping their bodies.
    """

    def effective_content(self, page: Page, options: PluginOptions) -> str:
        """Return the edited content if the operator saved one, else the stored content."""
        override = options.get_override_content(page.page_id)
        if override:
            return override
        return page.content or ''

    def serialize(
        self,
        page: Page,
        options: PluginOptions,
        *,
        include_content: bool,
        order: Optional[int] = None,
        parent_id: Optional[int] = None,
    ) -> ExportedPage:
        """Build the exported record for a page.

        Args:
            page: Page to serialize
            options: Options snapshot providing content overrides
            include_content: True for the single-page export, False for the page list
            order: Position in the page list (None for single-page export)
            parent_id: Parent id to emit; defaults to the page's stored parent

        Returns:
            ExportedPage
        """
        content = self.effective_content(page, options)

        return ExportedPage(
            id=page.page_id,
            title=page.title,
            link=page.link,
            content=content if include_content else '',
            has_content=1 if content.strip() else 0,
            parent_id=page.parent_id if parent_id is None else parent_id,
            order=order,
            image=self._image(page),
        )

    def _image(self, page: Page) -> Optional[ExportedImage]:
        image = page.featured_image
        if image is None:
            return None
        if not image.is_complete:
            logger.debug(f"Page {page.page_id} featured image has no recorded size, omitting it")
            return None
        return ExportedImage(src=image.src, width=image.width, height=image.height)
