"""Export service producing the JSON documents read by the mobile application.

Two read-only operations are provided:
- export_page(page_id): {"page": {...}}, {"page": {}} or {"error": "Invalid post id"}
- export_pages(): {"pages": [...]}

Options are loaded once per call, so each response is built from a single
snapshot of the hidden-page set and the content overrides.
"""

import json
import logging
from typing import Any, Dict, Optional

from src.content_store.errors import PageNotFoundError
from src.content_store.models import DEFAULT_POST_TYPE
from src.options.status_editor import parse_item_id
from .serializer import PageSerializer
from .tree_builder import PageTreeBuilder
from .visibility import VisibilityPolicy

logger = logging.getLogger(__name__)

INVALID_ID_ERROR = "Invalid post id"


class ExportService:
    """Orchestrates single-page and page-list exports.

    Args:
        content_store: Any store with get_page / list_pages
            (WordPressContentStore, FileContentStore, MemoryContentStore)
        options_store: Object whose load() returns a PluginOptions snapshot
        post_type: Post type managed by the export
        serializer: PageSerializer to use (a default one if omitted)

    Example:
        >>> service = ExportService(FileContentStore("pages.yaml"), OptionsStore())
        >>> print(service.export_pages())
        {"pages": [...]}
    """

    def __init__(
        self,
        content_store: Any,
        options_store: Any,
        post_type: str = DEFAULT_POST_TYPE,
        serializer: Optional[PageSerializer] = None,
    ):
        self._store = content_store
        self._options_store = options_store
        self.post_type = post_type
        self._serializer = serializer or PageSerializer()

    def export_page_data(self, page_id: Any = None) -> Dict[str, Any]:
        """Build the single-page envelope.

        Args:
            page_id: Requested page id (int or numeric string)

        Returns:
            {"error": ...} for a missing or malformed id, {"page": {}} for a
            page that does not exist or is not public, otherwise
            {"page": <exported page>}
        """
        parsed_id = parse_item_id(page_id)
        if parsed_id is None:
            logger.info(f"Rejected page export request for id {page_id!r}")
            return {'error': INVALID_ID_ERROR}

        options = self._options_store.load()

        try:
            page = self._store.get_page(parsed_id, post_type=self.post_type)
        except PageNotFoundError:
            page = None

        if page is None or page.post_type != self.post_type:
            logger.debug(f"Page {parsed_id} not found")
            return {'page': {}}

        # Hidden pages look exactly like missing ones
        if not VisibilityPolicy(options.get_inactive_page_ids()).is_visible(page):
            logger.debug(f"Page {parsed_id} is not public")
            return {'page': {}}

        exported = self._serializer.serialize(page, options, include_content=True)
        return {'page': exported.to_dict()}

    def export_pages_data(self) -> Dict[str, Any]:
        """Build the page-list envelope.

        Returns:
            {"pages": [...]} with pages in list order, order numbered 1..N

        Raises:
            PageTreeCycleError: If parent references form a cycle
        """
        options = self._options_store.load()
        pages = self._store.list_pages(self.post_type)

        builder = PageTreeBuilder(VisibilityPolicy(options.get_inactive_page_ids()))
        entries = builder.build(pages)

        exported = [
            self._serializer.serialize(
                entry.page,
                options,
                include_content=False,
                order=entry.order,
                parent_id=entry.parent_id,
            ).to_dict()
            for entry in entries
        ]
        return {'pages': exported}

    @staticmethod
    def to_json(data: Dict[str, Any]) -> str:
        """Serialize an envelope built by export_page_data / export_pages_data."""
        return json.dumps(data)

    def export_page(self, page_id: Any = None) -> str:
        """JSON document for one page."""
        return self.to_json(self.export_page_data(page_id))

    def export_pages(self) -> str:
        """JSON document for the page list."""
        return self.to_json(self.export_pages_data())
