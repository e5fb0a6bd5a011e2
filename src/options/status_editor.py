"""Activate / deactivate pages and categories for the mobile app.

Server side of the admin toggle: each call is a single read-modify-write of
the options file. Export requests observe the change on their next read.
"""

import dataclasses
import logging
import re
from typing import Any, Optional

from .errors import OptionsError, OptionsFilesystemError
from .models import (
    ITEM_CATEGORY,
    ITEM_PAGE,
    PluginOptions,
    STATUS_ACTIVE,
    STATUS_INACTIVE,
)
from .options_store import OptionsStore

logger = logging.getLogger(__name__)

VALID_STATUSES = (STATUS_ACTIVE, STATUS_INACTIVE)
VALID_ITEM_TYPES = (ITEM_PAGE, ITEM_CATEGORY)


def parse_item_id(value: Any) -> Optional[int]:
    """Return value as a positive integer id, or None if it is not one."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    text = str(value).strip()
    if not re.match(r'^\d+$', text):
        return None
    item_id = int(text)
    return item_id if item_id > 0 else None


class StatusEditor:
    """Applies visibility and content edits made from the admin screens.

    Example:
        >>> editor = StatusEditor(OptionsStore())
        >>> editor.save_status("12", "inactive")
        True
    """

    def __init__(self, options_store: OptionsStore):
        self._store = options_store

    def save_status(self, item_id: Any, status: str, item_type: str = ITEM_PAGE) -> bool:
        """Mark a page or category active or inactive.

        Args:
            item_id: Page or category id (int or numeric string)
            status: "active" or "inactive"
            item_type: "page" or "category"

        Returns:
            True if the options now reflect the requested status, False if the
            request was invalid or the options could not be persisted
        """
        parsed_id = parse_item_id(item_id)
        if parsed_id is None or status not in VALID_STATUSES or item_type not in VALID_ITEM_TYPES:
            logger.warning(
                f"Rejected status change: id={item_id!r}, status={status!r}, type={item_type!r}"
            )
            return False

        field_name = 'inactive_pages' if item_type == ITEM_PAGE else 'inactive_categories'

        try:
            options = self._store.load()
            inactive = set(getattr(options, field_name))
            if status == STATUS_INACTIVE:
                inactive.add(parsed_id)
            else:
                inactive.discard(parsed_id)

            if inactive == set(getattr(options, field_name)):
                logger.debug(f"{item_type} {parsed_id} already {status}")
                return True

            self._store.save(dataclasses.replace(options, **{field_name: frozenset(inactive)}))
        except (OptionsError, OptionsFilesystemError) as e:
            logger.error(f"Failed to change status of {item_type} {parsed_id}: {e}")
            return False

        logger.info(f"Changed status of {item_type} {parsed_id} to {status}")
        return True

    def save_content(self, page_id: Any, content: Optional[str]) -> bool:
        """Store replacement content for a page; None or blank content clears it.

        Returns:
            True on success, False on invalid id or persistence failure
        """
        parsed_id = parse_item_id(page_id)
        if parsed_id is None:
            logger.warning(f"Rejected content change for invalid page id {page_id!r}")
            return False

        try:
            options = self._store.load()
            page_content = dict(options.page_content)
            if content is None or not content.strip():
                page_content.pop(parsed_id, None)
            else:
                page_content[parsed_id] = content
            self._store.save(dataclasses.replace(options, page_content=page_content))
        except (OptionsError, OptionsFilesystemError) as e:
            logger.error(f"Failed to save content of page {parsed_id}: {e}")
            return False

        logger.info(f"Saved mobile content for page {parsed_id}")
        return True

    def clear_content(self, page_id: Any) -> bool:
        return self.save_content(page_id, None)

    def current_options(self) -> PluginOptions:
        return self._store.load()
