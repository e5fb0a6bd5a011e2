"""Visibility rules for exporting a single page."""

from typing import AbstractSet

from src.content_store.models import Page


def is_visible(page: Page, inactive_ids: AbstractSet[int]) -> bool:
    """Decide whether a page may be shown in the mobile application.

    A page is visible only when it is published, has no password and has not
    been hidden by the site operator. Ancestors are not considered here; the
    tree builder applies this rule level by level.

    Args:
        page: Page to check
        inactive_ids: Ids of pages hidden by the site operator

    Returns:
        True if the page is publicly exportable
    """
    if not page.is_published:
        return False
    if page.password_protected:
        return False
    if page.page_id in inactive_ids:
        return False
    return True


class VisibilityPolicy:
    """is_visible bound to one snapshot of the inactive page set."""

    def __init__(self, inactive_ids: AbstractSet[int] = frozenset()):
        self.inactive_ids = frozenset(inactive_ids)

    def is_visible(self, page: Page) -> bool:
        return is_visible(page, self.inactive_ids)
