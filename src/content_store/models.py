"""WordPress page data models.

Typed records for the page data the exporter reads. Mapping from the
heterogeneous REST or YAML representation into these records happens in
the store adapters, so the export core only ever sees these dataclasses.
"""

from dataclasses import dataclass
from typing import Optional


# post_status value of a publicly viewable page
STATUS_PUBLISH = "publish"

# Sentinel parent id for pages at the root of the hierarchy
ROOT_PARENT_ID = 0

DEFAULT_POST_TYPE = "page"


@dataclass(frozen=True)
class FeaturedImage:
    """Featured image attachment of a page.

    Attributes:
        src: Absolute URL of the attachment file
        width: Width in pixels from the attachment metadata (None if unknown)
        height: Height in pixels from the attachment metadata (None if unknown)
    """
    src: str
    width: Optional[int] = None
    height: Optional[int] = None

    @property
    def is_complete(self) -> bool:
        """True when the attachment has both dimensions recorded."""
        return bool(self.src) and self.width is not None and self.height is not None


@dataclass(frozen=True)
class Page:
    """WordPress page as read from the content store.

    Attributes:
        page_id: Unique identifier of the page
        title: Page title
        content: Raw body markup as stored
        status: post_status ("publish", "draft", "pending", ...)
        password_protected: True if the page requires a password
        parent_id: Parent page ID (0 if page is at root level)
        menu_order: Operator-assigned sibling ordering
        link: Permalink of the page
        featured_image: Featured image attachment (None if not set)
        post_type: WordPress post type of the record
    """
    page_id: int
    title: str
    content: str = ""
    status: str = STATUS_PUBLISH
    password_protected: bool = False
    parent_id: int = ROOT_PARENT_ID
    menu_order: int = 0
    link: str = ""
    featured_image: Optional[FeaturedImage] = None
    post_type: str = DEFAULT_POST_TYPE

    @property
    def is_published(self) -> bool:
        return self.status == STATUS_PUBLISH
