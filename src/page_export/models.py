"""Data models for exported pages.

This module defines the records the mobile application receives. Field
names of to_dict() are the JSON contract and must not change.
"""

from dataclasses import dataclass
from typing import Any, Dict, NamedTuple, Optional

from src.content_store.models import Page


@dataclass(frozen=True)
class ExportedImage:
    """Featured image as exported: absolute URL plus pixel dimensions."""
    src: str
    width: int
    height: int

    def to_dict(self) -> Dict[str, Any]:
        return {'src': self.src, 'width': self.width, 'height': self.height}


@dataclass(frozen=True)
class ExportedPage:
    """A page in the shape sent to the mobile application.

    Attributes:
        id: Page id
        title: Page title
        link: Permalink
        content: Body markup ("" in the page list)
        has_content: 1 if the effective content is non-blank, else 0
        parent_id: Parent page id, 0 for root pages
        order: 1-based position in the page list (None for single-page export)
        image: Featured image (None if missing or incomplete)
    """
    id: int
    title: str
    link: str
    content: str
    has_content: int
    parent_id: int
    order: Optional[int] = None
    image: Optional[ExportedImage] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-ready dictionary; absent order and image keys are omitted."""
        data: Dict[str, Any] = {'id': self.id}
        if self.order is not None:
            data['order'] = self.order
        data.update({
            'title': self.title,
            'link': self.link,
            'content': self.content,
            'has_content': self.has_content,
            'parent_id': self.parent_id,
        })
        if self.image is not None:
            data['image'] = self.image.to_dict()
        return data


class TreeEntry(NamedTuple):
    """A page that survived tree pruning, with its list position."""
    page: Page
    order: int
    parent_id: int
