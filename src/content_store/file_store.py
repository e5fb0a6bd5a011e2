"""Content store backed by a YAML page dump.

The dump is re-read on every call so edits to the file are visible on the
next export, mirroring a live site.

Dump structure:
    pages:
      - id: 12
        title: "About"
        content: "<p>Who we are</p>"
        status: publish
        password: ""
        parent: 0
        menu_order: 1
        link: "https://example.com/about/"
        type: page
        image:
          src: "https://example.com/wp-content/uploads/about.jpg"
          width: 640
          height: 480
"""

import logging
from typing import Any, Dict, List, Optional

import yaml

from .errors import InvalidPageDataError, ContentStoreError
from .memory_store import MemoryContentStore
from .models import DEFAULT_POST_TYPE, FeaturedImage, Page, ROOT_PARENT_ID, STATUS_PUBLISH

logger = logging.getLogger(__name__)


class FileContentStore:
    """Reads pages from a YAML dump file.

    Example:
        >>> store = FileContentStore("pages.yaml")
        >>> [page.title for page in store.list_pages()]
    """

    def __init__(self, path: str):
        self.path = path

    def get_page(self, page_id: int, post_type: Optional[str] = None) -> Optional[Page]:
        return self._load().get_page(page_id, post_type=post_type)

    def list_pages(self, post_type: str = DEFAULT_POST_TYPE) -> List[Page]:
        pages = self._load().list_pages(post_type)
        logger.info(f"Loaded {len(pages)} {post_type} record(s) from {self.path}")
        return pages

    def get_featured_image(self, page_id: int) -> Optional[FeaturedImage]:
        return self._load().get_featured_image(page_id)

    def _load(self) -> MemoryContentStore:
        """Parse the dump into a MemoryContentStore snapshot.

        Raises:
            ContentStoreError: If the file cannot be read or is not valid YAML
            InvalidPageDataError: If a page record is malformed
        """
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f.read())
        except FileNotFoundError:
            raise ContentStoreError(f"Page dump not found at {self.path}")
        except yaml.YAMLError as e:
            raise ContentStoreError(f"Invalid YAML syntax in {self.path}: {e}")
        except OSError as e:
            raise ContentStoreError(f"Cannot read page dump {self.path}: {e}")

        if data is None:
            return MemoryContentStore()

        if not isinstance(data, dict) or not isinstance(data.get('pages', []), list):
            raise InvalidPageDataError("expected a mapping with a 'pages' list", source=self.path)

        return MemoryContentStore(
            self._parse_page(record, index) for index, record in enumerate(data.get('pages') or [])
        )

    def _parse_page(self, record: Any, index: int) -> Page:
        source = f"{self.path} pages[{index}]"
        if not isinstance(record, dict):
            raise InvalidPageDataError("page record must be a mapping", source=source)

        try:
            page_id = int(record['id'])
            image = self._parse_image(record.get('image'), source)
            return Page(
                page_id=page_id,
                title=str(record.get('title', '')),
                content=str(record.get('content') or ''),
                status=str(record.get('status', STATUS_PUBLISH)),
                password_protected=bool(record.get('password')) or bool(record.get('password_protected', False)),
                parent_id=int(record.get('parent') or ROOT_PARENT_ID),
                menu_order=int(record.get('menu_order') or 0),
                link=str(record.get('link', '')),
                featured_image=image,
                post_type=str(record.get('type', DEFAULT_POST_TYPE)),
            )
        except KeyError as e:
            raise InvalidPageDataError(f"missing required field {e}", source=source)
        except (TypeError, ValueError) as e:
            raise InvalidPageDataError(f"invalid field type: {e}", source=source)

    @staticmethod
    def _parse_image(image: Any, source: str) -> Optional[FeaturedImage]:
        if not image:
            return None
        if not isinstance(image, dict) or not image.get('src'):
            raise InvalidPageDataError("image must be a mapping with a 'src'", source=source)

        width = image.get('width')
        height = image.get('height')
        return FeaturedImage(
            src=str(image['src']),
            width=int(width) if width is not None else None,
            height=int(height) if height is not None else None,
        )
