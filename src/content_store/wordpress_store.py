"""Content store backed by a live WordPress site.

Maps wp/v2 REST records onto the typed Page model. Pages are fetched fresh
on every call; nothing is cached between export requests.
"""

import logging
from typing import Any, Dict, List, Optional

from .api_wrapper import APIWrapper
from .errors import InvalidCredentialsError, InvalidPageDataError, PageNotFoundError
from .models import DEFAULT_POST_TYPE, FeaturedImage, Page, ROOT_PARENT_ID

logger = logging.getLogger(__name__)


def _rendered(field: Any, prefer_raw: bool = True) -> str:
    """Extract text from a REST field that may be {'raw':..,'rendered':..} or a string."""
    if isinstance(field, dict):
        if prefer_raw and field.get('raw') is not None:
            return str(field['raw'])
        return str(field.get('rendered') or '')
    if field is None:
        return ''
    return str(field)


def _as_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def image_from_media(media: Dict[str, Any]) -> Optional[FeaturedImage]:
    """Build a FeaturedImage from a wp/v2/media record.

    Args:
        media: Attachment data as returned by the media endpoint or _embedded

    Returns:
        FeaturedImage, or None when the record has no source URL
    """
    src = media.get('source_url') or _rendered(media.get('guid'), prefer_raw=False)
    if not src:
        return None

    details = media.get('media_details') or {}
    return FeaturedImage(
        src=src,
        width=_as_int(details.get('width')),
        height=_as_int(details.get('height')),
    )


def page_from_rest(item: Dict[str, Any], featured_image: Optional[FeaturedImage] = None) -> Page:
    """Map a wp/v2 page record onto a Page.

    Args:
        item: Page data from the REST API
        featured_image: Already resolved featured image, if any

    Returns:
        Page: The typed page record

    Raises:
        InvalidPageDataError: If the record has no usable id
    """
    page_id = _as_int(item.get('id'))
    if not page_id:
        raise InvalidPageDataError("record has no numeric 'id' field", source='wp-json')

    content_field = item.get('content') or {}
    # 'password' only exists in the edit context, 'protected' in the view context
    password_protected = bool(item.get('password')) or (
        isinstance(content_field, dict) and bool(content_field.get('protected'))
    )

    return Page(
        page_id=page_id,
        title=_rendered(item.get('title')),
        content=_rendered(content_field),
        status=str(item.get('status') or ''),
        password_protected=password_protected,
        parent_id=_as_int(item.get('parent'), ROOT_PARENT_ID) or ROOT_PARENT_ID,
        menu_order=_as_int(item.get('menu_order'), 0) or 0,
        link=str(item.get('link') or ''),
        featured_image=featured_image,
        post_type=str(item.get('type') or DEFAULT_POST_TYPE),
    )


class WordPressContentStore:
    """Reads pages and featured images through the WordPress REST API.

    Example:
        >>> store = WordPressContentStore(APIWrapper(Authenticator()))
        >>> pages = store.list_pages('page')
    """

    def __init__(self, api: APIWrapper, orderby: str = 'id'):
        self._api = api
        self._orderby = orderby

    def get_page(self, page_id: int, post_type: str = DEFAULT_POST_TYPE) -> Optional[Page]:
        """Return the page with the given id, or None if it does not exist.

        Anonymous requests for drafts and private pages are answered with
        401/403; those pages are reported as missing too.
        """
        try:
            item = self._api.get_page(page_id, post_type=post_type)
        except PageNotFoundError:
            logger.debug(f"Page {page_id} not found in WordPress")
            return None
        except InvalidCredentialsError:
            if self._api.is_authenticated:
                raise
            logger.debug(f"Page {page_id} is not public")
            return None
        return page_from_rest(item, self._resolve_image(item))

    def list_pages(self, post_type: str = DEFAULT_POST_TYPE) -> List[Page]:
        """Return every page of the post type in retrieval order."""
        items = self._api.list_pages(post_type, orderby=self._orderby)
        pages = []
        for item in items:
            try:
                pages.append(page_from_rest(item, self._resolve_image(item)))
            except InvalidPageDataError as e:
                logger.warning(f"Skipping page record: {e}")
        logger.info(f"Loaded {len(pages)} {post_type} record(s) from WordPress")
        return pages

    def get_featured_image(self, page_id: int) -> Optional[FeaturedImage]:
        page = self.get_page(page_id)
        return page.featured_image if page else None

    def _resolve_image(self, item: Dict[str, Any]) -> Optional[FeaturedImage]:
        media_id = _as_int(item.get('featured_media'), 0)
        if not media_id:
            return None

        embedded = (item.get('_embedded') or {}).get('wp:featuredmedia') or []
        for media in embedded:
            if _as_int(media.get('id')) == media_id:
                return image_from_media(media)

        try:
            return image_from_media(self._api.get_media(media_id))
        except PageNotFoundError:
            logger.warning(f"Featured image {media_id} of page {item.get('id')} is missing")
            return None
