"""API wrapper for the WordPress REST API (wp/v2).

This module wraps a requests Session and provides error translation from
HTTP exceptions to our typed exception hierarchy. It integrates with the
retry logic for handling rate limits and walks WordPress pagination.
"""

import logging
import re
from typing import Dict, Any, Optional, List

import requests
from requests.exceptions import Timeout, ConnectTimeout, ReadTimeout, ConnectionError, HTTPError

from .auth import Authenticator, Credentials
from .errors import (
    InvalidCredentialsError,
    PageNotFoundError,
    APIUnreachableError,
    APIAccessError,
)
from .retry_logic import retry_on_rate_limit, _is_rate_limit_error

logger = logging.getLogger(__name__)

USER_AGENT = "mobile-pack-export/0.1"

# REST collection names for the built-in post types
REST_BASES = {
    'page': 'pages',
    'post': 'posts',
    'attachment': 'media',
}

# Embeds the featured image record so images cost no extra request per page
EMBED_FEATURED_MEDIA = 'wp:featuredmedia'


class APIWrapper:
    """Wrapper around the WordPress REST API with error translation.

    This class provides a thin wrapper over the wp/v2 endpoints that:
    1. Handles authentication using the Authenticator (application passwords)
    2. Translates HTTP errors to typed exceptions
    3. Integrates retry logic for 429 rate limits
    4. Follows X-WP-TotalPages pagination for collections

    Example:
        >>> auth = Authenticator()
        >>> api = APIWrapper(auth)
        >>> page = api.get_page("42")
    """

    def __init__(self, authenticator: Authenticator, timeout: int = 30, per_page: int = 100):
        """Initialize the API wrapper with authentication credentials.

        Args:
            authenticator: Authenticator instance for loading credentials
            timeout: Timeout in seconds for each HTTP request
            per_page: Page size used when walking collections (WordPress caps it at 100)
        """
        self._authenticator = authenticator
        self._timeout = timeout
        self._per_page = min(max(per_page, 1), 100)
        self._session: Optional[requests.Session] = None
        self._credentials: Optional[Credentials] = None

    def _get_credentials(self) -> Credentials:
        if self._credentials is None:
            self._credentials = self._authenticator.get_credentials()
        return self._credentials

    def _get_session(self) -> requests.Session:
        """Get or create the HTTP session.

        The session is created lazily on first use so that constructing the
        wrapper never touches the environment.

        Returns:
            requests.Session configured with auth and headers

        Raises:
            InvalidCredentialsError: If credentials are missing
        """
        if self._session is None:
            creds = self._get_credentials()
            session = requests.Session()
            session.headers.update({
                'User-Agent': USER_AGENT,
                'Accept': 'application/json',
            })
            if creds.is_authenticated:
                session.auth = (creds.user, creds.app_password)
            self._session = session
        return self._session

    @property
    def is_authenticated(self) -> bool:
        """True when requests are sent with an application password."""
        return self._get_credentials().is_authenticated

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def _validate_id(self, item_id: Any) -> str:
        """Validate that a page or media ID is numeric.

        Args:
            item_id: The ID to validate

        Returns:
            str: The normalized ID

        Raises:
            ValueError: If item_id is not a positive numeric value
        """
        item_id_str = str(item_id).strip() if item_id is not None else ""
        if not item_id_str:
            raise ValueError("id cannot be empty")

        if not re.match(r'^\d+$', item_id_str) or int(item_id_str) <= 0:
            raise ValueError(
                f"Invalid id format: '{item_id}'. "
                f"WordPress ids must be positive integers."
            )
        return item_id_str

    def _sanitize_credentials(self, text: str) -> str:
        """Mask credentials that could leak through error messages.

        Args:
            text: The error message or log text to sanitize

        Returns:
            str: Sanitized text with credentials masked
        """
        if not text:
            return text

        sanitized = re.sub(r'://([^:/@\s]+):([^@\s]+)@', r'://***:***@', text)
        sanitized = re.sub(
            r'Authorization:\s*[^\n\r]+',
            'Authorization: ***REDACTED***',
            sanitized,
            flags=re.IGNORECASE
        )
        sanitized = re.sub(
            r'Basic\s+[A-Za-z0-9+/=]{8,}',
            'Basic ***REDACTED***',
            sanitized
        )
        # Application passwords are six groups of four characters
        sanitized = re.sub(
            r'\b(?:[A-Za-z0-9]{4} ){5}[A-Za-z0-9]{4}\b',
            '***REDACTED***',
            sanitized
        )
        return sanitized

    def _translate_error(self, exception: Exception, operation: str) -> Exception:
        """Translate HTTP exceptions to typed content store exceptions.

        Args:
            exception: The original exception from requests
            operation: Description of the operation that failed (for logging)

        Returns:
            Exception: Translated exception (one of our typed exceptions), or
                the original exception for 429 responses so the retry logic
                can recognize it
        """
        if _is_rate_limit_error(exception):
            return exception

        creds = self._get_credentials()

        if isinstance(exception, (Timeout, ConnectTimeout, ReadTimeout, ConnectionError)):
            return APIUnreachableError(endpoint=creds.url)

        response = getattr(exception, 'response', None)
        status_code = getattr(response, 'status_code', None)

        if status_code in (401, 403):
            return InvalidCredentialsError(
                user=creds.user or "anonymous",
                endpoint=creds.url
            )

        if status_code == 404:
            item_id = "unknown"
            match = re.search(r'\(([^)]+)\)', operation)
            if match:
                item_id = match.group(1)
            return PageNotFoundError(page_id=item_id)

        safe_error_msg = self._sanitize_credentials(str(exception))
        logger.error(f"API operation failed: {operation} - {safe_error_msg}")
        return APIAccessError(f"WordPress API failure during {operation}")

    def _get(self, path: str, params: Optional[Dict[str, Any]], operation: str) -> requests.Response:
        """Issue a GET against the REST API with error translation and retries."""
        url = f"{self._get_credentials().url}/wp-json/wp/v2/{path}"

        def _fetch() -> requests.Response:
            try:
                logger.debug(f"WordPress API: GET {url} params={params}")
                response = self._get_session().get(url, params=params or {}, timeout=self._timeout)
                response.raise_for_status()
                return response
            except (HTTPError, Timeout, ConnectionError) as e:
                translated = self._translate_error(e, operation)
                if translated is e:
                    raise
                raise translated from e

        return retry_on_rate_limit(_fetch)

    def _edit_context(self) -> Dict[str, str]:
        # context=edit exposes raw content, password and every status, but needs auth
        if self.is_authenticated:
            return {'context': 'edit'}
        return {}

    def get_page(self, page_id: Any, post_type: str = 'page') -> Dict[str, Any]:
        """Fetch a single page by its ID.

        Args:
            page_id: The WordPress page ID
            post_type: Post type whose collection is queried

        Returns:
            Dict containing page data from the REST API

        Raises:
            ValueError: If page_id is not numeric
            InvalidCredentialsError: If credentials are rejected
            PageNotFoundError: If page doesn't exist
            APIUnreachableError: If API is unreachable
            APIAccessError: If API access fails after retries
        """
        page_id = self._validate_id(page_id)
        rest_base = REST_BASES.get(post_type, post_type)
        params = {'_embed': EMBED_FEATURED_MEDIA}
        params.update(self._edit_context())
        response = self._get(f"{rest_base}/{page_id}", params, f"get_page({page_id})")
        return response.json()

    def list_pages(self, post_type: str = 'page', orderby: str = 'id') -> List[Dict[str, Any]]:
        """Fetch every page of a post type, walking all result pages.

        Args:
            post_type: Post type whose collection is queried
            orderby: REST orderby parameter; defines the retrieval order

        Returns:
            List of page dictionaries in retrieval order

        Raises:
            InvalidCredentialsError: If credentials are rejected
            APIUnreachableError: If API is unreachable
            APIAccessError: If API access fails after retries
        """
        rest_base = REST_BASES.get(post_type, post_type)
        params: Dict[str, Any] = {
            'per_page': self._per_page,
            'orderby': orderby,
            'order': 'asc',
            '_embed': EMBED_FEATURED_MEDIA,
        }
        params.update(self._edit_context())
        if self.is_authenticated:
            # drafts and private pages are needed to prune their subtrees
            params['status'] = 'any'

        results: List[Dict[str, Any]] = []
        page_number = 1
        while True:
            params['page'] = page_number
            response = self._get(rest_base, dict(params), f"list_pages({post_type})")
            items = response.json() or []
            results.extend(items)

            total_pages = int(response.headers.get('X-WP-TotalPages', page_number) or page_number)
            logger.debug(
                f"Fetched {len(items)} {post_type} item(s), result page {page_number}/{total_pages}"
            )
            if not items or page_number >= total_pages:
                break
            page_number += 1

        return results

    def get_media(self, media_id: Any) -> Dict[str, Any]:
        """Fetch attachment details by ID.

        Args:
            media_id: The attachment ID (the page's featured_media value)

        Returns:
            Dict containing attachment data (source_url, media_details, ...)

        Raises:
            PageNotFoundError: If the attachment doesn't exist
            APIUnreachableError: If API is unreachable
            APIAccessError: If API access fails after retries
        """
        media_id = self._validate_id(media_id)
        response = self._get(f"media/{media_id}", None, f"get_media({media_id})")
        return response.json()
