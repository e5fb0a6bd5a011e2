"""Authentication module for loading WordPress credentials.

This module handles loading WordPress REST API credentials from environment
variables using python-dotenv. Only the site URL is mandatory: without a
user and application password the store falls back to anonymous access,
which only sees published content.
"""

import os
from typing import NamedTuple, Optional

from dotenv import load_dotenv

from .errors import InvalidCredentialsError


class Credentials(NamedTuple):
    """WordPress REST API credentials."""
    url: str
    user: Optional[str]
    app_password: Optional[str]

    @property
    def is_authenticated(self) -> bool:
        return bool(self.user and self.app_password)


class Authenticator:
    """Loads and validates WordPress credentials from environment variables.

    Credentials are loaded from a .env file using python-dotenv and are never
    cached or logged.

    Environment variables:
        WP_URL: Site URL (e.g., https://example.com), required
        WP_USER: WordPress user name, optional
        WP_APP_PASSWORD: Application password for WP_USER, optional

    Example:
        >>> auth = Authenticator()
        >>> creds = auth.get_credentials()
        >>> print(f"Connecting to {creds.url}")
    """

    def __init__(self, url: Optional[str] = None):
        """Initialize the authenticator by loading environment variables from .env file.

        Args:
            url: Optional site URL overriding WP_URL (e.g. from the config file)
        """
        load_dotenv()
        self._url = url

    def get_credentials(self) -> Credentials:
        """Get WordPress credentials from environment variables.

        Returns:
            Credentials: A named tuple containing url, user and app_password

        Raises:
            InvalidCredentialsError: If the site URL is missing, or only one
                of WP_USER / WP_APP_PASSWORD is set
        """
        url = self._url or os.getenv('WP_URL')
        user = os.getenv('WP_USER')
        app_password = os.getenv('WP_APP_PASSWORD')

        if not url:
            raise InvalidCredentialsError(
                user=user if user else "anonymous",
                endpoint="unknown"
            )

        # A half-configured login is a configuration mistake, not anonymous access
        if bool(user) != bool(app_password):
            raise InvalidCredentialsError(
                user=user if user else "unknown",
                endpoint=url
            )

        return Credentials(url=url.rstrip('/'), user=user or None, app_password=app_password or None)
