"""Unit tests for the exception hierarchy."""

from src.content_store.errors import (
    MobilePackError,
    ContentStoreError,
    InvalidCredentialsError,
    PageNotFoundError,
    APIUnreachableError,
    APIAccessError,
    InvalidPageDataError,
)
from src.options.errors import OptionsError, OptionsFilesystemError
from src.page_export.errors import ExportError, PageTreeCycleError
from src.cli.errors import CLIError, ConfigError, ConfigNotFoundError


class TestHierarchy:
    """All application errors share MobilePackError as base."""

    def test_content_store_errors_inherit_from_base(self):
        for error in (
            InvalidCredentialsError("editor", "https://example.com"),
            PageNotFoundError("12"),
            APIUnreachableError("https://example.com"),
            APIAccessError(),
            InvalidPageDataError("bad"),
        ):
            assert isinstance(error, ContentStoreError)
            assert isinstance(error, MobilePackError)

    def test_other_package_errors_inherit_from_base(self):
        for error in (
            OptionsError("bad"),
            OptionsFilesystemError("options.yaml", "read"),
            PageTreeCycleError([1, 2]),
            ConfigError("bad"),
            ConfigNotFoundError("config.yaml"),
        ):
            assert isinstance(error, MobilePackError)

        assert issubclass(PageTreeCycleError, ExportError)
        assert issubclass(ConfigError, CLIError)


class TestMessages:
    """Error messages carry the context attributes."""

    def test_invalid_credentials_message(self):
        error = InvalidCredentialsError(user="editor", endpoint="https://example.com")
        assert str(error) == "WordPress credentials are invalid (user: editor, endpoint: https://example.com)"
        assert error.user == "editor"

    def test_page_not_found_message(self):
        error = PageNotFoundError(page_id="12")
        assert str(error) == "Page 12 not found"
        assert error.page_id == "12"

    def test_api_access_default_message(self):
        assert str(APIAccessError()) == "WordPress API failure (after 3 retries)"

    def test_invalid_page_data_with_source(self):
        error = InvalidPageDataError("missing id", source="pages.yaml")
        assert str(error) == "Invalid page data in pages.yaml: missing id"
        assert error.original_message == "missing id"

    def test_cycle_error_lists_sorted_ids(self):
        error = PageTreeCycleError({3, 1})
        assert error.page_ids == [1, 3]
        assert "1, 3" in str(error)

    def test_options_error_with_field(self):
        error = OptionsError("must be a list", "inactive_pages")
        assert str(error) == "Options error in field 'inactive_pages': must be a list"
