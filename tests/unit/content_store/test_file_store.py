"""Unit tests for content_store.file_store module."""

import pytest

from src.content_store.errors import ContentStoreError, InvalidPageDataError
from src.content_store.file_store import FileContentStore
from tests.fixtures.sample_pages import (
    SAMPLE_PAGE_DUMP,
    SAMPLE_PAGE_DUMP_INVALID_YAML,
    SAMPLE_PAGE_DUMP_MISSING_ID,
)


@pytest.fixture
def dump_path(tmp_path):
    path = tmp_path / "pages.yaml"
    path.write_text(SAMPLE_PAGE_DUMP, encoding='utf-8')
    return str(path)


class TestFileContentStore:
    """Test cases for FileContentStore class."""

    def test_list_pages_in_file_order(self, dump_path):
        pages = FileContentStore(dump_path).list_pages()
        assert [page.page_id for page in pages] == [10, 11, 12, 13, 14]

    def test_page_fields(self, dump_path):
        page = FileContentStore(dump_path).get_page(12)

        assert page.title == "Team"
        assert page.parent_id == 11
        assert page.content == ""
        assert page.link == "https://example.com/about/team/"
        assert page.status == "publish"
        assert page.menu_order == 0

    def test_status_and_password(self, dump_path):
        store = FileContentStore(dump_path)

        assert store.get_page(13).status == "draft"
        assert store.get_page(14).password_protected is True
        assert store.get_page(10).password_protected is False

    def test_featured_image(self, dump_path):
        image = FileContentStore(dump_path).get_featured_image(11)

        assert image.src == "https://example.com/wp-content/uploads/about.jpg"
        assert (image.width, image.height) == (640, 480)

    def test_file_is_reread_on_each_call(self, tmp_path):
        path = tmp_path / "pages.yaml"
        path.write_text("pages:\n  - id: 1\n    title: One\n", encoding='utf-8')
        store = FileContentStore(str(path))
        assert len(store.list_pages()) == 1

        path.write_text("pages:\n  - id: 1\n  - id: 2\n", encoding='utf-8')
        assert len(store.list_pages()) == 2

    def test_empty_file_has_no_pages(self, tmp_path):
        path = tmp_path / "pages.yaml"
        path.write_text("", encoding='utf-8')

        assert FileContentStore(str(path)).list_pages() == []

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(ContentStoreError, match="not found"):
            FileContentStore(str(tmp_path / "missing.yaml")).list_pages()

    def test_invalid_yaml_raises(self, tmp_path):
        path = tmp_path / "pages.yaml"
        path.write_text(SAMPLE_PAGE_DUMP_INVALID_YAML, encoding='utf-8')

        with pytest.raises(ContentStoreError, match="Invalid YAML"):
            FileContentStore(str(path)).list_pages()

    def test_record_without_id_raises(self, tmp_path):
        path = tmp_path / "pages.yaml"
        path.write_text(SAMPLE_PAGE_DUMP_MISSING_ID, encoding='utf-8')

        with pytest.raises(InvalidPageDataError, match="pages\\[0\\]"):
            FileContentStore(str(path)).list_pages()

    def test_image_without_src_raises(self, tmp_path):
        path = tmp_path / "pages.yaml"
        path.write_text("pages:\n  - id: 1\n    image:\n      width: 10\n", encoding='utf-8')

        with pytest.raises(InvalidPageDataError):
            FileContentStore(str(path)).get_page(1)
