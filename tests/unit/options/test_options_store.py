"""Unit tests for options.options_store module."""

import os

import pytest
import yaml

from src.options.errors import OptionsError, OptionsFilesystemError
from src.options.models import PluginOptions
from src.options.options_store import OptionsStore
from tests.fixtures.sample_pages import SAMPLE_OPTIONS, SAMPLE_OPTIONS_INVALID_TYPE


def write_options(path, content):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


class TestLoad:
    """Test cases for OptionsStore.load()."""

    def test_missing_file_returns_defaults(self, options_store):
        """A site that never saved options has nothing hidden."""
        options = options_store.load()

        assert options == PluginOptions()
        assert options.get_inactive_page_ids() == frozenset()

    def test_empty_file_returns_defaults(self, options_store, options_path):
        write_options(options_path, "\n")
        assert options_store.load() == PluginOptions()

    def test_load_sample_options(self, options_store, options_path):
        write_options(options_path, SAMPLE_OPTIONS)

        options = options_store.load()

        assert options.get_inactive_page_ids() == frozenset({12})
        assert options.is_page_inactive(12) is True
        assert options.get_override_content(11) == "<p>Short mobile text</p>"
        assert options.get_override_content(10) is None

    def test_string_keys_are_converted_to_ids(self, options_store, options_path):
        write_options(options_path, "page_content:\n  '7': text\ninactive_pages: ['3']\n")

        options = options_store.load()

        assert options.get_override_content(7) == "text"
        assert options.get_inactive_page_ids() == frozenset({3})

    def test_invalid_field_type_raises(self, options_store, options_path):
        write_options(options_path, SAMPLE_OPTIONS_INVALID_TYPE)

        with pytest.raises(OptionsError) as exc_info:
            options_store.load()

        assert exc_info.value.option_field == 'inactive_pages'

    def test_invalid_yaml_raises(self, options_store, options_path):
        write_options(options_path, "inactive_pages: [1, 2\n")

        with pytest.raises(OptionsError, match="Invalid YAML syntax"):
            options_store.load()

    def test_non_mapping_raises(self, options_store, options_path):
        write_options(options_path, "- 1\n- 2\n")

        with pytest.raises(OptionsError, match="YAML dictionary"):
            options_store.load()

    def test_non_string_content_raises(self, options_store, options_path):
        write_options(options_path, "page_content:\n  7: [a, b]\n")

        with pytest.raises(OptionsError):
            options_store.load()


class TestSave:
    """Test cases for OptionsStore.save()."""

    def test_save_creates_directory_and_round_trips(self, options_store, options_path):
        options = PluginOptions(
            inactive_pages=frozenset({5, 2}),
            inactive_categories=frozenset({9}),
            page_content={4: "<p>Mobile</p>"},
        )

        options_store.save(options)

        assert os.path.exists(options_path)
        assert options_store.load() == options

    def test_saved_ids_are_sorted(self, options_store, options_path):
        options_store.save(PluginOptions(inactive_pages=frozenset({30, 1, 7})))

        with open(options_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)

        assert data['inactive_pages'] == [1, 7, 30]

    def test_save_into_unwritable_location_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding='utf-8')
        store = OptionsStore(str(blocker / "options.yaml"))

        with pytest.raises(OptionsFilesystemError):
            store.save(PluginOptions())
