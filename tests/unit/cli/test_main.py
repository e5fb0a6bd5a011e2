"""Unit tests for main CLI entry point (main.py).

Tests the Typer CLI application using CliRunner.
"""

import json
import logging
from unittest.mock import Mock, patch, MagicMock

import pytest
import yaml
from typer.testing import CliRunner

from src.cli.main import app, _configure_logging, _exit_code_for
from src.cli.models import ExitCode
from src.content_store.errors import (
    APIAccessError,
    APIUnreachableError,
    InvalidCredentialsError,
)
from src.page_export.errors import PageTreeCycleError
from tests.fixtures.sample_pages import SAMPLE_PAGE_DUMP


runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers bound to CliRunner streams after each test."""
    yield
    app_logger = logging.getLogger("src")
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)


@pytest.fixture
def site(tmp_path, monkeypatch):
    """Working directory with a page dump and a config file pointing at it."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "pages.yaml").write_text(SAMPLE_PAGE_DUMP, encoding='utf-8')
    config_dir = tmp_path / ".mobile-pack"
    config_dir.mkdir()
    (config_dir / "config.yaml").write_text(
        "source_path: pages.yaml\noptions_path: .mobile-pack/options.yaml\n",
        encoding='utf-8',
    )
    return tmp_path


def invoke(args):
    with patch('src.cli.main.OutputHandler', MagicMock()):
        return runner.invoke(app, args)


class TestConfigureLogging:
    """Test cases for _configure_logging function."""

    def test_verbosity_levels(self):
        """Verbosity 0/1/2 map to WARNING/INFO/DEBUG on the 'src' logger."""
        for verbosity, level in ((0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG)):
            _configure_logging(verbosity)
            assert logging.getLogger("src").level == level

    def test_repeated_calls_do_not_stack_handlers(self):
        _configure_logging(0)
        _configure_logging(0)

        assert len(logging.getLogger("src").handlers) == 1

    def test_logdir_adds_file_handler(self, tmp_path):
        _configure_logging(1, str(tmp_path / "logs"))

        handlers = logging.getLogger("src").handlers
        assert any(isinstance(handler, logging.FileHandler) for handler in handlers)
        assert list((tmp_path / "logs").glob("mobile-pack_*.log"))

        for handler in handlers:
            handler.close()


class TestExitCodes:
    """Test cases for error to exit code mapping."""

    def test_mapping(self):
        assert _exit_code_for(InvalidCredentialsError("u", "e")) == ExitCode.AUTH_ERROR
        assert _exit_code_for(APIUnreachableError("e")) == ExitCode.NETWORK_ERROR
        assert _exit_code_for(APIAccessError()) == ExitCode.NETWORK_ERROR
        assert _exit_code_for(PageTreeCycleError([1])) == ExitCode.GENERAL_ERROR


class TestExportCommands:
    """Test cases for export-page and export-pages."""

    def test_export_pages_from_dump(self, site):
        result = invoke(["export-pages"])

        assert result.exit_code == ExitCode.SUCCESS
        pages = json.loads(result.stdout)['pages']
        assert [(page['title'], page['order']) for page in pages] == [
            ("Home", 1), ("About", 2), ("Team", 3)
        ]
        assert pages[1]['image']['width'] == 640

    def test_export_page(self, site):
        result = invoke(["export-page", "11"])

        assert result.exit_code == ExitCode.SUCCESS
        page = json.loads(result.stdout)['page']
        assert page['content'] == "<p>Who we are</p>"
        assert 'order' not in page

    def test_export_draft_page_is_empty(self, site):
        result = invoke(["export-page", "13"])

        assert json.loads(result.stdout) == {'page': {}}

    def test_export_page_invalid_id(self, site):
        result = invoke(["export-page", "abc"])

        assert result.exit_code == ExitCode.SUCCESS
        assert json.loads(result.stdout) == {'error': 'Invalid post id'}

    def test_source_option_overrides_config(self, site):
        (site / "other.yaml").write_text("pages:\n  - id: 99\n    title: Other\n", encoding='utf-8')

        result = invoke(["--source", "other.yaml", "export-pages"])

        assert [page['id'] for page in json.loads(result.stdout)['pages']] == [99]

    def test_cycle_exits_with_general_error(self, site):
        (site / "cycle.yaml").write_text(
            "pages:\n  - id: 1\n    parent: 2\n  - id: 2\n    parent: 1\n", encoding='utf-8'
        )

        result = invoke(["--source", "cycle.yaml", "export-pages"])

        assert result.exit_code == ExitCode.GENERAL_ERROR

    @pytest.mark.parametrize("error,exit_code", [
        (InvalidCredentialsError("editor", "https://example.com"), ExitCode.AUTH_ERROR),
        (APIUnreachableError("https://example.com"), ExitCode.NETWORK_ERROR),
    ])
    def test_store_errors_map_to_exit_codes(self, site, error, exit_code):
        service = Mock()
        service.export_page.side_effect = error

        with patch('src.cli.main._build_service', return_value=service):
            result = invoke(["export-page", "11"])

        assert result.exit_code == exit_code

    @patch('src.cli.main.APIWrapper')
    @patch('src.cli.main.Authenticator')
    def test_live_site_when_no_source(self, mock_auth, mock_api, tmp_path, monkeypatch):
        """Without a page dump the WordPress REST API is used."""
        monkeypatch.chdir(tmp_path)
        config = tmp_path / "config.yaml"
        config.write_text("site_url: https://example.com\ntimeout: 5\n", encoding='utf-8')
        mock_api.return_value.list_pages.return_value = []

        result = invoke(["--config", str(config), "export-pages"])

        assert result.exit_code == ExitCode.SUCCESS
        assert json.loads(result.stdout) == {'pages': []}
        mock_auth.assert_called_once_with(url="https://example.com")
        mock_api.assert_called_once_with(mock_auth.return_value, timeout=5, per_page=100)
        mock_api.return_value.list_pages.assert_called_once_with('page', orderby='id')

    def test_missing_explicit_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)

        result = invoke(["--config", "missing.yaml", "export-pages"])

        assert result.exit_code == ExitCode.GENERAL_ERROR


class TestEditCommands:
    """Test cases for set-status and set-content."""

    def _options(self, site):
        with open(site / ".mobile-pack" / "options.yaml", 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)

    def test_set_status_hides_page_from_export(self, site):
        result = invoke(["set-status", "11", "inactive"])

        assert result.exit_code == ExitCode.SUCCESS
        assert result.stdout.strip() == "1"
        assert self._options(site)['inactive_pages'] == [11]

        pages = json.loads(invoke(["export-pages"]).stdout)['pages']
        assert [page['title'] for page in pages] == ["Home"]

    def test_set_status_category(self, site):
        result = invoke(["set-status", "4", "inactive", "--type", "category"])

        assert result.stdout.strip() == "1"
        assert self._options(site)['inactive_categories'] == [4]

    def test_set_status_invalid_request(self, site):
        result = invoke(["set-status", "11", "hidden"])

        assert result.exit_code == ExitCode.GENERAL_ERROR
        assert result.stdout.strip() == "0"

    def test_set_content_and_clear(self, site):
        result = invoke(["set-content", "10", "<p>Mobile home</p>"])
        assert result.stdout.strip() == "1"

        page = json.loads(invoke(["export-page", "10"]).stdout)['page']
        assert page['content'] == "<p>Mobile home</p>"

        result = invoke(["set-content", "10", "--clear"])
        assert result.stdout.strip() == "1"

        page = json.loads(invoke(["export-page", "10"]).stdout)['page']
        assert page['content'] == "<p>Welcome</p>"

    def test_set_content_requires_text_or_clear(self, site):
        result = invoke(["set-content", "10"])

        assert result.exit_code == ExitCode.GENERAL_ERROR


class TestVersion:
    """Test cases for --version."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "mobile-pack version" in result.stdout
