"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import pytest

from src.content_store.memory_store import MemoryContentStore
from src.options.options_store import OptionsStore


@pytest.fixture(autouse=True)
def isolated_wp_env(monkeypatch):
    """Keep a developer's WordPress credentials out of the tests."""
    for name in ('WP_URL', 'WP_USER', 'WP_APP_PASSWORD'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def options_path(tmp_path):
    """Path of an options file inside a fresh temporary directory."""
    return str(tmp_path / ".mobile-pack" / "options.yaml")


@pytest.fixture
def options_store(options_path):
    return OptionsStore(options_path)


@pytest.fixture
def memory_store():
    return MemoryContentStore()
