"""Shared test fixtures for pomkit."""
from pathlib import Path

import pytest

from pomkit.config import PomkitConfig, set_config

# Path to test fixtures
FIXTURES_DIR = Path(__file__).parent / "fixtures"
MOCK_PAGES_DIR = FIXTURES_DIR / "mock_pages"


@pytest.fixture(autouse=True)
def fast_config():
    """Short timeouts and polling so failed lookups finish quickly."""
    config = PomkitConfig(fallback_timeout_ms=300, poll_interval_ms=10)
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def mock_pages_dir() -> Path:
    """Path to mock HTML pages."""
    return MOCK_PAGES_DIR


@pytest.fixture
def catalog_path() -> Path:
    """Path to the product catalog test page."""
    return MOCK_PAGES_DIR / "catalog.html"
