"""Shared pytest configuration."""
import pytest

from fileshare.config.settings import get_settings
from tests.fixtures.env_fixtures import aws_environ, full_environ, sample_file  # noqa: F401


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
