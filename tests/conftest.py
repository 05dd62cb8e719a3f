"""Shared fixtures: an isolated environment store and captured log events."""

import pytest
from structlog.testing import capture_logs

from env_vars_config import InMemoryEnvironment, use_environment
from env_vars_config.settings import get_logging_settings, get_sentinel_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Reload library settings for every test so patched env vars apply."""
    get_sentinel_settings.cache_clear()
    get_logging_settings.cache_clear()
    yield
    get_sentinel_settings.cache_clear()
    get_logging_settings.cache_clear()


@pytest.fixture()
def env():
    """Install an empty in-memory environment as the process-wide store."""
    environment = InMemoryEnvironment()
    with use_environment(environment):
        yield environment


@pytest.fixture()
def logs():
    with capture_logs() as captured:
        yield captured


@pytest.fixture()
def logged_warnings(logs):
    """Return a callable listing the warning events captured so far."""

    def _warnings():
        return [entry for entry in logs if entry["log_level"] == "warning"]

    return _warnings
