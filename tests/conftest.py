"""Shared fixtures for unit and integration tests."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
import structlog

from vcap.cookbooks.ruby.settings import RubyCookbookSettings, get_ruby_settings
from vcap.infra.observability.logging import get_logging_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture(autouse=True)
def _clear_settings_caches() -> Iterator[None]:
    """Settings singletons and logging configuration must not leak between tests."""
    get_ruby_settings.cache_clear()
    get_logging_settings.cache_clear()
    yield
    get_ruby_settings.cache_clear()
    get_logging_settings.cache_clear()
    structlog.reset_defaults()


@pytest.fixture()
def clean_env() -> Iterator[None]:
    """Run the test with an empty process environment."""
    with patch.dict("os.environ", {}, clear=True):
        yield


@pytest.fixture()
def host_settings(clean_env: None) -> RubyCookbookSettings:
    """Host settings with no VCAP_RUBY_* variables set."""
    return RubyCookbookSettings()  # type: ignore[call-arg]
