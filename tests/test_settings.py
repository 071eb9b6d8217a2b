# tests/test_settings.py
"""
Settings and logging setup.

Covers:
  - CATALOG_ROWS_PER_PAGE honoured when it is one of the options
  - invalid / non-numeric values fall back to 10 with a warning
  - CATALOG_DEFAULT_GROUP_BY picked up by new sessions
  - configure_logging attaches exactly one handler, even when called twice
"""

from __future__ import annotations

import importlib
import logging

import pytest

from catalog import settings
from catalog.catalog_view import CatalogSession


@pytest.fixture
def reload_settings(monkeypatch):
    def _reload(**env):
        for name in ("CATALOG_ROWS_PER_PAGE", "CATALOG_DEFAULT_GROUP_BY", "CATALOG_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(settings)

    yield _reload

    monkeypatch.undo()
    importlib.reload(settings)


class TestRowsPerPage:
    def test_valid_value(self, reload_settings):
        assert reload_settings(CATALOG_ROWS_PER_PAGE="25").ROWS_PER_PAGE == 25

    def test_default(self, reload_settings):
        assert reload_settings().ROWS_PER_PAGE == 10

    @pytest.mark.parametrize("raw", ["7", "lots"])
    def test_invalid_falls_back(self, reload_settings, caplog, raw):
        with caplog.at_level(logging.WARNING, logger="catalog.settings"):
            module = reload_settings(CATALOG_ROWS_PER_PAGE=raw)
        assert module.ROWS_PER_PAGE == 10
        assert "CATALOG_ROWS_PER_PAGE" in caplog.text


class TestDefaultGroupBy:
    def test_session_uses_env_default(self, reload_settings):
        reload_settings(CATALOG_DEFAULT_GROUP_BY="price")
        assert CatalogSession().group_by == "price"


class TestConfigureLogging:
    def test_single_handler(self):
        logger = logging.getLogger("catalog")
        saved_handlers, saved_level = list(logger.handlers), logger.level
        try:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
            settings.configure_logging("DEBUG")
            settings.configure_logging("WARNING")
            assert len(logger.handlers) == 1
            assert logger.level == logging.WARNING
        finally:
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
            for handler in saved_handlers:
                logger.addHandler(handler)
            logger.setLevel(saved_level)
