# catalog/settings.py
"""
Runtime settings for the catalog editor.

Values come from the environment, with ROOT/.env loaded first so a local
checkout can be tuned without exporting variables:

    CATALOG_LOG_LEVEL=DEBUG
    CATALOG_ROWS_PER_PAGE=25
    CATALOG_DEFAULT_GROUP_BY=catId
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from catalog.pagination import DEFAULT_ROWS_PER_PAGE, ROWS_PER_PAGE_OPTIONS

log = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parents[1]

# --- Load .env if present (existing environment wins) ---
load_dotenv(ROOT / ".env")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

LOG_LEVEL = (os.getenv("CATALOG_LOG_LEVEL") or "INFO").upper()


def _rows_per_page_from_env() -> int:
    raw = os.getenv("CATALOG_ROWS_PER_PAGE")
    if not raw:
        return DEFAULT_ROWS_PER_PAGE
    try:
        value = int(raw)
    except ValueError:
        value = -1
    if value not in ROWS_PER_PAGE_OPTIONS:
        log.warning(
            "CATALOG_ROWS_PER_PAGE=%r not in %s; using %d",
            raw, ROWS_PER_PAGE_OPTIONS, DEFAULT_ROWS_PER_PAGE,
        )
        return DEFAULT_ROWS_PER_PAGE
    return value


ROWS_PER_PAGE = _rows_per_page_from_env()

# validated against the grouping modes by CatalogSession
DEFAULT_GROUP_BY = os.getenv("CATALOG_DEFAULT_GROUP_BY") or "none"


def configure_logging(level: str | None = None) -> logging.Logger:
    """
    Attach one stream handler to the "catalog" logger.
    Safe to call repeatedly; later calls only adjust the level.
    """
    logger = logging.getLogger("catalog")
    logger.setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT))
        logger.addHandler(handler)
    return logger
