"""Configuration settings for the catalog server."""

import os


DATABASE_PATH = os.environ.get("CATALOG_DATABASE_PATH", "/app/data/catalog.db")

CATALOG_HOST = os.environ.get("CATALOG_HOST", "0.0.0.0")

CATALOG_PORT = int(os.environ.get("CATALOG_PORT", "8000"))

CATALOG_RELOAD = os.environ.get("CATALOG_RELOAD", "false").lower() in ("1", "true", "yes")

DEFAULT_PAGE_SIZE = int(os.environ.get("CATALOG_DEFAULT_PAGE_SIZE", "20"))

MAX_PAGE_SIZE = int(os.environ.get("CATALOG_MAX_PAGE_SIZE", "2000"))
