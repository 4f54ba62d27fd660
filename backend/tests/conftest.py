"""Root conftest — shared test configuration."""

import os

# Tests never reach a real database or catalog
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("CATALOG_API_URL", "http://catalog.test")
os.environ.setdefault("LOG_FORMAT", "text")
