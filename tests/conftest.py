"""Root conftest — shared test configuration."""

import os

# Tests never touch a developer's local database file
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("DATABASE_CREATE_TABLES", "false")
os.environ.setdefault("STORAGE_TIMEOUT_SECONDS", "5")
