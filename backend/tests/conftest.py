"""Root conftest — shared test configuration."""

import os

# Tests never touch a real database file or expose dev-mode error details by default
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "production")
os.environ.setdefault("ERROR_FORMAT", "problem")
