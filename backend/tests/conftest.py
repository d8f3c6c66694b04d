"""Root conftest — shared test configuration."""

import os

# Tests never talk to a real database or use a real signing secret
os.environ.setdefault("TOKEN_SECRET_KEY", "test-secret-key")
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///:memory:",
)
os.environ.setdefault("LOG_FORMAT", "text")
