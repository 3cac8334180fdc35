"""Root conftest: shared test configuration."""

import os

# Importing users_api.main builds an app from the environment; keep it off disk
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
