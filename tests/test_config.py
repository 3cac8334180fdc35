"""Settings: environment-driven configuration."""

from users_api.config import Settings, get_settings


def test_postgres_url_converted_to_asyncpg():
    settings = Settings(database_url="postgresql://u:p@db:5432/users")
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/users"


def test_async_urls_left_alone():
    url = "sqlite+aiosqlite:///./other.db"
    assert Settings(database_url=url).database_url == url


def test_api_router_from_environment(monkeypatch):
    monkeypatch.setenv("API_ROUTER", "compact")
    assert Settings().api_router == "compact"


def test_defaults():
    settings = Settings()
    assert settings.api_router == "full"
    assert settings.database_create_tables is True
    assert settings.port == 8000


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
