"""Settings — environment overrides and URL normalization."""

from cadastro.config import Settings


def test_defaults(monkeypatch):
    for name in ("DATABASE_URL", "HOST", "PORT", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url == "sqlite+aiosqlite:///./cadastros.db"
    assert settings.host == "0.0.0.0"
    assert settings.port == 3000
    assert settings.database_auto_create is True


def test_host_and_port_from_environment(monkeypatch):
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "8080")
    settings = Settings(_env_file=None)
    assert settings.host == "127.0.0.1"
    assert settings.port == 8080


def test_postgres_url_gets_async_driver(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/cadastro")
    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/cadastro"


def test_async_urls_untouched(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    assert Settings(_env_file=None).database_url == "sqlite+aiosqlite:///:memory:"
