from rentals.core.config import Settings


def test_defaults_target_local_postgis() -> None:
    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL.startswith("postgresql+asyncpg://")
    assert settings.DB_CHECK_ON_STARTUP is False


def test_allowed_origins_accepts_json_string() -> None:
    settings = Settings(
        _env_file=None,
        ALLOWED_ORIGINS='["https://rentals.example", "http://localhost:3000"]',
    )

    assert settings.ALLOWED_ORIGINS == ["https://rentals.example", "http://localhost:3000"]


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("DB_POOL_SIZE", "3")

    settings = Settings(_env_file=None)

    assert settings.APP_ENV == "production"
    assert settings.DB_POOL_SIZE == 3
