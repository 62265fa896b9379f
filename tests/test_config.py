from __future__ import annotations

import pytest

from hs256jwt import config


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in (
        "HS256JWT_JWT_SECRET_KEY",
        "HS256JWT_JWT_ISSUER",
        "HS256JWT_TOKEN_LIFETIME_MINUTES",
        "JWT_SECRET",
        "JWT_SECRET_KEY",
        "JWT_ISSUER",
    ):
        monkeypatch.delenv(name, raising=False)
    config.get_settings.cache_clear()
    yield
    config.get_settings.cache_clear()


def test_defaults_without_environment():
    settings = config.Settings.load()

    assert settings.jwt_secret == "local-dev-secret"
    assert settings.jwt_issuer is None
    assert settings.token_lifetime_minutes == 30


def test_prefixed_environment_overrides(monkeypatch):
    monkeypatch.setenv("HS256JWT_JWT_SECRET_KEY", "a-strong-secret")
    monkeypatch.setenv("HS256JWT_JWT_ISSUER", "auth.example.com")
    monkeypatch.setenv("HS256JWT_TOKEN_LIFETIME_MINUTES", "5")

    settings = config.get_settings()

    assert settings.jwt_secret == "a-strong-secret"
    assert settings.jwt_issuer == "auth.example.com"
    assert settings.token_lifetime_minutes == 5
    assert "a-strong-secret" not in repr(settings)


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("HS256JWT_JWT_ISSUER=from-dotenv\n", encoding="utf-8")

    assert config.Settings.load().jwt_issuer == "from-dotenv"


def test_placeholder_secret_is_rejected(monkeypatch):
    monkeypatch.setenv("HS256JWT_JWT_SECRET_KEY", "change-me")

    with pytest.raises(ValueError, match="JWT_SECRET_KEY"):
        config.Settings.load()


def test_lifetime_must_be_positive(monkeypatch):
    monkeypatch.setenv("HS256JWT_TOKEN_LIFETIME_MINUTES", "0")

    with pytest.raises(ValueError):
        config.Settings.load()
