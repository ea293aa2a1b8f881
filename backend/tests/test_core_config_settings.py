import importlib

import pytest
from pydantic import ValidationError


def _load_settings(monkeypatch, extra_env=None):
    # Required keys must be in the environment before the module is imported.
    monkeypatch.setenv("SKIP_MIGRATIONS", "1")
    monkeypatch.setenv("DATABASE_URL", "sqlite:///:memory:")
    if extra_env:
        for key, value in extra_env.items():
            monkeypatch.setenv(key, value)

    import app.core.config as config

    importlib.reload(config)
    return config.Settings


def test_settings_defaults(monkeypatch):
    for key in (
        "ENVIRONMENT",
        "WITHDRAWAL_STRICT_TRANSITIONS",
        "WITHDRAWAL_ID_PREFIX",
        "SEED_DEMO_DATA",
        "CORS_ALLOWED_ORIGINS",
        "DB_ECHO",
    ):
        monkeypatch.delenv(key, raising=False)
    Settings = _load_settings(monkeypatch)
    cfg = Settings(_env_file=None)
    assert cfg.ENVIRONMENT == "development"
    assert cfg.DB_ECHO is False
    assert cfg.WITHDRAWAL_STRICT_TRANSITIONS is False
    assert cfg.WITHDRAWAL_ID_PREFIX == "WD"
    assert cfg.SEED_DEMO_DATA is False
    assert cfg.CORS_ALLOWED_ORIGINS == ["http://localhost:3000", "http://localhost:5173"]


def test_settings_env_overrides(monkeypatch):
    Settings = _load_settings(
        monkeypatch,
        {
            "DATABASE_URL": "postgresql://affiliates@db/affiliates",
            "ENVIRONMENT": "staging",
            "WITHDRAWAL_STRICT_TRANSITIONS": "true",
            "WITHDRAWAL_ID_PREFIX": "PAY",
            "SEED_DEMO_DATA": "1",
            "CORS_ALLOWED_ORIGINS": "https://admin.example.com, https://partners.example.com",
        },
    )
    cfg = Settings(_env_file=None)
    assert cfg.DATABASE_URL == "postgresql://affiliates@db/affiliates"
    assert cfg.ENVIRONMENT == "staging"
    assert cfg.WITHDRAWAL_STRICT_TRANSITIONS is True
    assert cfg.WITHDRAWAL_ID_PREFIX == "PAY"
    assert cfg.SEED_DEMO_DATA is True
    assert cfg.CORS_ALLOWED_ORIGINS == ["https://admin.example.com", "https://partners.example.com"]


def test_cors_origins_accept_json_list(monkeypatch):
    Settings = _load_settings(monkeypatch, {"CORS_ALLOWED_ORIGINS": '["https://a.example.com"]'})
    cfg = Settings(_env_file=None)
    assert cfg.CORS_ALLOWED_ORIGINS == ["https://a.example.com"]


def test_database_url_is_required(monkeypatch):
    Settings = _load_settings(monkeypatch)
    monkeypatch.delenv("DATABASE_URL")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_cors_origins_accept_single_origin(monkeypatch):
    Settings = _load_settings(monkeypatch, {"CORS_ALLOWED_ORIGINS": "https://admin.example.com"})
    cfg = Settings(_env_file=None)
    assert cfg.CORS_ALLOWED_ORIGINS == ["https://admin.example.com"]
