import os
from uuid import uuid4

import pytest

os.environ.setdefault("DATABASE_URL", f"sqlite:///./affiliate_{uuid4().hex}.db")
os.environ.setdefault("SKIP_MIGRATIONS", "1")

import app.core.startup_checks as startup_checks  # noqa: E402


def test_startup_checks_pass_in_development(monkeypatch):
    monkeypatch.setattr(startup_checks.settings, "ENVIRONMENT", "development")
    monkeypatch.setattr(startup_checks.settings, "DATABASE_URL", "sqlite:///./dev.db")
    monkeypatch.setattr(startup_checks.settings, "SEED_DEMO_DATA", True)
    startup_checks.run_startup_checks()


def test_startup_checks_require_withdrawal_prefix(monkeypatch):
    monkeypatch.setattr(startup_checks.settings, "WITHDRAWAL_ID_PREFIX", "  ")
    with pytest.raises(RuntimeError, match="WITHDRAWAL_ID_PREFIX"):
        startup_checks.run_startup_checks()


def test_startup_checks_reject_sqlite_and_demo_data_in_production(monkeypatch):
    monkeypatch.setattr(startup_checks.settings, "ENVIRONMENT", "production")
    monkeypatch.setattr(startup_checks.settings, "DATABASE_URL", "sqlite:///./prod.db")
    monkeypatch.setattr(startup_checks.settings, "SEED_DEMO_DATA", True)
    with pytest.raises(RuntimeError) as excinfo:
        startup_checks.run_startup_checks()
    message = str(excinfo.value)
    assert "Insecure settings detected" in message
    assert "DATABASE_URL" in message
    assert "SEED_DEMO_DATA" in message


def test_startup_checks_accept_production_database(monkeypatch):
    monkeypatch.setattr(startup_checks.settings, "ENVIRONMENT", "prod")
    monkeypatch.setattr(startup_checks.settings, "DATABASE_URL", "postgresql://affiliates@db/affiliates")
    monkeypatch.setattr(startup_checks.settings, "SEED_DEMO_DATA", False)
    startup_checks.run_startup_checks()
