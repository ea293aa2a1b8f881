"""
Startup-time checks for required configuration.
"""

from __future__ import annotations

from app.core.config import settings


def _is_production() -> bool:
    env = (settings.ENVIRONMENT or "").strip().lower()
    return env in {"production", "prod"}


def run_startup_checks() -> None:
    missing: list[str] = []
    insecure: list[str] = []

    if not settings.DATABASE_URL:
        missing.append("DATABASE_URL")
    if not (settings.WITHDRAWAL_ID_PREFIX or "").strip():
        missing.append("WITHDRAWAL_ID_PREFIX")

    if _is_production():
        if (settings.DATABASE_URL or "").startswith("sqlite"):
            insecure.append("DATABASE_URL")
        if settings.SEED_DEMO_DATA:
            insecure.append("SEED_DEMO_DATA")

    if missing or insecure:
        parts = []
        if missing:
            parts.append(f"Missing required settings: {', '.join(sorted(set(missing)))}")
        if insecure:
            parts.append(f"Insecure settings detected: {', '.join(sorted(set(insecure)))}")
        raise RuntimeError("Startup checks failed. " + " ".join(parts))
