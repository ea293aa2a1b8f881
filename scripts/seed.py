"""
Deterministic seed script for dev/demo environments.
"""

from __future__ import annotations

import os
import sys

from app.core.db import SessionLocal, Base, engine
from app.seed.utils import seed_default_commission_settings, seed_demo_affiliates


def ensure_not_production():
    env = os.getenv("ENVIRONMENT", os.getenv("ENV", "")).lower()
    allow_prod = os.getenv("ALLOW_SEED_PROD", "0").lower() in {"1", "true", "yes"}
    if env in {"production", "prod"} and not allow_prod:
        print("Refusing to seed in production. Set ALLOW_SEED_PROD=1 to override.", file=sys.stderr)
        sys.exit(1)


def seed():
    ensure_not_production()
    Base.metadata.create_all(bind=engine)

    with SessionLocal() as db:
        seed_default_commission_settings(db)
        affiliates = seed_demo_affiliates(db)
    print(f"Seed complete. {len(affiliates)} affiliates available.")


if __name__ == "__main__":
    seed()
