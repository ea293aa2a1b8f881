# Central place for all configurable settings. We use Pydantic's
# BaseSettings so values can be read from env vars or a .env file.
# This keeps deployment flexible without hardcoding secrets.

import json
from typing import Annotated, List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


def safe_json_loads(value):
    try:
        return json.loads(value)
    except ValueError:
        return value


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Core DB connection string, like sqlite:///./affiliates.db or Postgres URL.
    # Needed by SQLAlchemy to connect to the persistence layer.
    DATABASE_URL: str

    # Toggle SQLAlchemy echo logs. Useful for debugging queries locally.
    DB_ECHO: bool = False

    # Deployment environment name. "production" turns on stricter
    # startup checks (no SQLite, no demo seeding).
    ENVIRONMENT: str = "development"

    # Withdrawal lifecycle. When strict, approve/decline only act on
    # Pending requests; otherwise any request can be re-approved or
    # re-declined.
    WITHDRAWAL_STRICT_TRANSITIONS: bool = False
    WITHDRAWAL_ID_PREFIX: str = "WD"

    # Seed the demo affiliates (AFF001...) when the app starts.
    SEED_DEMO_DATA: bool = False

    # Browser origins allowed to call the API (admin + affiliate portals).
    # NoDecode hands the raw env string to the validator below.
    CORS_ALLOWED_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default_factory=lambda: [
            "http://localhost:3000",
            "http://localhost:5173",
        ]
    )

    @field_validator("CORS_ALLOWED_ORIGINS", mode="before")
    @classmethod
    def _parse_list_values(cls, value):
        if isinstance(value, str) and value.strip().startswith("["):
            return safe_json_loads(value)
        if isinstance(value, str):
            parts = [p.strip() for p in value.split(",") if p.strip()]
            return parts
        return value


# Instantiate a single settings object for app-wide import.
# Any module can just `from app.core.config import settings`.
settings = Settings()
