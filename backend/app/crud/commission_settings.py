from __future__ import annotations

from sqlalchemy.orm import Session

from app.core.time import utcnow
from app.models.commission_settings import CommissionSettings


SETTINGS_ROW_ID = 1
DEFAULT_RECURRING_PERCENTAGE = 10.0
DEFAULT_ONE_TIME_PERCENTAGE = 5.0


def get_commission_settings(db: Session) -> CommissionSettings | None:
    return db.query(CommissionSettings).filter(CommissionSettings.id == SETTINGS_ROW_ID).first()


def default_commission_settings() -> CommissionSettings:
    # Transient instance; never added to the session.
    return CommissionSettings(
        id=SETTINGS_ROW_ID,
        recurring_percentage=DEFAULT_RECURRING_PERCENTAGE,
        one_time_percentage=DEFAULT_ONE_TIME_PERCENTAGE,
        updated_at=None,
    )


def upsert_commission_settings(db: Session, *, payload: dict) -> CommissionSettings:
    config = get_commission_settings(db)
    if not config:
        config = CommissionSettings(id=SETTINGS_ROW_ID, **payload)
        db.add(config)
    else:
        for key, value in payload.items():
            setattr(config, key, value)
    config.updated_at = utcnow()
    db.commit()
    db.refresh(config)
    return config


def get_effective_rates(db: Session) -> tuple[float, float]:
    """Returns (recurring, one-time) percentages, falling back to the defaults."""
    config = get_commission_settings(db)
    if not config:
        return DEFAULT_RECURRING_PERCENTAGE, DEFAULT_ONE_TIME_PERCENTAGE
    return float(config.recurring_percentage), float(config.one_time_percentage)
