from __future__ import annotations

from sqlalchemy.orm import Session

from app.core.logging import get_structured_logger
from app.crud.commission_settings import (
    default_commission_settings,
    get_commission_settings as get_stored_settings,
    upsert_commission_settings,
)
from app.models.commission_settings import CommissionSettings


logger = get_structured_logger("affiliate_events")


def get_commission_settings(db: Session) -> CommissionSettings:
    # Reading never creates the row; defaults are 10% recurring / 5% one-time.
    return get_stored_settings(db) or default_commission_settings()


def update_commission_settings(
    db: Session,
    *,
    recurring_percentage: float,
    one_time_percentage: float,
) -> CommissionSettings:
    config = upsert_commission_settings(
        db,
        payload={
            "recurring_percentage": recurring_percentage,
            "one_time_percentage": one_time_percentage,
        },
    )
    logger.info(
        "commission_settings.updated",
        extra={
            "recurring_percentage": recurring_percentage,
            "one_time_percentage": one_time_percentage,
        },
    )
    return config
