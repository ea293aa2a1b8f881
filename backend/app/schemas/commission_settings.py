from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class CommissionSettingsRead(BaseModel):
    recurring_percentage: float
    one_time_percentage: float
    updated_at: datetime | None = None


class CommissionSettingsUpdate(BaseModel):
    recurring_percentage: float = Field(ge=0, le=100)
    one_time_percentage: float = Field(ge=0, le=100)
