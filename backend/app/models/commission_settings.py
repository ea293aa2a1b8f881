from sqlalchemy import Column, DateTime, Integer, Numeric

from app.core.db import Base
from app.core.time import utcnow


class CommissionSettings(Base):
    __tablename__ = "commission_settings"

    # Single global row.
    id = Column(Integer, primary_key=True, default=1)
    recurring_percentage = Column(Numeric(5, 2), nullable=False, default=10)
    one_time_percentage = Column(Numeric(5, 2), nullable=False, default=5)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
