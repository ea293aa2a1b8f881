from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.models.enums import WithdrawalStatusEnum


class WithdrawalRequestCreate(BaseModel):
    amount: float = Field(gt=0)


class WithdrawalApprove(BaseModel):
    payment_proof_url: Optional[str] = None


class WithdrawalRequestRead(BaseModel):
    id: str
    affiliate_id: str
    affiliate_name: str
    amount: float
    status: WithdrawalStatusEnum
    payment_proof_url: str | None = None
    created_at: datetime
    updated_at: datetime
