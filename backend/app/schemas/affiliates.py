from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.models.enums import AffiliatePlanEnum, OrderTypeEnum


class AffiliateRead(BaseModel):
    id: str
    name: str
    email: str
    referral_code: str
    plan: AffiliatePlanEnum
    total_revenue: float
    total_commission: float
    recurring_customers: int
    one_time_customers: int
    created_at: datetime


class ReferredCustomerRead(BaseModel):
    id: str
    name: str
    affiliate_id: str
    order_amount: float
    order_type: OrderTypeEnum
    commission_earned: float
    created_at: datetime


class AffiliateDashboard(BaseModel):
    affiliate: AffiliateRead
    total_earnings: float
    total_sales: float
    total_commissions: float
    pending_withdrawals: float


class ValidateReferralRequest(BaseModel):
    referral_code: str


class ValidateReferralResponse(BaseModel):
    valid: bool
    affiliate_id: Optional[str] = None
    affiliate_name: Optional[str] = None


class ConfirmOrderRequest(BaseModel):
    user_id: str
    affiliate_id: str
    order_amount: float = Field(gt=0)
    recurring: bool
    customer_name: Optional[str] = None


class ConfirmOrderResponse(BaseModel):
    success: bool
    commission: Optional[float] = None
