from __future__ import annotations

from sqlalchemy.orm import Session

from app.core.orders import confirm_order
from app.core.referrals import generate_referral_code
from app.crud.affiliates import create_affiliate, get_affiliate, get_referred_customer
from app.crud.commission_settings import (
    DEFAULT_ONE_TIME_PERCENTAGE,
    DEFAULT_RECURRING_PERCENTAGE,
    get_commission_settings,
    upsert_commission_settings,
)
from app.crud.withdrawals import create_withdrawal_request, get_withdrawal_request
from app.models.affiliates import Affiliate
from app.models.commission_settings import CommissionSettings
from app.models.enums import AffiliatePlanEnum
from app.models.withdrawals import WithdrawalRequest


DEMO_AFFILIATES = [
    {
        "affiliate_id": "AFF001",
        "name": "John Smith",
        "email": "john.smith@example.com",
        "referral_code": "JOHN123",
        "plan": AffiliatePlanEnum.PREMIUM,
    },
    {
        "affiliate_id": "AFF002",
        "name": "Sarah Johnson",
        "email": "sarah.johnson@example.com",
        "referral_code": "SARAH456",
        "plan": AffiliatePlanEnum.BASIC,
    },
    {
        "affiliate_id": "AFF003",
        "name": "Mike Davis",
        "email": "mike.davis@example.com",
        "referral_code": "MIKE789",
        "plan": AffiliatePlanEnum.BASIC,
    },
]

# (user_id, affiliate_id, order_amount, recurring)
DEMO_ORDERS = [
    ("CUST001", "AFF001", 120.0, True),
    ("CUST002", "AFF001", 80.0, False),
    ("CUST003", "AFF002", 200.0, True),
]

DEMO_WITHDRAWALS = [
    {"withdrawal_id": "WR001", "affiliate_id": "AFF001", "amount": 250.50},
]


def get_or_create_affiliate(
    db: Session,
    *,
    affiliate_id: str,
    name: str,
    email: str,
    referral_code: str | None = None,
    plan: AffiliatePlanEnum = AffiliatePlanEnum.BASIC,
) -> Affiliate:
    affiliate = get_affiliate(db, affiliate_id=affiliate_id)
    if affiliate:
        return affiliate
    return create_affiliate(
        db,
        affiliate_id=affiliate_id,
        name=name,
        email=email,
        referral_code=referral_code or generate_referral_code(name),
        plan=plan,
    )


def get_or_create_withdrawal(db: Session, *, withdrawal_id: str, affiliate_id: str, amount: float) -> WithdrawalRequest:
    withdrawal = get_withdrawal_request(db, withdrawal_id=withdrawal_id)
    if withdrawal:
        return withdrawal
    affiliate = get_affiliate(db, affiliate_id=affiliate_id)
    return create_withdrawal_request(
        db,
        withdrawal_id=withdrawal_id,
        affiliate_id=affiliate_id,
        affiliate_name=affiliate.name,
        amount=amount,
    )


def seed_default_commission_settings(db: Session) -> CommissionSettings:
    config = get_commission_settings(db)
    if config:
        return config
    return upsert_commission_settings(
        db,
        payload={
            "recurring_percentage": DEFAULT_RECURRING_PERCENTAGE,
            "one_time_percentage": DEFAULT_ONE_TIME_PERCENTAGE,
        },
    )


def seed_demo_affiliates(db: Session) -> list[Affiliate]:
    """Idempotent: safe to call on every startup."""
    affiliates = [get_or_create_affiliate(db, **row) for row in DEMO_AFFILIATES]
    for user_id, affiliate_id, amount, recurring in DEMO_ORDERS:
        if get_referred_customer(db, customer_id=user_id):
            continue
        confirm_order(
            db,
            user_id=user_id,
            affiliate_id=affiliate_id,
            order_amount=amount,
            recurring=recurring,
        )
    for row in DEMO_WITHDRAWALS:
        get_or_create_withdrawal(db, **row)
    return affiliates
