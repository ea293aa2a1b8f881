from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.db import get_db
from app.core.orders import confirm_order
from app.core.referrals import validate_referral
from app.schemas.affiliates import (
    ConfirmOrderRequest,
    ConfirmOrderResponse,
    ValidateReferralRequest,
    ValidateReferralResponse,
)


# Called by the checkout flow of the main shop.
router = APIRouter(tags=["checkout"])


@router.post(
    "/referrals/validate",
    response_model=ValidateReferralResponse,
    response_model_exclude_none=True,
)
def validate_referral_code(
    payload: ValidateReferralRequest,
    db: Session = Depends(get_db),
):
    return ValidateReferralResponse(**validate_referral(db, referral_code=payload.referral_code))


@router.post(
    "/orders/confirm",
    response_model=ConfirmOrderResponse,
    response_model_exclude_none=True,
)
def confirm_referred_order(
    payload: ConfirmOrderRequest,
    db: Session = Depends(get_db),
):
    result = confirm_order(
        db,
        user_id=payload.user_id,
        affiliate_id=payload.affiliate_id,
        order_amount=payload.order_amount,
        recurring=payload.recurring,
        customer_name=payload.customer_name,
    )
    return ConfirmOrderResponse(**result)
