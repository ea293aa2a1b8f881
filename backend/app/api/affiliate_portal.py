from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.serializers import affiliate_read, referred_customer_read, withdrawal_read
from app.core.dashboard import build_affiliate_dashboard, list_affiliate_referrals
from app.core.db import get_db
from app.core.withdrawals import create_withdrawal_request, list_affiliate_withdrawals
from app.schemas.affiliates import AffiliateDashboard, ReferredCustomerRead
from app.schemas.withdrawals import WithdrawalRequestCreate, WithdrawalRequestRead


router = APIRouter(prefix="/affiliates/{affiliate_id}", tags=["affiliates"])


@router.get("/dashboard", response_model=AffiliateDashboard)
def get_affiliate_dashboard(affiliate_id: str, db: Session = Depends(get_db)):
    summary = build_affiliate_dashboard(db, affiliate_id=affiliate_id)
    return AffiliateDashboard(
        affiliate=affiliate_read(summary["affiliate"]),
        total_earnings=summary["total_earnings"],
        total_sales=summary["total_sales"],
        total_commissions=summary["total_commissions"],
        pending_withdrawals=summary["pending_withdrawals"],
    )


@router.get("/referrals", response_model=list[ReferredCustomerRead])
def get_affiliate_referrals(affiliate_id: str, db: Session = Depends(get_db)):
    return [referred_customer_read(row) for row in list_affiliate_referrals(db, affiliate_id=affiliate_id)]


@router.post("/withdrawals", response_model=WithdrawalRequestRead, status_code=status.HTTP_201_CREATED)
def request_withdrawal(
    affiliate_id: str,
    payload: WithdrawalRequestCreate,
    db: Session = Depends(get_db),
):
    withdrawal = create_withdrawal_request(db, affiliate_id=affiliate_id, amount=payload.amount)
    return withdrawal_read(withdrawal)


@router.get("/withdrawals", response_model=list[WithdrawalRequestRead])
def get_affiliate_withdrawals(affiliate_id: str, db: Session = Depends(get_db)):
    return [withdrawal_read(row) for row in list_affiliate_withdrawals(db, affiliate_id=affiliate_id)]
