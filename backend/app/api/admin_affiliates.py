from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.serializers import affiliate_read, commission_settings_read, withdrawal_read
from app.core.commission_settings import get_commission_settings, update_commission_settings
from app.core.db import get_db
from app.core.withdrawals import approve_withdrawal, decline_withdrawal, list_pending_withdrawals
from app.crud.affiliates import list_affiliates
from app.schemas.affiliates import AffiliateRead
from app.schemas.commission_settings import CommissionSettingsRead, CommissionSettingsUpdate
from app.schemas.withdrawals import WithdrawalApprove, WithdrawalRequestRead


router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/affiliates", response_model=list[AffiliateRead])
def list_all_affiliates(db: Session = Depends(get_db)):
    return [affiliate_read(affiliate) for affiliate in list_affiliates(db)]


@router.get("/withdrawals/pending", response_model=list[WithdrawalRequestRead])
def list_pending_withdrawal_requests(db: Session = Depends(get_db)):
    return [withdrawal_read(row) for row in list_pending_withdrawals(db)]


@router.post("/withdrawals/{withdrawal_id}/approve", response_model=WithdrawalRequestRead)
def approve_withdrawal_request(
    withdrawal_id: str,
    payload: WithdrawalApprove | None = None,
    db: Session = Depends(get_db),
):
    proof_url = payload.payment_proof_url if payload else None
    withdrawal = approve_withdrawal(db, withdrawal_id=withdrawal_id, payment_proof_url=proof_url)
    return withdrawal_read(withdrawal)


@router.post("/withdrawals/{withdrawal_id}/decline", response_model=WithdrawalRequestRead)
def decline_withdrawal_request(
    withdrawal_id: str,
    db: Session = Depends(get_db),
):
    return withdrawal_read(decline_withdrawal(db, withdrawal_id=withdrawal_id))


@router.get("/commission-settings", response_model=CommissionSettingsRead)
def get_commission_config(db: Session = Depends(get_db)):
    return commission_settings_read(get_commission_settings(db))


@router.post("/commission-settings", response_model=CommissionSettingsRead)
def update_commission_config(
    payload: CommissionSettingsUpdate,
    db: Session = Depends(get_db),
):
    config = update_commission_settings(
        db,
        recurring_percentage=payload.recurring_percentage,
        one_time_percentage=payload.one_time_percentage,
    )
    return commission_settings_read(config)
