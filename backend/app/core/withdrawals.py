from __future__ import annotations

import secrets

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.errors import AffiliateNotFound, WithdrawalNotFound, WithdrawalTransitionNotAllowed
from app.core.logging import get_structured_logger
from app.core.metrics import record_withdrawal_transition
from app.core.time import utcnow
from app.crud.affiliates import get_affiliate
from app.crud.withdrawals import (
    create_withdrawal_request as create_withdrawal_record,
    get_withdrawal_request,
    list_withdrawals_by_status,
    list_withdrawals_for_affiliate,
    update_withdrawal_request,
)
from app.models.enums import WithdrawalStatusEnum
from app.models.withdrawals import WithdrawalRequest


logger = get_structured_logger("affiliate_events")


def generate_withdrawal_id() -> str:
    prefix = settings.WITHDRAWAL_ID_PREFIX or "WD"
    return f"{prefix}{utcnow():%Y%m%d%H%M%S}{secrets.token_hex(3).upper()}"


def create_withdrawal_request(db: Session, *, affiliate_id: str, amount: float) -> WithdrawalRequest:
    # The amount is not checked against the affiliate's commission here;
    # the affiliate portal does that before submitting.
    affiliate = get_affiliate(db, affiliate_id=affiliate_id)
    if not affiliate:
        raise AffiliateNotFound(affiliate_id)

    withdrawal = create_withdrawal_record(
        db,
        withdrawal_id=generate_withdrawal_id(),
        affiliate_id=affiliate.id,
        affiliate_name=affiliate.name,
        amount=amount,
    )
    record_withdrawal_transition(WithdrawalStatusEnum.PENDING)
    logger.info(
        "withdrawal.created",
        extra={"withdrawal_id": withdrawal.id, "affiliate_id": affiliate_id, "amount": amount},
    )
    return withdrawal


def _load_for_transition(
    db: Session,
    *,
    withdrawal_id: str,
    target: WithdrawalStatusEnum,
) -> WithdrawalRequest:
    withdrawal = get_withdrawal_request(db, withdrawal_id=withdrawal_id)
    if not withdrawal:
        raise WithdrawalNotFound(withdrawal_id)
    current = WithdrawalStatusEnum(withdrawal.status)
    if settings.WITHDRAWAL_STRICT_TRANSITIONS and current != WithdrawalStatusEnum.PENDING:
        raise WithdrawalTransitionNotAllowed(withdrawal_id, current.value, target.value)
    return withdrawal


def approve_withdrawal(
    db: Session,
    *,
    withdrawal_id: str,
    payment_proof_url: str | None = None,
) -> WithdrawalRequest:
    withdrawal = _load_for_transition(db, withdrawal_id=withdrawal_id, target=WithdrawalStatusEnum.APPROVED)
    previous = withdrawal.status
    updates = {"status": WithdrawalStatusEnum.APPROVED, "updated_at": utcnow()}
    if payment_proof_url:
        updates["payment_proof_url"] = payment_proof_url
    withdrawal = update_withdrawal_request(db, withdrawal=withdrawal, updates=updates)
    record_withdrawal_transition(WithdrawalStatusEnum.APPROVED)
    logger.info(
        "withdrawal.approved",
        extra={
            "withdrawal_id": withdrawal.id,
            "affiliate_id": withdrawal.affiliate_id,
            "previous_status": WithdrawalStatusEnum(previous).value,
            "has_payment_proof": bool(withdrawal.payment_proof_url),
        },
    )
    return withdrawal


def decline_withdrawal(db: Session, *, withdrawal_id: str) -> WithdrawalRequest:
    withdrawal = _load_for_transition(db, withdrawal_id=withdrawal_id, target=WithdrawalStatusEnum.DECLINED)
    previous = withdrawal.status
    withdrawal = update_withdrawal_request(
        db,
        withdrawal=withdrawal,
        updates={"status": WithdrawalStatusEnum.DECLINED, "updated_at": utcnow()},
    )
    record_withdrawal_transition(WithdrawalStatusEnum.DECLINED)
    logger.info(
        "withdrawal.declined",
        extra={
            "withdrawal_id": withdrawal.id,
            "affiliate_id": withdrawal.affiliate_id,
            "previous_status": WithdrawalStatusEnum(previous).value,
        },
    )
    return withdrawal


def list_pending_withdrawals(db: Session) -> list[WithdrawalRequest]:
    return list_withdrawals_by_status(db, status=WithdrawalStatusEnum.PENDING)


def list_affiliate_withdrawals(db: Session, *, affiliate_id: str) -> list[WithdrawalRequest]:
    return list_withdrawals_for_affiliate(db, affiliate_id=affiliate_id)
