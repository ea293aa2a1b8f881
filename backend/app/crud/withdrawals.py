from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.enums import WithdrawalStatusEnum
from app.models.withdrawals import WithdrawalRequest


def create_withdrawal_request(
    db: Session,
    *,
    withdrawal_id: str,
    affiliate_id: str,
    affiliate_name: str,
    amount: float,
) -> WithdrawalRequest:
    withdrawal = WithdrawalRequest(
        id=withdrawal_id,
        affiliate_id=affiliate_id,
        affiliate_name=affiliate_name,
        amount=amount,
        status=WithdrawalStatusEnum.PENDING,
        payment_proof_url=None,
    )
    db.add(withdrawal)
    db.commit()
    db.refresh(withdrawal)
    return withdrawal


def get_withdrawal_request(db: Session, *, withdrawal_id: str) -> WithdrawalRequest | None:
    return db.query(WithdrawalRequest).filter(WithdrawalRequest.id == withdrawal_id).first()


def list_withdrawals_by_status(db: Session, *, status: WithdrawalStatusEnum) -> list[WithdrawalRequest]:
    return (
        db.query(WithdrawalRequest)
        .filter(WithdrawalRequest.status == status)
        .order_by(WithdrawalRequest.created_at.asc(), WithdrawalRequest.id.asc())
        .all()
    )


def list_withdrawals_for_affiliate(db: Session, *, affiliate_id: str) -> list[WithdrawalRequest]:
    return (
        db.query(WithdrawalRequest)
        .filter(WithdrawalRequest.affiliate_id == affiliate_id)
        .order_by(WithdrawalRequest.created_at.desc(), WithdrawalRequest.id.desc())
        .all()
    )


def update_withdrawal_request(
    db: Session,
    *,
    withdrawal: WithdrawalRequest,
    updates: dict,
) -> WithdrawalRequest:
    for key, value in updates.items():
        setattr(withdrawal, key, value)
    db.commit()
    db.refresh(withdrawal)
    return withdrawal


def sum_withdrawals(db: Session, *, affiliate_id: str, status: WithdrawalStatusEnum) -> float:
    total = (
        db.query(func.coalesce(func.sum(WithdrawalRequest.amount), 0))
        .filter(
            WithdrawalRequest.affiliate_id == affiliate_id,
            WithdrawalRequest.status == status,
        )
        .scalar()
    )
    try:
        return float(total or 0)
    except (TypeError, ValueError):
        return 0.0
