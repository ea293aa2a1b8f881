from __future__ import annotations

from sqlalchemy.orm import Session

from app.core.errors import AffiliateNotFound
from app.crud.affiliates import get_affiliate, list_referred_customers, sum_referral_totals
from app.crud.withdrawals import sum_withdrawals
from app.models.affiliates import ReferredCustomer
from app.models.enums import WithdrawalStatusEnum


def build_affiliate_dashboard(db: Session, *, affiliate_id: str) -> dict:
    affiliate = get_affiliate(db, affiliate_id=affiliate_id)
    if not affiliate:
        raise AffiliateNotFound(affiliate_id)

    total_earnings, total_sales = sum_referral_totals(db, affiliate_id=affiliate_id)
    return {
        "affiliate": affiliate,
        "total_earnings": total_earnings,
        "total_sales": total_sales,
        # Stored aggregate, tracked separately from the referral rows and
        # not reduced by approved withdrawals.
        "total_commissions": float(affiliate.total_commission or 0),
        "pending_withdrawals": sum_withdrawals(
            db,
            affiliate_id=affiliate_id,
            status=WithdrawalStatusEnum.PENDING,
        ),
    }


def list_affiliate_referrals(db: Session, *, affiliate_id: str) -> list[ReferredCustomer]:
    return list_referred_customers(db, affiliate_id=affiliate_id)
