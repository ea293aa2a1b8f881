from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.affiliates import Affiliate, ReferredCustomer
from app.models.enums import AffiliatePlanEnum, OrderTypeEnum


def create_affiliate(
    db: Session,
    *,
    affiliate_id: str,
    name: str,
    email: str,
    referral_code: str,
    plan: AffiliatePlanEnum = AffiliatePlanEnum.BASIC,
) -> Affiliate:
    affiliate = Affiliate(
        id=affiliate_id,
        name=name,
        email=email,
        referral_code=referral_code,
        plan=plan,
        total_revenue=0,
        total_commission=0,
        recurring_customers=0,
        one_time_customers=0,
    )
    db.add(affiliate)
    db.commit()
    db.refresh(affiliate)
    return affiliate


def list_affiliates(db: Session) -> list[Affiliate]:
    return db.query(Affiliate).order_by(Affiliate.created_at.asc(), Affiliate.id.asc()).all()


def get_affiliate(db: Session, *, affiliate_id: str) -> Affiliate | None:
    return db.query(Affiliate).filter(Affiliate.id == affiliate_id).first()


def get_affiliate_by_referral_code(db: Session, *, referral_code: str) -> Affiliate | None:
    return db.query(Affiliate).filter(Affiliate.referral_code == referral_code).first()


def add_referred_customer(
    db: Session,
    *,
    customer_id: str,
    name: str,
    affiliate_id: str,
    order_amount: float,
    order_type: OrderTypeEnum,
    commission_earned: float,
) -> ReferredCustomer:
    """Adds the row to the session only; the caller commits."""
    customer = ReferredCustomer(
        id=customer_id,
        name=name,
        affiliate_id=affiliate_id,
        order_amount=order_amount,
        order_type=order_type,
        commission_earned=commission_earned,
    )
    db.add(customer)
    return customer


def get_referred_customer(db: Session, *, customer_id: str) -> ReferredCustomer | None:
    return db.query(ReferredCustomer).filter(ReferredCustomer.id == customer_id).first()


def list_referred_customers(db: Session, *, affiliate_id: str) -> list[ReferredCustomer]:
    return (
        db.query(ReferredCustomer)
        .filter(ReferredCustomer.affiliate_id == affiliate_id)
        .order_by(ReferredCustomer.created_at.desc())
        .all()
    )


def sum_referral_totals(db: Session, *, affiliate_id: str) -> tuple[float, float]:
    """Returns (commission earned, order amount) summed over the affiliate's referrals."""
    earnings, sales = (
        db.query(
            func.coalesce(func.sum(ReferredCustomer.commission_earned), 0),
            func.coalesce(func.sum(ReferredCustomer.order_amount), 0),
        )
        .filter(ReferredCustomer.affiliate_id == affiliate_id)
        .one()
    )
    try:
        return float(earnings or 0), float(sales or 0)
    except (TypeError, ValueError):
        return 0.0, 0.0
