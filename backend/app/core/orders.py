from __future__ import annotations

from sqlalchemy.orm import Session

from app.core.db import unit_of_work
from app.core.errors import OrderAlreadyConfirmed
from app.core.logging import get_structured_logger
from app.core.metrics import record_order_confirmed, record_order_rejected
from app.crud.affiliates import add_referred_customer, get_affiliate, get_referred_customer
from app.crud.commission_settings import get_effective_rates
from app.models.enums import OrderTypeEnum


logger = get_structured_logger("affiliate_events")


def calculate_commission(order_amount: float, rate_percentage: float) -> float:
    return order_amount * rate_percentage / 100


def confirm_order(
    db: Session,
    *,
    user_id: str,
    affiliate_id: str,
    order_amount: float,
    recurring: bool,
    customer_name: str | None = None,
) -> dict:
    """
    Credit an affiliate for a confirmed checkout.

    An unknown affiliate is not an error for the checkout flow: the
    result is ``{"success": False}`` and nothing is written. Otherwise the
    referred-customer row and the affiliate's running totals are written
    in one commit, using the commission rates in effect right now.
    """
    affiliate = get_affiliate(db, affiliate_id=affiliate_id)
    if not affiliate:
        record_order_rejected("unknown_affiliate")
        logger.info(
            "order.rejected",
            extra={"user_id": user_id, "affiliate_id": affiliate_id, "reason": "unknown_affiliate"},
        )
        return {"success": False}

    if get_referred_customer(db, customer_id=user_id):
        record_order_rejected("duplicate_order")
        raise OrderAlreadyConfirmed(user_id)

    recurring_percentage, one_time_percentage = get_effective_rates(db)
    rate = recurring_percentage if recurring else one_time_percentage
    commission = calculate_commission(order_amount, rate)
    order_type = OrderTypeEnum.RECURRING if recurring else OrderTypeEnum.ONE_TIME

    with unit_of_work(db):
        add_referred_customer(
            db,
            customer_id=user_id,
            name=customer_name or f"Customer {user_id}",
            affiliate_id=affiliate.id,
            order_amount=order_amount,
            order_type=order_type,
            commission_earned=commission,
        )
        affiliate.total_revenue = float(affiliate.total_revenue or 0) + order_amount
        affiliate.total_commission = float(affiliate.total_commission or 0) + commission
        if recurring:
            affiliate.recurring_customers = int(affiliate.recurring_customers or 0) + 1
        else:
            affiliate.one_time_customers = int(affiliate.one_time_customers or 0) + 1

    record_order_confirmed(order_type=order_type, commission=commission)
    logger.info(
        "order.confirmed",
        extra={
            "user_id": user_id,
            "affiliate_id": affiliate_id,
            "order_type": order_type.value,
            "order_amount": order_amount,
            "commission": commission,
            "rate": rate,
        },
    )
    return {"success": True, "commission": commission}
