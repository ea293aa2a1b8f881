from __future__ import annotations

from app.schemas.affiliates import AffiliateRead, ReferredCustomerRead
from app.schemas.commission_settings import CommissionSettingsRead
from app.schemas.withdrawals import WithdrawalRequestRead


def affiliate_read(affiliate) -> AffiliateRead:
    return AffiliateRead(
        id=affiliate.id,
        name=affiliate.name,
        email=affiliate.email,
        referral_code=affiliate.referral_code,
        plan=affiliate.plan,
        total_revenue=float(affiliate.total_revenue or 0),
        total_commission=float(affiliate.total_commission or 0),
        recurring_customers=int(affiliate.recurring_customers or 0),
        one_time_customers=int(affiliate.one_time_customers or 0),
        created_at=affiliate.created_at,
    )


def referred_customer_read(customer) -> ReferredCustomerRead:
    return ReferredCustomerRead(
        id=customer.id,
        name=customer.name,
        affiliate_id=customer.affiliate_id,
        order_amount=float(customer.order_amount or 0),
        order_type=customer.order_type,
        commission_earned=float(customer.commission_earned or 0),
        created_at=customer.created_at,
    )


def withdrawal_read(withdrawal) -> WithdrawalRequestRead:
    return WithdrawalRequestRead(
        id=withdrawal.id,
        affiliate_id=withdrawal.affiliate_id,
        affiliate_name=withdrawal.affiliate_name,
        amount=float(withdrawal.amount or 0),
        status=withdrawal.status,
        payment_proof_url=withdrawal.payment_proof_url,
        created_at=withdrawal.created_at,
        updated_at=withdrawal.updated_at,
    )


def commission_settings_read(config) -> CommissionSettingsRead:
    return CommissionSettingsRead(
        recurring_percentage=float(config.recurring_percentage),
        one_time_percentage=float(config.one_time_percentage),
        updated_at=config.updated_at,
    )
