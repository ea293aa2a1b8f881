from .affiliates import (
    create_affiliate,
    list_affiliates,
    get_affiliate,
    get_affiliate_by_referral_code,
    add_referred_customer,
    get_referred_customer,
    list_referred_customers,
    sum_referral_totals,
)
from .withdrawals import (
    create_withdrawal_request,
    get_withdrawal_request,
    list_withdrawals_by_status,
    list_withdrawals_for_affiliate,
    update_withdrawal_request,
    sum_withdrawals,
)
from .commission_settings import (
    get_commission_settings,
    default_commission_settings,
    upsert_commission_settings,
    get_effective_rates,
)

__all__ = [
    "create_affiliate",
    "list_affiliates",
    "get_affiliate",
    "get_affiliate_by_referral_code",
    "add_referred_customer",
    "get_referred_customer",
    "list_referred_customers",
    "sum_referral_totals",
    "create_withdrawal_request",
    "get_withdrawal_request",
    "list_withdrawals_by_status",
    "list_withdrawals_for_affiliate",
    "update_withdrawal_request",
    "sum_withdrawals",
    "get_commission_settings",
    "default_commission_settings",
    "upsert_commission_settings",
    "get_effective_rates",
]
