"""
Domain errors raised by the affiliate core and rendered by the API layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AffiliateServiceError(Exception):
    code: str
    message: str
    status_code: int

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def to_payload(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class AffiliateNotFound(AffiliateServiceError):
    def __init__(self, affiliate_id: str):
        super().__init__(
            code="affiliate_not_found",
            message=f"Affiliate with ID {affiliate_id} not found",
            status_code=404,
        )
        self.affiliate_id = affiliate_id


class WithdrawalNotFound(AffiliateServiceError):
    def __init__(self, withdrawal_id: str):
        super().__init__(
            code="withdrawal_not_found",
            message=f"Withdrawal request with ID {withdrawal_id} not found",
            status_code=404,
        )
        self.withdrawal_id = withdrawal_id


class WithdrawalTransitionNotAllowed(AffiliateServiceError):
    def __init__(self, withdrawal_id: str, current_status: str, target_status: str):
        super().__init__(
            code="withdrawal_transition_not_allowed",
            message=(
                f"Withdrawal request {withdrawal_id} is {current_status} "
                f"and cannot be moved to {target_status}"
            ),
            status_code=409,
        )
        self.withdrawal_id = withdrawal_id
        self.current_status = current_status
        self.target_status = target_status


class OrderAlreadyConfirmed(AffiliateServiceError):
    def __init__(self, user_id: str):
        super().__init__(
            code="order_already_confirmed",
            message=f"Order for user {user_id} was already confirmed",
            status_code=409,
        )
        self.user_id = user_id
