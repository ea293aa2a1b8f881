from __future__ import annotations

import secrets

from sqlalchemy.orm import Session

from app.core.metrics import record_referral_validation
from app.crud.affiliates import get_affiliate_by_referral_code


def generate_referral_code(name: str | None = None) -> str:
    token = secrets.token_hex(3).upper()
    stem = "".join(ch for ch in (name or "").split(" ")[0] if ch.isalnum()).upper()[:8]
    return f"{stem or 'REF'}{token}"


def validate_referral(db: Session, *, referral_code: str) -> dict:
    # Exact, case-sensitive match: "john123" does not resolve "JOHN123".
    affiliate = get_affiliate_by_referral_code(db, referral_code=referral_code) if referral_code else None
    if not affiliate:
        record_referral_validation(False)
        return {"valid": False}

    record_referral_validation(True)
    return {
        "valid": True,
        "affiliate_id": affiliate.id,
        "affiliate_name": affiliate.name,
    }
