from uuid import uuid4

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.db import Base
from app.crud.affiliates import create_affiliate
from app.crud.withdrawals import create_withdrawal_request
from app.models.enums import AffiliatePlanEnum


def make_session_factory(db_url: str):
    engine = create_engine(db_url, future=True, connect_args={"check_same_thread": False})
    Base.metadata.create_all(bind=engine)
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)


def make_affiliate(
    db,
    *,
    affiliate_id: str | None = None,
    name: str | None = None,
    email: str | None = None,
    referral_code: str | None = None,
    plan: AffiliatePlanEnum = AffiliatePlanEnum.BASIC,
):
    token = uuid4().hex[:8]
    affiliate_id = affiliate_id or f"AFF_{token}"
    name = name or f"Affiliate {token}"
    return create_affiliate(
        db,
        affiliate_id=affiliate_id,
        name=name,
        email=email or f"{token}@example.com",
        referral_code=referral_code or f"REF{token.upper()}",
        plan=plan,
    )


def make_withdrawal(db, *, affiliate, amount: float = 50.0, withdrawal_id: str | None = None):
    return create_withdrawal_request(
        db,
        withdrawal_id=withdrawal_id or f"WD_{uuid4().hex[:10]}",
        affiliate_id=affiliate.id,
        affiliate_name=affiliate.name,
        amount=amount,
    )
