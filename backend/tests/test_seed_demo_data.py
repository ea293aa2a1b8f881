import os
from uuid import uuid4

import pytest

os.environ.setdefault("DATABASE_URL", f"sqlite:///./affiliate_{uuid4().hex}.db")
os.environ.setdefault("SKIP_MIGRATIONS", "1")

from app.core.dashboard import build_affiliate_dashboard  # noqa: E402
from app.core.referrals import validate_referral  # noqa: E402
from app.core.withdrawals import approve_withdrawal, list_pending_withdrawals  # noqa: E402
from app.crud.affiliates import list_affiliates  # noqa: E402
from app.crud.commission_settings import get_effective_rates  # noqa: E402
from app.models.affiliates import ReferredCustomer  # noqa: E402
from app.models.enums import AffiliatePlanEnum, WithdrawalStatusEnum  # noqa: E402
from app.seed.utils import get_or_create_affiliate, seed_default_commission_settings, seed_demo_affiliates  # noqa: E402
from tests.factories import make_session_factory  # noqa: E402


@pytest.fixture
def db_session(tmp_path):
    TestingSessionLocal = make_session_factory(f"sqlite:///{tmp_path}/seed_test.db")
    with TestingSessionLocal() as session:
        yield session


def _seed(db):
    seed_default_commission_settings(db)
    return seed_demo_affiliates(db)


def test_seed_creates_demo_affiliates(db_session):
    affiliates = _seed(db_session)
    assert [a.id for a in affiliates] == ["AFF001", "AFF002", "AFF003"]
    assert affiliates[0].name == "John Smith"
    assert AffiliatePlanEnum(affiliates[0].plan) == AffiliatePlanEnum.PREMIUM
    assert get_effective_rates(db_session) == (10.0, 5.0)

    assert validate_referral(db_session, referral_code="JOHN123") == {
        "valid": True,
        "affiliate_id": "AFF001",
        "affiliate_name": "John Smith",
    }


def test_seed_orders_feed_dashboards(db_session):
    _seed(db_session)
    summary = build_affiliate_dashboard(db_session, affiliate_id="AFF001")
    assert summary["total_sales"] == pytest.approx(200.0)
    assert summary["total_earnings"] == pytest.approx(16.0)
    assert summary["pending_withdrawals"] == pytest.approx(250.50)


def test_seed_withdrawal_can_be_approved(db_session):
    _seed(db_session)
    pending = list_pending_withdrawals(db_session)
    assert [row.id for row in pending] == ["WR001"]
    assert pending[0].affiliate_name == "John Smith"

    approved = approve_withdrawal(db_session, withdrawal_id="WR001")
    assert WithdrawalStatusEnum(approved.status) == WithdrawalStatusEnum.APPROVED
    assert approved.payment_proof_url is None


def test_seed_is_idempotent(db_session):
    _seed(db_session)
    _seed(db_session)
    assert len(list_affiliates(db_session)) == 3
    assert db_session.query(ReferredCustomer).count() == 3
    assert len(list_pending_withdrawals(db_session)) == 1


def test_get_or_create_affiliate_generates_referral_code(db_session):
    affiliate = get_or_create_affiliate(
        db_session,
        affiliate_id="AFF900",
        name="Priya Patel",
        email="priya@example.com",
    )
    assert affiliate.referral_code.startswith("PRIYA")
    again = get_or_create_affiliate(
        db_session,
        affiliate_id="AFF900",
        name="Someone Else",
        email="else@example.com",
    )
    assert again.referral_code == affiliate.referral_code
    assert again.name == "Priya Patel"
