from sqlalchemy import (
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
)

from app.core.db import Base
from app.models.enums import AffiliatePlanEnum, OrderTypeEnum
from app.models.mixins import CreatedAtMixin


def _enum_values(enum_cls) -> list[str]:
    return [member.value for member in enum_cls]


class Affiliate(CreatedAtMixin, Base):
    __tablename__ = "affiliates"
    __table_args__ = (
        UniqueConstraint("referral_code", name="uq_affiliates_referral_code"),
    )

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    referral_code = Column(String, nullable=False)
    plan = Column(
        Enum(
            AffiliatePlanEnum,
            name="affiliate_plan_enum",
            native_enum=False,
            validate_strings=True,
            values_callable=_enum_values,
        ),
        nullable=False,
        default=AffiliatePlanEnum.BASIC,
    )
    # Running aggregates, only moved forward by order confirmation.
    total_revenue = Column(Numeric(10, 2), nullable=False, default=0)
    total_commission = Column(Numeric(10, 2), nullable=False, default=0)
    recurring_customers = Column(Integer, nullable=False, default=0)
    one_time_customers = Column(Integer, nullable=False, default=0)


class ReferredCustomer(CreatedAtMixin, Base):
    __tablename__ = "referred_customers"
    __table_args__ = (
        Index("ix_referred_customers_affiliate_created", "affiliate_id", "created_at"),
    )

    # The checkout user id doubles as customer and order id.
    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    affiliate_id = Column(String, ForeignKey("affiliates.id", ondelete="RESTRICT"), nullable=False)
    order_amount = Column(Numeric(10, 2), nullable=False)
    order_type = Column(
        Enum(
            OrderTypeEnum,
            name="order_type_enum",
            native_enum=False,
            validate_strings=True,
            values_callable=_enum_values,
        ),
        nullable=False,
    )
    commission_earned = Column(Numeric(10, 2), nullable=False)
