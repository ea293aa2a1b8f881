from sqlalchemy import Column, Enum, ForeignKey, Index, Numeric, String, Text

from app.core.db import Base
from app.models.affiliates import _enum_values
from app.models.enums import WithdrawalStatusEnum
from app.models.mixins import TimestampMixin


class WithdrawalRequest(TimestampMixin, Base):
    __tablename__ = "withdrawal_requests"
    __table_args__ = (
        Index("ix_withdrawal_requests_affiliate", "affiliate_id"),
        Index("ix_withdrawal_requests_status", "status"),
    )

    id = Column(String, primary_key=True)
    affiliate_id = Column(String, ForeignKey("affiliates.id", ondelete="RESTRICT"), nullable=False)
    # Snapshot of the affiliate's name when the request was made; not
    # kept in sync with later renames.
    affiliate_name = Column(String, nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    status = Column(
        Enum(
            WithdrawalStatusEnum,
            name="withdrawal_status_enum",
            native_enum=False,
            validate_strings=True,
            values_callable=_enum_values,
        ),
        nullable=False,
        default=WithdrawalStatusEnum.PENDING,
    )
    payment_proof_url = Column(Text, nullable=True)
