"""create affiliate tables

Revision ID: a1f3c9d2e7b4
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


revision = "a1f3c9d2e7b4"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "affiliates",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("referral_code", sa.String(), nullable=False),
        sa.Column("plan", sa.String(length=7), nullable=False, server_default="Basic"),
        sa.Column("total_revenue", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("total_commission", sa.Numeric(10, 2), nullable=False, server_default="0"),
        sa.Column("recurring_customers", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("one_time_customers", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.UniqueConstraint("referral_code", name="uq_affiliates_referral_code"),
    )

    op.create_table(
        "referred_customers",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("affiliate_id", sa.String(), nullable=False),
        sa.Column("order_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("order_type", sa.String(length=9), nullable=False),
        sa.Column("commission_earned", sa.Numeric(10, 2), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["affiliate_id"], ["affiliates.id"], ondelete="RESTRICT"),
    )
    op.create_index(
        "ix_referred_customers_affiliate_created",
        "referred_customers",
        ["affiliate_id", "created_at"],
    )

    op.create_table(
        "withdrawal_requests",
        sa.Column("id", sa.String(), primary_key=True, nullable=False),
        sa.Column("affiliate_id", sa.String(), nullable=False),
        sa.Column("affiliate_name", sa.String(), nullable=False),
        sa.Column("amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("status", sa.String(length=8), nullable=False, server_default="Pending"),
        sa.Column("payment_proof_url", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["affiliate_id"], ["affiliates.id"], ondelete="RESTRICT"),
    )
    op.create_index("ix_withdrawal_requests_affiliate", "withdrawal_requests", ["affiliate_id"])
    op.create_index("ix_withdrawal_requests_status", "withdrawal_requests", ["status"])

    op.create_table(
        "commission_settings",
        sa.Column("id", sa.Integer(), primary_key=True, nullable=False),
        sa.Column("recurring_percentage", sa.Numeric(5, 2), nullable=False, server_default="10"),
        sa.Column("one_time_percentage", sa.Numeric(5, 2), nullable=False, server_default="5"),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )

    # Batch mode so the defaults can also be dropped on SQLite.
    with op.batch_alter_table("affiliates") as batch_op:
        batch_op.alter_column("plan", server_default=None)
        batch_op.alter_column("total_revenue", server_default=None)
        batch_op.alter_column("total_commission", server_default=None)
        batch_op.alter_column("recurring_customers", server_default=None)
        batch_op.alter_column("one_time_customers", server_default=None)
    with op.batch_alter_table("withdrawal_requests") as batch_op:
        batch_op.alter_column("status", server_default=None)
    with op.batch_alter_table("commission_settings") as batch_op:
        batch_op.alter_column("recurring_percentage", server_default=None)
        batch_op.alter_column("one_time_percentage", server_default=None)


def downgrade():
    op.drop_table("commission_settings")
    op.drop_index("ix_withdrawal_requests_status", table_name="withdrawal_requests")
    op.drop_index("ix_withdrawal_requests_affiliate", table_name="withdrawal_requests")
    op.drop_table("withdrawal_requests")
    op.drop_index("ix_referred_customers_affiliate_created", table_name="referred_customers")
    op.drop_table("referred_customers")
    op.drop_table("affiliates")
