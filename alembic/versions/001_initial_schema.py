"""Initial schema - customers and credits.

Revision ID: 001_initial_schema
Revises: None
Create Date: 2026-10-17

Creates:
- customers: unique cpf and email, embedded address
- credits: unique credit_code, owned by a customer (ON DELETE CASCADE)
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_initial_schema"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CREDIT_STATUS = sa.Enum("IN_PROGRESS", "APPROVED", "REJECTED", name="credit_status")


def upgrade() -> None:
    """Create customers and credits tables."""

    # ==========================================================================
    # 1. customers
    # ==========================================================================
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("first_name", sa.String(100), nullable=False),
        sa.Column("last_name", sa.String(100), nullable=False),
        sa.Column("cpf", sa.String(14), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("income", sa.Numeric(15, 2), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("zip_code", sa.String(20), nullable=False),
        sa.Column("street", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_customers"),
        sa.UniqueConstraint("cpf", name="uq_customers_cpf"),
        sa.UniqueConstraint("email", name="uq_customers_email"),
    )

    # ==========================================================================
    # 2. credits
    # ==========================================================================
    op.create_table(
        "credits",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("credit_code", sa.Uuid(), nullable=False),
        sa.Column("credit_value", sa.Numeric(15, 2), nullable=False),
        sa.Column("day_first_installment", sa.Date(), nullable=False),
        sa.Column("number_of_installments", sa.Integer(), nullable=False),
        sa.Column("status", CREDIT_STATUS, nullable=False),
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_credits"),
        sa.ForeignKeyConstraint(
            ["customer_id"],
            ["customers.id"],
            name="fk_credits_customer_id_customers",
            ondelete="CASCADE",
        ),
    )
    op.create_index("ix_credits_credit_code", "credits", ["credit_code"], unique=True)
    op.create_index("ix_credits_customer_id", "credits", ["customer_id"])


def downgrade() -> None:
    """Drop credits and customers tables."""
    op.drop_index("ix_credits_customer_id", table_name="credits")
    op.drop_index("ix_credits_credit_code", table_name="credits")
    op.drop_table("credits")
    op.drop_table("customers")
    CREDIT_STATUS.drop(op.get_bind(), checkfirst=True)
