"""Initial schema: ledger state, shares, expenses, allocations, tenants, audit log.

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-17 10:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.current_timestamp(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.current_timestamp(),
        ),
    ]


def upgrade() -> None:
    # Singleton row holding contract owner and block height
    op.create_table(
        "ledger_state",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("contract_owner", sa.String(length=128), nullable=False),
        sa.Column("block_height", sa.BigInteger(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "ownership_shares",
        sa.Column("property_id", sa.Integer(), nullable=False),
        sa.Column("owner", sa.String(length=128), nullable=False),
        sa.Column("percentage", sa.Integer(), nullable=False),
        sa.Column("last_updated", sa.BigInteger(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("property_id", "owner"),
        sa.CheckConstraint(
            "percentage >= 0 AND percentage <= 100", name="ck_share_percentage"
        ),
    )

    op.create_table(
        "expenses",
        sa.Column("property_id", sa.Integer(), nullable=False),
        sa.Column("expense_id", sa.Integer(), nullable=False),
        sa.Column("description", sa.String(length=256), nullable=False),
        sa.Column("amount", sa.BigInteger(), nullable=False),
        sa.Column("date", sa.BigInteger(), nullable=False),
        sa.Column("category", sa.String(length=64), nullable=False),
        sa.Column("paid_by", sa.String(length=128), nullable=False),
        sa.Column("distributed", sa.Boolean(), nullable=False, server_default="0"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("property_id", "expense_id"),
    )

    op.create_table(
        "payment_allocations",
        sa.Column("property_id", sa.Integer(), nullable=False),
        sa.Column("expense_id", sa.Integer(), nullable=False),
        sa.Column("owner", sa.String(length=128), nullable=False),
        sa.Column("amount_due", sa.BigInteger(), nullable=False),
        sa.Column("paid", sa.Boolean(), nullable=False, server_default="0"),
        sa.Column("payment_date", sa.BigInteger(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("property_id", "expense_id", "owner"),
    )

    op.create_table(
        "tenants",
        sa.Column("tenant_id", sa.Integer(), nullable=False),
        sa.Column("identity", sa.String(length=128), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("contact", sa.String(length=100), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False, server_default="5"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("tenant_id"),
    )
    op.create_index("ix_tenants_identity", "tenants", ["identity"])

    op.create_table(
        "audit_logs",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("entity_type", sa.String(length=50), nullable=False),
        sa.Column("entity_key", sa.String(length=300), nullable=False),
        sa.Column("action", sa.String(length=50), nullable=False),
        sa.Column("actor", sa.String(length=128), nullable=False),
        sa.Column("block_height", sa.BigInteger(), nullable=False),
        sa.Column("changes", sa.JSON(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("audit_logs")
    op.drop_index("ix_tenants_identity", table_name="tenants")
    op.drop_table("tenants")
    op.drop_table("payment_allocations")
    op.drop_table("expenses")
    op.drop_table("ownership_shares")
    op.drop_table("ledger_state")
