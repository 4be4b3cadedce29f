"""Create customers table.

Revision ID: 001
Revises:
Create Date: 2026-01-15

Tables: customers
"""

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import UUID

revision = "001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create the customers table and its indexes."""
    op.create_table(
        "customers",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(20)),
        sa.Column("address", sa.String(500)),
        sa.Column("is_deleted", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("created_by", sa.String(255)),
        sa.Column("updated_by", sa.String(255)),
    )
    op.create_index("ix_customers_created_at", "customers", ["created_at"])
    # Deleted rows keep their email; only active rows must be unique
    op.execute(
        "CREATE UNIQUE INDEX ix_customers_email_active "
        "ON customers (email) WHERE is_deleted = false"
    )


def downgrade() -> None:
    """Drop the customers table."""
    op.execute("DROP INDEX IF EXISTS ix_customers_email_active")
    op.drop_index("ix_customers_created_at", table_name="customers")
    op.drop_table("customers")
