"""Seed sample customers.

Revision ID: 002
Revises: 001
Create Date: 2026-01-15
"""

import uuid
from datetime import UTC, datetime

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects.postgresql import UUID

revision = "002"
down_revision = "001"
branch_labels = None
depends_on = None

SEED_CUSTOMERS = [
    ("John Smith", "john.smith@email.com", "+1-555-0101", "123 Main St, New York, NY 10001, USA"),
    ("Emma Johnson", "emma.j@email.com", "+1-555-0102", "456 Oak Ave, Los Angeles, CA 90001, USA"),
    ("Michael Williams", "m.williams@email.com", "+1-555-0103", "789 Pine Rd, Chicago, IL 60601, USA"),
    ("Sophia Brown", "sophia.brown@email.com", "+1-555-0104", "321 Elm St, Houston, TX 77001, USA"),
    ("James Davis", "james.davis@email.com", "+1-555-0105", "654 Maple Dr, Phoenix, AZ 85001, USA"),
    ("Olivia Miller", "olivia.m@email.com", "+1-555-0106", "987 Cedar Ln, Philadelphia, PA 19101, USA"),
    ("William Wilson", "will.wilson@email.com", "+1-555-0107", "147 Birch Blvd, San Antonio, TX 78201, USA"),
    ("Ava Moore", "ava.moore@email.com", "+1-555-0108", "258 Spruce Way, San Diego, CA 92101, USA"),
    ("Robert Taylor", "rob.taylor@email.com", "+1-555-0109", "369 Willow Ct, Dallas, TX 75201, USA"),
    ("Isabella Anderson", "isabella.a@email.com", "+1-555-0110", "741 Ash Ter, San Jose, CA 95101, USA"),
]  # fmt: skip

customers = sa.table(
    "customers",
    sa.column("id", UUID(as_uuid=True)),
    sa.column("name", sa.String),
    sa.column("email", sa.String),
    sa.column("phone", sa.String),
    sa.column("address", sa.String),
    sa.column("is_deleted", sa.Boolean),
    sa.column("created_at", sa.TIMESTAMP(timezone=True)),
    sa.column("updated_at", sa.TIMESTAMP(timezone=True)),
)


def upgrade() -> None:
    """Insert ten sample customers."""
    now = datetime.now(UTC)
    op.bulk_insert(
        customers,
        [
            {
                "id": uuid.uuid4(),
                "name": name,
                "email": email,
                "phone": phone,
                "address": address,
                "is_deleted": False,
                "created_at": now,
                "updated_at": now,
            }
            for name, email, phone, address in SEED_CUSTOMERS
        ],
    )


def downgrade() -> None:
    """Remove the sample customers."""
    emails = [email for _, email, _, _ in SEED_CUSTOMERS]
    op.execute(customers.delete().where(customers.c.email.in_(emails)))
