"""baseline: orgs

Revision ID: 20261012090000
Revises:
Create Date: 2026-10-12
"""

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = "20261012090000"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "orgs",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_orgs_name", "orgs", ["name"], unique=True)


def downgrade() -> None:
    # Downgrading baseline is intentionally a no-op to avoid accidental data loss.
    # If you need destructive rollback, create explicit downgrade migrations.
    pass
