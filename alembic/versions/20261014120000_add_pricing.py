"""add pricing

Revision ID: 20261014120000
Revises: 20261012090000
Create Date: 2026-10-14
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "20261014120000"
down_revision = "20261012090000"
branch_labels = None
depends_on = None


def _table_exists(table_name: str) -> bool:
    """Idempotency guard for databases restored from a dump that already has the table."""
    return table_name in sa.inspect(op.get_bind()).get_table_names()


def upgrade() -> None:
    if _table_exists("pricing"):
        return
    op.create_table(
        "pricing",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("rupees", sa.Float(), nullable=False),
        sa.Column("credits", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )


def downgrade() -> None:
    if _table_exists("pricing"):
        op.drop_table("pricing")
