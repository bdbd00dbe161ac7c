"""authority_items

Per-menu authority codes with their allowed action types.

Revision ID: authority_items
Revises: initial_tables
Create Date: 2026-10-20

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "authority_items"
down_revision: Union[str, Sequence[str], None] = "initial_tables"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the authority_items table."""
    op.create_table(
        "authority_items",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("menu_id", sa.Integer(), nullable=False),
        sa.Column("authority", sa.String(100), nullable=False),
        sa.Column("types", sa.JSON(), nullable=False),
        sa.Column("display_order", sa.Integer(), server_default=sa.text("0"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["menu_id"], ["menus.id"], ondelete="CASCADE"),
    )
    op.create_index("ix_authority_items_menu_id", "authority_items", ["menu_id"])


def downgrade() -> None:
    """Drop the authority_items table."""
    op.drop_index("ix_authority_items_menu_id", table_name="authority_items")
    op.drop_table("authority_items")
