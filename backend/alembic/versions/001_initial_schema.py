"""Initial schema — users, decorations, covers, notebooks.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(100), nullable=False),
    )

    op.create_table(
        "decorations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("value", sa.String(500), nullable=False),
    )

    op.create_table(
        "covers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column(
            "decoration_id", sa.Integer,
            sa.ForeignKey("decorations.id"), nullable=False,
        ),
        sa.UniqueConstraint("decoration_id", name="uq_covers_decoration_id"),
    )

    op.create_table(
        "notebooks",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "user_id", sa.Integer, sa.ForeignKey("users.id"), nullable=False,
        ),
        sa.Column(
            "cover_id", sa.Integer, sa.ForeignKey("covers.id"), nullable=False,
        ),
        sa.UniqueConstraint("cover_id", name="uq_notebooks_cover_id"),
    )
    op.create_index("ix_notebooks_user_id", "notebooks", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_notebooks_user_id", table_name="notebooks")
    op.drop_table("notebooks")
    op.drop_table("covers")
    op.drop_table("decorations")
    op.drop_table("users")
