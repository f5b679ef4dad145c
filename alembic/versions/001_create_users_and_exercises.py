"""Create users and exercises tables

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates `users` (unique, non-empty username) and `exercises`
       (entries keyed by user_id, indexed on user_id + date).
Rollback: downgrade() drops both tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("length(username) > 0", name="ck_users_username_not_empty"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    # No foreign key to users: ownership is checked by the handler at write time
    op.create_table(
        "exercises",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("user_id", sa.String(36), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "length(description) > 0", name="ck_exercises_description_not_empty"
        ),
    )
    op.create_index("idx_exercises_user_id_date", "exercises", ["user_id", "date"])


def downgrade() -> None:
    op.drop_index("idx_exercises_user_id_date", table_name="exercises")
    op.drop_table("exercises")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
