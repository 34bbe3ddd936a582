"""create_users

Create the users table: accounts, profiles, the reputation rating and the
encoded vote ledger, plus the version counter guarding ledger writes.

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 10:12:04.118532

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    op.create_table(
        "users",
        sa.Column(
            "id",
            postgresql.UUID(),
            primary_key=True,
            server_default=sa.text("uuid_generate_v4()"),
        ),
        sa.Column("nickname", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=False),
        sa.Column("information", sa.Text(), nullable=False, server_default=""),
        sa.Column("role", sa.String(50), nullable=False, server_default="user"),
        sa.Column("rating", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("rating_list", sa.Text(), nullable=False, server_default=""),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("deleted_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("voted_at", postgresql.TIMESTAMP(timezone=True), nullable=True),
        sa.UniqueConstraint("nickname", name="users_nickname_key"),
        sa.UniqueConstraint("email", name="users_email_key"),
        sa.CheckConstraint("role IN ('user', 'admin')", name="users_role_check"),
    )

    # Leaderboard ordering: rating desc, nickname asc
    op.create_index(
        "idx_users_rating",
        "users",
        [sa.text("rating DESC"), "nickname"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_users_rating", table_name="users")
    op.drop_table("users")
