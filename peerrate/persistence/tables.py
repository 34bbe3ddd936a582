"""SQLAlchemy table definitions for peerrate.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import Column, Index, Integer, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("nickname", String(255), nullable=False, unique=True),
    Column("first_name", String(255), nullable=False),
    Column("last_name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),
    Column("information", Text, nullable=False, server_default=""),
    Column("role", String(50), nullable=False, server_default="user"),
    Column("rating", Integer, nullable=False, server_default="0"),
    # Encoded vote ledger, see peerrate.domain.service.ledger_codec
    Column("rating_list", Text, nullable=False, server_default=""),
    # Bumped by every rating write; guards concurrent ledger updates
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    Column("voted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_users_rating", users_table.c.rating.desc(), users_table.c.nickname)
