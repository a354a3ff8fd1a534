"""SQLAlchemy table definitions.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CHAR,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# INVITES TABLE
# ============================================================================
invites_table = Table(
    "invites",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    # HMAC-SHA256 hex of the normalized code, never the code itself
    Column("code_hash", CHAR(64), nullable=False, unique=True),
    Column("meta", JSONB, nullable=False, server_default=text("'{}'::jsonb")),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column("used_at", TIMESTAMP(timezone=True), nullable=True),
    Column("used_by", UUID(as_uuid=True), nullable=True),
    Column("created_by", UUID(as_uuid=True), nullable=True),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint(
        "(used_at IS NULL) = (used_by IS NULL)",
        name="ck_invites_used_pair",
    ),
)

Index("idx_invites_created_at", invites_table.c.created_at.desc())
Index("idx_invites_used_at", invites_table.c.used_at)

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", String(255), nullable=False, unique=True),  # Lower-cased
    Column(
        "invite_id",
        UUID(as_uuid=True),
        ForeignKey("invites.id", ondelete="RESTRICT"),
        nullable=False,
    ),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)

# ============================================================================
# CREDENTIALS TABLE
# ============================================================================
credentials_table = Table(
    "credentials",
    metadata,
    Column(
        "account_id",
        UUID(as_uuid=True),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column("password_hash", Text, nullable=False),  # Argon2 PHC string
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
)
