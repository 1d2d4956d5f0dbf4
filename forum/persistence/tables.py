"""SQLAlchemy Core tables.

Kept in step with migrations/versions by hand; alembic autogenerate
compares against this metadata.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE (mirrored from the identity service)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(50), nullable=False, unique=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_username", users_table.c.username)

# ============================================================================
# DISCUSSIONS TABLE (aggregate root with embedded reply tree)
# ============================================================================
discussions_table = Table(
    "discussions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("question_id", Integer, nullable=True),  # NULL for general forum
    # No foreign key: users are mirrored lazily and may be missing
    Column("author_id", UUID, nullable=False),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("category", String(20), nullable=False, server_default="General"),
    Column("approach", String(20), nullable=True),
    Column("tags", ARRAY(String(20)), nullable=False, server_default="{}"),
    Column("likes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("dislikes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("mentions", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("replies", JSONB, nullable=False, server_default="[]"),  # Reply tree
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("views >= 0", name="ck_discussions_views_non_negative"),
    CheckConstraint(
        "(category = 'Solutions') = (approach IS NOT NULL)",
        name="ck_discussions_approach_iff_solutions",
    ),
)

Index(
    "idx_discussions_question_created",
    discussions_table.c.question_id,
    discussions_table.c.created_at.desc(),
)
Index("idx_discussions_author_id", discussions_table.c.author_id)
Index(
    "idx_discussions_category_created",
    discussions_table.c.category,
    discussions_table.c.created_at.desc(),
)
Index("idx_discussions_created_at", discussions_table.c.created_at.desc())
Index("idx_discussions_views", discussions_table.c.views.desc())
