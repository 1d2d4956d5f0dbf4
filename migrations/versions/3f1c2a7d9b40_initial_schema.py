"""initial_schema

Create the forum schema:
- Users (mirrored from the identity service, referenced by @mentions)
- Discussions (aggregate root; the reply tree is embedded as JSONB)

Revision ID: 3f1c2a7d9b40
Revises:
Create Date: 2026-10-19 10:12:04.518233

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a7d9b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("username", sa.String(50), nullable=False),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username", name="uq_users_username"),
    )
    op.create_index("idx_users_username", "users", ["username"])

    # ========================================================================
    # DISCUSSIONS table (replies embedded)
    # ========================================================================
    op.create_table(
        "discussions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("question_id", sa.Integer(), nullable=True),  # NULL = general forum
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "category", sa.String(20), nullable=False, server_default="General"
        ),
        sa.Column("approach", sa.String(20), nullable=True),
        sa.Column(
            "tags",
            postgresql.ARRAY(sa.String(20)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "likes", postgresql.ARRAY(sa.UUID()), nullable=False, server_default="{}"
        ),
        sa.Column(
            "dislikes",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "mentions",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "replies",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("is_pinned", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("views >= 0", name="ck_discussions_views_non_negative"),
        sa.CheckConstraint(
            "(category = 'Solutions') = (approach IS NOT NULL)",
            name="ck_discussions_approach_iff_solutions",
        ),
    )
    op.create_index(
        "idx_discussions_question_created",
        "discussions",
        ["question_id", sa.text("created_at DESC")],
    )
    op.create_index("idx_discussions_author_id", "discussions", ["author_id"])
    op.create_index(
        "idx_discussions_category_created",
        "discussions",
        ["category", sa.text("created_at DESC")],
    )
    op.create_index(
        "idx_discussions_created_at", "discussions", [sa.text("created_at DESC")]
    )
    op.create_index("idx_discussions_views", "discussions", [sa.text("views DESC")])

    # Discussions keep updated_at themselves; a view must not touch it
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER update_users_updated_at
        BEFORE UPDATE ON users
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP TRIGGER IF EXISTS update_users_updated_at ON users")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    op.drop_table("discussions")
    op.drop_table("users")
