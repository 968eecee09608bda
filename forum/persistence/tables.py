"""SQLAlchemy table definitions for the forum.

They match the schema defined in Alembic migrations. Collection fields
(tags, answer lists, voter sets) are PostgreSQL arrays.
"""

from sqlalchemy import (
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("clerk_id", String(255), nullable=False, unique=True),
    Column("name", String(255), nullable=False),
    Column("username", String(255), nullable=False, unique=True),
    Column("picture", Text, nullable=True),
    Column("reputation", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False, server_default=""),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("answer_ids", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_questions_author_id", questions_table.c.author_id)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("content", Text, nullable=False),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("upvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("downvotes", ARRAY(UUID), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_author_id", answers_table.c.author_id)
Index("idx_answers_created_at", answers_table.c.created_at)

# ============================================================================
# INTERACTIONS TABLE (append-only log)
# ============================================================================
interactions_table = Table(
    "interactions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("action", String(50), nullable=False),
    Column("question_id", UUID, nullable=True),
    Column("answer_id", UUID, nullable=True),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_interactions_user_id", interactions_table.c.user_id)
Index("idx_interactions_answer_id", interactions_table.c.answer_id)
