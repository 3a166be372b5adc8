"""SQLAlchemy table definitions for the Q&A board.

These Core tables back the Postgres repositories and match the schema
created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
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
# USERS
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", String(255), nullable=False),
    Column("first_name", String(100), nullable=True),
    Column("last_name", String(100), nullable=True),
    Column("role", String(20), nullable=False, server_default="user"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# QUESTIONS
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("author_id", UUID, nullable=False),
    Column("views", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())

# ============================================================================
# ANSWERS
# Comments and the voter ledger are embedded (JSONB). There is no foreign key
# to questions: deleting a question removes its answers in the repository.
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("question_id", UUID, nullable=False),
    Column("author_id", UUID, nullable=False),
    Column("text", Text, nullable=False),
    Column("votes", Integer, nullable=False, server_default="0"),
    Column("voters", JSONB, nullable=False, server_default="{}"),  # user id -> up|down
    Column("is_accepted", Boolean, nullable=False, server_default="false"),
    Column("comments", JSONB, nullable=False, server_default="[]"),
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)

# ============================================================================
# NOTIFICATIONS
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("user_id", UUID, nullable=False),
    Column("type", String(20), nullable=False),  # answer | comment | mention
    Column("message", String(500), nullable=False),
    Column("link", Text, nullable=True),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_notifications_user_created",
    notifications_table.c.user_id,
    notifications_table.c.created_at.desc(),
)
