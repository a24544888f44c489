"""generated questions and answer attempts

Revision ID: base_0001
Revises:
Create Date: 2026-09-28 10:12:41.118203

"""

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision = "base_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "generated_questions",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("topic", sa.String(length=32), nullable=False),
        sa.Column("type", sa.String(length=16), nullable=False),
        sa.Column("difficulty", sa.Float(), nullable=False),
        sa.Column("question_text", sa.Text(), nullable=False),
        sa.Column("answer", sa.Float(), nullable=False),
        sa.Column("explanation", sa.Text(), nullable=False),
        sa.Column("quantum_state", sa.JSON(), nullable=False),
    )
    op.create_index("ix_generated_questions_topic", "generated_questions", ["topic"])

    op.create_table(
        "question_attempts",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("question_id", sa.String(length=64), nullable=False),
        sa.Column("user_answer", sa.Float(), nullable=False),
        sa.Column("is_correct", sa.Boolean(), nullable=False),
        sa.Column("time_taken_ms", sa.Float(), nullable=False),
    )
    op.create_index("ix_question_attempts_created_at", "question_attempts", ["created_at"])
    op.create_index("ix_question_attempts_question_id", "question_attempts", ["question_id"])


def downgrade() -> None:
    op.drop_index("ix_question_attempts_question_id", table_name="question_attempts")
    op.drop_index("ix_question_attempts_created_at", table_name="question_attempts")
    op.drop_table("question_attempts")
    op.drop_index("ix_generated_questions_topic", table_name="generated_questions")
    op.drop_table("generated_questions")
