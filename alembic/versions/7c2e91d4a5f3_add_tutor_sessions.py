"""add tutor_sessions and session_id on attempts

Revision ID: 7c2e91d4a5f3
Revises: base_0001
Create Date: 2026-10-06 18:47:03.552914

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "7c2e91d4a5f3"
down_revision: Union[str, Sequence[str], None] = "base_0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "tutor_sessions",
        sa.Column("id", sa.String(length=64), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False),
        sa.Column("state", sa.JSON(), nullable=False),
        sa.Column("current_question", sa.JSON(), nullable=True),
    )

    op.add_column("question_attempts", sa.Column("session_id", sa.String(length=64), nullable=True))
    op.create_index("ix_question_attempts_session_id", "question_attempts", ["session_id"])


def downgrade() -> None:
    op.drop_index("ix_question_attempts_session_id", table_name="question_attempts")
    op.drop_column("question_attempts", "session_id")
    op.drop_table("tutor_sessions")
