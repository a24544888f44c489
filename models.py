from __future__ import annotations

from datetime import UTC, datetime

import sqlalchemy as sa
from sqlalchemy import JSON, Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from db import Base


def _now() -> datetime:
    return datetime.now(UTC)


class GeneratedQuestion(Base):
    __tablename__ = "generated_questions"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)
    topic: Mapped[str] = mapped_column(String(32), index=True)
    type: Mapped[str] = mapped_column(String(16), default="numeric")
    difficulty: Mapped[float] = mapped_column(Float)
    question_text: Mapped[str] = mapped_column(Text)
    answer: Mapped[float] = mapped_column(Float)
    explanation: Mapped[str] = mapped_column(Text)
    quantum_state: Mapped[list] = mapped_column(JSON)  # decorative amplitudes


class QuestionAttempt(Base):
    __tablename__ = "question_attempts"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, index=True
    )
    # question ids may be local (never persisted), so no foreign key here
    question_id: Mapped[str] = mapped_column(String(64), index=True)
    user_answer: Mapped[float] = mapped_column(Float)
    is_correct: Mapped[bool] = mapped_column(Boolean)
    time_taken_ms: Mapped[float] = mapped_column(Float)
    session_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)


class TutorSession(Base):
    __tablename__ = "tutor_sessions"
    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_now)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, onupdate=_now
    )
    active: Mapped[bool] = mapped_column(sa.Boolean, default=True)
    state: Mapped[dict] = mapped_column(JSON)  # serialized mastery.UserState
    current_question: Mapped[dict | None] = mapped_column(JSON, nullable=True)
