# Best-effort storage for generated questions and answer attempts.
# Neither write is allowed to hold up or change the quiz flow.

from __future__ import annotations

import logging
from typing import Optional

from db import SessionLocal
from generator import Question
from models import GeneratedQuestion, QuestionAttempt

logger = logging.getLogger("quantum-tutor.persistence")


def save_question(question: Question) -> str:
    """Store a generated question and return its database id. Errors propagate."""
    with SessionLocal() as db:
        row = GeneratedQuestion(
            topic=question.topic,
            type=question.type,
            difficulty=question.difficulty,
            question_text=question.question_text,
            answer=question.answer,
            explanation=question.explanation,
            quantum_state=list(question.quantum_state),
        )
        db.add(row)
        db.commit()
        db.refresh(row)
        return str(row.id)


def record_attempt(
    question_id: str,
    user_answer: float,
    is_correct: bool,
    time_taken_ms: float,
    session_id: Optional[str] = None,
) -> Optional[int]:
    try:
        with SessionLocal() as db:
            attempt = QuestionAttempt(
                question_id=question_id,
                user_answer=user_answer,
                is_correct=is_correct,
                time_taken_ms=time_taken_ms,
                session_id=session_id,
            )
            db.add(attempt)
            db.commit()
            db.refresh(attempt)
            return attempt.id
    except Exception:
        logger.warning("could not record attempt for question %s", question_id, exc_info=True)
        return None
