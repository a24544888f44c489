# routers/sessions.py
# One quiz round per call pair: POST .../questions, then POST .../answers.
# Each session keeps its own UserState row; nothing is shared across sessions.

from __future__ import annotations

import logging
import random
import uuid
from typing import Any, Dict

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException
from sqlalchemy.orm import Session

from db import SessionLocal
from deps.rng import get_rng
from generator import Question, generate_question, next_difficulty
from grading import grade_answer
from mastery import UserState, accuracy_percent, update_state
from models import TutorSession
from persistence import record_attempt, save_question
from schemas.questions import QuestionOut
from schemas.sessions import AnswerRequest, AnswerResponse, SessionOut

logger = logging.getLogger("quantum-tutor.sessions")

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _load(db: Session, session_id: str) -> TutorSession:
    row = db.get(TutorSession, session_id)
    if not row:
        raise HTTPException(status_code=404, detail="Session not found")
    return row


def _session_out(row: TutorSession) -> Dict[str, Any]:
    state = UserState.model_validate(row.state)
    current = row.current_question
    return {
        "session_id": row.id,
        "active": row.active,
        "state": state,
        "accuracy": accuracy_percent(state),
        "current_question": QuestionOut.model_validate(current) if current else None,
    }


@router.post("", response_model=SessionOut)
def start_session():
    with SessionLocal() as db:
        row = TutorSession(
            id=uuid.uuid4().hex,
            active=True,
            state=UserState().model_dump(),
            current_question=None,
        )
        db.add(row)
        db.commit()
        db.refresh(row)
        logger.info("session %s started", row.id)
        return _session_out(row)


@router.get("/{session_id}", response_model=SessionOut)
def get_session(session_id: str):
    with SessionLocal() as db:
        return _session_out(_load(db, session_id))


@router.post("/{session_id}/end", response_model=SessionOut)
def end_session(session_id: str):
    with SessionLocal() as db:
        row = _load(db, session_id)
        row.active = False
        row.current_question = None
        db.commit()
        db.refresh(row)
        logger.info("session %s ended", session_id)
        return _session_out(row)


@router.post("/{session_id}/questions", response_model=QuestionOut)
def next_question(session_id: str, rng: random.Random = Depends(get_rng)):
    with SessionLocal() as db:
        row = _load(db, session_id)
        if not row.active:
            raise HTTPException(status_code=409, detail="Session has ended")
        state = UserState.model_validate(row.state)

    # no session is held while the question is stored; save_question takes its own
    difficulty = next_difficulty(state.mastery_level, rng)
    question = generate_question(difficulty, state.weak_topics, rng=rng, store=save_question)

    with SessionLocal() as db:
        row = _load(db, session_id)
        if not row.active:
            raise HTTPException(status_code=409, detail="Session has ended")
        # an unanswered question is simply replaced
        row.current_question = question.model_dump()
        db.commit()

    logger.info(
        "session %s: question %s (%s, difficulty %s)",
        session_id,
        question.id,
        question.topic,
        question.difficulty,
    )
    return QuestionOut.model_validate(question.model_dump())


@router.post("/{session_id}/answers", response_model=AnswerResponse)
def submit_answer(session_id: str, req: AnswerRequest, background_tasks: BackgroundTasks):
    with SessionLocal() as db:
        row = _load(db, session_id)
        if not row.current_question:
            raise HTTPException(status_code=409, detail="No question pending")

        question = Question.model_validate(row.current_question)
        state = UserState.model_validate(row.state)
        result = grade_answer(req.answer, question.answer)

        if not result["ok"]:
            # malformed input: the question stays pending and the state is untouched
            return {
                "ok": False,
                "correct": False,
                "feedback": result["feedback"],
                "question_id": question.id,
                "state": state,
                "accuracy": accuracy_percent(state),
            }

        new_state = update_state(state, result["correct"], req.time_taken_ms)
        row.state = new_state.model_dump()
        row.current_question = None
        db.commit()

    background_tasks.add_task(
        record_attempt,
        question.id,
        result["value"],
        result["correct"],
        req.time_taken_ms,
        session_id,
    )

    return {
        "ok": True,
        "correct": result["correct"],
        "feedback": result["feedback"],
        "expected": result["expected_str"],
        "explanation": question.explanation,
        "question_id": question.id,
        "state": new_state,
        "accuracy": accuracy_percent(new_state),
    }
