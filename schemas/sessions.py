# schemas/sessions.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from mastery import UserState
from schemas.questions import QuestionOut

# ---------- Session ----------


class SessionOut(BaseModel):
    session_id: str
    active: bool
    state: UserState
    accuracy: int  # percent, 0 before the first answer
    current_question: Optional[QuestionOut] = None


# ---------- Answer ----------


class AnswerRequest(BaseModel):
    answer: str
    time_taken_ms: float


class AnswerResponse(BaseModel):
    ok: bool
    correct: bool
    feedback: str
    expected: Optional[str] = None
    explanation: Optional[str] = None
    question_id: Optional[str] = None
    state: UserState
    accuracy: int


# ---------- Stateless update ----------


class UpdateRequest(BaseModel):
    state: UserState
    is_correct: bool
    time_taken_ms: float
