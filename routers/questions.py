from __future__ import annotations

import re
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from db import SessionLocal
from models import GeneratedQuestion
from schemas.questions import StoredQuestionOut

router = APIRouter(prefix="/questions", tags=["questions"])

# database ids are ASCII digits that fit a signed 64-bit integer
_DB_ID_RE = re.compile(r"^[0-9]{1,18}$")


def _to_out(q: GeneratedQuestion) -> StoredQuestionOut:
    return StoredQuestionOut(
        id=str(q.id),
        type=q.type,
        topic=q.topic,
        difficulty=q.difficulty,
        question_text=q.question_text,
        explanation=q.explanation,
        quantum_state=q.quantum_state or [],
        created_at=q.created_at,
    )


@router.get("", response_model=List[StoredQuestionOut])
def list_questions(
    topic: Optional[str] = None,
    limit: int = Query(default=20, ge=1, le=100),
):
    with SessionLocal() as db:
        query = db.query(GeneratedQuestion)
        if topic:
            query = query.filter(GeneratedQuestion.topic == topic)
        rows = query.order_by(GeneratedQuestion.id.desc()).limit(limit).all()
        return [_to_out(q) for q in rows]


@router.get("/{qid}", response_model=StoredQuestionOut)
def get_question_detail(qid: str):
    # locally generated ids never reached the store
    if not _DB_ID_RE.fullmatch(qid):
        raise HTTPException(status_code=404, detail="question not found")
    with SessionLocal() as db:
        q = db.get(GeneratedQuestion, int(qid))
        if not q:
            raise HTTPException(status_code=404, detail="question not found")
        return _to_out(q)
