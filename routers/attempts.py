# routers/attempts.py

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from db import SessionLocal
from deps.auth import require_client
from models import QuestionAttempt
from schemas.attempts import AttemptOut

router = APIRouter(prefix="/attempts", tags=["attempts"])


@router.get("/recent-list", dependencies=[Depends(require_client)])
def attempts_recent(limit: int = 20, session_id: Optional[str] = None):
    limit = max(1, min(limit, 100))

    with SessionLocal() as db:
        query = db.query(QuestionAttempt)
        if session_id:
            query = query.filter(QuestionAttempt.session_id == session_id)
        items = query.order_by(QuestionAttempt.id.desc()).limit(limit).all()

    rows = [AttemptOut.model_validate(a).model_dump() for a in items]
    return {"ok": True, "items": rows, "count": len(rows)}


@router.get("/{attempt_id}", response_model=AttemptOut)
def get_attempt(attempt_id: int):
    # Public endpoint: no key required
    with SessionLocal() as db:
        a = db.get(QuestionAttempt, attempt_id)
        if not a:
            raise HTTPException(status_code=404, detail="Attempt not found")
        return AttemptOut.model_validate(a)
