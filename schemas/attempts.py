from datetime import datetime

from pydantic import BaseModel, ConfigDict


class AttemptOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: int
    created_at: datetime | None
    question_id: str
    user_answer: float
    is_correct: bool
    time_taken_ms: float
    session_id: str | None = None
