# schemas/questions.py
from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

Topic = Literal["algebra", "geometry", "calculus", "statistics", "trigonometry"]


class QuestionOut(BaseModel):
    """Question as shown to the learner; the answer stays on the server."""

    model_config = ConfigDict(from_attributes=True)
    id: str
    type: str
    topic: str
    difficulty: float
    question_text: str
    explanation: str
    quantum_state: List[float]


class StoredQuestionOut(QuestionOut):
    created_at: datetime | None = None


class GenerateRequest(BaseModel):
    difficulty: float
    weak_topics: List[Topic] = Field(default_factory=list)
