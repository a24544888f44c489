# Template-based question generator.
# Topic choice follows the learner's weak topics; the "quantum state" is a
# decorative amplitude vector for the UI and never affects content or grading.

from __future__ import annotations

import logging
import math
import random
import uuid
from typing import Any, Callable, Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger("quantum-tutor.generator")

TOPICS = ("algebra", "geometry", "calculus", "statistics", "trigonometry")
FALLBACK_TOPIC = "algebra"
STATE_SIZE = 8
MAX_DIFFICULTY = 10

_default_rng = random.Random()


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    type: str = "numeric"
    topic: str
    difficulty: float
    question_text: str
    answer: float
    explanation: str
    quantum_state: List[float]


# whole numbers print without ".0"; beyond this size floats keep their exponent form
_MAX_PLAIN_INT = 1e15


def format_number(x: float) -> str:
    if math.isfinite(x) and abs(x) < _MAX_PLAIN_INT and abs(x - round(x)) < 1e-12:
        return str(int(round(x)))
    return str(x)


# --- Templates --------------------------------------------------------------------
# Each template takes the rounded difficulty D and returns the text, the expected
# value and a fixed explanation.


def linear_equation(d: float) -> Dict[str, Any]:
    return {
        "question_text": f"Solve for x: {format_number(d)}x + {format_number(round(d * 2, 2))} = {format_number(round(d * 5, 2))}",
        # (5D - 2D) / D; holds for every D
        "answer": 3.0,
        "explanation": "Subtract the constant term from both sides, then divide by the coefficient of x.",
    }


def quadratic_value(d: float) -> Dict[str, Any]:
    return {
        "question_text": f"If f(x) = {format_number(d)}x² + {format_number(round(d * 2, 2))}x + 1, what is f(2)?",
        "answer": round(d * 4 + d * 4 + 1, 2),
        "explanation": "Substitute x = 2 into the function and calculate.",
    }


def circle_area(d: float) -> Dict[str, Any]:
    return {
        "question_text": f"What is the area of a circle with radius {format_number(d)}?",
        "answer": round(math.pi * d * d, 2),
        "explanation": "Use the formula A = πr² where r is the radius.",
    }


TEMPLATES: Dict[str, List[Callable[[float], Dict[str, Any]]]] = {
    "algebra": [linear_equation, quadratic_value],
    "geometry": [circle_area],
}


def templates_for(topic: str) -> List[Callable[[float], Dict[str, Any]]]:
    return TEMPLATES.get(topic) or TEMPLATES[FALLBACK_TOPIC]


def _local_id() -> str:
    return uuid.uuid4().hex[:9]


# --- Public API -------------------------------------------------------------------


def generate_question(
    difficulty: float,
    weak_topics: Iterable[str] = (),
    rng: Optional[Any] = None,
    store: Optional[Callable[[Question], Optional[str]]] = None,
) -> Question:
    """
    Build a question for `difficulty`, preferring one of `weak_topics`.

    `rng` needs choice/uniform (a random.Random works). When `store` is given
    it is offered the question and may hand back a persisted id; if it raises,
    the question keeps its local id.
    """
    rng = rng or _default_rng

    # de-duplicate but keep order so seeded sources stay reproducible
    weak = list(dict.fromkeys(weak_topics))
    topic = rng.choice(weak) if weak else rng.choice(TOPICS)

    d = round(difficulty, 2)
    template = rng.choice(templates_for(topic))
    body = template(d)

    quantum_state = [rng.uniform(-1, 1) for _ in range(STATE_SIZE)]

    question = Question(
        id=_local_id(),
        topic=topic,
        difficulty=d,
        quantum_state=quantum_state,
        **body,
    )

    if store is None:
        return question

    try:
        persisted_id = store(question)
    except Exception:
        logger.warning("could not persist question; keeping local id %s", question.id, exc_info=True)
        return question

    if not persisted_id:
        return question
    return question.model_copy(update={"id": str(persisted_id)})


def next_difficulty(mastery_level: float, rng: Optional[Any] = None) -> float:
    """Jitter the mastery level by up to half a point, capped at 10."""
    rng = rng or _default_rng
    return min(mastery_level + (rng.random() - 0.5), MAX_DIFFICULTY)
