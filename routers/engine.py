# routers/engine.py
# Stateless access to the generator and the mastery update; the caller owns the state.

import random

from fastapi import APIRouter, Depends

from deps.rng import get_rng
from generator import Question, generate_question
from mastery import UserState, update_state
from schemas.questions import GenerateRequest
from schemas.sessions import UpdateRequest

router = APIRouter(tags=["engine"])


@router.post("/generate", response_model=Question)
def generate(req: GenerateRequest, rng: random.Random = Depends(get_rng)):
    return generate_question(req.difficulty, req.weak_topics, rng=rng)


@router.post("/update", response_model=UserState)
def update(req: UpdateRequest):
    return update_state(req.state, req.is_correct, req.time_taken_ms)
