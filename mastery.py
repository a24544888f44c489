from __future__ import annotations

from typing import Iterable, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MIN_MASTERY = 1.0
MAX_MASTERY = 10.0

# Reward: a correct answer earns a base step plus a bonus that shrinks linearly
# over the first ten seconds. A wrong answer costs a fixed step.
BASE_REWARD = 0.1
SPEED_REWARD = 0.05
TIME_BONUS_WINDOW_MS = 10000
PENALTY = 0.05

WEAK_ACCURACY = 0.6
STRONG_ACCURACY = 0.8
# Topic labels used by the accuracy thresholds, independent of the question asked.
WEAK_TOPICS_ON_LOW_ACCURACY = ("algebra", "geometry")
STRONG_TOPIC_ON_HIGH_ACCURACY = "algebra"


def _unique(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))


class UserState(BaseModel):
    model_config = ConfigDict(frozen=True)

    mastery_level: float = Field(default=MIN_MASTERY, ge=MIN_MASTERY, le=MAX_MASTERY)
    streak: int = Field(default=0, ge=0)
    total_questions: int = Field(default=0, ge=0)
    correct_answers: int = Field(default=0, ge=0)
    weak_topics: List[str] = Field(default_factory=list)
    strong_topics: List[str] = Field(default_factory=list)

    @field_validator("weak_topics", "strong_topics")
    @classmethod
    def _dedupe(cls, v: List[str]) -> List[str]:
        return _unique(v)

    @model_validator(mode="after")
    def _check_counts(self) -> "UserState":
        if self.correct_answers > self.total_questions:
            raise ValueError("correct_answers cannot exceed total_questions")
        return self


def update_state(state: UserState, is_correct: bool, time_taken_ms: float) -> UserState:
    """
    Return the state after one answered question; `state` itself is untouched.

    Correct answers raise mastery by round(0.1 + bonus * 0.05, 2) where bonus is
    max(0, (10000 - time_taken_ms) / 10000). Wrong answers lower it by 0.05 and
    reset the streak. Mastery stays within [1, 10].
    """
    total = state.total_questions + 1
    correct = state.correct_answers
    streak = state.streak
    mastery = state.mastery_level

    if is_correct:
        correct += 1
        streak += 1
        time_bonus = max(0.0, (TIME_BONUS_WINDOW_MS - time_taken_ms) / TIME_BONUS_WINDOW_MS)
        increase = round(BASE_REWARD + time_bonus * SPEED_REWARD, 2)
        mastery = min(MAX_MASTERY, round(mastery + increase, 2))
    else:
        streak = 0
        mastery = max(MIN_MASTERY, round(mastery - PENALTY, 2))

    weak = list(state.weak_topics)
    strong = list(state.strong_topics)

    accuracy = correct / total
    if accuracy < WEAK_ACCURACY:
        weak = _unique([*weak, *WEAK_TOPICS_ON_LOW_ACCURACY])
    elif accuracy > STRONG_ACCURACY:
        strong = _unique([*strong, STRONG_TOPIC_ON_HIGH_ACCURACY])
        weak = [t for t in weak if t != STRONG_TOPIC_ON_HIGH_ACCURACY]

    return UserState(
        mastery_level=mastery,
        streak=streak,
        total_questions=total,
        correct_answers=correct,
        weak_topics=weak,
        strong_topics=strong,
    )


def accuracy_percent(state: UserState) -> int:
    if state.total_questions <= 0:
        return 0
    return round(state.correct_answers * 100 / state.total_questions)
