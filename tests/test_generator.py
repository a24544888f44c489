import math
import random

import pytest

from generator import (
    STATE_SIZE,
    TOPICS,
    circle_area,
    format_number,
    generate_question,
    linear_equation,
    next_difficulty,
    quadratic_value,
)


@pytest.mark.parametrize("d", [0.5, 1, 2.37, 9.99, -4, 0])
def test_linear_answer_is_always_three(d):
    assert linear_equation(d)["answer"] == 3.0


def test_linear_text():
    assert linear_equation(2.5)["question_text"] == "Solve for x: 2.5x + 5 = 12.5"


@pytest.mark.parametrize("d", [1, 2.5, 3.14, 7.77])
def test_quadratic_answer(d):
    assert quadratic_value(d)["answer"] == round(8 * d + 1, 2)


def test_quadratic_text():
    assert quadratic_value(3)["question_text"] == "If f(x) = 3x² + 6x + 1, what is f(2)?"


@pytest.mark.parametrize("d", [1, 2, 4.2])
def test_circle_area_answer(d):
    assert circle_area(d)["answer"] == round(math.pi * d * d, 2)


def test_circle_area_text():
    body = circle_area(2)
    assert body["question_text"] == "What is the area of a circle with radius 2?"
    assert body["answer"] == 12.57


def test_single_weak_topic_is_always_chosen():
    rng = random.Random(1234)
    for _ in range(25):
        q = generate_question(3, ["geometry"], rng=rng)
        assert q.topic == "geometry"
        assert q.answer == round(math.pi * 9, 2)


def test_weak_topics_are_deduplicated(scripted_rng):
    q = generate_question(2, ["geometry", "geometry", "algebra"], rng=scripted_rng(picks=[1, 0]))
    assert q.topic == "algebra"


def test_no_weak_topics_picks_from_all_topics(scripted_rng):
    q = generate_question(2, [], rng=scripted_rng(picks=[1]))
    assert q.topic == TOPICS[1]


def test_unimplemented_topic_falls_back_to_algebra_templates(scripted_rng):
    q = generate_question(2, [], rng=scripted_rng(picks=[2, 1]))
    assert q.topic == "calculus"
    assert q.question_text.startswith("If f(x) = 2x²")
    assert q.answer == 17.0


def test_question_fields(scripted_rng):
    q = generate_question(3.14159, ["algebra"], rng=scripted_rng(picks=[0, 0], value=-0.75))
    assert q.difficulty == 3.14
    assert q.type == "numeric"
    assert q.answer == 3.0
    assert q.explanation.startswith("Subtract the constant term")
    assert q.quantum_state == [-0.75] * STATE_SIZE
    assert len(q.id) == 9


def test_quantum_state_is_bounded():
    q = generate_question(5, rng=random.Random(7))
    assert len(q.quantum_state) == 8
    assert all(-1 <= v <= 1 for v in q.quantum_state)


def test_out_of_range_difficulty_is_accepted():
    for d in (0, -3.5, 1000):
        q = generate_question(d, ["algebra", "geometry"])
        assert q.difficulty == round(d, 2)


def test_store_id_replaces_local_id(scripted_rng):
    seen = []

    def store(question):
        seen.append(question)
        return 42

    q = generate_question(2, ["geometry"], rng=scripted_rng(), store=store)
    assert q.id == "42"
    assert seen[0].question_text == q.question_text


def test_store_failure_keeps_local_id(scripted_rng, caplog):
    def store(question):
        raise RuntimeError("db down")

    q = generate_question(2, ["geometry"], rng=scripted_rng(), store=store)
    assert len(q.id) == 9
    assert q.answer == 12.57
    assert "could not persist question" in caplog.text


def test_store_without_id_keeps_local_id(scripted_rng):
    q = generate_question(2, ["geometry"], rng=scripted_rng(), store=lambda question: None)
    assert len(q.id) == 9


def test_next_difficulty_jitter_and_cap(scripted_rng):
    assert next_difficulty(5, scripted_rng(jitter=0.5)) == 5
    assert next_difficulty(1, scripted_rng(jitter=0.0)) == 0.5
    assert next_difficulty(9.8, scripted_rng(jitter=0.9)) == 10


def test_huge_difficulty_keeps_exponent_form():
    body = circle_area(1e200)
    assert body["question_text"] == "What is the area of a circle with radius 1e+200?"
    assert format_number(3.0) == "3"
    assert format_number(1e16) == "1e+16"
