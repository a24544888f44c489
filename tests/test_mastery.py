import pytest
from pydantic import ValidationError

from mastery import UserState, accuracy_percent, update_state


@pytest.fixture
def mid_state():
    return UserState(
        mastery_level=5,
        streak=2,
        total_questions=10,
        correct_answers=7,
        weak_topics=[],
        strong_topics=[],
    )


def test_defaults():
    s = UserState()
    assert s.mastery_level == 1
    assert s.streak == 0
    assert s.total_questions == 0 and s.correct_answers == 0
    assert s.weak_topics == [] and s.strong_topics == []


def test_correct_answer_example(mid_state):
    s = update_state(mid_state, True, 2000)
    assert s.mastery_level == 5.14
    assert s.streak == 3
    assert s.total_questions == 11
    assert s.correct_answers == 8
    # 8/11 sits between the thresholds
    assert s.weak_topics == [] and s.strong_topics == []


def test_incorrect_answer_example(mid_state):
    s = update_state(mid_state, False, 123456)
    assert s.mastery_level == 4.95
    assert s.streak == 0
    assert s.total_questions == 11
    assert s.correct_answers == 7
    assert s.weak_topics == [] and s.strong_topics == []


def test_input_state_is_not_modified(mid_state):
    before = mid_state.model_dump()
    update_state(mid_state, True, 1000)
    update_state(mid_state, False, 1000)
    assert mid_state.model_dump() == before


def test_repeated_updates_accumulate(mid_state):
    s = update_state(update_state(mid_state, True, 5000), True, 5000)
    assert s.total_questions == 12
    assert s.correct_answers == 9
    assert s.streak == 4


def test_time_bonus_saturates():
    slow = update_state(UserState(mastery_level=2), True, 20000)
    assert slow.mastery_level == 2.1
    fast = update_state(UserState(mastery_level=2), True, 0)
    assert fast.mastery_level == 2.15


def test_mastery_clamped_at_ten():
    s = update_state(UserState(mastery_level=10, total_questions=5, correct_answers=5), True, 0)
    assert s.mastery_level == 10


def test_mastery_clamped_at_one():
    s = update_state(UserState(mastery_level=1), False, 500)
    assert s.mastery_level == 1


def test_low_accuracy_marks_weak_topics():
    s = update_state(UserState(), False, 3000)
    assert s.weak_topics == ["algebra", "geometry"]
    assert s.strong_topics == []


def test_low_accuracy_does_not_duplicate_weak_topics():
    start = UserState(total_questions=3, correct_answers=1, weak_topics=["geometry"])
    s = update_state(start, False, 3000)
    assert sorted(s.weak_topics) == ["algebra", "geometry"]
    assert len(s.weak_topics) == 2


def test_high_accuracy_promotes_algebra():
    start = UserState(
        total_questions=4,
        correct_answers=4,
        weak_topics=["algebra", "geometry"],
    )
    s = update_state(start, True, 3000)
    assert s.strong_topics == ["algebra"]
    assert s.weak_topics == ["geometry"]


def test_first_correct_answer_is_strong():
    s = update_state(UserState(), True, 3000)
    assert s.strong_topics == ["algebra"]


def test_topic_lists_are_deduplicated_on_validation():
    s = UserState(weak_topics=["algebra", "algebra"], strong_topics=["geometry", "geometry"])
    assert s.weak_topics == ["algebra"]
    assert s.strong_topics == ["geometry"]


def test_invalid_states_rejected():
    with pytest.raises(ValidationError):
        UserState(total_questions=1, correct_answers=2)
    with pytest.raises(ValidationError):
        UserState(mastery_level=11)
    with pytest.raises(ValidationError):
        UserState(streak=-1)


def test_accuracy_percent():
    assert accuracy_percent(UserState()) == 0
    assert accuracy_percent(UserState(total_questions=3, correct_answers=2)) == 67


def test_accuracy_of_exactly_sixty_percent_changes_no_topics():
    s = update_state(UserState(total_questions=4, correct_answers=2), True, 3000)
    assert s.correct_answers / s.total_questions == 0.6
    assert s.weak_topics == [] and s.strong_topics == []


def test_accuracy_of_exactly_eighty_percent_changes_no_topics():
    start = UserState(total_questions=4, correct_answers=3, weak_topics=["algebra"])
    s = update_state(start, True, 3000)
    assert s.correct_answers / s.total_questions == 0.8
    assert s.weak_topics == ["algebra"]
    assert s.strong_topics == []
