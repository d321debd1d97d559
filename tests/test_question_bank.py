import random

import pytest

from interview_sim.interview import InputError
from interview_sim.interview.question_bank import (
    CATEGORIES,
    DIFFICULTIES,
    QUESTION_BANK,
    get_templates,
    question_stats,
    sample_by_criteria,
)


def test_bank_has_five_templates_per_cell():
    for category in CATEGORIES:
        for difficulty in DIFFICULTIES:
            assert len(QUESTION_BANK[category][difficulty]) == 5


def test_question_stats():
    stats = question_stats()

    assert stats["total_questions"] == 45
    assert stats["categories"] == ["technical", "behavioral", "situational"]
    assert stats["difficulties"] == ["easy", "medium", "hard"]
    assert len(stats["question_bank"]["behavioral"]["hard"]) == 5


def test_unknown_category_or_difficulty_rejected():
    with pytest.raises(InputError):
        get_templates("management", "easy")
    with pytest.raises(InputError):
        get_templates("technical", "extreme")


def test_sample_by_criteria_caps_count():
    questions = sample_by_criteria("behavioral", "easy", count=12, rng=random.Random(1))

    assert len(questions) == 5
    for q in questions:
        assert q.question in QUESTION_BANK["behavioral"]["easy"]
        assert q.category == "behavioral"
        assert q.difficulty == "easy"
        assert q.type == "bank-based"


def test_sample_by_criteria_rejects_bad_input():
    with pytest.raises(InputError):
        sample_by_criteria("technical", "easy", count=0)
    with pytest.raises(InputError):
        sample_by_criteria("unknown", "easy")
