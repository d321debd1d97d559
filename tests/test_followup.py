import random

from interview_sim.interview import FollowUpDecisionEngine
from interview_sim.interview.followup import FOLLOW_UP_TEMPLATES

from conftest import LONG_ANSWER


def test_short_answers_never_get_follow_up():
    engine = FollowUpDecisionEngine(rng=random.Random(0), probability=1.0)

    assert engine.decide("", "technical") is None
    assert engine.decide("I used React", "technical") is None
    # exactly ten words is not enough
    assert engine.decide("one two three four five six seven eight nine ten", "behavioral") is None


def test_follow_up_comes_from_category_templates():
    engine = FollowUpDecisionEngine(rng=random.Random(0), probability=1.0)

    for category in ("technical", "behavioral", "situational"):
        assert engine.decide(LONG_ANSWER, category) in FOLLOW_UP_TEMPLATES[category]


def test_unknown_category_uses_technical_templates():
    engine = FollowUpDecisionEngine(rng=random.Random(0), probability=1.0)
    assert engine.decide(LONG_ANSWER, "other") in FOLLOW_UP_TEMPLATES["technical"]


def test_zero_probability_never_follows_up():
    engine = FollowUpDecisionEngine(rng=random.Random(0), probability=0.0)
    assert all(engine.decide(LONG_ANSWER, "technical") is None for _ in range(50))


def test_follow_up_rate_is_about_seventy_percent():
    engine = FollowUpDecisionEngine(rng=random.Random(1234))
    trials = 2000
    hits = sum(engine.decide(LONG_ANSWER, "situational") is not None for _ in range(trials))

    assert 0.63 < hits / trials < 0.77
