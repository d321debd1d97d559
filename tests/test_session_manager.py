import threading

import pytest

from interview_sim.interview import InterviewSessionManager, SessionNotFoundError
from interview_sim.interview.session import SKIPPED_EVALUATION

from conftest import SENIOR_RESUME, FakeCapability, build_state_machine


def test_start_registers_session(manager):
    result = manager.start_interview(SENIOR_RESUME, 4)

    assert set(result) == {"session_id", "questions", "analysis", "source", "timer_seconds"}
    assert len(result["questions"]) == 4
    assert manager.get_session(result["session_id"]).state.value == "active"
    assert manager.session_count() == 1


def test_failed_start_registers_nothing(manager):
    with pytest.raises(Exception):
        manager.start_interview("", 4)
    assert manager.session_count() == 0


def test_unknown_session(manager):
    with pytest.raises(SessionNotFoundError):
        manager.get_session("missing")
    with pytest.raises(SessionNotFoundError):
        manager.submit_turn("missing", "answer")
    with pytest.raises(SessionNotFoundError):
        manager.discard_session("missing")


def test_discard_session(manager):
    session_id = manager.start_interview(SENIOR_RESUME, 2)["session_id"]
    manager.discard_session(session_id)

    with pytest.raises(SessionNotFoundError):
        manager.get_session(session_id)


def test_scores_skip_sentinel_and_categories(rng):
    capability = FakeCapability(evaluation="Overall Score: 8/10")
    manager = InterviewSessionManager(build_state_machine(rng, capability=capability))
    session_id = manager.start_interview(SENIOR_RESUME, 3)["session_id"]

    manager.submit_turn(session_id, "short answer")
    manager.submit_turn(session_id, skip=True)
    manager.submit_turn(session_id, "short answer")

    session = manager.get_session(session_id)
    assert session.evaluations[1] == SKIPPED_EVALUATION

    scores = manager.calculate_overall_scores(session_id)
    assert scores["overall_score"] == 8.0
    categories = {q.category for i, q in enumerate(session.questions) if i != 1}
    for category in ("technical", "behavioral", "situational"):
        if category in categories:
            assert scores[f"{category}_score"] == 8.0


def test_summary_for_completed_interview(manager):
    session_id = manager.start_interview(SENIOR_RESUME, 2)["session_id"]
    manager.submit_turn(session_id, skip=True)
    manager.submit_turn(session_id, skip=True)

    summary = manager.get_session_summary(session_id)
    assert summary["completed"] is True
    assert summary["status"] == "complete"
    assert summary["questions_completed"] == 2
    assert summary["total_evaluations"] == 2
    assert summary["scores"]["overall_score"] is None


def test_concurrent_skips_are_serialized(manager):
    session_id = manager.start_interview(SENIOR_RESUME, 10)["session_id"]
    errors = []

    def skip():
        try:
            manager.submit_turn(session_id, skip=True)
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=skip) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    session = manager.get_session(session_id)
    assert errors == []
    assert session.current_index == 10
    assert len(session.evaluations) == 10
