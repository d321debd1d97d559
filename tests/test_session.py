import pytest

from interview_sim.interview import InputError, InterviewSession, SessionState, StateError
from interview_sim.interview.session import SKIPPED_EVALUATION

from conftest import LONG_ANSWER, SENIOR_RESUME, FailingCapability, build_state_machine


def _started(machine, count=3, resume=SENIOR_RESUME, use_external=False):
    session = InterviewSession(timer_seconds=machine.time_limit_seconds)
    machine.start_interview(session, resume, count, use_external)
    return session


def test_new_session_is_in_setup(state_machine):
    session = InterviewSession()

    assert session.state == SessionState.SETUP
    assert session.current_question is None
    with pytest.raises(StateError):
        state_machine.submit_answer(session, "hello")


def test_start_interview(state_machine):
    session = _started(state_machine, count=5)

    assert session.state == SessionState.ACTIVE
    assert session.current_index == 0
    assert session.is_follow_up is False
    assert session.timer_seconds == 120
    assert len(session.questions) == 5
    assert session.source == "rule-based"
    assert session.analysis.experience_level == "senior"


def test_start_requires_resume(state_machine):
    with pytest.raises(InputError):
        state_machine.start_interview(InterviewSession(), "   ", 5)


def test_start_twice_rejected(state_machine):
    session = _started(state_machine)
    with pytest.raises(StateError):
        state_machine.start_interview(session, SENIOR_RESUME, 3)


def test_misconfigured_external_still_starts(rng):
    machine = build_state_machine(rng, capability=FailingCapability())
    session = _started(machine, count=4, use_external=True)

    assert session.source in ("rule-based-fallback", "fallback")
    assert len(session.questions) <= 4


def test_short_answer_advances_without_follow_up(state_machine):
    session = _started(state_machine)
    turn = state_machine.submit_answer(session, "I use React")

    assert turn.follow_up_question is None
    assert session.current_index == 1
    assert session.answers == ["I use React"]
    assert len(session.evaluations) == 1


def test_long_answer_gets_single_follow_up(rng):
    machine = build_state_machine(rng, follow_up_probability=1.0)
    session = _started(machine)

    first = machine.submit_answer(session, LONG_ANSWER)
    assert first.follow_up_question is not None
    assert session.is_follow_up is True
    assert session.current_index == 0
    assert session.current_prompt == first.follow_up_question

    second = machine.submit_answer(session, LONG_ANSWER)
    assert second.follow_up_question is None
    assert session.is_follow_up is False
    assert session.current_index == 1
    assert len(session.evaluations) == 2
    assert len(session.answers) == 2


def test_skip_records_sentinel_and_advances(state_machine):
    session = _started(state_machine)
    turn = state_machine.skip(session)

    assert turn.evaluation == SKIPPED_EVALUATION
    assert session.evaluations == [SKIPPED_EVALUATION]
    assert session.answers == []
    assert session.current_index == 1


def test_skip_during_follow_up_moves_to_next_main_question(rng):
    machine = build_state_machine(rng, follow_up_probability=1.0)
    session = _started(machine)
    machine.submit_answer(session, LONG_ANSWER)

    machine.skip(session)
    assert session.is_follow_up is False
    assert session.follow_up_question is None
    assert session.current_index == 1


def test_skip_on_last_question_completes(state_machine):
    session = _started(state_machine, count=2)
    state_machine.skip(session)
    turn = state_machine.skip(session)

    assert turn.completed is True
    assert session.state == SessionState.COMPLETE
    assert session.current_question is None
    with pytest.raises(StateError):
        state_machine.skip(session)
    with pytest.raises(StateError):
        state_machine.submit_answer(session, "late answer")


def test_evaluations_never_fewer_than_answers(rng):
    machine = build_state_machine(rng)
    session = _started(machine, count=5)

    while session.state == SessionState.ACTIVE:
        if session.current_index % 2:
            machine.skip(session)
        else:
            machine.submit_answer(session, LONG_ANSWER)
        assert len(session.evaluations) >= len(session.answers)
        assert session.current_index <= len(session.questions)


def test_transcript_accumulates_and_resets(state_machine):
    session = _started(state_machine)

    state_machine.capture_transcript(session, "I built")
    assert state_machine.capture_transcript(session, "a chat app") == "I built a chat app"

    state_machine.skip(session)
    assert session.transcript == ""


def test_tick_counts_down_and_auto_submits(rng):
    machine = build_state_machine(rng, follow_up_probability=0.0, time_limit_seconds=3)
    session = _started(machine)
    machine.capture_transcript(session, "partial answer")

    assert machine.tick(session) is None
    assert session.timer_seconds == 2

    turn = machine.tick(session, 5)
    assert turn is not None
    assert session.answers == ["partial answer"]
    assert session.current_index == 1
    assert session.timer_seconds == 3


def test_tick_with_empty_transcript_still_evaluates(rng):
    machine = build_state_machine(rng, time_limit_seconds=1)
    session = _started(machine)

    turn = machine.tick(session)
    assert turn.follow_up_question is None
    assert session.answers == []
    assert len(session.evaluations) == 1
    assert session.current_index == 1


def test_tick_rejects_non_positive_seconds(state_machine):
    session = _started(state_machine)
    with pytest.raises(InputError):
        state_machine.tick(session, 0)


def test_to_dict_projection(state_machine):
    session = _started(state_machine)
    data = session.to_dict()

    assert data["state"] == "active"
    assert data["total_questions"] == 3
    assert data["current_prompt"] == session.questions[0].question
