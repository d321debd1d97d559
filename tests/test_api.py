import random

import pytest
from fastapi.testclient import TestClient

from app import app
from interview_sim.api import service as service_module
from interview_sim.api.service import InterviewService
from interview_sim.interview.session import SKIPPED_EVALUATION

from conftest import LONG_ANSWER, SENIOR_RESUME, FailingCapability


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setattr(service_module, "_service_instance", InterviewService(rng=random.Random(0)))
    return TestClient(app)


def _start(client, count=3):
    response = client.post("/interview/start", json={
        "resume_text": SENIOR_RESUME,
        "question_count": count,
        "use_ai": False
    })
    assert response.status_code == 200
    return response.json()


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "llm_ready": False, "active_sessions": 0}


def test_generate_questions(client):
    response = client.post("/generate-questions", json={"resume_text": SENIOR_RESUME, "question_count": 6})
    data = response.json()

    assert response.status_code == 200
    assert data["source"] == "rule-based"
    assert len(data["questions"]) == 6
    assert data["resume_analysis"]["experience_level"] == "senior"


def test_generate_questions_validates_count(client):
    response = client.post("/generate-questions", json={"resume_text": SENIOR_RESUME, "question_count": 0})
    assert response.status_code == 422


def test_start_with_misconfigured_llm(monkeypatch):
    service = InterviewService(text_capability=FailingCapability(), rng=random.Random(0))
    monkeypatch.setattr(service_module, "_service_instance", service)
    client = TestClient(app)

    data = _start(client, count=4)
    assert data["source"] in ("rule-based-fallback", "fallback")
    assert len(data["questions"]) <= 4


def test_start_requires_resume(client):
    response = client.post("/interview/start", json={"resume_text": "  ", "question_count": 3})
    assert response.status_code == 400


def test_interview_flow(client):
    started = _start(client, count=2)
    session_id = started["session_id"]
    assert started["timer_seconds"] == 120

    turn = client.post(f"/interview/{session_id}/turn", json={"answer": "I use React"}).json()
    assert turn["has_follow_up"] is False
    assert turn["current_index"] == 1
    assert "Overall Score" in turn["evaluation"]

    turn = client.post(f"/interview/{session_id}/turn", json={"skip": True}).json()
    assert turn["evaluation"] == SKIPPED_EVALUATION
    assert turn["completed"] is True

    status_response = client.get(f"/interview/{session_id}")
    assert status_response.json()["state"] == "complete"

    late = client.post(f"/interview/{session_id}/turn", json={"answer": "late"})
    assert late.status_code == 409

    report = client.get(f"/interview/{session_id}/report").json()
    assert report["completed"] is True
    assert report["total_evaluations"] == 2
    assert report["total_answers"] == 1
    assert report["scores"]["overall_score"] is not None


def test_transcript_and_tick(client):
    session_id = _start(client)["session_id"]

    response = client.post(f"/interview/{session_id}/transcript", json={"text": "I built a chat app"})
    assert response.json() == {"transcript": "I built a chat app"}

    tick = client.post(f"/interview/{session_id}/tick", json={"seconds": 30}).json()
    assert tick == {"timer_seconds": 90, "expired": False, "turn": None}

    tick = client.post(f"/interview/{session_id}/tick", json={"seconds": 200}).json()
    assert tick["expired"] is True
    assert tick["timer_seconds"] == 120
    assert tick["turn"]["current_index"] == 1


def test_unknown_session(client):
    assert client.get("/interview/missing").status_code == 404
    assert client.post("/interview/missing/turn", json={"skip": True}).status_code == 404
    assert client.delete("/interview/missing").status_code == 404


def test_discard_session(client):
    session_id = _start(client)["session_id"]

    assert client.delete(f"/interview/{session_id}").status_code == 200
    assert client.get(f"/interview/{session_id}").status_code == 404


def test_evaluate(client):
    response = client.post("/evaluate", json={"question": "What is React?", "answer": LONG_ANSWER})
    data = response.json()

    assert response.status_code == 200
    assert data["source"] == "mock"
    assert data["has_follow_up"] == (data["follow_up_question"] is not None)


def test_evaluate_short_answer_has_no_follow_up(client):
    data = client.post("/evaluate", json={"question": "Q?", "answer": "no idea"}).json()
    assert data["follow_up_question"] is None
    assert data["has_follow_up"] is False


def test_question_stats(client):
    data = client.get("/question-stats").json()
    assert data["total_questions"] == 45


def test_questions_by_criteria(client):
    response = client.post("/get-questions-by-criteria", json={
        "category": "situational", "difficulty": "hard", "count": 3
    })
    assert response.status_code == 200
    assert len(response.json()["questions"]) == 3

    bad = client.post("/get-questions-by-criteria", json={"category": "x", "difficulty": "hard"})
    assert bad.status_code == 400


def test_upload_resume(client):
    response = client.post(
        "/upload-resume",
        files={"file": ("resume.txt", b"Junior developer\nProject: blog", "text/plain")}
    )
    assert response.status_code == 200
    assert response.json() == {"resume_text": "Junior developer\nProject: blog"}

    unsupported = client.post(
        "/upload-resume",
        files={"file": ("resume.png", b"\x89PNG", "image/png")}
    )
    assert unsupported.status_code == 400


def test_register_and_login(client):
    credentials = {"email": "ada@example.com", "password": "s3cret"}

    assert client.post("/register", json=credentials).status_code == 200
    assert client.post("/register", json=credentials).status_code == 400

    login = client.post("/login", json=credentials)
    assert login.status_code == 200
    assert len(login.json()["token"]) == 64

    bad = client.post("/login", json={"email": "ada@example.com", "password": "nope"})
    assert bad.status_code == 401
