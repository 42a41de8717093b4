"""
Tests for the HTTP API.
"""

import pytest
from fastapi.testclient import TestClient

from api.app import create_app


@pytest.fixture
def app(three_questions):
    app = create_app(questions=three_questions, duration=120)
    yield app
    app.state.quiz_session.close()


@pytest.fixture
def client(app):
    # lifespan 을 실행하지 않으므로 타이머 스레드 없음
    return TestClient(app)


class TestQuizEndpoints:

    def test_quiz_hides_answers_while_in_progress(self, client):
        res = client.get("/api/quiz")
        assert res.status_code == 200
        body = res.json()
        assert body["total"] == 3
        assert body["duration"] == 120
        assert all("correct_answer_index" not in q for q in body["questions"])

    def test_quiz_reveals_answers_after_submit(self, client):
        client.post("/api/submit")
        body = client.get("/api/quiz").json()
        assert [q["correct_answer_index"] for q in body["questions"]] == [0, 1, 2]

    def test_initial_state(self, client):
        body = client.get("/api/state").json()
        assert body == {
            "phase": "in-progress",
            "answers": {},
            "remaining_seconds": 120,
            "remaining_label": "02:00",
            "answered_count": 0,
            "total": 3,
        }


class TestAnswerEndpoint:

    def test_select_answer(self, client):
        res = client.post("/api/answer", json={"question_id": 1, "option_index": 0})
        assert res.status_code == 200
        assert res.json()["answered_count"] == 1
        assert client.get("/api/state").json()["answers"] == {"1": 0}

    def test_unknown_question_is_404(self, client):
        res = client.post("/api/answer", json={"question_id": 9, "option_index": 0})
        assert res.status_code == 404

    def test_out_of_range_option_is_422(self, client):
        res = client.post("/api/answer", json={"question_id": 1, "option_index": 3})
        assert res.status_code == 422
        assert client.get("/api/state").json()["answered_count"] == 0

    def test_answer_after_submit_is_409(self, client):
        client.post("/api/submit")
        res = client.post("/api/answer", json={"question_id": 1, "option_index": 0})
        assert res.status_code == 409


class TestSubmitAndResults:

    def test_results_before_submit_is_409(self, client):
        assert client.get("/api/results").status_code == 409

    def test_submit_returns_result(self, client):
        client.post("/api/answer", json={"question_id": 1, "option_index": 0})
        client.post("/api/answer", json={"question_id": 2, "option_index": 1})

        res = client.post("/api/submit")

        assert res.status_code == 200
        result = res.json()["result"]
        assert result["score"] == 2
        assert result["percentage"] == 67
        assert [r["status"] for r in result["reviews"]] == ["correct", "correct", "unanswered"]

    def test_submit_twice_keeps_same_result(self, client):
        client.post("/api/answer", json={"question_id": 3, "option_index": 0})
        first = client.post("/api/submit").json()["result"]
        second = client.post("/api/submit").json()["result"]
        assert first == second
        assert client.get("/api/results").json() == first


class TestRestartEndpoint:

    def test_restart_requires_submission(self, client):
        assert client.post("/api/restart").status_code == 409

    def test_restart_after_submit(self, client):
        client.post("/api/answer", json={"question_id": 1, "option_index": 0})
        client.post("/api/submit")

        res = client.post("/api/restart")

        assert res.status_code == 200
        body = res.json()
        assert body["phase"] == "in-progress"
        assert body["answers"] == {}
        assert body["remaining_seconds"] == 120


class TestLifespan:

    def test_lifespan_starts_and_releases_timer(self, app):
        quiz = app.state.quiz_session
        with TestClient(app):
            assert quiz.timer_running
        assert not quiz.timer_running
