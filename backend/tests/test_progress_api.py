"""Progress dashboard and seed data."""
import json
import uuid

from beyondchats.config import settings
from beyondchats.models.chat import ChatMessage
from beyondchats.models.pdf import PDF, PDFChunk
from beyondchats.models.progress import Progress
from beyondchats.models.quiz import QuizAttempt
from beyondchats.seed import CHAT_PHYSICS, QUIZ_FUNDAMENTALS, seed_database


def test_progress_empty(client):
    r = client.get("/api/progress")
    assert r.status_code == 200
    assert r.json() == {
        "totalQuizzes": 0,
        "completedQuizzes": 0,
        "averageScore": 0,
        "totalStudyTime": 0,
        "strengths": [],
        "weaknesses": [],
        "recentActivity": [],
    }


def test_progress_from_seed(client, db):
    seed_database(db)
    body = client.get("/api/progress").json()
    assert body["totalQuizzes"] == 1
    assert body["completedQuizzes"] == 2
    assert body["averageScore"] == 75
    assert body["totalStudyTime"] == 30
    assert body["strengths"] == ["Physics Fundamentals", "Basic Concepts"]
    assert body["weaknesses"] == ["Advanced Mechanics"]
    activity = body["recentActivity"]
    assert [a["score"] for a in activity] == [50, 100]
    assert activity[0]["type"] == "quiz"
    assert activity[0]["title"] == "Physics Fundamentals Quiz"


def test_progress_merges_subjects(client, db):
    user_id = uuid.UUID(settings.demo_user_id)
    db.add_all([
        Progress(user_id=user_id, subject="Chemistry", strengths=json.dumps(["Bonds"]),
                 weaknesses=json.dumps(["Kinetics", "Organic"])),
        Progress(user_id=user_id, subject="Biology", strengths=json.dumps(["Cells", "Bonds"]),
                 weaknesses=json.dumps(["Organic"])),
    ])
    db.commit()
    body = client.get("/api/progress").json()
    # rows are read in subject order: Biology, Chemistry
    assert body["strengths"] == ["Cells", "Bonds"]
    assert body["weaknesses"] == ["Organic", "Kinetics"]


def test_recent_activity_limited_to_five(client, db):
    seed_database(db)
    for i in range(6):
        db.add(QuizAttempt(quiz_id=QUIZ_FUNDAMENTALS, user_id=uuid.UUID(settings.demo_user_id),
                           user_answers="{}", score=0, total_questions=2))
    db.commit()
    body = client.get("/api/progress").json()
    assert body["completedQuizzes"] == 8
    assert len(body["recentActivity"]) == 5


def test_seed_is_idempotent(db):
    first = seed_database(db)
    assert first == {
        "pdfs": 2,
        "pdf_chunks": 3,
        "quizzes": 1,
        "quiz_attempts": 2,
        "chats": 1,
        "chat_messages": 3,
        "progress": 1,
    }
    second = seed_database(db)
    assert set(second.values()) == {0}
    assert db.query(PDF).count() == 2
    assert db.query(PDFChunk).count() == 3


def test_seeded_results_and_messages(client, db):
    seed_database(db)
    results = client.get(f"/api/quiz/{QUIZ_FUNDAMENTALS}/results").json()
    assert results["score"] == 50
    assert [d["isCorrect"] for d in results["detailedResults"]] == [False, True]

    messages = client.get(f"/api/chat/{CHAT_PHYSICS}/messages").json()
    assert [m["role"] for m in messages] == ["ASSISTANT", "USER", "ASSISTANT"]
    assert db.query(ChatMessage).count() == 3


def test_health_and_root(client):
    assert client.get("/health").json() == {"status": "ok", "message": "BeyondChats API"}
    r = client.get("/")
    assert r.status_code == 200
    assert "BeyondChats API" in r.text


def test_malformed_body_is_400(client):
    r = client.post("/api/chat/create", content="{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert "error" in r.json()


def test_unhandled_error_uses_error_envelope(monkeypatch):
    from fastapi.testclient import TestClient

    from beyondchats.api import deps
    from beyondchats.main import app

    def broken(db):
        raise RuntimeError("database unavailable")

    monkeypatch.setattr(deps, "ensure_demo_user", broken)
    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.get("/api/progress")
    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error"}
