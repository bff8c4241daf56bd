"""
API tests for the chat router: create, list, messages, send (with a recording fake LLM) and delete.
"""
import uuid
from datetime import timedelta

from beyondchats.llm.base import LLMError
from beyondchats.models.chat import Chat, ChatMessage
from beyondchats.models.types import utcnow
from beyondchats.services.prompts import CHAT_SYSTEM_PROMPT, WELCOME_WITH_PDF, WELCOME_WITHOUT_PDF


def _create_chat(client, title="Study", pdf_id=None):
    body = {"title": title}
    if pdf_id:
        body["pdfId"] = str(pdf_id)
    r = client.post("/api/chat/create", json=body)
    assert r.status_code == 200, r.text
    return r.json()["chat"]


def test_create_chat_with_welcome(client):
    chat = _create_chat(client)
    assert chat["title"] == "Study"
    assert chat["pdfId"] is None
    messages = client.get(f"/api/chat/{chat['id']}/messages").json()
    assert [(m["role"], m["content"]) for m in messages] == [("ASSISTANT", WELCOME_WITHOUT_PDF)]


def test_create_chat_with_pdf(client, make_pdf_row):
    pdf = make_pdf_row(title="Optics")
    chat = _create_chat(client, pdf_id=pdf.id)
    assert chat["pdfId"] == str(pdf.id)
    messages = client.get(f"/api/chat/{chat['id']}/messages").json()
    assert messages[0]["content"] == WELCOME_WITH_PDF

    detail = client.get(f"/api/chat/{chat['id']}").json()
    assert detail["pdf"] == {"id": str(pdf.id), "title": "Optics"}


def test_create_chat_validation(client):
    r = client.post("/api/chat/create", json={"title": "  "})
    assert r.status_code == 400
    assert r.json() == {"error": "Chat title is required"}
    r = client.post("/api/chat/create", json={"title": "x", "pdfId": str(uuid.uuid4())})
    assert r.status_code == 404
    assert r.json() == {"error": "PDF not found"}


def test_messages_for_empty_or_unknown_chat(client, db):
    chat = _create_chat(client)
    db.query(ChatMessage).delete()
    db.commit()
    r = client.get(f"/api/chat/{chat['id']}/messages")
    assert r.status_code == 200
    assert r.json() == []
    assert client.get(f"/api/chat/{uuid.uuid4()}/messages").json() == []


def test_send_message(client, db, make_pdf_row, fake_llm):
    pdf = make_pdf_row(chunks=[(2, "Second page text."), (1, "First page text.")])
    chat = _create_chat(client, pdf_id=pdf.id)

    r = client.post("/api/chat", json={"message": "What is on page 1?", "chatId": chat["id"]})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["message"]["role"] == "ASSISTANT"
    assert body["message"]["content"] == "Fake reply citing page 1."

    sent = fake_llm.chat_calls[0]
    assert sent[0] == {"role": "system", "content": CHAT_SYSTEM_PROMPT}
    # history holds only the welcome message; the new question is not repeated
    assert [m["role"] for m in sent] == ["system", "assistant", "user"]
    assert "Page 1: First page text.\n\nPage 2: Second page text." in sent[-1]["content"]
    assert "Student Question: What is on page 1?" in sent[-1]["content"]

    roles = [m["role"] for m in client.get(f"/api/chat/{chat['id']}/messages").json()]
    assert roles == ["ASSISTANT", "USER", "ASSISTANT"]


def test_send_without_pdf_content(client, fake_llm):
    chat = _create_chat(client)
    client.post("/api/chat", json={"message": "Hi", "chatId": chat["id"]})
    assert "No PDF content available" in fake_llm.chat_calls[0][-1]["content"]


def test_send_uses_last_ten_messages(client, db, fake_llm):
    chat = _create_chat(client)
    chat_id = uuid.UUID(chat["id"])
    base = utcnow()
    for i in range(15):
        db.add(ChatMessage(
            chat_id=chat_id,
            role="USER" if i % 2 else "ASSISTANT",
            content=f"old message {i}",
            created_at=base + timedelta(seconds=i + 1),
        ))
    db.commit()

    client.post("/api/chat", json={"message": "latest", "chatId": chat["id"]})
    sent = fake_llm.chat_calls[0]
    history = sent[1:-1]
    assert len(history) == 10
    assert [m["content"] for m in history] == [f"old message {i}" for i in range(5, 15)]


def test_send_touches_updated_at(client, db, fake_llm):
    first = _create_chat(client, title="first")
    _create_chat(client, title="second")
    assert [c["title"] for c in client.get("/api/chat/list").json()] == ["second", "first"]
    client.post("/api/chat", json={"message": "bump", "chatId": first["id"]})
    assert [c["title"] for c in client.get("/api/chat/list").json()] == ["first", "second"]


def test_send_validation(client, fake_llm):
    r = client.post("/api/chat", json={"message": "hi"})
    assert r.status_code == 400
    assert r.json() == {"error": "Message and chat ID are required"}
    r = client.post("/api/chat", json={"message": "hi", "chatId": str(uuid.uuid4())})
    assert r.status_code == 404
    assert r.json() == {"error": "Chat not found"}
    assert fake_llm.chat_calls == []


def test_send_provider_failure_is_500(client, db, fake_llm):
    fake_llm.error = LLMError("No response from OpenAI")
    chat = _create_chat(client)
    r = client.post("/api/chat", json={"message": "hello?", "chatId": chat["id"]})
    assert r.status_code == 500
    assert r.json() == {"error": "Failed to process chat message"}
    # the user's message was stored before the provider call
    contents = [m["content"] for m in client.get(f"/api/chat/{chat['id']}/messages").json()]
    assert contents[-1] == "hello?"


def test_send_with_mock_provider(client):
    chat = _create_chat(client)
    r = client.post("/api/chat", json={"message": "What is physics?", "chatId": chat["id"]})
    assert r.status_code == 200
    assert r.json()["message"]["content"].startswith("[Mock]")


def test_get_and_delete_chat(client, db, fake_llm):
    chat = _create_chat(client)
    client.post("/api/chat", json={"message": "hi", "chatId": chat["id"]})
    r = client.get(f"/api/chat/{chat['id']}")
    assert r.status_code == 200
    assert r.json()["title"] == "Study"

    assert client.delete(f"/api/chat/{chat['id']}").json() == {"success": True}
    db.expire_all()
    assert db.query(Chat).count() == 0
    assert db.query(ChatMessage).count() == 0
    assert client.get(f"/api/chat/{chat['id']}").status_code == 404
    assert client.delete(f"/api/chat/{chat['id']}").status_code == 404
