"""
Chat assistant: create chats (with a welcome message) and answer user messages.
Context is every chunk of the chat's PDF in page order (no relevance ranking) plus the last N messages.
One completion per message; no retry.
"""
import logging
import uuid

from sqlalchemy.orm import Session

from beyondchats.config import settings
from beyondchats.llm import get_llm_service
from beyondchats.models.chat import Chat, ChatMessage, ROLE_ASSISTANT, ROLE_USER
from beyondchats.models.pdf import PDFChunk
from beyondchats.models.types import utcnow
from beyondchats.services.prompts import (
    CHAT_SYSTEM_PROMPT,
    WELCOME_WITH_PDF,
    WELCOME_WITHOUT_PDF,
    format_chat_question,
    format_pdf_context,
)

logger = logging.getLogger(__name__)


def create_chat(db: Session, user_id: uuid.UUID, title: str, pdf_id: uuid.UUID | None = None) -> Chat:
    """Create the chat and its assistant welcome message. Commits."""
    chat = Chat(title=title, user_id=user_id, pdf_id=pdf_id)
    db.add(chat)
    db.flush()
    db.add(ChatMessage(
        chat_id=chat.id,
        content=WELCOME_WITH_PDF if pdf_id else WELCOME_WITHOUT_PDF,
        role=ROLE_ASSISTANT,
    ))
    db.commit()
    db.refresh(chat)
    return chat


def recent_history(db: Session, chat_id: uuid.UUID, limit: int | None = None) -> list[ChatMessage]:
    """Last `limit` messages of the chat, oldest first."""
    limit = limit if limit is not None else settings.chat_history_limit
    rows = (
        db.query(ChatMessage)
        .filter(ChatMessage.chat_id == chat_id)
        .order_by(ChatMessage.created_at.desc())
        .limit(limit)
        .all()
    )
    return list(reversed(rows))


def pdf_context(db: Session, pdf_id: uuid.UUID | None) -> str:
    """All chunks of the PDF as prompt text; empty string when there is no PDF or no chunks."""
    if pdf_id is None:
        return ""
    chunks = (
        db.query(PDFChunk)
        .filter(PDFChunk.pdf_id == pdf_id)
        .order_by(PDFChunk.page_number)
        .all()
    )
    return format_pdf_context(chunks)


def build_chat_messages(history: list[ChatMessage], content: str, question: str) -> list[dict]:
    """System prompt, prior turns (roles lower-cased), then the templated question."""
    messages = [{"role": "system", "content": CHAT_SYSTEM_PROMPT}]
    messages.extend({"role": m.role.lower(), "content": m.content} for m in history)
    messages.append({"role": "user", "content": format_chat_question(content, question)})
    return messages


def send_message(db: Session, chat: Chat, message: str) -> ChatMessage:
    """
    Store the user message, ask the model, store and return the assistant reply.
    History is read before the new message is stored so the question is not sent twice.
    """
    history = recent_history(db, chat.id)
    db.add(ChatMessage(chat_id=chat.id, content=message, role=ROLE_USER))
    db.commit()

    messages = build_chat_messages(history, pdf_context(db, chat.pdf_id), message)
    reply = get_llm_service().complete_chat(messages)

    assistant = ChatMessage(chat_id=chat.id, content=reply, role=ROLE_ASSISTANT)
    db.add(assistant)
    chat.updated_at = utcnow()
    db.commit()
    db.refresh(assistant)
    logger.info("chat %s: reply stored (%s chars, %s history messages)", chat.id, len(reply), len(history))
    return assistant
