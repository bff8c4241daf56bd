"""
Chat API: create/list/get/delete chats, read messages, and send a message to the assistant.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from beyondchats.database import get_db
from beyondchats.models.chat import Chat, ChatMessage
from beyondchats.models.pdf import PDF
from beyondchats.models.user import User
from beyondchats.schemas.chat import (
    ChatCreateRequest,
    ChatCreateResponse,
    ChatResponse,
    ChatSendRequest,
    ChatSendResponse,
    CreatedChat,
    MessageResponse,
    PDFSummary,
)
from beyondchats.schemas.common import SuccessResponse
from beyondchats.api.deps import get_current_user, internal_error, parse_uuid
from beyondchats.services import chat_service

router = APIRouter(prefix="/chat", tags=["chat"])
logger = logging.getLogger(__name__)

CHAT_NOT_FOUND = "Chat not found"


def _message_to_response(m: ChatMessage) -> MessageResponse:
    return MessageResponse(id=str(m.id), content=m.content, role=m.role, created_at=m.created_at)


def _chat_to_response(c: Chat) -> ChatResponse:
    return ChatResponse(
        id=str(c.id),
        title=c.title,
        user_id=str(c.user_id),
        pdf_id=str(c.pdf_id) if c.pdf_id else None,
        created_at=c.created_at,
        updated_at=c.updated_at,
        pdf=PDFSummary(id=str(c.pdf.id), title=c.pdf.title) if c.pdf else None,
    )


def _get_owned_chat(db: Session, chat_id: str | None, user: User) -> Chat | None:
    cid = parse_uuid(chat_id)
    if cid is None:
        return None
    return db.query(Chat).filter(Chat.id == cid, Chat.user_id == user.id).first()


@router.post("", response_model=ChatSendResponse)
def send_message(
    data: ChatSendRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Store the user's message, answer it from the chat's PDF and recent history, return the reply."""
    if not data.message or not data.chat_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Message and chat ID are required")
    try:
        chat = _get_owned_chat(db, data.chat_id, current_user)
        if not chat:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CHAT_NOT_FOUND)
        reply = chat_service.send_message(db, chat, data.message)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Chat error for chat %s", data.chat_id)
        raise internal_error("Failed to process chat message", e)
    return ChatSendResponse(message=_message_to_response(reply))


@router.post("/create", response_model=ChatCreateResponse)
def create_chat(
    data: ChatCreateRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """New chat, optionally bound to one of the user's PDFs. Starts with a welcome message."""
    title = (data.title or "").strip()
    if not title:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Chat title is required")
    try:
        pdf_id = None
        if data.pdf_id:
            pid = parse_uuid(data.pdf_id)
            pdf = (
                db.query(PDF).filter(PDF.id == pid, PDF.user_id == current_user.id).first()
                if pid else None
            )
            if not pdf:
                raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="PDF not found")
            pdf_id = pdf.id
        chat = chat_service.create_chat(db, current_user.id, title, pdf_id)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Error creating chat")
        raise internal_error("Failed to create chat", e)
    return ChatCreateResponse(
        chat=CreatedChat(
            id=str(chat.id),
            title=chat.title,
            pdf_id=str(chat.pdf_id) if chat.pdf_id else None,
            created_at=chat.created_at,
        )
    )


@router.get("/list", response_model=list[ChatResponse])
def list_chats(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Current user's chats, most recently active first."""
    try:
        chats = (
            db.query(Chat)
            .filter(Chat.user_id == current_user.id)
            .order_by(Chat.updated_at.desc())
            .all()
        )
        return [_chat_to_response(c) for c in chats]
    except Exception as e:
        logger.exception("Error fetching chats")
        raise internal_error("Failed to fetch chats", e)


@router.get("/{chat_id}", response_model=ChatResponse)
def get_chat(
    chat_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    try:
        chat = _get_owned_chat(db, chat_id, current_user)
    except Exception as e:
        logger.exception("Error fetching chat %s", chat_id)
        raise internal_error("Failed to fetch chat", e)
    if not chat:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CHAT_NOT_FOUND)
    return _chat_to_response(chat)


@router.delete("/{chat_id}", response_model=SuccessResponse)
def delete_chat(
    chat_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete the chat and all of its messages."""
    try:
        chat = _get_owned_chat(db, chat_id, current_user)
        if not chat:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CHAT_NOT_FOUND)
        db.delete(chat)
        db.commit()
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Error deleting chat %s", chat_id)
        raise internal_error("Failed to delete chat", e)
    return SuccessResponse()


@router.get("/{chat_id}/messages", response_model=list[MessageResponse])
def list_messages(
    chat_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """All messages of the chat, oldest first. An unknown chat yields an empty list."""
    try:
        chat = _get_owned_chat(db, chat_id, current_user)
        if not chat:
            return []
        rows = (
            db.query(ChatMessage)
            .filter(ChatMessage.chat_id == chat.id)
            .order_by(ChatMessage.created_at.asc())
            .all()
        )
    except Exception as e:
        logger.exception("Error fetching messages for chat %s", chat_id)
        raise internal_error("Failed to fetch messages", e)
    return [_message_to_response(m) for m in rows]
