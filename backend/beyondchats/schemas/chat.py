"""
Chat and chat message schemas.
"""
from datetime import datetime

from beyondchats.schemas.common import CamelModel


class ChatCreateRequest(CamelModel):
    title: str | None = None
    pdf_id: str | None = None


class ChatSendRequest(CamelModel):
    message: str | None = None
    chat_id: str | None = None
    pdf_id: str | None = None  # accepted for client compatibility; the chat's own PDF is used


class PDFSummary(CamelModel):
    id: str
    title: str


class CreatedChat(CamelModel):
    id: str
    title: str
    pdf_id: str | None = None
    created_at: datetime


class ChatCreateResponse(CamelModel):
    success: bool = True
    chat: CreatedChat


class ChatResponse(CamelModel):
    id: str
    title: str
    user_id: str
    pdf_id: str | None = None
    created_at: datetime
    updated_at: datetime
    pdf: PDFSummary | None = None


class MessageResponse(CamelModel):
    id: str
    content: str
    role: str  # USER | ASSISTANT | SYSTEM
    created_at: datetime


class ChatSendResponse(CamelModel):
    success: bool = True
    message: MessageResponse
