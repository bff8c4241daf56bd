"""
Shared dependencies: get_current_user (single-tenant demo user), id parsing, 500 helper.
All PDF, chat and quiz APIs use get_current_user to scope by user_id.
"""
import logging
import uuid

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from beyondchats.config import settings
from beyondchats.database import ensure_demo_user, get_db
from beyondchats.models.user import User

logger = logging.getLogger(__name__)


def get_current_user(db: Session = Depends(get_db)) -> User:
    """No authentication yet: every request acts as the configured demo user."""
    return ensure_demo_user(db)


def parse_uuid(value: str | None) -> uuid.UUID | None:
    """Return the UUID, or None when value is empty or malformed (callers answer 404)."""
    if not value:
        return None
    try:
        return uuid.UUID(str(value))
    except ValueError:
        return None


def internal_error(message: str, exc: Exception) -> HTTPException:
    """500 with a fixed message; the underlying error is only exposed when DEBUG is on."""
    detail = message
    if getattr(settings, "debug", False):
        detail = f"{message}: {type(exc).__name__}: {exc}"
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
