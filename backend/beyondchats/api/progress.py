"""
Progress dashboard API.
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from beyondchats.database import get_db
from beyondchats.models.user import User
from beyondchats.schemas.progress import ProgressResponse
from beyondchats.api.deps import get_current_user, internal_error
from beyondchats.services.progress import compute_progress

router = APIRouter(prefix="/progress", tags=["progress"])
logger = logging.getLogger(__name__)


@router.get("", response_model=ProgressResponse)
def get_progress(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Quiz counts, average score, study time, strengths/weaknesses and recent attempts."""
    try:
        return ProgressResponse(**compute_progress(db, current_user.id))
    except Exception as e:
        logger.exception("Error fetching progress")
        raise internal_error("Failed to fetch progress", e)
