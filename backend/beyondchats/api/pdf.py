"""
PDF API: upload (PDF only, max 10MB), list, get, delete, and on-demand processing into chunks.
Scoped by current user.
"""
import logging
import re
import uuid
from pathlib import Path

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from sqlalchemy.orm import Session

from beyondchats.config import settings
from beyondchats.database import get_db
from beyondchats.models.pdf import PDF
from beyondchats.models.user import User
from beyondchats.schemas.common import SuccessResponse
from beyondchats.schemas.pdf import (
    PDFProcessRequest,
    PDFProcessResponse,
    PDFResponse,
    PDFUploadResponse,
)
from beyondchats.api.deps import get_current_user, internal_error, parse_uuid
from beyondchats.services.pdf_processing import process_pdf

router = APIRouter(prefix="/pdf", tags=["pdf"])
logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
PDF_NOT_FOUND = "PDF not found"


def _pdf_to_response(p: PDF) -> PDFResponse:
    return PDFResponse(
        id=str(p.id),
        title=p.title,
        filename=p.filename,
        file_size=p.file_size,
        upload_date=p.upload_date,
    )


def _default_title(filename: str) -> str:
    return re.sub(r"\.pdf$", "", filename, flags=re.IGNORECASE) or filename


def _get_owned_pdf(db: Session, pdf_id: str | None, user: User) -> PDF | None:
    pid = parse_uuid(pdf_id)
    if pid is None:
        return None
    return db.query(PDF).filter(PDF.id == pid, PDF.user_id == user.id).first()


@router.post("/upload", response_model=PDFUploadResponse)
def upload_pdf(
    file: UploadFile | None = File(None),
    title: str | None = Form(None),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Upload one PDF (multipart: file, optional title). Nothing is stored when validation fails."""
    if file is None or not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")
    if file.content_type != PDF_MIME_TYPE:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="File must be a PDF")
    contents = file.file.read()
    if len(contents) > settings.max_upload_bytes:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="File size must be less than 10MB")

    file_path: Path | None = None
    try:
        upload_dir = settings.upload_path
        upload_dir.mkdir(parents=True, exist_ok=True)
        extension = file.filename.rsplit(".", 1)[-1] if "." in file.filename else "pdf"
        file_path = upload_dir / f"{uuid.uuid4()}.{extension}"
        file_path.write_bytes(contents)
        pdf = PDF(
            title=(title or "").strip() or _default_title(file.filename),
            filename=file.filename,
            file_path=str(file_path),
            file_size=len(contents),
            user_id=current_user.id,
        )
        db.add(pdf)
        db.commit()
        db.refresh(pdf)
    except Exception as e:
        db.rollback()
        if file_path is not None:
            file_path.unlink(missing_ok=True)
        logger.exception("Upload failed for %s", file.filename)
        raise internal_error("Failed to upload PDF", e)
    logger.info("Uploaded PDF %s (%s bytes) as %s", pdf.filename, pdf.file_size, pdf.id)
    return PDFUploadResponse(pdf=_pdf_to_response(pdf))


@router.get("/list", response_model=list[PDFResponse])
def list_pdfs(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Current user's PDFs, newest upload first."""
    try:
        items = (
            db.query(PDF)
            .filter(PDF.user_id == current_user.id)
            .order_by(PDF.upload_date.desc())
            .all()
        )
    except Exception as e:
        logger.exception("Error fetching PDFs")
        raise internal_error("Failed to fetch PDFs", e)
    return [_pdf_to_response(p) for p in items]


@router.post("/process", response_model=PDFProcessResponse, response_model_exclude_none=True)
def process(
    data: PDFProcessRequest,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Extract and chunk a PDF. Already-processed PDFs are reported, not reprocessed."""
    if not data.pdf_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="PDF ID is required")
    try:
        pdf = _get_owned_pdf(db, data.pdf_id, current_user)
        if not pdf:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PDF_NOT_FOUND)
        result = process_pdf(db, pdf)
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("PDF processing error for %s", data.pdf_id)
        raise internal_error("Failed to process PDF", e)
    return PDFProcessResponse(message=result.message, pages=result.pages, chunks=result.chunks)


@router.get("/{pdf_id}", response_model=PDFResponse)
def get_pdf(
    pdf_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Get one PDF's metadata; 404 if not owned."""
    try:
        pdf = _get_owned_pdf(db, pdf_id, current_user)
    except Exception as e:
        logger.exception("Error fetching PDF %s", pdf_id)
        raise internal_error("Failed to fetch PDF", e)
    if not pdf:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PDF_NOT_FOUND)
    return _pdf_to_response(pdf)


@router.delete("/{pdf_id}", response_model=SuccessResponse)
def delete_pdf(
    pdf_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """Delete a PDF, its chunks and its stored file. Chats and quizzes on it keep existing without a PDF."""
    try:
        pdf = _get_owned_pdf(db, pdf_id, current_user)
        if not pdf:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=PDF_NOT_FOUND)
        stored = Path(pdf.file_path)
        db.delete(pdf)
        db.commit()
    except HTTPException:
        raise
    except Exception as e:
        db.rollback()
        logger.exception("Error deleting PDF %s", pdf_id)
        raise internal_error("Failed to delete PDF", e)
    try:
        stored.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("PDF %s deleted but file %s could not be removed: %s", pdf_id, stored, e)
    return SuccessResponse()
