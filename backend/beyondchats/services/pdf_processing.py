"""
PDF processing: extract page text, chunk it and store PDFChunk rows.
Triggered on demand (POST /pdf/process), never on upload. Idempotent: a PDF that has chunks is left alone.
If extraction fails as a whole, two placeholder chunks are stored so chat and quizzes still work (demo mode).
"""
import logging
from typing import NamedTuple

from sqlalchemy.orm import Session

from beyondchats.models.pdf import PDF, PDFChunk
from beyondchats.services.chunking import chunk_page_text
from beyondchats.services.pdf_extract import extract_pages

logger = logging.getLogger(__name__)

MESSAGE_ALREADY_PROCESSED = "PDF already processed"
MESSAGE_PROCESSED = "PDF processed successfully"
MESSAGE_PLACEHOLDER = "PDF processed with sample content (demo mode)"


class ProcessResult(NamedTuple):
    message: str
    chunks: int
    pages: int | None = None  # None when nothing was processed


def placeholder_chunks(pdf: PDF) -> list[dict]:
    return [
        {
            "content": (
                f"Sample content from {pdf.title}. This is a demonstration of how the PDF processing would work. "
                "In a real implementation, this would contain the actual text extracted from the PDF document."
            ),
            "page_number": 1,
        },
        {
            "content": (
                "This is additional sample content to demonstrate the chunking system. Each chunk would typically "
                "contain 1000 characters or less of text from the PDF for optimal AI processing."
            ),
            "page_number": 2,
        },
    ]


def build_chunks(file_path: str) -> tuple[list[dict], int]:
    """Return ([{content, page_number}], page_count) for the file."""
    result = extract_pages(file_path)
    chunks = []
    for page in result.pages:
        for content in chunk_page_text(page.text):
            chunks.append({"content": content, "page_number": page.page_number})
    return chunks, result.page_count


def process_pdf(db: Session, pdf: PDF) -> ProcessResult:
    """Chunk the PDF into the database unless it already has chunks. Commits."""
    existing = db.query(PDFChunk).filter(PDFChunk.pdf_id == pdf.id).count()
    if existing > 0:
        return ProcessResult(message=MESSAGE_ALREADY_PROCESSED, chunks=existing)

    try:
        chunks, page_count = build_chunks(pdf.file_path)
        message = MESSAGE_PROCESSED
    except Exception:
        logger.exception("PDF processing failed for pdf_id=%s; storing placeholder chunks", pdf.id)
        chunks = placeholder_chunks(pdf)
        page_count = len(chunks)
        message = MESSAGE_PLACEHOLDER

    if chunks:
        db.add_all(PDFChunk(pdf_id=pdf.id, **c) for c in chunks)
    db.commit()
    logger.info("process_pdf: pdf_id=%s pages=%s chunks=%s", pdf.id, page_count, len(chunks))
    return ProcessResult(message=message, chunks=len(chunks), pages=page_count)
