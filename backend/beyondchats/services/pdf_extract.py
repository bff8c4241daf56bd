"""
Per-page PDF text extraction with PyMuPDF (text-based PDFs; no OCR).
A page that fails to extract is logged and skipped; a file that cannot be opened raises PDFExtractionError.
"""
import logging
from pathlib import Path
from typing import NamedTuple

import pymupdf

logger = logging.getLogger(__name__)


class PDFExtractionError(Exception):
    """The PDF file is missing or cannot be opened."""


class PageText(NamedTuple):
    page_number: int  # 1-based
    text: str


class ExtractionResult(NamedTuple):
    pages: list[PageText]  # only pages that extracted successfully
    page_count: int


def _normalize(text: str) -> str:
    """Collapse all whitespace runs (newlines included) to single spaces."""
    return " ".join((text or "").split())


def extract_pages(file_path: str | Path) -> ExtractionResult:
    """Open the PDF and return normalized text per page."""
    path = Path(file_path)
    if not path.exists():
        raise PDFExtractionError(f"PDF not found: {file_path}")
    try:
        doc = pymupdf.open(str(path))
    except Exception as e:
        raise PDFExtractionError(f"Could not open PDF {file_path}: {e}") from e
    pages: list[PageText] = []
    try:
        page_count = len(doc)
        for index in range(page_count):
            try:
                text = _normalize(doc[index].get_text("text"))
            except Exception as e:
                logger.warning("Error processing page %s of %s: %s", index + 1, path.name, e)
                continue
            pages.append(PageText(page_number=index + 1, text=text))
    finally:
        doc.close()
    return ExtractionResult(pages=pages, page_count=page_count)
