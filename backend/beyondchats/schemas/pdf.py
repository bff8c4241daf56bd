"""
PDF request/response schemas.
"""
from datetime import datetime

from beyondchats.schemas.common import CamelModel


class PDFResponse(CamelModel):
    id: str
    title: str
    filename: str
    file_size: int
    upload_date: datetime


class PDFUploadResponse(CamelModel):
    success: bool = True
    pdf: PDFResponse


class PDFProcessRequest(CamelModel):
    pdf_id: str | None = None


class PDFProcessResponse(CamelModel):
    success: bool = True
    message: str
    pages: int | None = None  # omitted when the PDF was already processed
    chunks: int
