# xpdf/services/document_ingestor.py
"""
Upload ingestion layer.

UploadFile  -> Document -> str (plain text OR markdown)

The Document only lives for the duration of one request; nothing is written
to disk.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from fastapi import HTTPException, UploadFile

from xpdf import config
from xpdf.services import pdf_service

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPES = {"application/pdf", "application/x-pdf"}


@dataclass(frozen=True)
class Document:
    filename: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


def is_pdf(filename: str, content_type: str | None) -> bool:
    return (content_type or "").lower() in PDF_CONTENT_TYPES or filename.lower().endswith(".pdf")


async def read_upload(file: UploadFile | None) -> Document:
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded.")

    filename = file.filename or "document.pdf"
    if not is_pdf(filename, file.content_type):
        raise HTTPException(400, f"Unsupported file type: {file.content_type or filename}")

    data = await file.read()
    if not data:
        raise HTTPException(400, "Uploaded file is empty.")
    if len(data) > config.MAX_UPLOAD_BYTES:
        raise HTTPException(413, f"File exceeds maximum size of {config.MAX_UPLOAD_MB:g} MB")

    return Document(filename=filename, data=data)


async def extract(document: Document) -> str:
    # PyMuPDF is synchronous and CPU-bound; keep it off the event loop
    if config.PDF_TEXT_MODE == "markdown":
        text = await asyncio.to_thread(pdf_service.extract_markdown, document.data)
    else:
        text = await asyncio.to_thread(pdf_service.extract_text, document.data)

    logger.info("Extracted %d chars from '%s' (%.2f KB)", len(text), document.filename, document.size / 1024)

    if not text.strip():
        raise HTTPException(422, "The document contains no extractable text.")
    return text


async def ingest(file: UploadFile | None) -> str:
    document = await read_upload(file)
    return await extract(document)
