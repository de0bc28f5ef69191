# xpdf/services/pdf_service.py
"""
Born-digital PDF extractor.
Receives raw PDF bytes and returns the document text for the LLM prompt.

• "text" mode ....... PyMuPDF text layer, pages joined by blank lines
• "markdown" mode ... pymupdf4llm, keeps headings / tables as Markdown
"""
from fastapi import HTTPException
import fitz                    # PyMuPDF
import pymupdf4llm


def open_pdf(pdf_bytes: bytes) -> fitz.Document:
    try:
        doc = fitz.open(stream=pdf_bytes, filetype="pdf")
    except Exception as exc:
        raise HTTPException(status_code=400, detail=f"Invalid or corrupted PDF file: {exc}") from exc
    if doc.page_count == 0:   # MuPDF may "repair" garbage into an empty document
        doc.close()
        raise HTTPException(status_code=400, detail="Invalid or corrupted PDF file: no pages")
    return doc


def extract_text(pdf_bytes: bytes) -> str:
    doc = open_pdf(pdf_bytes)
    try:
        return "\n\n".join(page.get_text("text").strip() for page in doc).strip()
    finally:
        doc.close()


def extract_markdown(pdf_bytes: bytes) -> str:
    doc = open_pdf(pdf_bytes)
    try:
        return pymupdf4llm.to_markdown(doc, write_images=False).strip()
    except Exception as exc:
        raise HTTPException(500, f"PDF parsing failed: {exc}") from exc
    finally:
        doc.close()
