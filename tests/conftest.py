import os
import sys
from pathlib import Path

import fitz
import pytest

# Fix import path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# Settings are read at import time
os.environ.setdefault("OPENAI_API_KEY", "test-key")
os.environ["PDF_TEXT_MODE"] = "text"


def make_pdf(*pages: str) -> bytes:
    """Builds a small born-digital PDF, one text line per page (empty string = blank page)."""
    doc = fitz.open()
    for text in pages:
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


@pytest.fixture
def pdf_bytes() -> bytes:
    return make_pdf("Photosynthesis converts light into chemical energy.")
