# xpdf/config.py
"""
Runtime settings, read once from the environment (and a local .env file).
"""
import os

from dotenv import load_dotenv

load_dotenv()

# --- LLM ---
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
# Any OpenAI-compatible endpoint, e.g. https://generativelanguage.googleapis.com/v1beta/openai/
OPENAI_BASE_URL = os.getenv("OPENAI_BASE_URL") or None
LLM_MODEL = os.getenv("LLM_MODEL", "gpt-4o-mini")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.3"))

# --- PDF ---
PDF_TEXT_MODE = os.getenv("PDF_TEXT_MODE", "text")   # "text" | "markdown"

# --- HTTP ---
MAX_UPLOAD_MB = float(os.getenv("MAX_UPLOAD_MB", "20"))
MAX_UPLOAD_BYTES = int(MAX_UPLOAD_MB * 1024 * 1024)
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- Languages offered for translation ---
LANGUAGES = {
    "en": "English",
    "ta": "Tamil",
    "si": "Sinhala",
    "ru": "Russian",
    "zh": "Chinese",
}


def language_name(code: str) -> str:
    """Display name for a language code; unknown codes are returned unchanged."""
    return LANGUAGES.get(code.strip().lower(), code)
