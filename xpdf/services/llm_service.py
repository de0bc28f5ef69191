# xpdf/services/llm_service.py
"""
This service sends document text to a Large Language Model and returns the
generated text verbatim: a short summary with notes, a detailed tutor-style
explanation, or a translation.
"""
import asyncio
import logging

import openai
from openai import AsyncOpenAI

from xpdf import config

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3

# Worth another attempt; any other openai.APIError fails straight away
TRANSIENT_ERRORS = (
    openai.APIConnectionError,   # includes APITimeoutError
    openai.RateLimitError,
    openai.InternalServerError,
)

_client: AsyncOpenAI | None = None


class LLMServiceError(RuntimeError):
    """The generative-text service could not produce an answer."""


def get_client() -> AsyncOpenAI:
    # Created on first use so importing the app never needs an API key
    global _client
    if _client is None:
        _client = AsyncOpenAI(api_key=config.OPENAI_API_KEY, base_url=config.OPENAI_BASE_URL, max_retries=0)
    return _client


# --- Prompt templates ---
EXPLAIN_PROMPT = """
You are a helpful study assistant. A student has uploaded a document.
Please do the following based on this text:
1. Provide a concise, one-paragraph summary of the entire document.
2. Provide a simple set of bullet-point notes covering the main topics.

Document Text:
\"\"\"
{text}
\"\"\"
"""

EXPLAIN_MORE_PROMPT = """
You are an expert tutor. A student has uploaded a document and needs a detailed breakdown.
Please provide a deep, step-by-step explanation of the content.
- If there are calculations, explain the math and the steps.
- If there is programming code, explain the logic line-by-line.
- If it's a concept, explain it with examples or analogies.

Document Text:
\"\"\"
{text}
\"\"\"
"""

TRANSLATE_PROMPT = """
Translate the following text into {language}.
Keep the Markdown formatting exactly as it is: headings, numbered and bullet lists,
**bold** markers, `inline code` and ``` code blocks. Do not translate code.
Return only the translation, with no additional text or explanations.

Text:
\"\"\"
{text}
\"\"\"
"""


async def _complete(prompt: str) -> str:
    """Single-turn chat completion with a short exponential backoff."""
    for attempt in range(MAX_ATTEMPTS):
        try:
            response = await get_client().chat.completions.create(
                model=config.LLM_MODEL,
                messages=[{"role": "user", "content": prompt}],
                temperature=config.LLM_TEMPERATURE,
            )
            return response.choices[0].message.content or ""
        except TRANSIENT_ERRORS as e:
            if attempt < MAX_ATTEMPTS - 1:
                wait = 2 ** attempt
                logger.warning("LLM call failed (attempt %d), retrying in %ss: %s", attempt + 1, wait, str(e)[:80])
                await asyncio.sleep(wait)
            else:
                raise LLMServiceError(f"The LLM API call failed: {e}") from e
        except openai.APIError as e:
            raise LLMServiceError(f"The LLM API call failed: {e}") from e


async def explain(text: str) -> str:
    """
    Summary plus bullet-point notes for a document.

    Args:
        text: The full extracted text of the document.

    Returns:
        The model's answer, as Markdown-flavoured text.
    """
    return await _complete(EXPLAIN_PROMPT.format(text=text))


async def explain_more(text: str) -> str:
    """Step-by-step breakdown of a document (maths, code, concepts)."""
    return await _complete(EXPLAIN_MORE_PROMPT.format(text=text))


async def translate(text: str, target_language: str) -> str:
    language = config.language_name(target_language)
    logger.info("Translating %d chars to %s", len(text), language)
    return await _complete(TRANSLATE_PROMPT.format(language=language, text=text))
