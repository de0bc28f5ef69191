# xpdf/routers/analysis.py
"""
Analysis router
===============
POST /api/explain ........ PDF -> summary + bullet notes
POST /api/explain-more ... PDF -> detailed step-by-step explanation
POST /api/translate ...... text -> text in another language
POST /api/render ......... text -> rendered blocks + HTML
GET  /api/languages ...... languages offered for translation

The PDF endpoints take the upload in the multipart field `document`,
extract its text and hand it to the LLM; the answer is returned verbatim.
"""
import logging
import time

from fastapi import APIRouter, File, HTTPException, UploadFile

from xpdf import config
from xpdf.models.response import (
    DetailedExplanationResponse,
    ExplanationResponse,
    Language,
    LanguagesResponse,
    RenderRequest,
    RenderResponse,
    TranslateRequest,
    TranslateResponse,
)
from xpdf.services import document_ingestor as ing
from xpdf.services import llm_service
from xpdf.services.html_presenter import render_html
from xpdf.services.markdown_renderer import render_markdown

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.post("/explain", response_model=ExplanationResponse)
async def explain_document(document: UploadFile | None = File(None)):
    start = time.time()
    text = await ing.ingest(document)
    try:
        explanation = await llm_service.explain(text)
    except llm_service.LLMServiceError:
        logger.exception("Simple explanation failed for '%s'", document.filename)
        raise HTTPException(status_code=502, detail="Error processing document.")

    logger.info("explain '%s' done in %.2fs", document.filename, time.time() - start)
    return ExplanationResponse(explanation=explanation)


@router.post("/explain-more", response_model=DetailedExplanationResponse)
async def explain_document_more(document: UploadFile | None = File(None)):
    start = time.time()
    text = await ing.ingest(document)
    try:
        detailed = await llm_service.explain_more(text)
    except llm_service.LLMServiceError:
        logger.exception("Detailed explanation failed for '%s'", document.filename)
        raise HTTPException(status_code=502, detail="Error processing document.")

    logger.info("explain-more '%s' done in %.2fs", document.filename, time.time() - start)
    return DetailedExplanationResponse(detailed_explanation=detailed)


@router.post("/translate", response_model=TranslateResponse)
async def translate_text(request: TranslateRequest):
    try:
        translated = await llm_service.translate(request.text, request.target_language)
    except llm_service.LLMServiceError:
        logger.exception("Translation to '%s' failed", request.target_language)
        raise HTTPException(status_code=502, detail="Error translating text.")
    return TranslateResponse(translated_text=translated)


@router.post("/render", response_model=RenderResponse)
def render_text(request: RenderRequest):
    blocks = render_markdown(request.text)
    return RenderResponse(blocks=blocks, html=render_html(blocks))


@router.get("/languages", response_model=LanguagesResponse)
def list_languages():
    return LanguagesResponse(
        languages=[Language(code=code, name=name) for code, name in config.LANGUAGES.items()]
    )
