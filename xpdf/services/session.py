# xpdf/services/session.py
"""
Analysis session
----------------
The state a front end keeps between the user picking a PDF and reading the
rendered answer: the chosen file, both explanations, their translations,
busy flags, and a terminal-style status log.

The backend is injected, so the same session drives the local services (CLI)
or a remote XPDF server.
"""
from __future__ import annotations

import logging
from typing import List, Literal, Optional, Protocol

from xpdf import config
from xpdf.models.blocks import RenderedBlock
from xpdf.services import document_ingestor, llm_service
from xpdf.services.document_ingestor import Document
from xpdf.services.markdown_renderer import render_markdown

logger = logging.getLogger(__name__)

Kind = Literal["simple", "detailed"]

BOOT_SEQUENCE = (
    "INITIALIZING XPDF TERMINAL v2.0...",
    "LOADING AI MODULES...",
    "PDF PARSER: READY",
    "AWAITING INPUT...",
)


class Backend(Protocol):
    async def explain(self, document: Document) -> str: ...

    async def explain_more(self, document: Document) -> str: ...

    async def translate(self, text: str, target_language: str) -> str: ...


class LocalBackend:
    """Runs extraction and the LLM calls in-process."""

    async def explain(self, document: Document) -> str:
        return await llm_service.explain(await document_ingestor.extract(document))

    async def explain_more(self, document: Document) -> str:
        return await llm_service.explain_more(await document_ingestor.extract(document))

    async def translate(self, text: str, target_language: str) -> str:
        return await llm_service.translate(text, target_language)


class AnalysisSession:
    def __init__(self, backend: Backend):
        self.backend = backend
        self.document: Optional[Document] = None
        self.simple_explanation = ""
        self.detailed_explanation = ""
        self.translated_simple = ""
        self.translated_detailed = ""
        self.selected_language = "en"
        self.loading_simple = False
        self.loading_detailed = False
        self.is_translating = False
        self.terminal: List[str] = []

    # -------- log --------
    def log(self, *lines: str) -> None:
        for line in lines:
            self.terminal.append(f"> {line}")

    def boot(self) -> None:
        self.log(*BOOT_SEQUENCE)

    @property
    def busy(self) -> bool:
        return self.loading_simple or self.loading_detailed

    # -------- file --------
    def select_file(self, filename: str, data: bytes) -> None:
        self.document = Document(filename=filename, data=data)
        self.simple_explanation = ""
        self.detailed_explanation = ""
        self.translated_simple = ""
        self.translated_detailed = ""
        self.log(
            f"FILE DETECTED: {filename}",
            f"SIZE: {len(data) / 1024:.2f} KB",
            "STATUS: READY FOR ANALYSIS",
        )

    def clear_file(self) -> None:
        self.document = None
        self.simple_explanation = ""
        self.detailed_explanation = ""
        self.log("FILE CLEARED", "READY FOR NEW UPLOAD")

    # -------- analysis --------
    async def explain(self) -> None:
        await self._analyse("simple")

    async def explain_more(self) -> None:
        await self._analyse("detailed")

    async def _analyse(self, kind: Kind) -> None:
        if self.document is None:
            self.log("ERROR: NO FILE UPLOADED")
            return
        if self.busy:
            self.log("ERROR: ANALYSIS ALREADY RUNNING")
            return

        simple = kind == "simple"
        self.simple_explanation = ""
        self.detailed_explanation = ""
        if simple:
            self.loading_simple = True
            self.translated_simple = ""
            self.log("EXECUTING: SIMPLE ANALYSIS", "AI PROCESSING...")
        else:
            self.loading_detailed = True
            self.translated_detailed = ""
            self.log("EXECUTING: DEEP ANALYSIS", "NEURAL NETWORK ACTIVE...")

        try:
            if simple:
                self.simple_explanation = await self.backend.explain(self.document)
                self.log("ANALYSIS COMPLETE")
            else:
                self.detailed_explanation = await self.backend.explain_more(self.document)
                self.log("DEEP ANALYSIS COMPLETE")
        except Exception:
            logger.exception("%s analysis failed for '%s'", kind, self.document.filename)
            self.log("ERROR: CONNECTION FAILED")
        finally:
            self.loading_simple = False
            self.loading_detailed = False

    # -------- translation --------
    def select_language(self, code: str) -> None:
        self.selected_language = code

    async def translate(self, kind: Kind) -> None:
        if self.selected_language == "en":
            self.log("ALREADY IN ENGLISH")
            return
        if self.is_translating:
            self.log("ERROR: TRANSLATION ALREADY RUNNING")
            return

        original = self.original_text(kind)
        if not original:
            self.log("ERROR: NOTHING TO TRANSLATE")
            return

        self.is_translating = True
        self.log(f"TRANSLATING TO {config.language_name(self.selected_language).upper()}...")
        try:
            translated = await self.backend.translate(original, self.selected_language)
            if kind == "simple":
                self.translated_simple = translated
            else:
                self.translated_detailed = translated
            self.log("TRANSLATION COMPLETE")
        except Exception:
            logger.exception("Translation to '%s' failed", self.selected_language)
            self.log("ERROR: TRANSLATION FAILED")
        finally:
            self.is_translating = False

    def show_original(self, kind: Kind) -> None:
        if kind == "simple":
            self.translated_simple = ""
        else:
            self.translated_detailed = ""

    # -------- display --------
    def original_text(self, kind: Kind) -> str:
        return self.simple_explanation if kind == "simple" else self.detailed_explanation

    def display_text(self, kind: Kind) -> str:
        translated = self.translated_simple if kind == "simple" else self.translated_detailed
        return translated or self.original_text(kind)

    def copy_text(self, kind: Kind) -> str:
        """The text a copy button would put on the clipboard: what is on screen."""
        text = self.display_text(kind)
        self.log("TEXT COPIED TO CLIPBOARD" if text else "ERROR: COPY FAILED")
        return text

    def display_blocks(self, kind: Kind) -> List[RenderedBlock]:
        return render_markdown(self.display_text(kind))
