import asyncio

import pytest

from xpdf.models.blocks import BulletItem, Heading
from xpdf.services.session import AnalysisSession


class FakeBackend:
    def __init__(self, fail=False):
        self.fail = fail
        self.translated = []

    async def explain(self, document):
        if self.fail:
            raise ConnectionError("backend down")
        return f"# Summary of {document.filename}\n- point"

    async def explain_more(self, document):
        if self.fail:
            raise ConnectionError("backend down")
        return "1. Step"

    async def translate(self, text, target_language):
        if self.fail:
            raise ConnectionError("backend down")
        self.translated.append((text, target_language))
        return f"[{target_language}] {text}"


@pytest.fixture
def session():
    s = AnalysisSession(FakeBackend())
    s.select_file("lecture.pdf", b"x" * 2048)
    return s


def test_select_file_logs_size(session):
    assert session.terminal == [
        "> FILE DETECTED: lecture.pdf",
        "> SIZE: 2.00 KB",
        "> STATUS: READY FOR ANALYSIS",
    ]
    assert session.document.size == 2048


def test_explain_without_file():
    s = AnalysisSession(FakeBackend())
    asyncio.run(s.explain())
    assert s.terminal[-1] == "> ERROR: NO FILE UPLOADED"
    assert s.simple_explanation == ""


def test_explain_stores_result_and_resets_loading(session):
    asyncio.run(session.explain())

    assert session.simple_explanation == "# Summary of lecture.pdf\n- point"
    assert not session.loading_simple
    assert session.terminal[-1] == "> ANALYSIS COMPLETE"
    assert isinstance(session.display_blocks("simple")[0], Heading)


def test_analyses_replace_each_other(session):
    asyncio.run(session.explain())
    asyncio.run(session.explain_more())

    assert session.simple_explanation == ""
    assert session.detailed_explanation == "1. Step"
    assert session.terminal[-1] == "> DEEP ANALYSIS COMPLETE"


def test_backend_failure_is_logged():
    s = AnalysisSession(FakeBackend(fail=True))
    s.select_file("a.pdf", b"%PDF")
    asyncio.run(s.explain_more())

    assert s.terminal[-1] == "> ERROR: CONNECTION FAILED"
    assert s.detailed_explanation == ""
    assert not s.loading_detailed


def test_second_analysis_refused_while_busy(session):
    session.loading_simple = True
    asyncio.run(session.explain_more())
    assert session.terminal[-1] == "> ERROR: ANALYSIS ALREADY RUNNING"


def test_translate_in_english_is_a_no_op(session):
    asyncio.run(session.explain())
    asyncio.run(session.translate("simple"))

    assert session.terminal[-1] == "> ALREADY IN ENGLISH"
    assert session.backend.translated == []


def test_translate_and_show_original(session):
    asyncio.run(session.explain())
    session.select_language("ta")
    asyncio.run(session.translate("simple"))

    assert session.backend.translated == [(session.simple_explanation, "ta")]
    assert session.display_text("simple").startswith("[ta] ")
    assert "> TRANSLATING TO TAMIL..." in session.terminal

    session.show_original("simple")
    assert session.display_text("simple") == session.simple_explanation
    assert isinstance(session.display_blocks("simple")[1], BulletItem)


def test_translation_failure_keeps_original():
    s = AnalysisSession(FakeBackend())
    s.select_file("a.pdf", b"%PDF")
    asyncio.run(s.explain())
    s.backend.fail = True
    s.select_language("ru")
    asyncio.run(s.translate("simple"))

    assert s.terminal[-1] == "> ERROR: TRANSLATION FAILED"
    assert s.translated_simple == ""
    assert not s.is_translating


def test_clear_file(session):
    asyncio.run(session.explain())
    session.clear_file()

    assert session.document is None
    assert session.display_blocks("simple") == []
    assert session.terminal[-2:] == ["> FILE CLEARED", "> READY FOR NEW UPLOAD"]


class SlowTranslateBackend(FakeBackend):
    async def translate(self, text, target_language):
        await asyncio.sleep(0.01)
        return await super().translate(text, target_language)


def test_second_translation_refused_while_one_runs():
    s = AnalysisSession(SlowTranslateBackend())
    s.select_file("a.pdf", b"%PDF")
    asyncio.run(s.explain())
    s.select_language("ta")

    async def both():
        await asyncio.gather(s.translate("simple"), s.translate("simple"))

    asyncio.run(both())

    assert len(s.backend.translated) == 1, "❌ Only one translation should reach the backend."
    assert "> ERROR: TRANSLATION ALREADY RUNNING" in s.terminal
    assert not s.is_translating


def test_new_file_drops_previous_translations(session):
    asyncio.run(session.explain())
    session.select_language("zh")
    asyncio.run(session.translate("simple"))
    session.translated_detailed = "old"

    session.select_file("next.pdf", b"%PDF")

    assert session.translated_simple == ""
    assert session.translated_detailed == ""
    assert session.display_text("simple") == ""


def test_copy_text_returns_what_is_displayed(session):
    asyncio.run(session.explain())
    session.select_language("si")
    asyncio.run(session.translate("simple"))

    assert session.copy_text("simple") == session.translated_simple
    assert session.terminal[-1] == "> TEXT COPIED TO CLIPBOARD"


def test_copy_with_nothing_displayed_fails(session):
    assert session.copy_text("detailed") == ""
    assert session.terminal[-1] == "> ERROR: COPY FAILED"


def test_boot_sequence():
    s = AnalysisSession(FakeBackend())
    s.boot()
    assert s.terminal[0] == "> INITIALIZING XPDF TERMINAL v2.0..."
    assert s.terminal[-1] == "> AWAITING INPUT..."
