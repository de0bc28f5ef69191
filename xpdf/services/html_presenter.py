# xpdf/services/html_presenter.py
"""
Blocks -> HTML fragment, using the CSS classes of the XPDF browser UI.
All user text is escaped; no markup from the LLM output is passed through.
"""
from html import escape
from typing import Iterable, List

from xpdf.models.blocks import (
    BlankLine,
    Bold,
    BulletItem,
    CodeBlock,
    Heading,
    InlineCode,
    InlineSpan,
    NumberedItem,
    Paragraph,
    RenderedBlock,
)
from xpdf.services.markdown_renderer import render_markdown

HEADING_MARKERS = {1: "▸▸▸", 2: "▸▸", 3: "▸"}


def render_spans(spans: Iterable[InlineSpan]) -> str:
    parts: List[str] = []
    for span in spans:
        if isinstance(span, InlineCode):
            parts.append(f'<code class="inline-code">{escape(span.text)}</code>')
        elif isinstance(span, Bold):
            parts.append(f'<strong class="bold-text">{escape(span.text)}</strong>')
        else:
            parts.append(escape(span.text))
    return "".join(parts)


def render_block(block: RenderedBlock) -> str:
    if isinstance(block, Heading):
        tag = f"h{block.level}"
        return (
            f'<{tag} class="output-{tag}">{HEADING_MARKERS[block.level]} '
            f"{render_spans(block.content)}</{tag}>"
        )
    if isinstance(block, NumberedItem):
        return (
            '<div class="output-numbered">'
            f'<span class="number-badge">{escape(block.index)}</span>'
            f"{render_spans(block.content)}</div>"
        )
    if isinstance(block, BulletItem):
        return (
            '<div class="output-bullet"><span class="bullet-icon">▸</span>'
            f"{render_spans(block.content)}</div>"
        )
    if isinstance(block, CodeBlock):
        return f'<pre class="code-block"><code>{escape(chr(10).join(block.lines))}</code></pre>'
    if isinstance(block, BlankLine):
        return '<div class="line-break"></div>'
    if isinstance(block, Paragraph):
        return f'<p class="output-text">{render_spans(block.content)}</p>'
    raise TypeError(f"Unknown block type: {type(block).__name__}")


def render_html(blocks: Iterable[RenderedBlock]) -> str:
    return "\n".join(render_block(b) for b in blocks)


def markdown_to_html(text: str) -> str:
    """Shortcut used by the API and CLI: LLM text straight to an HTML fragment."""
    return render_html(render_markdown(text))
