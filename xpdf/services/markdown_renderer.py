# xpdf/services/markdown_renderer.py
"""
Markdown-subset renderer
------------------------
LLM text -> ordered list of RenderedBlock.

Only a fixed subset is understood:

• ``` fences ............ CodeBlock (verbatim lines, language tag ignored)
• #, ##, ### ............ Heading
• 1. item ............... NumberedItem (number kept as written)
• - item / * item ....... BulletItem
• empty line ............ BlankLine
• anything else ......... Paragraph

Inside headings, list items and paragraphs, `code` and **bold** spans are
picked out by `format_inline`. Nothing here raises: malformed markup falls
back to plain text.
"""
import re
from dataclasses import dataclass, field
from typing import List

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
    PlainText,
    RenderedBlock,
)

FENCE_MARKER = "```"
HEADING_PREFIXES = (("### ", 3), ("## ", 2), ("# ", 1))   # longest first
BULLET_PREFIXES = ("- ", "* ")

_NUMBERED_RE = re.compile(r"^(\d+)\.\s(.+)$", re.ASCII)
_INLINE_CODE_RE = re.compile(r"`([^`]+)`")
_BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")


# -------- inline formatting --------
def _format_bold(text: str) -> List[InlineSpan]:
    spans: List[InlineSpan] = []
    last = 0
    for match in _BOLD_RE.finditer(text):
        if match.start() > last:
            spans.append(PlainText(text=text[last:match.start()]))
        spans.append(Bold(text=match.group(1)))
        last = match.end()
    if last < len(text):
        spans.append(PlainText(text=text[last:]))
    return spans


def format_inline(text: str) -> List[InlineSpan]:
    """
    Splits one line of content into PlainText / InlineCode / Bold spans.

    Inline code is matched first and its contents are never scanned for bold
    markers. Text between code spans gets the bold pass. Characters outside
    any span are kept exactly, so joining the span texts back together gives
    the line minus its delimiters.
    """
    spans: List[InlineSpan] = []
    last = 0
    for match in _INLINE_CODE_RE.finditer(text):
        if match.start() > last:
            spans.extend(_format_bold(text[last:match.start()]))
        spans.append(InlineCode(text=match.group(1)))
        last = match.end()
    if last < len(text):
        spans.extend(_format_bold(text[last:]))

    return spans or [PlainText(text=text)]


# -------- block rendering --------
@dataclass
class _Fence:
    is_open: bool = False
    lines: List[str] = field(default_factory=list)

    def toggle(self) -> List[str] | None:
        """Opens the fence, or closes it and hands back the collected lines."""
        if not self.is_open:
            self.is_open = True
            return None
        collected, self.lines = self.lines, []
        self.is_open = False
        return collected


def _classify(line: str) -> RenderedBlock:
    """Maps one line outside a fence to its block; first matching rule wins."""
    trimmed = line.strip()

    for prefix, level in HEADING_PREFIXES:
        if trimmed.startswith(prefix):
            return Heading(level=level, content=format_inline(trimmed[len(prefix):]))

    numbered = _NUMBERED_RE.match(trimmed)
    if numbered:
        return NumberedItem(index=numbered.group(1), content=format_inline(numbered.group(2)))

    if trimmed.startswith(BULLET_PREFIXES):
        return BulletItem(content=format_inline(trimmed[2:]))

    if not trimmed:
        return BlankLine()

    return Paragraph(content=format_inline(line))


def render_markdown(text: str) -> List[RenderedBlock]:
    """
    Converts a text blob into an ordered list of blocks, one per input line.

    Lines inside a ``` fence are collected verbatim and come out as a single
    CodeBlock once the closing fence is seen. A fence that is never closed
    produces nothing.
    """
    if not text:
        return []

    blocks: List[RenderedBlock] = []
    fence = _Fence()

    for line in text.split("\n"):
        if line.strip().startswith(FENCE_MARKER):
            collected = fence.toggle()
            if collected is not None:
                blocks.append(CodeBlock(lines=collected))
            continue

        if fence.is_open:
            fence.lines.append(line)
            continue

        blocks.append(_classify(line))

    return blocks
