# xpdf/models/blocks.py
"""
Structured output of the markdown-subset renderer.

A rendered document is an ordered list of blocks; blocks that carry text hold
an ordered list of inline spans. Every model has a `kind` tag so the lists
serialise to JSON that a front end can switch on.
"""
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, Field


# --- Inline spans ---
class PlainText(BaseModel):
    kind: Literal["text"] = "text"
    text: str


class InlineCode(BaseModel):
    kind: Literal["code"] = "code"
    text: str


class Bold(BaseModel):
    kind: Literal["bold"] = "bold"
    text: str


InlineSpan = Annotated[Union[PlainText, InlineCode, Bold], Field(discriminator="kind")]


# --- Blocks ---
class Heading(BaseModel):
    kind: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=3, description="1 for '# ', 2 for '## ', 3 for '### '")
    content: List[InlineSpan]


class NumberedItem(BaseModel):
    kind: Literal["numbered_item"] = "numbered_item"
    index: str = Field(..., description="Number exactly as written in the source line")
    content: List[InlineSpan]


class BulletItem(BaseModel):
    kind: Literal["bullet_item"] = "bullet_item"
    content: List[InlineSpan]


class CodeBlock(BaseModel):
    kind: Literal["code_block"] = "code_block"
    lines: List[str] = Field(..., description="Raw lines between the fence markers")


class BlankLine(BaseModel):
    kind: Literal["blank_line"] = "blank_line"


class Paragraph(BaseModel):
    kind: Literal["paragraph"] = "paragraph"
    content: List[InlineSpan]


RenderedBlock = Annotated[
    Union[Heading, NumberedItem, BulletItem, CodeBlock, BlankLine, Paragraph],
    Field(discriminator="kind"),
]
