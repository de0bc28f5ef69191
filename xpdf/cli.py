"""CLI to explain or translate a PDF from the terminal.

    python -m xpdf.cli notes.pdf --mode detailed --language ta
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Iterable, List

from rich.console import Console
from rich.markup import escape

from xpdf import config
from xpdf.models.blocks import (
    BlankLine,
    Bold,
    BulletItem,
    CodeBlock,
    Heading,
    InlineCode,
    InlineSpan,
    NumberedItem,
    RenderedBlock,
)
from xpdf.services.html_presenter import render_html
from xpdf.services.session import AnalysisSession, LocalBackend

console = Console()

HEADING_STYLES = {1: "bold magenta", 2: "bold cyan", 3: "bold green"}


def spans_markup(spans: Iterable[InlineSpan]) -> str:
    parts: List[str] = []
    for span in spans:
        if isinstance(span, InlineCode):
            parts.append(f"[yellow]{escape(span.text)}[/yellow]")
        elif isinstance(span, Bold):
            parts.append(f"[bold]{escape(span.text)}[/bold]")
        else:
            parts.append(escape(span.text))
    return "".join(parts)


def block_markup(block: RenderedBlock) -> str:
    """One block as rich console markup."""
    if isinstance(block, Heading):
        style = HEADING_STYLES[block.level]
        return f"[{style}]{'▸' * (4 - block.level)} {spans_markup(block.content)}[/{style}]"
    if isinstance(block, NumberedItem):
        return f"  [reverse] {escape(block.index)} [/reverse] {spans_markup(block.content)}"
    if isinstance(block, BulletItem):
        return f"  [cyan]▸[/cyan] {spans_markup(block.content)}"
    if isinstance(block, CodeBlock):
        return "\n".join(f"[dim]│[/dim] [green]{escape(line)}[/green]" for line in block.lines)
    if isinstance(block, BlankLine):
        return ""
    return spans_markup(block.content)


def print_blocks(blocks: Iterable[RenderedBlock]) -> None:
    for block in blocks:
        console.print(block_markup(block), highlight=False)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Explain a PDF document with an LLM")
    parser.add_argument("pdf", type=Path, help="Path to the PDF file")
    parser.add_argument(
        "--mode", choices=["simple", "detailed"], default="simple",
        help="simple = summary + notes, detailed = step-by-step explanation",
    )
    parser.add_argument(
        "--language", default="en",
        help=f"Translate the result ({', '.join(config.LANGUAGES)})",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument("--html", action="store_true", help="Print an HTML fragment instead of formatted text")
    output.add_argument("--raw", action="store_true", help="Print the answer text as returned, for copying")
    args = parser.parse_args(argv)

    logging.basicConfig(level=config.LOG_LEVEL, format="%(name)s - %(levelname)s - %(message)s")

    if not args.pdf.is_file():
        console.print(f"[red]Error: {args.pdf} not found[/red]")
        sys.exit(1)

    session = AnalysisSession(LocalBackend())
    session.boot()
    session.select_file(args.pdf.name, args.pdf.read_bytes())
    session.select_language(args.language)

    async def run():
        if args.mode == "simple":
            await session.explain()
        else:
            await session.explain_more()
        if session.original_text(args.mode) and args.language != "en":
            await session.translate(args.mode)

    asyncio.run(run())

    console.print(f"[dim]{escape(chr(10).join(session.terminal))}[/dim]\n", highlight=False)

    if not session.original_text(args.mode):
        sys.exit(1)

    if args.raw:
        print(session.copy_text(args.mode))
    elif args.html:
        print(render_html(session.display_blocks(args.mode)))
    else:
        print_blocks(session.display_blocks(args.mode))


if __name__ == "__main__":
    main()
