"""CLI entry point: python -m documind URL [options]"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from documind.items import Document, ErrorResponse, ParseResponse
from documind.query import extract, handle_parse_request

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="documind",
        description=(
            "Extract a bounded, structured document from any web page:\n"
            "title, plain text, section outline, code samples and insights."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("url", metavar="URL",
                        help="Address of the page to extract")
    parser.add_argument("--html-file", default=None, metavar="PATH",
                        help="Parse this local HTML file instead of fetching URL")
    parser.add_argument("--timeout", type=int, default=None, metavar="N",
                        help="Fetch timeout in seconds (default: DOCUMIND_FETCH_TIMEOUT or 30)")
    parser.add_argument("--user-agent", default=None, metavar="UA",
                        help="Override the browser User-Agent header")
    parser.add_argument("--json", action="store_true", default=False,
                        help="Print the response body as JSON instead of a summary")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help="Logging level (default: WARNING)")
    return parser


def _parse_local(path: str, url: str) -> ParseResponse:
    try:
        html = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        return ParseResponse(status=400, error=ErrorResponse(error=f"Cannot read {path}: {exc}"))
    try:
        return ParseResponse(status=200, document=extract(html, url=url))
    except Exception:
        logger.exception("Document parsing error for %s", path)
        return ParseResponse(status=500, error=ErrorResponse(error="Failed to parse document"))


def _print_summary(document: Document) -> None:
    from rich import box
    from rich.console import Console
    from rich.rule import Rule
    from rich.table import Table

    console = Console()
    console.print()
    console.print(Rule(f"[bold cyan]{document.title}[/bold cyan]"))
    console.print(f"  [bold]URL      :[/bold] [green]{document.url}[/green]")
    console.print(f"  [bold]Content  :[/bold] {len(document.content):,} chars")
    console.print(f"  [bold]Insights :[/bold] {' | '.join(document.insights)}")
    console.print()

    if document.sections:
        tbl = Table(
            title=f"[bold green]Sections ({len(document.sections)})[/bold green]",
            box=box.SIMPLE_HEAVY,
        )
        tbl.add_column("Lvl", style="dim", justify="right", width=4, no_wrap=True)
        tbl.add_column("Heading", style="cyan", max_width=40, no_wrap=True)
        tbl.add_column("Content", max_width=60, no_wrap=True)
        for section in document.sections:
            tbl.add_row(str(section.level), section.heading, section.content[:60])
        console.print(tbl)

    if document.code_blocks:
        tbl = Table(
            title=f"[bold green]Code blocks ({len(document.code_blocks)})[/bold green]",
            box=box.SIMPLE_HEAVY,
        )
        tbl.add_column("#", style="dim", justify="right", width=4, no_wrap=True)
        tbl.add_column("Language", style="yellow", width=12, no_wrap=True)
        tbl.add_column("Selector", style="dim", width=20, no_wrap=True)
        tbl.add_column("Context", style="cyan", max_width=50, no_wrap=True)
        for index, block in enumerate(document.code_blocks, start=1):
            tbl.add_row(str(index), block.language, block.element, block.context)
        console.print(tbl)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.html_file:
        response = _parse_local(args.html_file, args.url)
    else:
        response = handle_parse_request(
            {"url": args.url}, timeout=args.timeout, user_agent=args.user_agent,
        )

    if args.json:
        print(json.dumps(response.body(), ensure_ascii=False, indent=2))
    elif response.document is not None:
        _print_summary(response.document)

    if not response.ok:
        assert response.error is not None
        print(f"ERROR: {response.error.error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
