"""Line-oriented command-line front end.

Input format on stdin, one item per line:

1. space-separated stop words (may be empty)
2. number of documents N
3. N document lines, indexed with ids 0..N-1 and status ACTUAL
4. the query
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import sys
from typing import TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from search_server.config import Settings
from search_server.domain.errors import SearchServerError
from search_server.domain.model import DocumentStatus, RankedDocument
from search_server.observability.logging import configure_logging
from search_server.observability.tracing import init_tracing
from search_server.search_server import SearchServer


class InputFormatError(ValueError):
    """Raised when stdin does not follow the expected line layout."""


def read_line(stream: TextIO) -> str:
    return stream.readline().rstrip("\r\n")


def read_line_with_number(stream: TextIO) -> int:
    line = read_line(stream).strip()
    try:
        return int(line)
    except ValueError:
        raise InputFormatError(f"Expected a document count, got {line!r}") from None


def load_server(stream: TextIO, settings: Settings) -> tuple[SearchServer, str]:
    """Build a server from ``stream`` and return it with the trailing query line."""

    server = SearchServer(settings=settings, name="cli")
    server.set_stop_words(read_line(stream))
    document_count = read_line_with_number(stream)
    for document_id in range(document_count):
        server.add_document(document_id, read_line(stream), DocumentStatus.ACTUAL, [])
    return server, read_line(stream)


def _render_results(console: Console, results: Sequence[RankedDocument], plain: bool) -> None:
    if plain:
        for doc in results:
            console.print(str(doc), markup=False, highlight=False)
        return

    table = Table(title="Top documents")
    table.add_column("Document", justify="right", style="cyan")
    table.add_column("Relevance", justify="right")
    table.add_column("Rating", justify="right")
    for doc in results:
        table.add_row(str(doc.document_id), f"{doc.relevance:.6f}", str(doc.rating))
    console.print(table)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="search-server",
        description="Index documents from stdin and run one TF-IDF query",
    )
    parser.add_argument(
        "--status",
        choices=[status.value for status in DocumentStatus],
        default=None,
        help="Only return documents with this status (default: actual)",
    )
    parser.add_argument("--match", type=int, metavar="ID", help="Explain which query words document ID contains")
    parser.add_argument("--plain", action="store_true", help="Print one result per line instead of a table")
    parser.add_argument("--log-level", default=None, help="Override SEARCH_SERVER_LOG_LEVEL")
    return parser


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None, console: Console | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    configure_logging(args.log_level or settings.log_level, json_output=settings.log_json)
    if settings.tracing_enabled:
        init_tracing(settings.service_name)
    console = console or Console()
    stream = stdin or sys.stdin

    try:
        server, query = load_server(stream, settings)
        if args.match is not None:
            result = server.match_document(query, args.match)
            console.print(f"status = {result.status.value}", markup=False, highlight=False)
            console.print(f"words = {' '.join(result.words)}", markup=False, highlight=False)
            return 0

        status = DocumentStatus(args.status) if args.status else None
        _render_results(console, server.find_top_documents(query, status), args.plain)
    except (SearchServerError, InputFormatError) as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
