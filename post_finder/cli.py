"""Command-line entry point.

  post-finder scan [--date-after YYYY-MM-DD] [--date-before YYYY-MM-DD] [--strategy pushdown|verification]
  post-finder ingest --input posts.jsonl [--reset]
  post-finder serve [--host HOST] [--port PORT]

``scan`` prints one post id per line on stdout. Diagnostics go to stderr so
the output can be piped straight into other tools.
"""

from __future__ import annotations
import argparse
import json
import sys
from datetime import datetime
from typing import List, Optional, Tuple

from rich.console import Console
from tqdm import tqdm

from .config import API_HOST, API_PORT, SCAN_STRATEGY
from .container import Container, container as default_container
from .domain.entities import Document, PostStatus
from .domain.services import ScanStrategy
from .exceptions import PostFinderError
from .error_handler import log_error

out = Console(highlight=False, soft_wrap=True)
err = Console(stderr=True, highlight=False, soft_wrap=True)


def _parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="post-finder", description="Find posts that carry a Read More block.")
    sub = ap.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="List published posts in a date range that contain the block")
    scan.add_argument('--date-after', help='Posts published on or after this date (YYYY-MM-DD). Default: 30 days ago')
    scan.add_argument('--date-before', help='Posts published on or before this date (YYYY-MM-DD). Default: today')
    scan.add_argument('--strategy', choices=[s.value for s in ScanStrategy], default=SCAN_STRATEGY,
                      help='pushdown: fast literal match in the store (may over-report); '
                           'verification: parse every candidate (exact, slower)')

    ingest = sub.add_parser("ingest", help="Load posts from a JSON Lines file into the store")
    ingest.add_argument('--input', required=True, help='JSON Lines file, one post object per line')
    ingest.add_argument('--reset', action='store_true', help='Delete all stored posts before loading')

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument('--host', default=API_HOST)
    serve.add_argument('--port', type=int, default=API_PORT)
    return ap.parse_args(argv)


def run_scan(args: argparse.Namespace, di: Container) -> int:
    use_case = di.find_marked_posts_use_case(args.strategy)
    window = use_case.window_for(args.date_after, args.date_before)
    err.print(f"[cyan]Searching for posts with the Read More block between {window.after} and {window.before}[/]")

    post_ids = use_case.execute(window)
    if not post_ids:
        err.print("[yellow]Warning:[/] No posts found in the specified date range.")
        return 0

    for post_id in post_ids:
        out.print(str(post_id))
    return 0


def _document_from_record(record: dict) -> Document:
    published_at = datetime.fromisoformat(record["published_at"])
    if published_at.tzinfo is not None:
        # Stored times are site-local wall clock, like the scan window dates
        raise ValueError(
            f"published_at must be a local time without a UTC offset, got {record['published_at']!r}"
        )
    return Document(
        id=int(record["id"]),
        title=str(record.get("title", "")),
        content=str(record.get("content", "")),
        status=PostStatus.from_value(record.get("status", PostStatus.PUBLISHED.value)),
        published_at=published_at,
    )


def _read_records(path: str) -> Tuple[List[Document], int]:
    documents: List[Document] = []
    errored = 0
    with open(path, 'r', encoding='utf-8') as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                documents.append(_document_from_record(json.loads(line)))
            except (ValueError, KeyError, TypeError) as e:
                errored += 1
                err.print(f"[red]Line {line_no} skipped:[/] {e}")
    return documents, errored


def run_ingest(args: argparse.Namespace, di: Container) -> int:
    repo = di.document_repository()
    if args.reset:
        err.print('[yellow]Resetting existing document store...[/]')
        repo.reset()

    documents, errored = _read_records(args.input)
    if not documents:
        err.print("[yellow]No posts to ingest.[/]")
        return 1 if errored else 0

    for document in tqdm(documents, desc="Posts", file=sys.stderr):
        repo.save_document(document)

    err.print(f"[green]Done.[/] loaded={len(documents)} skipped={errored} store_total={repo.count()}")
    return 0


def run_serve(args: argparse.Namespace) -> int:
    import uvicorn
    uvicorn.run("post_finder.api:app", host=args.host, port=args.port)
    return 0


def main(argv: Optional[List[str]] = None, di: Optional[Container] = None) -> int:
    args = _parse_arguments(argv)
    di = di or default_container

    try:
        if args.command == "scan":
            return run_scan(args, di)
        if args.command == "ingest":
            return run_ingest(args, di)
        return run_serve(args)
    except PostFinderError as e:
        log_error(e, f"post-finder {args.command} failed")
        err.print(f"[red]Error:[/] {e.message}")
        return 1
    except OSError as e:
        err.print(f"[red]Error:[/] {e}")
        return 1


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
