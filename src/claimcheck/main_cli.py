"""Command-line host for claim verification.

Ingests files and URLs into a fresh session, then asks the judge whether
they support the claim.

Usage:
    claimcheck --claim "The sky is blue" --file notes.pdf --url https://example.com/article
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from rich.console import Console

from .config import get_settings
from .errors import ClaimCheckError
from .log import get_logger, setup_logging
from .pipeline.session import Session
from .rendering.console import print_sources, print_verdict
from .schemas.source import FileUpload

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="claimcheck",
        description="Check whether a set of documents and web pages supports a claim.",
    )
    parser.add_argument("--claim", help="Claim to verify (defaults to CLAIMCHECK_PENDING_CLAIM)")
    parser.add_argument("--file", dest="files", action="append", default=[], metavar="PATH",
                        help="Document or image to use as evidence (repeatable)")
    parser.add_argument("--url", dest="urls", action="append", default=[], metavar="URL",
                        help="Web page to use as evidence (repeatable)")
    return parser


async def run(claim: str, files: List[str], urls: List[str], console: Console) -> int:
    session = Session(pending_claim=claim, on_status=lambda msg: console.print(f"[dim]{msg}[/dim]"))

    uploads = []
    for path in files:
        try:
            uploads.append(FileUpload.from_path(path))
        except OSError as e:
            console.print(f"[red]Cannot read {path}: {e.strerror}[/red]")

    for outcome in await session.add_files(uploads):
        if not outcome.ok:
            console.print(f"[red]{outcome.error}[/red]")

    for url in urls:
        try:
            await session.add_url(url)
        except ClaimCheckError as e:
            console.print(f"[red]{e}[/red]")

    print_sources(console, session.sources, session.store.total_file_bytes)

    try:
        verdict = await session.verify()
    except ClaimCheckError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        return 1

    print_verdict(console, verdict)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    claim = args.claim if args.claim is not None else (get_settings().PENDING_CLAIM or "")
    console = Console()
    return asyncio.run(run(claim, args.files, args.urls, console))


if __name__ == "__main__":
    sys.exit(main())
