"""Terminal rendering of sources and verdicts with Rich."""

from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from claimcheck.schemas.source import Source
from claimcheck.schemas.verdict import Verdict, VerdictCategory

VERDICT_STYLES = {
    VerdictCategory.SUPPORTED: "green",
    VerdictCategory.CONTRADICTED: "red",
    VerdictCategory.PARTIALLY_SUPPORTED: "yellow",
    VerdictCategory.INSUFFICIENT_EVIDENCE: "yellow",
}


def format_size(size_bytes: int | None) -> str:
    if size_bytes is None:
        return "-"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


def sources_table(sources: Sequence[Source], total_file_bytes: int | None = None) -> Table:
    """Rows are numbered by combined index, the same index remove_at() takes."""
    caption = None
    if total_file_bytes is not None:
        caption = f"{len(sources)} source(s), {format_size(total_file_bytes)} of files"
    table = Table(title="Sources", caption=caption)
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Label")
    table.add_column("Size", justify="right")
    table.add_column("Chars", justify="right")
    for i, source in enumerate(sources):
        table.add_row(
            str(i),
            source.origin,
            source.label,
            format_size(source.size_bytes),
            str(len(source.content)),
        )
    return table


def verdict_panel(verdict: Verdict) -> Panel:
    style = VERDICT_STYLES[verdict.category]
    return Panel(
        verdict.explanation.strip(),
        title=f"[bold]Verdict: {verdict.category.value}[/bold]",
        subtitle=f"{verdict.source_count} source(s) · {verdict.model}" if verdict.model else None,
        border_style=style,
    )


def print_sources(console: Console, sources: Sequence[Source], total_file_bytes: int | None = None):
    if not sources:
        console.print("[dim]No sources added.[/dim]")
        return
    console.print(sources_table(sources, total_file_bytes))


def print_verdict(console: Console, verdict: Verdict):
    console.print(verdict_panel(verdict))
