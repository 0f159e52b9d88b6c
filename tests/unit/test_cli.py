import pytest
from unittest.mock import patch
from rich.console import Console
from claimcheck import main_cli
from claimcheck.rendering.console import format_size, sources_table, verdict_panel
from claimcheck.schemas.verdict import Verdict, VerdictCategory

def test_parser_collects_repeatable_inputs():
    args = main_cli.build_parser().parse_args(
        ["--claim", "c", "--file", "a.txt", "--file", "b.pdf", "--url", "https://x.org"]
    )
    assert args.claim == "c"
    assert args.files == ["a.txt", "b.pdf"]
    assert args.urls == ["https://x.org"]

@pytest.mark.asyncio
async def test_run_reports_missing_sources(tmp_path):
    """
    WHY: Precondition failures must be reported as a short message with a non-zero exit code.
    HOW: Run with a claim but only a non-existent file.
    EXPECTED: Exit code 1 and a 'Please add at least one source' message.
    """
    console = Console(record=True, width=120)
    code = await main_cli.run("The sky is blue", [str(tmp_path / "missing.txt")], [], console)
    output = console.export_text()
    assert code == 1
    assert "Cannot read" in output
    assert "Please add at least one source" in output

@pytest.mark.asyncio
async def test_run_prints_verdict(tmp_path, fake_judge):
    path = tmp_path / "sky.txt"
    path.write_text("The sky is blue.")
    console = Console(record=True, width=120)

    with patch("claimcheck.llm.verify.judge_client", fake_judge):
        code = await main_cli.run("The sky is blue", [str(path)], [], console)

    output = console.export_text()
    assert code == 0
    assert "sky.txt" in output
    assert "1 source(s), 16 B of files" in output
    assert "Verdict: Supported" in output

def test_verdict_panel_title():
    verdict = Verdict(category=VerdictCategory.PARTIALLY_SUPPORTED, explanation="Partially Supported.", model="m", source_count=2)
    panel = verdict_panel(verdict)
    assert "Partially Supported" in panel.title
    assert panel.border_style == "yellow"

@pytest.mark.parametrize("size,expected", [(None, "-"), (512, "512 B"), (2048, "2.0 KB"), (3 * 1024 * 1024, "3.0 MB")])
def test_format_size(size, expected):
    assert format_size(size) == expected

def test_sources_table_caption_shows_total_size(file_source, url_source):
    """
    WHY: Users need to see how much file evidence they have added.
    HOW: Build the table for two file sources and one URL with the store's byte total.
    EXPECTED: Caption counts every source and shows the file total.
    """
    table = sources_table([file_source(content="x" * 1024), file_source(content="y" * 1024), url_source()], 2048)
    assert table.caption == "3 source(s), 2.0 KB of files"
    assert table.row_count == 3
