import pytest
from claimcheck.errors import EmptyClaim, NoSources
from claimcheck.llm.prompts import load_prompt, VERIFY_CLAIM_PROMPT
from claimcheck.llm.verify import VerificationOrchestrator, build_evidence, SOURCE_SEPARATOR
from claimcheck.schemas.verdict import VerdictCategory

@pytest.mark.asyncio
@pytest.mark.parametrize("claim", ["", "   ", "\n\t"])
async def test_empty_claim_rejected_before_judge(claim, fake_judge, file_source, settings):
    orchestrator = VerificationOrchestrator(client=fake_judge, settings=settings)
    with pytest.raises(EmptyClaim):
        await orchestrator.verify(claim, [file_source()])
    assert fake_judge.calls == []

@pytest.mark.asyncio
async def test_no_sources_rejected_before_judge(fake_judge, settings):
    orchestrator = VerificationOrchestrator(client=fake_judge, settings=settings)
    with pytest.raises(NoSources):
        await orchestrator.verify("claim", [])
    assert fake_judge.calls == []

def test_evidence_joined_in_order(file_source, url_source):
    sources = [file_source(content="first"), file_source(content="second"), url_source(content="third")]
    assert build_evidence(sources, 1000) == SOURCE_SEPARATOR.join(["first", "second", "third"])

@pytest.mark.asyncio
async def test_evidence_truncated_to_ceiling(fake_judge, file_source, settings):
    """
    WHY: Evidence above the ceiling is cut, not rejected, to bound the request size.
    HOW: Two sources totalling well over 100,000 characters.
    EXPECTED: The evidence in the user message is exactly 100,000 characters.
    """
    sources = [file_source(content="a" * 80_000), file_source(content="b" * 80_000)]
    orchestrator = VerificationOrchestrator(client=fake_judge, settings=settings)
    await orchestrator.verify("claim", sources)

    user = fake_judge.calls[0]["user"]
    prefix = "CLAIM: claim\n\nSOURCE TEXTS:\n"
    assert user.startswith(prefix)
    assert len(user) - len(prefix) == 100_000

@pytest.mark.asyncio
async def test_claim_trimmed_and_verdict_built(judge_factory, file_source, settings):
    judge = judge_factory(reply="Contradicted: the source says the sky is green.")
    orchestrator = VerificationOrchestrator(client=judge, settings=settings)
    verdict = await orchestrator.verify("  The sky is blue  ", [file_source(content="The sky is green.")])

    assert judge.calls[0]["user"].startswith("CLAIM: The sky is blue\n\n")
    assert judge.calls[0]["system"] == VERIFY_CLAIM_PROMPT
    assert verdict.category == VerdictCategory.CONTRADICTED
    assert verdict.explanation == "Contradicted: the source says the sky is green."
    assert verdict.source_count == 1
    assert verdict.model == "fake-judge"

def test_prompt_override_from_yaml(tmp_path):
    (tmp_path / "verify_claim.yaml").write_text("content: Custom judge instructions\n")
    assert load_prompt("verify_claim", prompts_dir=str(tmp_path)) == "Custom judge instructions"

def test_prompt_builtin_fallback(tmp_path):
    assert load_prompt("verify_claim", prompts_dir=str(tmp_path)) == VERIFY_CLAIM_PROMPT
    with pytest.raises(FileNotFoundError):
        load_prompt("nonexistent", prompts_dir=str(tmp_path))
