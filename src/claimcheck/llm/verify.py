"""Claim verification against the collected sources.

Flattens every source into one evidence string, asks the judge once and
classifies the reply.
"""

from typing import Optional, Sequence

from ..config import Settings, get_settings
from ..errors import EmptyClaim, NoSources
from ..log import get_logger
from ..schemas.source import Source
from ..schemas.verdict import Verdict
from .classify import classify_verdict
from .client import JudgeClient, judge_client
from .prompts import load_prompt

logger = get_logger("verify")

SOURCE_SEPARATOR = "\n\n---\n\n"


def build_evidence(sources: Sequence[Source], max_chars: int) -> str:
    """Join source contents in order and cut at max_chars."""
    evidence = SOURCE_SEPARATOR.join(s.content for s in sources)
    return evidence[:max_chars]


def build_user_message(claim: str, evidence: str) -> str:
    return f"CLAIM: {claim}\n\nSOURCE TEXTS:\n{evidence}"


class VerificationOrchestrator:
    def __init__(self, client: Optional[JudgeClient] = None, settings: Optional[Settings] = None):
        self.client = client or judge_client
        self.settings = settings or get_settings()

    async def verify(self, claim: str, sources: Sequence[Source]) -> Verdict:
        """
        Raises EmptyClaim / NoSources before any network call,
        JudgeRequestFailed if the judge rejects the request.
        """
        claim = (claim or "").strip()
        if not claim:
            raise EmptyClaim()
        if not sources:
            raise NoSources()

        evidence = build_evidence(sources, self.settings.MAX_EVIDENCE_CHARS)
        logger.info(f"Verifying claim against {len(sources)} source(s), {len(evidence)} chars of evidence")

        reply = await self.client.complete(
            system=load_prompt("verify_claim", prompts_dir=self.settings.PROMPTS_DIR),
            user=build_user_message(claim, evidence),
        )

        category = classify_verdict(reply.content)
        logger.info(f"Verdict: {category.value}")
        return Verdict(
            category=category,
            explanation=reply.content,
            model=reply.model,
            source_count=len(sources),
        )
