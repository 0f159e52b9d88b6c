"""Session-scoped composition of ingestion, retrieval and verification.

A Session owns one SourceStore for its lifetime. Files in a batch are
processed one at a time so store mutations and status messages stay in order.
"""

import asyncio
from typing import Callable, Iterable, List, Optional

from pydantic import BaseModel

from ..errors import ValidationError
from ..ingest.extract import ContentExtractor, content_extractor
from ..ingest.validate import validate
from ..log import get_logger
from ..llm.verify import VerificationOrchestrator
from ..retrieval.extract import fetch_page
from ..retrieval.fetch import Fetcher
from ..schemas.source import FileUpload, Source
from ..schemas.verdict import Verdict
from ..store.sources import SourceStore

logger = get_logger("session")

StatusCallback = Callable[[str], None]


class IngestOutcome(BaseModel):
    name: str
    source: Optional[Source] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.source is not None


class Session:
    def __init__(
        self,
        pending_claim: Optional[str] = None,
        store: Optional[SourceStore] = None,
        extractor: Optional[ContentExtractor] = None,
        fetcher: Optional[Fetcher] = None,
        orchestrator: Optional[VerificationOrchestrator] = None,
        on_status: Optional[StatusCallback] = None,
    ):
        self.claim = pending_claim or ""
        self.store = store if store is not None else SourceStore()
        self.extractor = extractor or content_extractor
        self.fetcher = fetcher
        self.orchestrator = orchestrator or VerificationOrchestrator()
        self.on_status = on_status

    def _status(self, message: str):
        logger.debug(message)
        if self.on_status:
            self.on_status(message)

    def _progress_forwarder(self, loop: asyncio.AbstractEventLoop):
        """Backends report progress from a worker thread; hop back onto the loop."""
        def forward(stage: str, fraction: float):
            loop.call_soon_threadsafe(self._status, f"Extracting {stage}: {fraction:.0%}")
        return forward

    async def add_files(self, uploads: Iterable[FileUpload]) -> List[IngestOutcome]:
        uploads = list(uploads)
        outcomes = []
        progress = self._progress_forwarder(asyncio.get_running_loop())
        for i, upload in enumerate(uploads):
            remaining = len(uploads) - i - 1
            self._status(f"Processing {upload.name} ({remaining} remaining)")
            try:
                kind = validate(upload)
            except ValidationError as e:
                logger.warning(str(e))
                self._status(str(e))
                outcomes.append(IngestOutcome(name=upload.name, error=str(e)))
                continue

            content = await self.extractor.extract(upload, kind, progress=progress)
            source = Source.from_file(upload, content)
            self.store.insert(source)
            outcomes.append(IngestOutcome(name=upload.name, source=source))

        added = sum(1 for o in outcomes if o.ok)
        self._status(f"Added {added} of {len(uploads)} file(s)")
        return outcomes

    async def add_url(self, url: str) -> Source:
        """Raises InvalidUrl or FetchFailed; the store is only touched on success."""
        url = url.strip()
        self._status("Fetching source...")
        page = await fetch_page(url, self.fetcher)
        source = Source.from_page(page.url, page.title, page.content)
        self.store.insert(source)
        self._status(f"Added {source.label}")
        return source

    def remove_source(self, combined_index: int) -> Optional[Source]:
        return self.store.remove_at(combined_index)

    @property
    def sources(self) -> List[Source]:
        return self.store.snapshot()

    async def verify(self, claim: Optional[str] = None) -> Verdict:
        if claim is not None:
            self.claim = claim
        self._status("Analyzing claim...")
        return await self.orchestrator.verify(self.claim, self.store.snapshot())
