"""Turns an admitted upload into plain text.

Dispatches on FileKind to a format backend and degrades to a raw text
decode whenever a rich-format backend is missing or fails. extract() never
raises for backend problems.
"""

import asyncio
from typing import Optional

from ..errors import ExtractionError
from ..log import get_logger
from ..schemas.source import FileKind, FileUpload
from .formats import FormatBackend, OcrBackend, PdfBackend, ProgressCallback, WordBackend
from .validate import resolve_kind

logger = get_logger("extract")


def image_unavailable_text(name: str) -> str:
    return f"[Image: {name}] (OCR unavailable, no text extracted)"


def image_empty_text(name: str) -> str:
    return f"[Image: {name}] (no text detected)"


def decode_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


class ContentExtractor:
    def __init__(
        self,
        pdf: Optional[FormatBackend] = None,
        word: Optional[FormatBackend] = None,
        ocr: Optional[FormatBackend] = None,
    ):
        self.pdf = pdf or PdfBackend()
        self.word = word or WordBackend()
        self.ocr = ocr or OcrBackend()

    async def extract(
        self,
        upload: FileUpload,
        kind: Optional[FileKind] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> str:
        if kind is None:
            kind = resolve_kind(upload.media_type, upload.name)

        data = await upload.read()

        if kind == FileKind.PDF:
            text = await self._run_backend(self.pdf, data, upload.name, progress)
            if text is not None:
                return text
        elif kind == FileKind.WORD:
            text = await self._run_backend(self.word, data, upload.name, progress)
            if text is not None:
                return text
        elif kind == FileKind.IMAGE:
            return await self._extract_image(data, upload.name, progress)

        return decode_text(data)

    async def _run_backend(
        self,
        backend: FormatBackend,
        data: bytes,
        name: str,
        progress: Optional[ProgressCallback],
    ) -> Optional[str]:
        """Returns None when the caller should fall back to a raw decode."""
        if not backend.available():
            logger.warning(f"{backend.name} unavailable, reading {name} as text")
            return None
        try:
            return await asyncio.to_thread(backend.extract, data, name, progress)
        except ExtractionError as e:
            logger.warning(f"{e}; reading {name} as text")
            return None

    async def _extract_image(self, data: bytes, name: str, progress: Optional[ProgressCallback]) -> str:
        if not self.ocr.available():
            logger.warning(f"OCR unavailable for {name}")
            return image_unavailable_text(name)
        try:
            text = await asyncio.to_thread(self.ocr.extract, data, name, progress)
        except ExtractionError as e:
            logger.warning(str(e))
            return image_unavailable_text(name)
        text = text.strip()
        return text or image_empty_text(name)


content_extractor = ContentExtractor()
