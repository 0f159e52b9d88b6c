"""Format-specific text extraction backends.

Each backend is capability-gated: available() reports whether its library
can be imported, and extract() runs synchronously (callers offload it to a
thread). Failures are raised as ExtractionError.
"""

import io
from typing import Callable, Optional, Protocol

from ..errors import ExtractionError
from ..log import get_logger

logger = get_logger("formats")

ProgressCallback = Callable[[str, float], None]


class FormatBackend(Protocol):
    name: str

    def available(self) -> bool:
        ...

    def extract(self, data: bytes, filename: str, progress: Optional[ProgressCallback] = None) -> str:
        ...


def _import_pypdf():
    try:
        import pypdf
    except ImportError:
        return None
    return pypdf


def _import_docx():
    try:
        import docx
    except ImportError:
        return None
    return docx


def _import_ocr():
    try:
        import pytesseract
        from PIL import Image
    except ImportError:
        return None
    return pytesseract, Image


class PdfBackend:
    name = "pypdf"

    def available(self) -> bool:
        return _import_pypdf() is not None

    def extract(self, data: bytes, filename: str, progress: Optional[ProgressCallback] = None) -> str:
        pypdf = _import_pypdf()
        if pypdf is None:
            raise ExtractionError("pypdf is not installed")
        try:
            reader = pypdf.PdfReader(io.BytesIO(data))
            pages = []
            total = len(reader.pages)
            for i, page in enumerate(reader.pages, start=1):
                pages.append(page.extract_text() or "")
                if progress:
                    progress("pdf", i / total)
        except Exception as e:
            raise ExtractionError(f"PDF extraction failed for {filename}: {e}") from e
        return "\n\n".join(pages)


class WordBackend:
    name = "python-docx"

    def available(self) -> bool:
        return _import_docx() is not None

    def extract(self, data: bytes, filename: str, progress: Optional[ProgressCallback] = None) -> str:
        docx = _import_docx()
        if docx is None:
            raise ExtractionError("python-docx is not installed")
        try:
            document = docx.Document(io.BytesIO(data))
            lines = [p.text for p in document.paragraphs]
            # Tables are not part of document.paragraphs
            for table in document.tables:
                for row in table.rows:
                    lines.append("\t".join(cell.text for cell in row.cells))
        except Exception as e:
            raise ExtractionError(f"Word extraction failed for {filename}: {e}") from e
        if progress:
            progress("word", 1.0)
        return "\n".join(lines)


class OcrBackend:
    name = "tesseract"

    def available(self) -> bool:
        modules = _import_ocr()
        if modules is None:
            return False
        pytesseract, _ = modules
        try:
            pytesseract.get_tesseract_version()
        except Exception:
            logger.debug("tesseract binary not found")
            return False
        return True

    def extract(self, data: bytes, filename: str, progress: Optional[ProgressCallback] = None) -> str:
        modules = _import_ocr()
        if modules is None:
            raise ExtractionError("pytesseract/Pillow are not installed")
        pytesseract, Image = modules
        try:
            with Image.open(io.BytesIO(data)) as image:
                if progress:
                    progress("ocr", 0.0)
                text = pytesseract.image_to_string(image)
        except Exception as e:
            raise ExtractionError(f"OCR failed for {filename}: {e}") from e
        if progress:
            progress("ocr", 1.0)
        return text
