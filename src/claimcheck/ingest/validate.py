"""Admissibility checks for uploads and URLs.

Pure predicates over metadata; nothing here reads file content.
"""

import re
from typing import Optional
from urllib.parse import urlparse

from ..config import get_settings
from ..errors import FileTooLarge, UnsupportedType
from ..schemas.source import FileKind, FileUpload

MEDIA_TYPES = {
    "text/plain": FileKind.TEXT,
    "application/pdf": FileKind.PDF,
    "application/msword": FileKind.WORD,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": FileKind.WORD,
    "image/jpeg": FileKind.IMAGE,
    "image/png": FileKind.IMAGE,
    "image/gif": FileKind.IMAGE,
}

EXTENSIONS = {
    ".txt": FileKind.TEXT,
    ".pdf": FileKind.PDF,
    ".doc": FileKind.WORD,
    ".docx": FileKind.WORD,
    ".jpg": FileKind.IMAGE,
    ".jpeg": FileKind.IMAGE,
    ".png": FileKind.IMAGE,
    ".gif": FileKind.IMAGE,
}

ALLOWED_SCHEMES = ("http", "https")

# Never valid unescaped anywhere in a URL
INVALID_URL_CHARS = re.compile(r'[\s<>"\\\x00-\x1f\x7f]')


def resolve_kind(media_type: str, name: str) -> FileKind:
    """Declared media type first, extension as tiebreaker."""
    media_type = (media_type or "").split(";", 1)[0].strip().lower()
    if media_type in MEDIA_TYPES:
        return MEDIA_TYPES[media_type]

    dot = name.rfind(".")
    ext = name[dot:].lower() if dot != -1 else ""
    if ext in EXTENSIONS:
        return EXTENSIONS[ext]

    # Any image/* still goes through OCR once admitted
    if media_type.startswith("image/"):
        return FileKind.IMAGE
    return FileKind.UNKNOWN


def is_allowed(upload: FileUpload) -> bool:
    media_type = (upload.media_type or "").split(";", 1)[0].strip().lower()
    return media_type in MEDIA_TYPES or upload.extension in EXTENSIONS


def validate(upload: FileUpload, max_bytes: Optional[int] = None) -> FileKind:
    """
    Checks size and type. Returns the resolved FileKind.
    Raises FileTooLarge or UnsupportedType.
    """
    if max_bytes is None:
        max_bytes = get_settings().MAX_FILE_BYTES

    if upload.size_bytes > max_bytes:
        raise FileTooLarge(upload.name, max_bytes)
    if not is_allowed(upload):
        raise UnsupportedType(upload.name)

    return resolve_kind(upload.media_type, upload.name)


def validate_url(value: str) -> bool:
    """True for absolute http(s) URLs. Never raises."""
    if not isinstance(value, str):
        return False
    value = value.strip()
    if INVALID_URL_CHARS.search(value):
        return False
    try:
        parsed = urlparse(value)
        # Accessing .port validates the netloc
        _ = parsed.port
    except ValueError:
        return False
    return parsed.scheme in ALLOWED_SCHEMES and bool(parsed.hostname)
