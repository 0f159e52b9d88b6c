"""Pydantic schemas for uploads and ingested sources.

Defines FileUpload (the input handle), FileKind and Source.
"""

from __future__ import annotations

import asyncio
import mimetypes
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class FileKind(str, Enum):
    PDF = "pdf"
    WORD = "word"
    IMAGE = "image"
    TEXT = "text"
    UNKNOWN = "unknown"


class FileUpload(BaseModel):
    """A file handed over by a picker or drag-drop. Bytes are read lazily."""

    name: str
    media_type: str = ""
    size_bytes: int = Field(..., ge=0)
    data: Optional[bytes] = None
    path: Optional[Path] = None

    @model_validator(mode="after")
    def check_has_payload(self) -> "FileUpload":
        if self.data is None and self.path is None:
            raise ValueError("FileUpload needs either data or path")
        return self

    @property
    def extension(self) -> str:
        return Path(self.name).suffix.lower()

    @classmethod
    def from_path(cls, path: str | Path) -> "FileUpload":
        path = Path(path)
        media_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            media_type=media_type or "",
            size_bytes=path.stat().st_size,
            path=path,
        )

    @classmethod
    def from_bytes(cls, name: str, data: bytes, media_type: str = "") -> "FileUpload":
        return cls(name=name, media_type=media_type, size_bytes=len(data), data=data)

    async def read(self) -> bytes:
        if self.data is not None:
            return self.data
        return await asyncio.to_thread(self.path.read_bytes)


class Source(BaseModel):
    """One unit of evidence. Content is final once the model exists."""

    model_config = ConfigDict(frozen=True)

    origin: Literal["file", "url"]
    label: str
    mime_or_protocol_hint: str = ""
    size_bytes: Optional[int] = None
    url: Optional[str] = None
    content: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_file(cls, upload: FileUpload, content: str) -> "Source":
        return cls(
            origin="file",
            label=upload.name,
            mime_or_protocol_hint=upload.media_type,
            size_bytes=upload.size_bytes,
            content=content,
        )

    @classmethod
    def from_page(cls, url: str, title: str, content: str) -> "Source":
        scheme = url.split(":", 1)[0].lower()
        return cls(
            origin="url",
            label=title or url,
            mime_or_protocol_hint=scheme,
            url=url,
            content=content,
        )


class WebPage(BaseModel):
    url: str
    title: str = "Untitled"
    content: str
