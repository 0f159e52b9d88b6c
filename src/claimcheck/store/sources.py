"""In-memory collection of the session's sources.

Files and URLs are kept in two insertion-ordered lists. Callers address
sources through a combined index over [files..., urls...].
"""

from typing import List, Optional, Sequence

from ..log import get_logger
from ..schemas.source import Source

logger = get_logger("store")


class SourceStore:
    def __init__(self):
        self._files: List[Source] = []
        self._urls: List[Source] = []

    def insert(self, source: Source) -> int:
        """Append a source. Returns its combined index."""
        if source.origin == "file":
            self._files.append(source)
            index = len(self._files) - 1
        else:
            self._urls.append(source)
            index = len(self._files) + len(self._urls) - 1
        logger.debug(f"Inserted {source.origin} source {source.label!r} at {index}")
        return index

    def remove_at(self, combined_index: int) -> Optional[Source]:
        """
        Remove by combined index. Indices below the file count address files,
        the rest address URLs. Out-of-range indices leave the store untouched.
        """
        file_count = len(self._files)
        if combined_index < 0:
            return None
        if combined_index < file_count:
            return self._files.pop(combined_index)
        url_index = combined_index - file_count
        if url_index < len(self._urls):
            return self._urls.pop(url_index)
        logger.debug(f"Ignoring removal of out-of-range index {combined_index}")
        return None

    def snapshot(self) -> List[Source]:
        return [*self._files, *self._urls]

    @property
    def files(self) -> Sequence[Source]:
        return tuple(self._files)

    @property
    def urls(self) -> Sequence[Source]:
        return tuple(self._urls)

    @property
    def total_file_bytes(self) -> int:
        return sum(s.size_bytes or 0 for s in self._files)

    def __len__(self) -> int:
        return len(self._files) + len(self._urls)
