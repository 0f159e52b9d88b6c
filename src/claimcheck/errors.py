"""Exception hierarchy for ingestion, retrieval and verification.

Every error carries a short user-facing message via str().
"""

from typing import Optional


class ClaimCheckError(Exception):
    """Base class for all user-visible failures."""


class ValidationError(ClaimCheckError):
    """An input was rejected before any work was done on it."""


class FileTooLarge(ValidationError):
    def __init__(self, name: str, limit_bytes: int):
        self.name = name
        self.limit_bytes = limit_bytes
        limit_mb = limit_bytes / (1024 * 1024)
        super().__init__(f"{name} is too large (limit is {limit_mb:g} MB)")


class UnsupportedType(ValidationError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} has an unsupported file type")


class InvalidUrl(ValidationError):
    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Invalid URL: {url!r} (must be http or https)")


class ExtractionError(ClaimCheckError):
    """A format backend failed. Never escapes the content extractor."""


class FetchFailed(ClaimCheckError):
    def __init__(self, url: str, status_code: Optional[int] = None, status_text: str = ""):
        self.url = url
        self.status_code = status_code
        self.status_text = status_text
        if status_code is None:
            message = f"Failed to fetch {url}: {status_text or 'request error'}"
        else:
            message = f"Failed to fetch {url}: {status_code} {status_text}".rstrip()
        super().__init__(message)


class JudgeRequestFailed(ClaimCheckError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(f"Verification request failed: {message}")


class EmptyClaim(ClaimCheckError):
    def __init__(self):
        super().__init__("Please enter a claim to verify")


class NoSources(ClaimCheckError):
    def __init__(self):
        super().__init__("Please add at least one source")
