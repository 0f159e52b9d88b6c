import pytest
import os
from typing import List, Optional
from dotenv import load_dotenv

from claimcheck.config import Settings
from claimcheck.llm.client import JudgeReply
from claimcheck.schemas.source import FileUpload, Source

@pytest.fixture(scope="session", autouse=True)
def _load_env():
    # Load .env once per session to avoid side-effects on import time
    load_dotenv()

def _truthy(v: str | None) -> bool:
    return v is not None and v.strip().lower() not in ("", "0", "false", "no")

@pytest.fixture(scope="session")
def allow_integration(_load_env) -> bool:
    return _truthy(os.getenv("RUN_INTEGRATION_TESTS"))

@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the developer's .env."""
    return Settings(_env_file=None, OPENAI_API_KEY="sk-test", MODEL_JUDGE="test-judge")

@pytest.fixture
def make_upload():
    def _make(name: str, data: bytes = b"", media_type: str = "", size_bytes: Optional[int] = None) -> FileUpload:
        return FileUpload(
            name=name,
            media_type=media_type,
            size_bytes=len(data) if size_bytes is None else size_bytes,
            data=data,
        )
    return _make

@pytest.fixture
def file_source():
    def _make(label: str = "notes.txt", content: str = "text") -> Source:
        return Source(origin="file", label=label, mime_or_protocol_hint="text/plain",
                      size_bytes=len(content), content=content)
    return _make

@pytest.fixture
def url_source():
    def _make(label: str = "Page", content: str = "page text") -> Source:
        return Source(origin="url", label=label, mime_or_protocol_hint="https",
                      url="https://example.com/" + label, content=content)
    return _make


class FakeJudge:
    """Records every request and answers with a canned reply."""

    def __init__(self, reply: str = "Supported. The source says so."):
        self.reply = reply
        self.calls: List[dict] = []

    async def complete(self, system: str, user: str, model: Optional[str] = None) -> JudgeReply:
        self.calls.append({"system": system, "user": user, "model": model})
        return JudgeReply(content=self.reply, model="fake-judge")

@pytest.fixture
def fake_judge():
    return FakeJudge()


class FakeBackend:
    """Stand-in for a format backend."""

    def __init__(self, name: str = "fake", available: bool = True, text: str = "", error: Optional[Exception] = None):
        self.name = name
        self._available = available
        self.text = text
        self.error = error
        self.calls = 0

    def available(self) -> bool:
        return self._available

    def extract(self, data: bytes, filename: str, progress=None) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        if progress:
            progress(self.name, 1.0)
        return self.text

@pytest.fixture
def fake_backend():
    return FakeBackend

@pytest.fixture
def judge_factory():
    return FakeJudge

@pytest.fixture(scope="session")
def openai_api_key(_load_env) -> str | None:
    key = os.getenv("OPENAI_API_KEY")
    if not key or key == "sk-...":
        return None
    return key
