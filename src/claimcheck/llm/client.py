"""OpenAI-compatible chat client for the verdict judge.

Wraps AsyncOpenAI with retries disabled and maps provider failures to
JudgeRequestFailed.
"""

from typing import Optional

import httpx
import openai
from openai import AsyncOpenAI
from pydantic import BaseModel

from ..config import Settings, get_settings
from ..errors import JudgeRequestFailed
from ..log import get_logger

logger = get_logger("judge")


class JudgeReply(BaseModel):
    content: str
    model: str


def _error_message(exc: openai.APIStatusError) -> str:
    body = exc.body
    if isinstance(body, dict):
        # The SDK already unwraps {"error": {...}} into body
        message = body.get("message")
        if message is None and isinstance(body.get("error"), dict):
            message = body["error"].get("message")
        if message:
            return str(message)
    return str(exc.status_code)


class JudgeClient:
    def __init__(self, settings: Optional[Settings] = None, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings or get_settings()
        self.http_client = http_client
        self._client: Optional[AsyncOpenAI] = None

    @property
    def client(self) -> AsyncOpenAI:
        if self._client is None:
            if not self.settings.OPENAI_API_KEY:
                raise JudgeRequestFailed("OPENAI_API_KEY is not configured")
            self._client = AsyncOpenAI(
                api_key=self.settings.OPENAI_API_KEY,
                base_url=self.settings.OPENAI_BASE_URL,
                max_retries=0,
                http_client=self.http_client,
            )
        return self._client

    async def complete(self, system: str, user: str, model: Optional[str] = None) -> JudgeReply:
        model = model or self.settings.MODEL_JUDGE
        try:
            completion = await self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system},
                    {"role": "user", "content": user},
                ],
                temperature=self.settings.JUDGE_TEMPERATURE,
                max_tokens=self.settings.JUDGE_MAX_TOKENS,
            )
        except openai.APIStatusError as e:
            message = _error_message(e)
            logger.error(f"Judge returned {e.status_code}: {message}")
            raise JudgeRequestFailed(message, status_code=e.status_code) from e
        except openai.APIConnectionError as e:
            logger.error(f"Judge connection error: {e}")
            raise JudgeRequestFailed(str(e)) from e

        content = completion.choices[0].message.content if completion.choices else None
        if not content:
            raise JudgeRequestFailed("Judge returned an empty response")
        return JudgeReply(content=content, model=completion.model or model)


judge_client = JudgeClient()
