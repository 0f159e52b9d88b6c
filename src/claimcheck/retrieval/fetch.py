"""HTTP fetching with retry on transport errors.

HTTP status failures are surfaced as FetchFailed immediately; only
connection-level errors are retried.
"""

from typing import Optional

import httpx
from tenacity import retry, stop_after_attempt, wait_fixed, retry_if_exception_type

from ..config import get_settings
from ..errors import FetchFailed, InvalidUrl
from ..ingest.validate import validate_url
from ..log import get_logger

logger = get_logger("fetch")


class Fetcher:
    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.timeout = timeout if timeout is not None else settings.FETCH_TIMEOUT
        self.headers = {
            "User-Agent": user_agent or settings.FETCH_USER_AGENT,
            "Accept": "text/html,application/xhtml+xml;q=0.9,*/*;q=0.8",
        }
        self.transport = transport

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_fixed(1),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    )
    async def _get(self, url: str) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            headers=self.headers,
            transport=self.transport,
        ) as client:
            return await client.get(url)

    async def fetch_url(self, url: str) -> str:
        """
        Fetches the body of a URL as text.
        Raises InvalidUrl before any network call, FetchFailed on non-2xx or
        after transport retries are exhausted.
        """
        if not validate_url(url):
            raise InvalidUrl(url)

        try:
            resp = await self._get(url)
        except httpx.TransportError as e:
            logger.error(f"Transport error fetching {url}: {e}")
            raise FetchFailed(url, None, str(e)) from e

        if not resp.is_success:
            logger.warning(f"GET {url} returned {resp.status_code}")
            raise FetchFailed(url, resp.status_code, resp.reason_phrase)

        return resp.text


fetcher = Fetcher()
