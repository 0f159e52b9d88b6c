import trafilatura
from typing import Optional
from ..log import get_logger
from ..schemas.source import WebPage
from .fetch import Fetcher, fetcher as default_fetcher

logger = get_logger("web_extract")

DEFAULT_TITLE = "Untitled"


def extract_title(html: str, url: str) -> str:
    try:
        metadata = trafilatura.extract_metadata(html, default_url=url)
    except Exception as e:
        logger.debug(f"Metadata extraction failed for {url}: {e}")
        return DEFAULT_TITLE
    title = metadata.title if metadata is not None else None
    return title.strip() if title and title.strip() else DEFAULT_TITLE


def extract_main_text(html: str, url: str) -> str:
    """
    Readable main content via trafilatura, falling back to the full visible
    page text when no article-like block is found.
    """
    try:
        extracted = trafilatura.extract(html, include_comments=False, include_tables=True, url=url)
    except Exception as e:
        logger.warning(f"Main-content extraction failed for {url}: {e}")
        extracted = None

    if extracted and extracted.strip():
        return extracted

    logger.info(f"No main content detected for {url}, using full page text")
    return trafilatura.html2txt(html) or ""


def extract_content(html: str, url: str) -> WebPage:
    return WebPage(
        url=url,
        title=extract_title(html, url),
        content=extract_main_text(html, url),
    )


async def fetch_page(url: str, fetcher: Optional[Fetcher] = None) -> WebPage:
    """Fetch a URL and return its readable content and title."""
    html = await (fetcher or default_fetcher).fetch_url(url)
    return extract_content(html, url)
