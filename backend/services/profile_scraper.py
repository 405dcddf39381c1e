"""Fetch a public profile page and reduce it to text for LLM extraction."""

import asyncio
import html
import logging
import re
from dataclasses import dataclass, field

import httpx
from bs4 import BeautifulSoup

from config import settings

logger = logging.getLogger(__name__)

USER_AGENT = "Mozilla/5.0 (compatible; CandiBot/1.0)"
MAX_PAGE_CHARS = 20000


@dataclass
class ScrapedPage:
    """Text content and headline metadata of a scraped page."""
    markdown: str
    metadata: dict[str, str] = field(default_factory=dict)

    @property
    def title(self) -> str | None:
        return self.metadata.get("title")

    @property
    def description(self) -> str | None:
        return self.metadata.get("description")


def _meta_content(soup: BeautifulSoup, *keys: str) -> str | None:
    """First non-empty content of a <meta name=...> or <meta property=...> tag."""
    for key in keys:
        for attr in ("name", "property"):
            tag = soup.find("meta", attrs={attr: key})
            content = (tag.get("content") or "").strip() if tag else ""
            if content:
                return content
    return None


def extract_metadata(page_html: str) -> dict[str, str]:
    """Pull the page title and description (plain or og:) out of the head."""
    soup = BeautifulSoup(page_html, "html.parser")
    metadata: dict[str, str] = {}

    title = soup.title.get_text(strip=True) if soup.title else ""
    title = title or _meta_content(soup, "og:title")
    if title:
        metadata["title"] = title

    description = _meta_content(soup, "description", "og:description")
    if description:
        metadata["description"] = description
    return metadata


def html_to_text(page_html: str, max_chars: int = MAX_PAGE_CHARS) -> str:
    """Strip markup down to readable text, keeping headings and list items."""
    if not page_html or not page_html.strip():
        return ""

    text = page_html
    for tag in ("script", "style", "noscript", "svg", "head"):
        text = re.sub(rf"<{tag}[^>]*>[\s\S]*?</{tag}>", " ", text, flags=re.IGNORECASE)

    for level in range(1, 5):
        text = re.sub(rf"<h{level}\b[^>]*>", "\n" + "#" * level + " ", text, flags=re.IGNORECASE)
    text = re.sub(r"<li\b[^>]*>", "\n- ", text, flags=re.IGNORECASE)
    text = re.sub(r"</?(?:br|p|div|section|tr|ul|ol|h\d)\b[^>]*>", "\n", text, flags=re.IGNORECASE)
    text = re.sub(r"<[^>]+>", " ", text)
    text = html.unescape(text)

    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r" *\n *", "\n", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    text = text.strip()

    if len(text) > max_chars:
        text = text[:max_chars] + "\n\n[Content truncated.]"
    return text


async def fetch_page(url: str, client: httpx.AsyncClient | None = None) -> str | None:
    """Fetch a public page as HTML. Retries transient failures; None on failure."""
    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(
            follow_redirects=True,
            timeout=settings.scrape_timeout_seconds,
            headers={
                "User-Agent": USER_AGENT,
                "Accept": "text/html,application/xhtml+xml",
                "Accept-Language": "en-US,en;q=0.9",
            },
        )

    last_error: Exception | None = None
    try:
        for attempt in range(settings.scrape_max_retries):
            try:
                response = await client.get(url)
                response.raise_for_status()
                return response.text
            except httpx.HTTPStatusError as e:
                last_error = e
                logger.warning("HTTP error %s for %s", e.response.status_code, url)
                if 400 <= e.response.status_code < 500:
                    break  # Don't retry client errors
            except httpx.TransportError as e:
                last_error = e
                logger.warning("Request failed for %s (attempt %s): %s", url, attempt + 1, e)
            if attempt + 1 < settings.scrape_max_retries:
                await asyncio.sleep(1.0 * (attempt + 1))
    finally:
        if owns_client:
            await client.aclose()

    logger.error("Failed to fetch %s: %s", url, last_error)
    return None


async def scrape(url: str, client: httpx.AsyncClient | None = None) -> ScrapedPage | None:
    """Fetch ``url`` and return its text content plus title/description."""
    page_html = await fetch_page(url, client=client)
    if page_html is None:
        return None
    return ScrapedPage(markdown=html_to_text(page_html), metadata=extract_metadata(page_html))
