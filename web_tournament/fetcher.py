"""Page fetcher: download a page, extract its text, summarize it for a focus."""
import httpx
import logfire

from .config import ResearchSettings
from .html_text import extract_text
from .models import Summary
from .summarizer import focused_summary
from .transport import get_text, open_client
from .validators import require_http_url


class PageFetcher:
    """Fetches single pages and reduces them to focused summaries."""

    def __init__(
        self,
        settings: ResearchSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings or ResearchSettings()
        self.client = client

    async def fetch_text(self, url: str) -> str:
        """Fetch `url` and return its readable text."""
        url = require_http_url(url)
        async with open_client(self.client) as client:
            html = await get_text(
                client,
                url,
                user_agent=self.settings.fetch_user_agent,
                timeout=self.settings.fetch_timeout,
            )
        text = extract_text(html)
        logfire.info('Fetched {url}', url=url, html_length=len(html), text_length=len(text))
        return text

    @logfire.instrument('Fetch and summarize: {url}')
    async def fetch_and_summarize(self, url: str, focus: str, *, title: str = "") -> Summary:
        """Fetch `url` and build a summary biased toward `focus`.

        Raises:
            InvalidURL: `url` is not an http(s) URL; no request is made.
            TransportError: the request failed or returned a non-200 status.
            DecodingError: the page is not valid UTF-8.
        """
        text = await self.fetch_text(url)
        summary = focused_summary(text, focus, self.settings.summary_max_length)
        return Summary(source_url=url, source_title=title, text=summary, focus=focus)
