"""Query executor and result parser for the DuckDuckGo HTML endpoint.

The result page is unversioned markup, so the parser works over a handful of
marker strings and character offsets rather than a document tree. A block
that does not yield a usable title and URL is skipped; the parser itself
never raises on irregular input.
"""
from dataclasses import dataclass
from urllib.parse import unquote

import httpx
import logfire
from pydantic import ValidationError

from .config import ResearchSettings
from .html_text import clean_fragment, decode_entities
from .messages import NO_DESCRIPTION
from .models import SearchResult
from .transport import get_text, open_client
from .validators import encode_query


@dataclass(frozen=True)
class ProviderMarkers:
    """Structural markers of one provider's HTML result page."""

    block: str
    title_anchor: str
    snippet: str
    redirect_param: str
    anchor_close: str = "</a>"
    href: str = 'href="'


DUCKDUCKGO = ProviderMarkers(
    block='class="result ',
    title_anchor='class="result__a"',
    snippet='class="result__snippet"',
    redirect_param="uddg",
)


def _between(text: str, start: str, end: str, pos: int = 0) -> tuple[str, int] | None:
    """Return the text between `start` and the next `end` after `pos`, and the end offset."""
    begin = text.find(start, pos)
    if begin < 0:
        return None
    begin += len(start)
    finish = text.find(end, begin)
    if finish < 0:
        return None
    return text[begin:finish], finish + len(end)


def _marked_element_text(block: str, marker: str, close: str) -> tuple[str, int, int] | None:
    """Inner text of the element carrying `marker`, with the tag's start offset."""
    at = block.find(marker)
    if at < 0:
        return None
    tag_start = block.rfind("<", 0, at)
    inner = _between(block, ">", close, at)
    if inner is None:
        return None
    return inner[0], max(tag_start, 0), at


def unwrap_redirect(href: str, param: str) -> str:
    """Resolve a provider redirect link to its destination URL.

    `//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com&rut=...` becomes
    `https://example.com`; any other href is returned unchanged.
    """
    href = decode_entities(href.strip())
    if "?" not in href:
        return href
    query = href.split("?", 1)[1].split("#", 1)[0]
    for pair in query.split("&"):
        key, _, value = pair.partition("=")
        # percent-decoding only; a literal '+' in the target stays '+'
        if key == param and value:
            return unquote(value)
    return href


def _anchor_href(block: str, tag_start: int, marker_at: int, markers: ProviderMarkers) -> str:
    tag_end = block.find(">", marker_at)
    if tag_end >= 0:
        found = _between(block[tag_start:tag_end], markers.href, '"')
        if found is not None:
            return found[0]
    found = _between(block, markers.href, '"')
    return found[0] if found is not None else ""


def parse_block(block: str, markers: ProviderMarkers = DUCKDUCKGO) -> SearchResult | None:
    """Extract one result from a block, or None if it is unusable."""
    title_anchor = _marked_element_text(block, markers.title_anchor, markers.anchor_close)
    if title_anchor is None:
        return None
    raw_title, tag_start, marker_at = title_anchor
    title = clean_fragment(raw_title)

    url = unwrap_redirect(_anchor_href(block, tag_start, marker_at, markers), markers.redirect_param)

    snippet = ""
    snippet_element = _marked_element_text(block, markers.snippet, markers.anchor_close)
    if snippet_element is not None:
        snippet = clean_fragment(snippet_element[0])

    if not url.startswith("http") or not title:
        return None

    try:
        return SearchResult(title=title, url=url, snippet=snippet or NO_DESCRIPTION)
    except ValidationError:
        return None


def parse_results(
    html: str,
    *,
    limit: int = 10,
    markers: ProviderMarkers = DUCKDUCKGO,
) -> list[SearchResult]:
    """Parse up to `limit` results from a provider result page."""
    results: list[SearchResult] = []
    blocks = html.split(markers.block)

    # blocks[0] is the page header
    for block in blocks[1:]:
        if len(results) >= limit:
            break
        result = parse_block(block, markers)
        if result is not None:
            results.append(result)

    return results


class SearchClient:
    """Runs one query against the provider and parses the result page."""

    def __init__(
        self,
        settings: ResearchSettings | None = None,
        client: httpx.AsyncClient | None = None,
        markers: ProviderMarkers = DUCKDUCKGO,
    ):
        self.settings = settings or ResearchSettings()
        self.client = client
        self.markers = markers

    def build_url(self, query: str) -> str:
        return self.settings.search_url_template.format(query=encode_query(query))

    @logfire.instrument('Web search: {query}')
    async def search(self, query: str) -> list[SearchResult]:
        """Search the web for `query`.

        Returns:
            At most `max_results` results in provider rank order.

        Raises:
            InvalidQuery: the query is blank or cannot be encoded.
            TransportError: the request failed or returned a non-200 status.
            DecodingError: the page is not valid UTF-8.
        """
        url = self.build_url(query)

        async with open_client(self.client) as client:
            html = await get_text(
                client,
                url,
                user_agent=self.settings.search_user_agent,
                timeout=self.settings.search_timeout,
            )

        results = parse_results(html, limit=self.settings.max_results, markers=self.markers)
        logfire.info('Parsed {count} search results', count=len(results), html_length=len(html))
        return results
