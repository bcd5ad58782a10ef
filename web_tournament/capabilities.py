"""Research capabilities exposed to an external agent runtime.

Each capability is a named, described async operation returning text. The
registry built here is what a conversational layer hands to its model as
tools; the research core never depends on being called that way.
"""
from abc import ABC, abstractmethod

import httpx
import logfire
from pydantic_ai import Tool

from .config import ResearchSettings
from .errors import ResearchError
from .fetcher import PageFetcher
from .messages import format_listing
from .search import SearchClient
from .tournament import answer_research_question


class Capability(ABC):
    name: str
    description: str

    def __init__(
        self,
        settings: ResearchSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings or ResearchSettings()
        self.client = client

    @abstractmethod
    async def run(self, *args, **kwargs) -> str:
        ...

    def as_tool(self) -> Tool:
        """Wrap `run` as a pydantic-ai tool with this capability's name."""
        return Tool(self.run, takes_ctx=False, name=self.name, description=self.description)


class SearchCapability(Capability):
    name = "webSearch"
    description = "Searches the web and returns a list of relevant URLs with titles and snippets."

    async def run(self, query: str) -> str:
        """Search the web.

        Args:
            query: The search query.
        """
        try:
            results = await SearchClient(self.settings, self.client).search(query)
        except ResearchError as e:
            logfire.warn('webSearch failed: {error}', error=str(e))
            return f"Search failed: {e}"
        return format_listing(query, results, self.settings.listing_size)


class FetchCapability(Capability):
    name = "webFetch"
    description = "Fetches a webpage and returns a concise summary. Handles context limits intelligently."

    async def run(self, url: str, focus: str) -> str:
        """Fetch and summarize a page.

        Args:
            url: The URL to fetch.
            focus: What to focus on when summarizing (e.g. 'product features', 'recipe details').
        """
        try:
            summary = await PageFetcher(self.settings, self.client).fetch_and_summarize(url, focus)
        except ResearchError as e:
            logfire.warn('webFetch failed: {error}', url=url, error=str(e))
            return f"Could not fetch {url}: {e}"
        return summary.render()


class TournamentCapability(Capability):
    name = "research"
    description = (
        "Executes a tournament-style research workflow: searches, fetches pairs of sources, "
        "compares them, and returns only the best summary that answers the user's question."
    )

    async def run(self, user_question: str) -> str:
        """Research a question.

        Args:
            user_question: The user's question to research.
        """
        answer = await answer_research_question(user_question, self.settings, self.client)
        return answer.render()


CAPABILITY_TYPES: tuple[type[Capability], ...] = (SearchCapability, FetchCapability, TournamentCapability)


def build_registry(
    settings: ResearchSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Capability]:
    """Instantiate every capability, keyed by name."""
    settings = settings or ResearchSettings()
    return {cls.name: cls(settings, client) for cls in CAPABILITY_TYPES}
