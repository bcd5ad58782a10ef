import httpx
import logfire
import pytest

from web_tournament.config import ResearchSettings

logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def settings():
    return ResearchSettings(_env_file=None)


@pytest.fixture
def make_client():
    """Build an AsyncClient whose requests are answered by `handler`."""
    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return _make
