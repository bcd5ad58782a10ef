import httpx
import pytest

from pages import article, ddg_block, ddg_page
from web_tournament.capabilities import (
    Capability,
    FetchCapability,
    SearchCapability,
    TournamentCapability,
    build_registry,
)
from web_tournament.messages import NO_RESULTS_MESSAGE


def test_registry_contains_every_capability(settings):
    registry = build_registry(settings)

    assert set(registry) == {"webSearch", "webFetch", "research"}
    assert isinstance(registry["webSearch"], SearchCapability)
    assert isinstance(registry["webFetch"], FetchCapability)
    assert isinstance(registry["research"], TournamentCapability)
    assert all(isinstance(capability, Capability) for capability in registry.values())


def test_capabilities_convert_to_named_tools(settings):
    for name, capability in build_registry(settings).items():
        tool = capability.as_tool()
        assert tool.name == name


@pytest.mark.asyncio
async def test_search_capability_lists_top_results(settings, make_client):
    page = ddg_page(*[ddg_block(f"Result {i}", f"https://r{i}.example/", f"Snippet {i}") for i in range(7)])

    async with make_client(lambda request: httpx.Response(200, text=page)) as client:
        output = await SearchCapability(settings, client).run("laptops")

    assert output.startswith("Search results for 'laptops':\n\n")
    assert "[1] Result 0\n    URL: https://r0.example/\n    Snippet 0\n" in output
    assert "[5] Result 4" in output
    assert "[6]" not in output


@pytest.mark.asyncio
async def test_search_capability_reports_failure_as_text(settings, make_client):
    async with make_client(lambda request: httpx.Response(503, text="")) as client:
        output = await SearchCapability(settings, client).run("laptops")

    assert output == "Search failed: HTTP status 503"


@pytest.mark.asyncio
async def test_fetch_capability_returns_rendered_summary(settings, make_client):
    async with make_client(lambda request: httpx.Response(200, text=article("Battery life is great"))) as client:
        output = await FetchCapability(settings, client).run("https://example.com/review", "battery")

    assert output.startswith("Summary of https://example.com/review\nFocus: battery\n\n")
    assert "Battery life is great" in output


@pytest.mark.asyncio
async def test_fetch_capability_reports_invalid_url_as_text(settings):
    output = await FetchCapability(settings).run("ftp://example.com/file", "anything")

    assert output.startswith("Could not fetch ftp://example.com/file:")


@pytest.mark.asyncio
async def test_tournament_capability_renders_terminal_message(settings, make_client):
    async with make_client(lambda request: httpx.Response(200, text=ddg_page())) as client:
        output = await TournamentCapability(settings, client).run("nothing matches")

    assert output == NO_RESULTS_MESSAGE
