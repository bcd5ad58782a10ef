"""Single-attempt HTTP GET shared by the search and fetch stages."""
import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import logfire

from .errors import DecodingError, InvalidURL, TransportError


@asynccontextmanager
async def open_client(client: httpx.AsyncClient | None = None) -> AsyncIterator[httpx.AsyncClient]:
    """Yield the injected client, or a fresh one that is closed on exit."""
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(follow_redirects=True) as fresh:
        yield fresh


async def get_text(
    client: httpx.AsyncClient,
    url: str,
    *,
    user_agent: str,
    timeout: float,
) -> str:
    """GET `url` once and return the body as UTF-8 text.

    Raises:
        TransportError: connection failure, timeout, or status other than 200.
        DecodingError: the body is not valid UTF-8.
    """
    try:
        response = await asyncio.wait_for(
            client.get(url, headers={"User-Agent": user_agent}, timeout=timeout),
            timeout=timeout,
        )
    except (asyncio.TimeoutError, httpx.TimeoutException) as e:
        raise TransportError(f"Timed out after {timeout:g}s") from e
    except httpx.InvalidURL as e:
        raise InvalidURL(f"Malformed URL: {url[:80]}") from e
    except httpx.HTTPError as e:
        raise TransportError(f"Request failed: {type(e).__name__}") from e

    logfire.debug('GET {url} -> {status}', url=url, status=response.status_code, size=len(response.content))

    if response.status_code != 200:
        raise TransportError(f"HTTP status {response.status_code}")

    try:
        return response.content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodingError("Response body is not valid UTF-8") from e
