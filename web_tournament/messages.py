"""Fixed user-visible text for research outcomes.

Every outcome, including failures, is surfaced to callers as short
human-readable text built from these templates.
"""

NO_RESULTS_MESSAGE = "No search results found for the query."

NO_WINNER_MESSAGE = "Failed to process search results."

SEARCH_FAILED_MESSAGE = "Web search is unavailable right now: {reason}"

INVALID_QUESTION_MESSAGE = "Could not research that question: {reason}"

NO_DESCRIPTION = "No description available"


SUMMARY_TEMPLATE = """Summary of {url}
Focus: {focus}

{text}"""


ANSWER_TEMPLATE = """Based on multiple sources, here's what I found:

{text}

Source: {title}
URL: {url}

(This answer was selected from {count} sources in a knockout comparison)"""


LISTING_HEADER = "Search results for '{query}':\n\n"

LISTING_ENTRY = "[{rank}] {title}\n    URL: {url}\n    {snippet}\n\n"


def format_listing(query: str, results, limit: int) -> str:
    """Render the first `limit` results as a numbered text listing."""
    output = LISTING_HEADER.format(query=query)
    for rank, result in enumerate(results[:limit], start=1):
        output += LISTING_ENTRY.format(
            rank=rank,
            title=result.title,
            url=result.url,
            snippet=result.snippet,
        )
    return output
