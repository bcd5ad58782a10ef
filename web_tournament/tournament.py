"""Knockout tournament over fetched search results."""
import asyncio

import httpx
import logfire

from .config import ResearchSettings
from .errors import InputError, ResearchError
from .fetcher import PageFetcher
from .messages import (
    INVALID_QUESTION_MESSAGE,
    NO_RESULTS_MESSAGE,
    NO_WINNER_MESSAGE,
    SEARCH_FAILED_MESSAGE,
)
from .models import AnswerStatus, Contestant, ResearchAnswer, RoundWinner, SearchResult
from .search import SearchClient


def question_keywords(question: str) -> list[str]:
    return [token for token in question.lower().split() if len(token) > 3]


def score_summary(text: str, question: str) -> int:
    """Length proxy plus 10 points per question keyword present in `text`."""
    lower = text.lower()
    score = len(text) // 100
    for keyword in question_keywords(question):
        if keyword in lower:
            score += 10
    return score


def form_pairs(candidates: list[SearchResult], pool_size: int = 4) -> list[tuple[int, int]]:
    """Index pairs (0, 1), (2, 3), ... over the first `pool_size` candidates.

    An unpaired trailing candidate is dropped, not advanced.
    """
    pool = min(pool_size, len(candidates))
    return [(i, i + 1) for i in range(0, pool - 1, 2)]


def pick_winner(first: Contestant, second: Contestant) -> Contestant | None:
    """Higher score wins, ties go to `first`; a failed fetch never wins."""
    if first.failed and second.failed:
        return None
    if first.failed:
        return second
    if second.failed:
        return first
    return first if first.score >= second.score else second


def pick_final(winners: list[RoundWinner]) -> RoundWinner | None:
    """Longest summary wins; the earliest recorded winner takes ties."""
    if not winners:
        return None
    return max(winners, key=lambda winner: len(winner.summary))


class TournamentOrchestrator:
    """Search, pair off candidates, and keep the best-supported summary."""

    def __init__(
        self,
        settings: ResearchSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings or ResearchSettings()
        self.client = client
        self.searcher = SearchClient(self.settings, client)
        self.fetcher = PageFetcher(self.settings, client)

    async def _contest(self, index: int, result: SearchResult, question: str) -> Contestant:
        try:
            summary = await self.fetcher.fetch_and_summarize(result.url, question, title=result.title)
        except ResearchError as e:
            logfire.warn('Candidate {index} failed: {error}', index=index, url=result.url, error=str(e))
            return Contestant(index=index, result=result)
        return Contestant(
            index=index,
            result=result,
            summary=summary,
            score=score_summary(summary.text, question),
        )

    @logfire.instrument('Pair {first_index} vs {second_index}')
    async def run_pair(
        self,
        question: str,
        candidates: list[SearchResult],
        first_index: int,
        second_index: int,
    ) -> RoundWinner | None:
        """Fetch both sides concurrently, then score them once both are done."""
        tasks = [
            asyncio.ensure_future(self._contest(first_index, candidates[first_index], question)),
            asyncio.ensure_future(self._contest(second_index, candidates[second_index], question)),
        ]
        try:
            first, second = await asyncio.gather(*tasks)
        except BaseException:
            # no fetch outlives its pair
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

        winner = pick_winner(first, second)
        if winner is None:
            logfire.warn('Pair {first_index} vs {second_index} produced no winner',
                         first_index=first_index, second_index=second_index)
            return None

        logfire.info(
            'Winner: {title} (score: {winner_score} vs {loser_score})',
            title=winner.result.title,
            winner_score=winner.score,
            loser_score=(second if winner is first else first).score,
        )
        return RoundWinner(url=winner.result.url, title=winner.result.title, summary=winner.summary.text)

    @logfire.instrument('Tournament: {question}')
    async def answer(self, question: str) -> ResearchAnswer:
        """Answer `question` with the best source found on the web.

        Raises:
            ResearchError: the search itself failed, so there is nothing to rank.
        """
        results = await self.searcher.search(question)
        if not results:
            return ResearchAnswer(status=AnswerStatus.NO_RESULTS, text=NO_RESULTS_MESSAGE)

        candidates = results[:self.settings.max_candidates]
        pairs = form_pairs(candidates, self.settings.round_pool_size)
        logfire.info('Starting knockout with {count} candidates, {pairs} pairs',
                     count=len(candidates), pairs=len(pairs))

        winners: list[RoundWinner] = []
        for first_index, second_index in pairs:
            winner = await self.run_pair(question, candidates, first_index, second_index)
            if winner is not None:
                winners.append(winner)

        best = pick_final(winners)
        if best is None:
            return ResearchAnswer(status=AnswerStatus.FAILED, text=NO_WINNER_MESSAGE)

        logfire.info('Tournament complete! Winner: {title}', title=best.title, url=best.url)
        return ResearchAnswer(
            status=AnswerStatus.ANSWERED,
            text=best.summary,
            source_url=best.url,
            source_title=best.title,
            compared_count=len(winners),
        )


async def answer_research_question(
    question: str,
    settings: ResearchSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> ResearchAnswer:
    """Answer a question using web research.

    Every outcome, search failure included, comes back as a `ResearchAnswer`
    whose `render()` is short human-readable text.
    """
    orchestrator = TournamentOrchestrator(settings, client)
    try:
        return await orchestrator.answer(question)
    except InputError as e:
        return ResearchAnswer(status=AnswerStatus.FAILED, text=INVALID_QUESTION_MESSAGE.format(reason=e))
    except ResearchError as e:
        return ResearchAnswer(status=AnswerStatus.FAILED, text=SEARCH_FAILED_MESSAGE.format(reason=e))
