"""Web research by knockout tournament over search results."""
from .capabilities import build_registry
from .config import ResearchSettings
from .models import AnswerStatus, ResearchAnswer, SearchResult, Summary
from .tournament import TournamentOrchestrator, answer_research_question

__all__ = [
    "AnswerStatus",
    "ResearchAnswer",
    "ResearchSettings",
    "SearchResult",
    "Summary",
    "TournamentOrchestrator",
    "answer_research_question",
    "build_registry",
]
