"""Data models for search results, summaries, and tournament outcomes."""
from enum import Enum
from typing import Annotated

from annotated_types import Ge
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .messages import ANSWER_TEMPLATE, SUMMARY_TEMPLATE


class SearchResult(BaseModel):
    """One organic result scraped from the provider's result page."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1, description="Result title, tags stripped and entities decoded")
    url: str = Field(description="Destination URL, already unwrapped from the provider redirect")
    snippet: str = Field(default="", description="Result description text")

    @field_validator("url")
    @classmethod
    def _require_http(cls, value: str) -> str:
        if not value.startswith("http"):
            raise ValueError("url must start with 'http'")
        return value


class Summary(BaseModel):
    """Focused summary of a fetched page."""

    source_url: str
    source_title: str = ""
    text: str
    focus: str

    def render(self) -> str:
        """Wrap the summary text in a header naming the source and focus."""
        return SUMMARY_TEMPLATE.format(url=self.source_url, focus=self.focus, text=self.text)


class Contestant(BaseModel):
    """One side of a pair once its fetch has completed or failed."""

    index: int
    result: SearchResult
    summary: Summary | None = None
    score: Annotated[int, Ge(0)] = 0

    @property
    def failed(self) -> bool:
        return self.summary is None


class RoundWinner(BaseModel):
    url: str
    title: str
    summary: str


class AnswerStatus(str, Enum):
    ANSWERED = "answered"
    NO_RESULTS = "no_results"
    FAILED = "failed"


class ResearchAnswer(BaseModel):
    """Finished result of one research call."""

    status: AnswerStatus
    text: str
    source_url: str | None = None
    source_title: str | None = None
    compared_count: Annotated[int, Ge(0)] = 0

    def render(self) -> str:
        if self.status is not AnswerStatus.ANSWERED:
            return self.text
        return ANSWER_TEMPLATE.format(
            text=self.text,
            title=self.source_title,
            url=self.source_url,
            count=self.compared_count,
        )
