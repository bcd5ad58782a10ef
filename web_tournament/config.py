"""Runtime settings for search, fetch, and tournament stages."""
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


SAFARI_IPHONE_UA = "Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15"


class ResearchSettings(BaseSettings):
    """Settings passed into every component at construction.

    Values can be overridden with ``WEB_TOURNAMENT_*`` environment variables
    or a local ``.env`` file.
    """

    # Search provider (DuckDuckGo HTML endpoint)
    search_url_template: str = "https://html.duckduckgo.com/html/?q={query}"
    search_user_agent: str = SAFARI_IPHONE_UA
    search_timeout: float = Field(default=10.0, gt=0)
    max_results: int = Field(default=10, gt=0)

    # Page fetch
    fetch_user_agent: str = "Mozilla/5.0"
    fetch_timeout: float = Field(default=15.0, gt=0)
    summary_max_length: int = Field(default=2000, gt=0)

    # Tournament
    max_candidates: int = Field(default=8, gt=0)
    round_pool_size: int = Field(default=4, gt=0)

    # Search capability listing
    listing_size: int = Field(default=5, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="WEB_TOURNAMENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
