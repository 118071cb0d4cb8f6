from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "GitHub Contributor Profile"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # GitHub API
    github_token: str | None = None
    github_api_base_url: str = "https://api.github.com"
    github_request_timeout: float = 10.0
    github_per_page: int = 100
    github_max_pages: int = 10

    # Scoring
    push_event_points: float = 1
    pr_opened_points: float = 5
    pr_merged_points: float = 10
    pr_reviewed_points: float = 3

    # Leaderboard / API settings
    leaderboard_default_limit: int = 10
    api_pagination_max_limit: int = 100

    @field_validator(
        "push_event_points",
        "pr_opened_points",
        "pr_merged_points",
        "pr_reviewed_points",
    )
    @classmethod
    def points_not_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("event points must be non-negative")
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
