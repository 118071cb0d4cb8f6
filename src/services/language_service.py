import asyncio
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal
from typing import Protocol

import structlog

logger = structlog.get_logger()


class LanguageSource(Protocol):
    """The GitHub calls the language breakdown depends on."""

    async def get_user_repos(self, username: str) -> list[dict] | None: ...

    async def get_repo_languages(self, repo: dict) -> dict[str, int]: ...


class LanguageService:
    """Service for building a user's language usage breakdown."""

    def __init__(self, github: LanguageSource) -> None:
        self.github = github

    def aggregate_languages(
        self,
        language_data: Iterable[Mapping[str, int] | None] | None,
    ) -> dict[str, int]:
        """Sum byte counts per language across repositories, skipping None."""
        totals: dict[str, int] = {}
        if not language_data:
            return totals
        for languages in language_data:
            if not languages:
                continue
            for language, byte_count in languages.items():
                totals[language] = totals.get(language, 0) + byte_count
        return totals

    def calculate_percentages(self, language_totals: Mapping[str, int]) -> dict[str, str]:
        """Convert byte totals to percentage strings such as ``"33.33%"``."""
        grand_total = sum(language_totals.values()) if language_totals else 0
        if grand_total <= 0:
            return {}

        total = Decimal(grand_total)
        return {
            language: f"{_percent(Decimal(byte_count) * 100 / total)}%"
            for language, byte_count in language_totals.items()
        }

    async def get_language_distribution(self, username: str) -> dict[str, str]:
        """Fetch all of a user's repositories and compute their language mix.

        Languages for every repository are requested concurrently. A repository
        whose request fails is left out of the totals.
        """
        repos = await self.github.get_user_repos(username)
        if not repos:
            logger.info("No repositories found", username=username)
            return {}

        results = await asyncio.gather(
            *(self.github.get_repo_languages(repo) for repo in repos),
            return_exceptions=True,
        )

        language_data = []
        for repo, result in zip(repos, results):
            if isinstance(result, BaseException):
                logger.warning(
                    "Failed to fetch repository languages",
                    username=username,
                    repository=_repo_name(repo),
                    error=str(result),
                )
                continue
            language_data.append(result)

        totals = self.aggregate_languages(language_data)
        logger.info(
            "Language distribution calculated",
            username=username,
            repositories=len(repos),
            failed=len(repos) - len(language_data),
            languages=len(totals),
        )
        return self.calculate_percentages(totals)


def _percent(value: Decimal) -> Decimal:
    # Halves round up, so 0.125 becomes 0.13
    return value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _repo_name(repo: object) -> str | None:
    if isinstance(repo, Mapping):
        return repo.get("full_name") or repo.get("name")
    return None
