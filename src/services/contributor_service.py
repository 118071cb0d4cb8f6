import asyncio

import structlog

from src.api.schemas.contributor import ContributorProfile
from src.services.github_service import GitHubService
from src.services.language_service import LanguageService
from src.services.leaderboard_service import LeaderboardService
from src.services.scoring_service import ScoringService

logger = structlog.get_logger()


class ContributorService:
    """Service that builds contributor profiles from live GitHub data."""

    def __init__(
        self,
        github: GitHubService,
        leaderboard: LeaderboardService,
        scoring: ScoringService | None = None,
    ) -> None:
        self.github = github
        self.leaderboard = leaderboard
        self.scoring = scoring or ScoringService()
        self.languages = LanguageService(github)

    async def get_language_distribution(self, username: str) -> dict[str, str]:
        return await self.languages.get_language_distribution(username)

    async def get_impact_score(self, username: str) -> float:
        """Score a user's recent events and record the result on the leaderboard."""
        events = await self.github.get_user_events(username)
        return self._record_score(username, events)

    async def get_profile(self, username: str) -> ContributorProfile:
        """Get the language mix and impact score of a user in one pass."""
        try:
            async with asyncio.TaskGroup() as tg:
                languages_task = tg.create_task(
                    self.languages.get_language_distribution(username)
                )
                events_task = tg.create_task(self.github.get_user_events(username))
        except ExceptionGroup as eg:
            # the sibling fetch is cancelled; surface the first failure as-is
            raise eg.exceptions[0] from None

        languages = languages_task.result()
        events = events_task.result()
        score = self._record_score(username, events)
        return ContributorProfile(
            username=username,
            languages=languages,
            impact_score=score,
            event_count=len(events or []),
        )

    def _record_score(self, username: str, events: list[dict] | None) -> float:
        if events is None:
            logger.info("No events found", username=username)
            return 0.0

        score = self.scoring.calculate_impact_score(events)
        self.leaderboard.add_or_update(username, score)
        logger.info(
            "Impact score calculated",
            username=username,
            events=len(events),
            score=score,
        )
        return score
