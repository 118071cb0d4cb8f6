from functools import lru_cache

from fastapi import Depends

from src.services.contributor_service import ContributorService
from src.services.github_service import GitHubService
from src.services.leaderboard_service import LeaderboardService
from src.services.scoring_service import ScoringService


@lru_cache
def get_leaderboard() -> LeaderboardService:
    """Process-wide leaderboard shared by every request."""
    return LeaderboardService()


def get_github() -> GitHubService:
    return GitHubService()


def get_scoring() -> ScoringService:
    return ScoringService()


def get_contributor_service(
    github: GitHubService = Depends(get_github),
    leaderboard: LeaderboardService = Depends(get_leaderboard),
    scoring: ScoringService = Depends(get_scoring),
) -> ContributorService:
    return ContributorService(github, leaderboard, scoring)
