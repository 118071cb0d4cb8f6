from src.services.contributor_service import ContributorService
from src.services.github_service import GitHubService
from src.services.language_service import LanguageService
from src.services.leaderboard_service import LeaderboardService
from src.services.scoring_service import ScoringService

__all__ = [
    "LanguageService",
    "LeaderboardService",
    "ContributorService",
    "ScoringService",
    "GitHubService",
]
