from src.api.schemas.contributor import (
    ContributorProfile,
    ContributorScore,
    LanguageDistributionResponse,
)
from src.api.schemas.event import EventPayload, EventType, GitHubEvent, PullRequestInfo
from src.api.schemas.leaderboard import (
    LeaderboardEntry,
    LeaderboardRankedEntry,
    LeaderboardResponse,
    LeaderboardScoreUpdate,
)
from src.api.schemas.scoring import ImpactScoreRequest, ImpactScoreResponse, ScoringRule

__all__ = [
    "ContributorProfile",
    "ContributorScore",
    "LanguageDistributionResponse",
    "EventType",
    "EventPayload",
    "GitHubEvent",
    "PullRequestInfo",
    "LeaderboardEntry",
    "LeaderboardRankedEntry",
    "LeaderboardResponse",
    "LeaderboardScoreUpdate",
    "ImpactScoreRequest",
    "ImpactScoreResponse",
    "ScoringRule",
]
