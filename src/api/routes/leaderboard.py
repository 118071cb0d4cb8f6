from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.api.dependencies import get_leaderboard
from src.api.schemas.leaderboard import (
    LeaderboardEntry,
    LeaderboardRankedEntry,
    LeaderboardResponse,
    LeaderboardScoreUpdate,
)
from src.core.config import settings
from src.services.leaderboard_service import LeaderboardService

router = APIRouter()


@router.get(
    "",
    response_model=LeaderboardResponse,
    summary="Get top contributors",
)
async def get_leaderboard_top(
    limit: int = Query(
        settings.leaderboard_default_limit,
        ge=1,
        le=settings.api_pagination_max_limit,
    ),
    service: LeaderboardService = Depends(get_leaderboard),
) -> LeaderboardResponse:
    """Get the highest scoring contributors."""
    entries = service.get_top(limit)
    return LeaderboardResponse(
        entries=[LeaderboardEntry.model_validate(e) for e in entries],
        total=service.size(),
        limit=limit,
    )


@router.get(
    "/{username}",
    response_model=LeaderboardRankedEntry,
    summary="Get a contributor's position",
)
async def get_leaderboard_entry(
    username: str,
    service: LeaderboardService = Depends(get_leaderboard),
) -> LeaderboardRankedEntry:
    """Get the stored score and rank of a contributor."""
    rank = service.get_rank(username)
    if rank is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Contributor {username} not on leaderboard",
        )
    return LeaderboardRankedEntry(
        username=username,
        score=service.get_score(username),
        rank=rank,
    )


@router.put(
    "/{username}",
    response_model=LeaderboardEntry,
    summary="Set a contributor's score",
)
async def set_leaderboard_score(
    username: str,
    update: LeaderboardScoreUpdate,
    service: LeaderboardService = Depends(get_leaderboard),
) -> LeaderboardEntry:
    """Insert a contributor or overwrite their score."""
    entry = service.add_or_update(username, update.score)
    return LeaderboardEntry.model_validate(entry)
