import httpx
import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_contributor_service
from src.api.schemas.contributor import (
    ContributorProfile,
    ContributorScore,
    LanguageDistributionResponse,
)
from src.services.contributor_service import ContributorService

logger = structlog.get_logger()

router = APIRouter()


def _upstream_error(username: str, error: httpx.HTTPError) -> HTTPException:
    logger.error("GitHub request failed", username=username, error=str(error))
    return HTTPException(
        status_code=status.HTTP_502_BAD_GATEWAY,
        detail=f"GitHub request failed for {username}",
    )


@router.get(
    "/{username}",
    response_model=ContributorProfile,
    summary="Get contributor profile",
)
async def get_contributor(
    username: str,
    service: ContributorService = Depends(get_contributor_service),
) -> ContributorProfile:
    """Get language distribution and impact score for a contributor."""
    try:
        return await service.get_profile(username)
    except httpx.HTTPError as e:
        raise _upstream_error(username, e) from e


@router.get(
    "/{username}/languages",
    response_model=LanguageDistributionResponse,
    summary="Get language distribution",
)
async def get_contributor_languages(
    username: str,
    service: ContributorService = Depends(get_contributor_service),
) -> LanguageDistributionResponse:
    """Get the share of bytes per language across a contributor's repositories."""
    try:
        languages = await service.get_language_distribution(username)
    except httpx.HTTPError as e:
        raise _upstream_error(username, e) from e
    return LanguageDistributionResponse(username=username, languages=languages)


@router.get(
    "/{username}/score",
    response_model=ContributorScore,
    summary="Get impact score",
)
async def get_contributor_score(
    username: str,
    service: ContributorService = Depends(get_contributor_service),
) -> ContributorScore:
    """Score a contributor's recent activity and update the leaderboard."""
    try:
        score = await service.get_impact_score(username)
    except httpx.HTTPError as e:
        raise _upstream_error(username, e) from e
    return ContributorScore(username=username, score=score)
