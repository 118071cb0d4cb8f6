from fastapi import APIRouter, Depends

from src.api.dependencies import get_scoring
from src.api.schemas.scoring import ImpactScoreRequest, ImpactScoreResponse, ScoringRule
from src.services.scoring_service import ScoringService

router = APIRouter()


@router.get(
    "/rules",
    response_model=list[ScoringRule],
    summary="Get scoring rules",
)
async def get_scoring_rules(
    service: ScoringService = Depends(get_scoring),
) -> list[ScoringRule]:
    """Get the points awarded per event type, in precedence order."""
    return service.get_rules()


@router.post(
    "/impact",
    response_model=ImpactScoreResponse,
    summary="Score a list of events",
)
async def calculate_impact_score(
    request: ImpactScoreRequest,
    service: ScoringService = Depends(get_scoring),
) -> ImpactScoreResponse:
    """Calculate the impact score of an arbitrary list of GitHub events."""
    score = service.calculate_impact_score(request.events)
    return ImpactScoreResponse(score=score, event_count=len(request.events))
