from fastapi import APIRouter

from src.api.routes.contributors import router as contributors_router
from src.api.routes.leaderboard import router as leaderboard_router
from src.api.routes.scoring import router as scoring_router

router = APIRouter()

router.include_router(contributors_router, prefix="/contributors", tags=["contributors"])
router.include_router(leaderboard_router, prefix="/leaderboard", tags=["leaderboard"])
router.include_router(scoring_router, prefix="/scoring", tags=["scoring"])
