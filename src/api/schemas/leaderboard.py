from pydantic import BaseModel, Field


class LeaderboardEntry(BaseModel):
    username: str
    score: float


class LeaderboardRankedEntry(LeaderboardEntry):
    rank: int


class LeaderboardScoreUpdate(BaseModel):
    score: float = Field(..., ge=0)


class LeaderboardResponse(BaseModel):
    entries: list[LeaderboardEntry]
    total: int
    limit: int
