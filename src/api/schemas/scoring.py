from typing import Any

from pydantic import BaseModel, Field


class ImpactScoreRequest(BaseModel):
    events: list[Any] = Field(default_factory=list)


class ImpactScoreResponse(BaseModel):
    score: float
    event_count: int


class ScoringRule(BaseModel):
    event_type: str
    condition: str | None = None
    points: float
