from pydantic import BaseModel, Field


class LanguageDistributionResponse(BaseModel):
    username: str
    languages: dict[str, str] = Field(default_factory=dict)


class ContributorScore(BaseModel):
    username: str
    score: float


class ContributorProfile(BaseModel):
    username: str
    languages: dict[str, str] = Field(default_factory=dict)
    impact_score: float = 0
    event_count: int = 0
