from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EventType(str, Enum):
    PUSH = "PushEvent"
    PULL_REQUEST = "PullRequestEvent"
    PULL_REQUEST_REVIEW = "PullRequestReviewEvent"


class PullRequestInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    merged: bool = False

    @field_validator("merged", mode="before")
    @classmethod
    def only_literal_true(cls, v: Any) -> bool:
        # GitHub sends a JSON boolean; anything else counts as not merged
        return v is True


class EventPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    action: str | None = None
    pull_request: PullRequestInfo = Field(default_factory=PullRequestInfo)

    @field_validator("action", mode="before")
    @classmethod
    def action_as_string(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None

    @field_validator("pull_request", mode="before")
    @classmethod
    def pull_request_as_mapping(cls, v: Any) -> Any:
        if isinstance(v, PullRequestInfo | dict):
            return v
        return {}


class GitHubEvent(BaseModel):
    """A single entry of a GitHub activity stream.

    Only the fields used for scoring are modelled. Missing or ill-typed
    fields fall back to neutral values so that scoring never fails on
    partial payloads.
    """

    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    payload: EventPayload = Field(default_factory=EventPayload)

    @field_validator("type", mode="before")
    @classmethod
    def type_as_string(cls, v: Any) -> str | None:
        return v if isinstance(v, str) else None

    @field_validator("payload", mode="before")
    @classmethod
    def payload_as_mapping(cls, v: Any) -> Any:
        if isinstance(v, EventPayload | dict):
            return v
        return {}

    @property
    def is_merged_pull_request(self) -> bool:
        return self.payload.pull_request.merged
