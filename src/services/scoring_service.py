from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from src.api.schemas.event import EventType, GitHubEvent
from src.api.schemas.scoring import ScoringRule
from src.core.config import Settings, settings as default_settings

logger = structlog.get_logger()

PR_OPENED_ACTION = "opened"


class ScoringService:
    """Service for turning GitHub activity events into an impact score."""

    def __init__(self, config: Settings | None = None) -> None:
        config = config or default_settings
        self.push_points = float(config.push_event_points)
        self.pr_opened_points = float(config.pr_opened_points)
        self.pr_merged_points = float(config.pr_merged_points)
        self.pr_reviewed_points = float(config.pr_reviewed_points)

    def get_rules(self) -> list[ScoringRule]:
        """Describe the scoring table, in precedence order."""
        return [
            ScoringRule(event_type=EventType.PUSH.value, points=self.push_points),
            ScoringRule(
                event_type=EventType.PULL_REQUEST.value,
                condition="merged",
                points=self.pr_merged_points,
            ),
            ScoringRule(
                event_type=EventType.PULL_REQUEST.value,
                condition=f"action={PR_OPENED_ACTION}",
                points=self.pr_opened_points,
            ),
            ScoringRule(
                event_type=EventType.PULL_REQUEST_REVIEW.value,
                points=self.pr_reviewed_points,
            ),
        ]

    def calculate_impact_score(self, events: Any) -> float:
        """Sum the points of every event. Anything that is not a list scores 0."""
        if not isinstance(events, list):
            return 0.0

        total = 0.0
        for event in events:
            total += self.score_event(event)
        return total

    def score_event(self, event: Any) -> float:
        """Calculate points for a single event."""
        parsed = self._coerce_event(event)
        if parsed is None or parsed.type is None:
            return 0.0

        if parsed.type == EventType.PUSH.value:
            return self.push_points

        if parsed.type == EventType.PULL_REQUEST.value:
            # Merged status wins over the action field
            if parsed.is_merged_pull_request:
                return self.pr_merged_points
            if parsed.payload.action == PR_OPENED_ACTION:
                return self.pr_opened_points
            return 0.0

        if parsed.type == EventType.PULL_REQUEST_REVIEW.value:
            return self.pr_reviewed_points

        return 0.0

    @staticmethod
    def _coerce_event(event: Any) -> GitHubEvent | None:
        if isinstance(event, GitHubEvent):
            return event
        if not isinstance(event, Mapping):
            return None
        try:
            return GitHubEvent.model_validate(dict(event))
        except ValidationError as e:
            logger.debug("Skipping unparseable event", error=str(e))
            return None
