import structlog

logger = structlog.get_logger()


class LeaderboardService:
    """In-memory leaderboard ranking usernames by impact score.

    One score per username; writes replace the previous score. Entries live
    for the lifetime of the process. Not safe for concurrent writers from
    multiple threads.
    """

    def __init__(self) -> None:
        self._scores: dict[str, float] = {}

    def add_or_update(self, username: str, score: float) -> dict:
        """Insert a user or overwrite their score."""
        is_new = username not in self._scores
        self._scores[username] = score
        logger.debug(
            "Leaderboard entry stored",
            username=username,
            score=score,
            created=is_new,
        )
        return {"username": username, "score": score}

    def get_score(self, username: str) -> float:
        """Get a user's score, 0 if the user was never added."""
        return self._scores.get(username, 0)

    def size(self) -> int:
        return len(self._scores)

    def get_top(self, limit: int = 10) -> list[dict]:
        """Get up to ``limit`` entries sorted by score, highest first.

        Equal scores keep the order in which the usernames were first added.
        """
        if limit <= 0:
            return []

        return [
            {"username": username, "score": score}
            for username, score in self._ranked()[:limit]
        ]

    def get_rank(self, username: str) -> int | None:
        """Get the 1-based position of a user, None if not on the leaderboard."""
        if username not in self._scores:
            return None
        for position, (name, _) in enumerate(self._ranked(), start=1):
            if name == username:
                return position
        return None

    def _ranked(self) -> list[tuple[str, float]]:
        # sorted() is stable, so ties stay in insertion order
        return sorted(self._scores.items(), key=lambda item: item[1], reverse=True)
