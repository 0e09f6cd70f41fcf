import threading

import structlog

from github_impact.core.config import settings
from github_impact.core.models import LeaderboardEntry

logger = structlog.get_logger()


class LeaderboardService:
    """In-memory leaderboard mapping usernames to their latest impact score.

    Entries keep the position of their first insertion, so users with equal
    scores are ranked in the order they first joined the board.
    """

    def __init__(self) -> None:
        self._scores: dict[str, int] = {}
        self._lock = threading.Lock()

    def add_or_update(self, username: str, score: int) -> LeaderboardEntry:
        """Record a user's score, replacing any previous one."""
        with self._lock:
            self._scores[username] = score
        return LeaderboardEntry(username=username, score=score)

    def get_score(self, username: str) -> int:
        """Get a user's score, or 0 if they are not on the board."""
        with self._lock:
            return self._scores.get(username, 0)

    def get_top(self, limit: int = settings.leaderboard_default_limit) -> list[LeaderboardEntry]:
        """Get the top users by score, highest first."""
        if limit <= 0:
            return []
        ranked = sorted(self.get_all(), key=lambda entry: entry.score, reverse=True)
        return ranked[:limit]

    def get_all(self) -> list[LeaderboardEntry]:
        """Get every entry in insertion order."""
        with self._lock:
            items = list(self._scores.items())
        return [LeaderboardEntry(username=username, score=score) for username, score in items]

    def clear(self) -> None:
        with self._lock:
            self._scores.clear()
        logger.info("Leaderboard cleared")

    def size(self) -> int:
        with self._lock:
            return len(self._scores)
