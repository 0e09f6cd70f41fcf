import asyncio
from collections.abc import Sequence

import structlog

from github_impact.core.models import FailedUser, RankedUser, RankingReport
from github_impact.services.github_service import GitHubService
from github_impact.services.leaderboard_service import LeaderboardService
from github_impact.services.scoring_service import ScoringService

logger = structlog.get_logger()


class RankingService:
    """Scores a batch of users and records them on the leaderboard."""

    def __init__(
        self,
        github: GitHubService,
        leaderboard: LeaderboardService,
        scoring: ScoringService | None = None,
    ) -> None:
        self.github = github
        self.leaderboard = leaderboard
        self.scoring = scoring or ScoringService()

    async def rank_users(self, usernames: Sequence[str]) -> RankingReport:
        """
        Rank users by impact score.

        Every user is processed concurrently. A user whose events cannot be
        fetched ends up in ``failed`` without affecting the others.
        """
        results = await asyncio.gather(*(self._rank_user(username) for username in usernames))

        ranked = sorted(
            (result for result in results if isinstance(result, RankedUser)),
            key=lambda result: result.score,
            reverse=True,
        )
        failed = [result for result in results if isinstance(result, FailedUser)]

        logger.info(
            "Users ranked",
            requested=len(usernames),
            ranked=len(ranked),
            failed=len(failed),
        )
        return RankingReport(ranked=ranked, failed=failed)

    async def _rank_user(self, username: str) -> RankedUser | FailedUser:
        try:
            events = await self.github.get_user_events(username)
            score = self.scoring.calculate_impact_score(events)
            self.leaderboard.add_or_update(username, score)
        except Exception as e:
            logger.warning("Failed to rank user", username=username, error=str(e))
            return FailedUser(username=username, error=str(e) or type(e).__name__)
        return RankedUser(username=username, score=score)
