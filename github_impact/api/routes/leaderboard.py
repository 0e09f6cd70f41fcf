import re

from fastapi import APIRouter, Depends, Query

from github_impact.api.dependencies import get_leaderboard
from github_impact.api.schemas.leaderboard import LeaderboardResponse, LeaderboardUser
from github_impact.core.config import settings
from github_impact.services.leaderboard_service import LeaderboardService

router = APIRouter()

LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def parse_limit(raw: str | None) -> int:
    """Read a leading integer from ``raw``; missing, invalid or non-positive means the default."""
    match = LEADING_INTEGER.match(raw or "")
    limit = int(match.group(1)) if match else 0
    return limit if limit > 0 else settings.leaderboard_default_limit


@router.get(
    "",
    response_model=LeaderboardResponse,
    summary="Get the top users",
)
async def get_leaderboard_top(
    limit: str | None = Query(None, description="Number of users to return (default 10)"),
    leaderboard: LeaderboardService = Depends(get_leaderboard),
) -> LeaderboardResponse:
    """Get the highest scoring users ranked so far."""
    top = leaderboard.get_top(parse_limit(limit))
    return LeaderboardResponse(
        count=len(top),
        users=[LeaderboardUser.model_validate(entry) for entry in top],
    )
