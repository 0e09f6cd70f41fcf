from github_impact.api.schemas.error import ErrorResponse, ValidationIssue
from github_impact.api.schemas.leaderboard import LeaderboardResponse, LeaderboardUser
from github_impact.api.schemas.user import (
    FailedUserResponse,
    ProjectResponse,
    RankedUserResponse,
    RankUsersRequest,
    RankUsersResponse,
    Username,
)

__all__ = [
    "ErrorResponse",
    "ValidationIssue",
    "LeaderboardResponse",
    "LeaderboardUser",
    "FailedUserResponse",
    "ProjectResponse",
    "RankedUserResponse",
    "RankUsersRequest",
    "RankUsersResponse",
    "Username",
]
