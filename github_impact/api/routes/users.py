from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from github_impact.api.dependencies import get_language_service, get_ranking_service
from github_impact.api.schemas.error import ErrorResponse
from github_impact.api.schemas.user import (
    USERNAME_MAX_LENGTH,
    USERNAME_PATTERN,
    FailedUserResponse,
    ProjectResponse,
    RankedUserResponse,
    RankUsersRequest,
    RankUsersResponse,
)
from github_impact.services.language_service import LanguageService
from github_impact.services.ranking_service import RankingService

router = APIRouter()

UsernamePath = Annotated[
    str,
    Path(
        min_length=1,
        max_length=USERNAME_MAX_LENGTH,
        pattern=USERNAME_PATTERN,
        description="GitHub username",
    ),
]

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid username"},
    403: {"model": ErrorResponse, "description": "GitHub rate limit exceeded"},
    404: {"model": ErrorResponse, "description": "User not found on GitHub"},
}


@router.post(
    "",
    response_model=RankUsersResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Rank users by impact score",
    responses={400: ERROR_RESPONSES[400]},
)
async def rank_users(
    body: RankUsersRequest,
    service: RankingService = Depends(get_ranking_service),
) -> RankUsersResponse:
    """Score each user from their last public events and update the leaderboard."""
    report = await service.rank_users(body.usernames)
    return RankUsersResponse(
        leaderboard=[RankedUserResponse.model_validate(r) for r in report.ranked],
        failed=[FailedUserResponse.model_validate(f) for f in report.failed] or None,
    )


@router.get(
    "/{username}/projects",
    response_model=list[ProjectResponse],
    summary="List a user's public repositories",
    responses=ERROR_RESPONSES,
)
async def get_projects(
    username: UsernamePath,
    service: LanguageService = Depends(get_language_service),
) -> list[ProjectResponse]:
    """Get all public repositories for a user."""
    repositories = await service.get_projects(username)
    return [
        ProjectResponse(
            name=repo.name,
            stargazers_count=repo.stargazers_count,
            primary_language=repo.language,
        )
        for repo in repositories
    ]


@router.get(
    "/{username}/languages",
    response_model=dict[str, str],
    summary="Get a user's language distribution",
    responses=ERROR_RESPONSES,
)
async def get_languages(
    username: UsernamePath,
    service: LanguageService = Depends(get_language_service),
) -> dict[str, str]:
    """Get language percentages across all of a user's repositories."""
    return await service.get_language_distribution(username)
