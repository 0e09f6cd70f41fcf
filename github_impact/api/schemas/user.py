from typing import Annotated

from pydantic import BaseModel, Field, StringConstraints

from github_impact.core.config import settings

# GitHub handles: alphanumerics and single inner hyphens, at most 39 characters
USERNAME_PATTERN = r"^[a-zA-Z0-9]([a-zA-Z0-9-]*[a-zA-Z0-9])?$"
USERNAME_MAX_LENGTH = 39

Username = Annotated[
    str,
    StringConstraints(min_length=1, max_length=USERNAME_MAX_LENGTH, pattern=USERNAME_PATTERN),
]


class RankUsersRequest(BaseModel):
    usernames: list[Username] = Field(
        ...,
        min_length=1,
        max_length=settings.max_usernames_per_request,
        examples=[["octocat", "torvalds"]],
    )


class RankedUserResponse(BaseModel):
    username: str
    score: int

    model_config = {"from_attributes": True}


class FailedUserResponse(BaseModel):
    username: str
    error: str

    model_config = {"from_attributes": True}


class RankUsersResponse(BaseModel):
    leaderboard: list[RankedUserResponse]
    failed: list[FailedUserResponse] | None = None


class ProjectResponse(BaseModel):
    name: str
    stargazers_count: int
    primary_language: str | None
