"""Domain models built from raw GitHub API payloads.

GitHub events are a tagged union keyed on ``type`` with a payload whose
shape depends on that tag. ``parse_event`` folds any raw value into one of
the variants below; unrecognised or malformed input becomes an
``UnknownEvent`` rather than an error.
"""

from dataclasses import dataclass
from typing import Any

from github_impact.core.errors import UpstreamError

PUSH_EVENT = "PushEvent"
PULL_REQUEST_EVENT = "PullRequestEvent"
PULL_REQUEST_REVIEW_EVENT = "PullRequestReviewEvent"


@dataclass(frozen=True)
class PushEvent:
    kind: str = PUSH_EVENT


@dataclass(frozen=True)
class PullRequestEvent:
    action: str | None = None
    merged: bool = False
    kind: str = PULL_REQUEST_EVENT


@dataclass(frozen=True)
class PullRequestReviewEvent:
    kind: str = PULL_REQUEST_REVIEW_EVENT


@dataclass(frozen=True)
class UnknownEvent:
    kind: str | None = None


ActivityEvent = PushEvent | PullRequestEvent | PullRequestReviewEvent | UnknownEvent

EVENT_VARIANTS = (PushEvent, PullRequestEvent, PullRequestReviewEvent, UnknownEvent)


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def parse_event(raw: Any) -> ActivityEvent:
    """Convert a raw event object from the events API into an ActivityEvent."""
    if isinstance(raw, EVENT_VARIANTS):
        return raw

    data = _as_dict(raw)
    kind = data.get("type")

    if kind == PUSH_EVENT:
        return PushEvent()

    if kind == PULL_REQUEST_EVENT:
        payload = _as_dict(data.get("payload"))
        pull_request = _as_dict(payload.get("pull_request"))
        action = payload.get("action")
        return PullRequestEvent(
            action=action if isinstance(action, str) else None,
            merged=pull_request.get("merged") is True,
        )

    if kind == PULL_REQUEST_REVIEW_EVENT:
        return PullRequestReviewEvent()

    return UnknownEvent(kind=kind if isinstance(kind, str) else None)


@dataclass(frozen=True)
class Repository:
    name: str
    owner: str
    language: str | None = None
    stargazers_count: int = 0

    @classmethod
    def from_api(cls, data: dict, default_owner: str) -> "Repository":
        """Build from a repos API object, falling back to the queried owner."""
        if not isinstance(data, dict) or not isinstance(data.get("name"), str):
            raise UpstreamError("GitHub API returned an invalid response")
        owner = _as_dict(data.get("owner")).get("login") or default_owner
        return cls(
            name=data["name"],
            owner=owner,
            language=data.get("language"),
            stargazers_count=data.get("stargazers_count") or 0,
        )


@dataclass(frozen=True)
class LeaderboardEntry:
    username: str
    score: int


@dataclass(frozen=True)
class RankedUser:
    username: str
    score: int


@dataclass(frozen=True)
class FailedUser:
    username: str
    error: str


@dataclass
class RankingReport:
    ranked: list[RankedUser]
    failed: list[FailedUser]

    @property
    def total(self) -> int:
        return len(self.ranked) + len(self.failed)
