from typing import Any

from github_impact.core.models import (
    ActivityEvent,
    PullRequestEvent,
    PullRequestReviewEvent,
    PushEvent,
    parse_event,
)

PUSH_POINTS = 1
PR_OPENED_POINTS = 5
PR_MERGED_POINTS = 10
PR_REVIEWED_POINTS = 3


class ScoringService:
    """Calculates a developer's impact score from their GitHub events."""

    def calculate_impact_score(self, events: Any) -> int:
        """Sum the points of every event; anything but a list or tuple scores 0."""
        if not isinstance(events, (list, tuple)):
            return 0
        return sum(self.get_event_points(event) for event in events)

    def get_event_points(self, event: ActivityEvent | dict) -> int:
        """Points for a single event, raw API dicts included."""
        event = parse_event(event)

        if isinstance(event, PushEvent):
            return PUSH_POINTS

        if isinstance(event, PullRequestEvent):
            # Merged wins over the reported action
            if event.merged:
                return PR_MERGED_POINTS
            if event.action == "opened":
                return PR_OPENED_POINTS
            return 0

        if isinstance(event, PullRequestReviewEvent):
            return PR_REVIEWED_POINTS

        return 0
