class GitHubImpactError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500
    default_message = "GitHub API error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(GitHubImpactError):
    """The requested user or repository does not exist upstream."""

    status_code = 404
    default_message = "Resource not found"


class RateLimitError(GitHubImpactError):
    """The GitHub API quota is exhausted."""

    status_code = 403
    default_message = "GitHub API rate limit exceeded"


class UpstreamError(GitHubImpactError):
    """Any other transport or protocol failure talking to GitHub."""

    status_code = 500
    default_message = "GitHub API request failed"
