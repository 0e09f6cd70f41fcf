import httpx
import structlog

from github_impact.core.config import settings
from github_impact.core.errors import NotFoundError, RateLimitError, UpstreamError

logger = structlog.get_logger()


class GitHubService:
    """Service for interacting with the GitHub API."""

    def __init__(
        self,
        token: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url or settings.github_api_base_url
        self.token = token if token is not None else settings.github_token
        self.transport = transport
        self.headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": settings.github_api_version,
            "User-Agent": settings.app_name.replace(" ", "-"),
        }
        if self.token:
            self.headers["Authorization"] = f"Bearer {self.token}"

    async def fetch(
        self,
        endpoint: str,
        params: dict | None = None,
        resource: str | None = None,
    ) -> list | dict:
        """GET an API endpoint and return the decoded JSON body.

        ``resource`` names the thing being fetched in NotFoundError messages.
        """
        logger.debug("GitHub request", endpoint=endpoint, params=params)
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                headers=self.headers,
                timeout=settings.github_timeout_seconds,
                transport=self.transport,
            ) as client:
                response = await client.get(endpoint, params=params)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise self.handle_error(e.response, endpoint, resource) from e
        except httpx.RequestError as e:
            logger.warning("GitHub request failed", endpoint=endpoint, error=str(e))
            raise UpstreamError(f"Unable to reach GitHub API: {e}") from e
        except ValueError as e:
            logger.warning("GitHub returned invalid JSON", endpoint=endpoint)
            raise UpstreamError("GitHub API returned an invalid response") from e

    async def get_user_events(self, username: str) -> list[dict]:
        """Fetch the most recent public events for a user."""
        return await self.fetch(
            f"/users/{username}/events/public",
            params={"per_page": settings.events_per_page},
            resource=f"GitHub user '{username}'",
        )

    async def get_user_repos(self, username: str) -> list[dict]:
        """Fetch the public repositories owned by a user."""
        return await self.fetch(
            f"/users/{username}/repos",
            params={"per_page": settings.repos_per_page, "type": "public"},
            resource=f"GitHub user '{username}'",
        )

    async def get_repo_languages(self, owner: str, repo: str) -> dict[str, int]:
        """Fetch language byte counts for a repository."""
        return await self.fetch(
            f"/repos/{owner}/{repo}/languages",
            resource=f"Repository '{owner}/{repo}'",
        )

    def handle_error(
        self,
        response: httpx.Response,
        endpoint: str,
        resource: str | None = None,
    ) -> Exception:
        """Translate an error response into the matching GitHubImpactError."""
        status = response.status_code
        message = _error_message(response)
        logger.warning("GitHub API error", endpoint=endpoint, status=status, message=message)

        if status == 404:
            return NotFoundError(f"{resource or 'GitHub resource'} not found")
        if status == 429 or (status == 403 and _is_rate_limited(response, message)):
            return RateLimitError(
                "GitHub API rate limit exceeded. Try again later or configure GITHUB_TOKEN."
            )
        if status == 401:
            return UpstreamError("GitHub authentication failed. Check GITHUB_TOKEN.")
        return UpstreamError(f"GitHub API error ({status}): {message or response.reason_phrase}")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("message", ""))
    return ""


def _is_rate_limited(response: httpx.Response, message: str) -> bool:
    if response.headers.get("x-ratelimit-remaining") == "0":
        return True
    return "rate limit" in message.lower()
