import asyncio
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal

import structlog

from github_impact.core.models import Repository
from github_impact.services.github_service import GitHubService

logger = structlog.get_logger()

TWO_PLACES = Decimal("0.01")


def aggregate_languages(language_maps: Iterable[Mapping[str, int] | None]) -> dict[str, int]:
    """Sum byte counts per language across repositories.

    Entries that are None (or not mappings at all) are skipped.
    """
    totals: dict[str, int] = {}
    for languages in language_maps or ():
        if not isinstance(languages, Mapping):
            continue
        for language, byte_count in languages.items():
            totals[language] = totals.get(language, 0) + byte_count
    return totals


def calculate_percentages(language_totals: Mapping[str, int]) -> dict[str, str]:
    """Convert byte totals into percentage strings such as ``"70.00%"``."""
    grand_total = sum(language_totals.values())
    if grand_total <= 0:
        return {}

    percentages: dict[str, str] = {}
    for language, byte_count in language_totals.items():
        share = Decimal(byte_count) * 100 / Decimal(grand_total)
        percentages[language] = f"{share.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)}%"
    return percentages


class LanguageService:
    """Analyzes language distribution across a user's repositories."""

    def __init__(self, github: GitHubService) -> None:
        self.github = github

    async def get_projects(self, username: str) -> list[Repository]:
        """List a user's public repositories."""
        repos = await self.github.get_user_repos(username)
        return [Repository.from_api(repo, default_owner=username) for repo in repos or []]

    async def get_language_distribution(self, username: str) -> dict[str, str]:
        """Language percentages across all of a user's repositories.

        A repository whose languages cannot be fetched contributes nothing;
        the remaining repositories are still counted.
        """
        repositories = await self.get_projects(username)
        if not repositories:
            logger.info("No repositories found", username=username)
            return {}

        language_maps = await asyncio.gather(
            *(self._fetch_languages(repo) for repo in repositories)
        )
        failed = sum(1 for languages in language_maps if languages is None)

        totals = aggregate_languages(language_maps)
        logger.info(
            "Language distribution calculated",
            username=username,
            repositories=len(repositories),
            failed=failed,
            languages=len(totals),
        )
        return calculate_percentages(totals)

    async def _fetch_languages(self, repo: Repository) -> dict[str, int] | None:
        try:
            return await self.github.get_repo_languages(repo.owner, repo.name)
        except Exception as e:
            logger.warning(
                "Failed to fetch repository languages",
                owner=repo.owner,
                repo=repo.name,
                error=str(e),
            )
            return None
