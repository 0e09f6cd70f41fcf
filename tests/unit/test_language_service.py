import re

import pytest

from github_impact.core.errors import RateLimitError, UpstreamError
from github_impact.services.language_service import (
    LanguageService,
    aggregate_languages,
    calculate_percentages,
)
from tests.fakes import FakeGitHubService, GatedGitHubService, repo


class TestAggregateLanguages:
    """Tests for summing byte counts across repositories."""

    def test_combines_multiple_repositories(self) -> None:
        result = aggregate_languages(
            [
                {"JavaScript": 1000, "Python": 500},
                {"JavaScript": 2000, "TypeScript": 1500},
                {"Python": 300},
            ]
        )
        assert result == {"JavaScript": 3000, "Python": 800, "TypeScript": 1500}

    def test_single_repository(self) -> None:
        assert aggregate_languages([{"JavaScript": 1000, "CSS": 200}]) == {
            "JavaScript": 1000,
            "CSS": 200,
        }

    def test_empty_input(self) -> None:
        assert aggregate_languages([]) == {}

    def test_skips_missing_entries(self) -> None:
        result = aggregate_languages([{"JavaScript": 1000}, None, {"Python": 500}])
        assert result == {"JavaScript": 1000, "Python": 500}

    def test_all_entries_missing(self) -> None:
        assert aggregate_languages([None, None]) == {}

    def test_language_names_are_case_sensitive(self) -> None:
        result = aggregate_languages([{"Python": 1}, {"python": 2}])
        assert result == {"Python": 1, "python": 2}

    def test_empty_repositories_add_nothing(self) -> None:
        assert aggregate_languages([{}, {"Go": 10}, {}]) == {"Go": 10}


class TestCalculatePercentages:
    """Tests for turning byte totals into percentage strings."""

    def test_empty_totals(self) -> None:
        assert calculate_percentages({}) == {}

    def test_zero_bytes(self) -> None:
        assert calculate_percentages({"JavaScript": 0}) == {}

    def test_single_language(self) -> None:
        assert calculate_percentages({"JavaScript": 1000}) == {"JavaScript": "100.00%"}

    def test_two_languages(self) -> None:
        assert calculate_percentages({"JavaScript": 7000, "TypeScript": 3000}) == {
            "JavaScript": "70.00%",
            "TypeScript": "30.00%",
        }

    def test_whole_percentages_keep_two_decimals(self) -> None:
        assert calculate_percentages({"JavaScript": 33, "Python": 33, "TypeScript": 34}) == {
            "JavaScript": "33.00%",
            "Python": "33.00%",
            "TypeScript": "34.00%",
        }

    def test_very_small_share(self) -> None:
        result = calculate_percentages({"JavaScript": 9999, "Shell": 1})
        assert result == {"JavaScript": "99.99%", "Shell": "0.01%"}

    def test_rounds_instead_of_truncating(self) -> None:
        result = calculate_percentages({"JavaScript": 1, "Python": 2})
        assert result == {"JavaScript": "33.33%", "Python": "66.67%"}

    def test_format(self) -> None:
        result = calculate_percentages({"JavaScript": 1234, "Python": 5678, "TypeScript": 91})
        assert set(result) == {"JavaScript", "Python", "TypeScript"}
        for value in result.values():
            assert re.fullmatch(r"\d+\.\d{2}%", value)


class TestLanguageDistribution:
    """Tests for the end-to-end distribution across a user's repositories."""

    @pytest.mark.asyncio
    async def test_fetches_every_repository(self) -> None:
        github = FakeGitHubService(
            repos={"testuser": [repo("repo1"), repo("repo2"), repo("repo3")]},
            languages={
                "testuser/repo1": {"JavaScript": 1000},
                "testuser/repo2": {"Python": 500},
                "testuser/repo3": {"JavaScript": 500, "TypeScript": 1000},
            },
        )

        result = await LanguageService(github).get_language_distribution("testuser")

        assert len(github.calls_for("languages")) == 3
        assert result == {
            "JavaScript": "50.00%",
            "Python": "16.67%",
            "TypeScript": "33.33%",
        }

    @pytest.mark.asyncio
    async def test_no_repositories(self) -> None:
        github = FakeGitHubService(repos={"testuser": []})

        result = await LanguageService(github).get_language_distribution("testuser")

        assert result == {}
        assert github.calls_for("repos") == ["testuser"]
        assert github.calls_for("languages") == []

    @pytest.mark.asyncio
    async def test_missing_repository_list(self) -> None:
        github = FakeGitHubService(repos={"testuser": None})

        result = await LanguageService(github).get_language_distribution("testuser")

        assert result == {}
        assert github.calls_for("languages") == []

    @pytest.mark.asyncio
    async def test_failed_repository_is_skipped(self) -> None:
        github = FakeGitHubService(
            repos={"testuser": [repo("repo1"), repo("repo2"), repo("repo3")]},
            languages={
                "testuser/repo1": {"JavaScript": 1000},
                "testuser/repo3": {"Python": 1000},
            },
            errors={"testuser/repo2": UpstreamError("API Error")},
        )

        result = await LanguageService(github).get_language_distribution("testuser")

        assert len(github.calls_for("languages")) == 3
        assert result == {"JavaScript": "50.00%", "Python": "50.00%"}

    @pytest.mark.asyncio
    async def test_all_repositories_failing(self) -> None:
        github = FakeGitHubService(
            repos={"testuser": [repo("repo1"), repo("repo2")]},
            errors={
                "testuser/repo1": RateLimitError(),
                "testuser/repo2": RuntimeError("boom"),
            },
        )

        result = await LanguageService(github).get_language_distribution("testuser")

        assert result == {}

    @pytest.mark.asyncio
    async def test_repositories_are_fetched_concurrently(self) -> None:
        github = GatedGitHubService(
            expected=3,
            repos={"testuser": [repo("repo1"), repo("repo2"), repo("repo3")]},
            languages={
                "testuser/repo1": {"Go": 100},
                "testuser/repo2": {"Go": 100},
                "testuser/repo3": {"Rust": 200},
            },
        )

        result = await LanguageService(github).get_language_distribution("testuser")

        assert github.peak == 3
        assert result == {"Go": "50.00%", "Rust": "50.00%"}

    @pytest.mark.asyncio
    async def test_uses_repository_owner(self) -> None:
        github = FakeGitHubService(
            repos={"testuser": [repo("forked", owner="upstream-org")]},
            languages={"upstream-org/forked": {"Rust": 10}},
        )

        result = await LanguageService(github).get_language_distribution("testuser")

        assert github.calls_for("languages") == ["upstream-org/forked"]
        assert result == {"Rust": "100.00%"}

    @pytest.mark.asyncio
    async def test_repository_list_failure_propagates(self) -> None:
        github = FakeGitHubService(errors={"ratelimited": RateLimitError()})

        with pytest.raises(RateLimitError):
            await LanguageService(github).get_language_distribution("ratelimited")


class TestProjects:
    """Tests for listing a user's repositories."""

    @pytest.mark.asyncio
    async def test_maps_repository_fields(self) -> None:
        github = FakeGitHubService(
            repos={
                "testuser": [
                    repo("api", language="Python", stars=12),
                    {"name": "notes", "stargazers_count": None, "language": None},
                ]
            }
        )

        projects = await LanguageService(github).get_projects("testuser")

        assert [(p.name, p.owner, p.language, p.stargazers_count) for p in projects] == [
            ("api", "testuser", "Python", 12),
            ("notes", "testuser", None, 0),
        ]
