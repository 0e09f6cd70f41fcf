"""Test configuration and fixtures.

This file contains fixtures used across all tests. Nothing here talks to the
real GitHub API: ``FakeGitHubService`` stands in for ``GitHubService`` and
serves canned payloads.
"""

from collections.abc import AsyncGenerator

import pytest

from github_impact.services.leaderboard_service import LeaderboardService
from tests.fakes import FakeGitHubService


def pytest_configure(config):
    """Register integration test marker."""
    config.addinivalue_line("markers", "integration: mark test as an HTTP API test")


@pytest.fixture
def fake_github() -> FakeGitHubService:
    return FakeGitHubService()


@pytest.fixture
def leaderboard() -> LeaderboardService:
    return LeaderboardService()


@pytest.fixture
async def client(fake_github, leaderboard) -> AsyncGenerator:
    """Create a test client backed by the fake GitHub service."""
    from httpx import ASGITransport, AsyncClient

    from github_impact.api.app import create_app

    app = create_app(github=fake_github, leaderboard=leaderboard)

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as ac:
        yield ac
