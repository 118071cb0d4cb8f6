"""Test configuration and fixtures.

This file contains fixtures used across all tests.
API fixtures (client) override the GitHub dependency with an AsyncMock so
no test talks to the real GitHub API.
"""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock

import pytest

from src.services.github_service import GitHubService
from src.services.leaderboard_service import LeaderboardService


def pytest_configure(config):
    """Register integration test marker."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test exercising the HTTP API"
    )


@pytest.fixture
def mock_github() -> AsyncMock:
    """GitHub client double with no repositories and no events."""
    github = AsyncMock(spec=GitHubService)
    github.get_user_repos.return_value = []
    github.get_repo_languages.return_value = {}
    github.get_user_events.return_value = []
    return github


@pytest.fixture
def leaderboard() -> LeaderboardService:
    return LeaderboardService()


@pytest.fixture(scope="function")
async def client(mock_github, leaderboard) -> AsyncGenerator:
    """Create a test client with the GitHub and leaderboard dependencies overridden."""
    from httpx import ASGITransport, AsyncClient

    from src.api.app import create_app
    from src.api.dependencies import get_github, get_leaderboard

    app = create_app()
    app.dependency_overrides[get_github] = lambda: mock_github
    app.dependency_overrides[get_leaderboard] = lambda: leaderboard

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
