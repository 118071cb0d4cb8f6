import asyncio
import re
from unittest.mock import AsyncMock

import pytest

from src.services.github_service import GitHubService
from src.services.language_service import LanguageService

PERCENT_FORMAT = re.compile(r"^\d+\.\d{2}%$")


@pytest.fixture
def github() -> AsyncMock:
    return AsyncMock(spec=GitHubService)


@pytest.fixture
def service(github: AsyncMock) -> LanguageService:
    return LanguageService(github)


def repo(name: str) -> dict:
    return {"name": name, "full_name": f"testuser/{name}", "owner": {"login": "testuser"}}


class TestAggregateLanguages:
    """Tests for summing byte counts."""

    def test_sums_across_repositories(self, service: LanguageService) -> None:
        data = [
            {"JavaScript": 1000, "Python": 500},
            {"JavaScript": 2000, "TypeScript": 1500},
            {"Python": 300},
        ]

        assert service.aggregate_languages(data) == {
            "JavaScript": 3000,
            "Python": 800,
            "TypeScript": 1500,
        }

    def test_empty_input(self, service: LanguageService) -> None:
        assert service.aggregate_languages([]) == {}

    def test_skips_missing_entries(self, service: LanguageService) -> None:
        data = [{"JavaScript": 1000}, None, None, {"Python": 500}]

        assert service.aggregate_languages(data) == {"JavaScript": 1000, "Python": 500}

    def test_single_repository(self, service: LanguageService) -> None:
        assert service.aggregate_languages([{"JavaScript": 1000, "CSS": 200}]) == {
            "JavaScript": 1000,
            "CSS": 200,
        }

    def test_missing_list(self, service: LanguageService) -> None:
        assert service.aggregate_languages(None) == {}

    def test_order_independent(self, service: LanguageService) -> None:
        data = [{"Go": 10, "Rust": 5}, {"Rust": 7}, {"C": 1, "Go": 2}]

        assert service.aggregate_languages(data) == service.aggregate_languages(data[::-1])


class TestCalculatePercentages:
    """Tests for converting totals to percentage strings."""

    def test_multiple_languages(self, service: LanguageService) -> None:
        result = service.calculate_percentages({"JavaScript": 7000, "TypeScript": 3000})

        assert result == {"JavaScript": "70.00%", "TypeScript": "30.00%"}

    def test_single_language(self, service: LanguageService) -> None:
        assert service.calculate_percentages({"JavaScript": 1000}) == {"JavaScript": "100.00%"}

    def test_empty_totals(self, service: LanguageService) -> None:
        assert service.calculate_percentages({}) == {}

    def test_zero_total(self, service: LanguageService) -> None:
        assert service.calculate_percentages({"JavaScript": 0, "Python": 0}) == {}

    def test_two_decimal_places(self, service: LanguageService) -> None:
        result = service.calculate_percentages({"JavaScript": 33, "Python": 33, "TypeScript": 34})

        assert all(PERCENT_FORMAT.match(value) for value in result.values())
        assert result == {
            "JavaScript": "33.00%",
            "Python": "33.00%",
            "TypeScript": "34.00%",
        }

    def test_small_percentages(self, service: LanguageService) -> None:
        result = service.calculate_percentages({"JavaScript": 9999, "Shell": 1})

        assert result == {"JavaScript": "99.99%", "Shell": "0.01%"}

    def test_rounds_instead_of_truncating(self, service: LanguageService) -> None:
        result = service.calculate_percentages({"Python": 2, "Go": 1})

        assert result == {"Python": "66.67%", "Go": "33.33%"}

    def test_halves_round_up(self, service: LanguageService) -> None:
        # 0.125% and 0.625% sit exactly halfway between two hundredths
        assert service.calculate_percentages({"A": 1, "B": 799}) == {
            "A": "0.13%",
            "B": "99.88%",
        }
        assert service.calculate_percentages({"A": 5, "B": 795})["A"] == "0.63%"


class TestGetLanguageDistribution:
    """Tests for the fetch-aggregate-format workflow."""

    @pytest.mark.asyncio
    async def test_no_repositories(self, service: LanguageService, github: AsyncMock) -> None:
        github.get_user_repos.return_value = []

        result = await service.get_language_distribution("testuser")

        assert result == {}
        github.get_user_repos.assert_awaited_once_with("testuser")
        github.get_repo_languages.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_user(self, service: LanguageService, github: AsyncMock) -> None:
        github.get_user_repos.return_value = None

        assert await service.get_language_distribution("testuser") == {}
        github.get_repo_languages.assert_not_called()

    @pytest.mark.asyncio
    async def test_full_distribution(self, service: LanguageService, github: AsyncMock) -> None:
        github.get_user_repos.return_value = [repo("repo1"), repo("repo2"), repo("repo3")]
        github.get_repo_languages.side_effect = [
            {"JavaScript": 1000},
            {"Python": 500},
            {"JavaScript": 500, "TypeScript": 1000},
        ]

        result = await service.get_language_distribution("testuser")

        assert github.get_repo_languages.await_count == 3
        assert result == {
            "JavaScript": "50.00%",
            "Python": "16.67%",
            "TypeScript": "33.33%",
        }

    @pytest.mark.asyncio
    async def test_failed_repository_is_skipped(
        self, service: LanguageService, github: AsyncMock
    ) -> None:
        github.get_user_repos.return_value = [repo("repo1"), repo("repo2")]
        github.get_repo_languages.side_effect = [
            {"JavaScript": 1000},
            RuntimeError("API Error"),
        ]

        result = await service.get_language_distribution("testuser")

        assert result == {"JavaScript": "100.00%"}

    @pytest.mark.asyncio
    async def test_all_repositories_fail(self, service: LanguageService, github: AsyncMock) -> None:
        github.get_user_repos.return_value = [repo("repo1"), repo("repo2")]
        github.get_repo_languages.side_effect = RuntimeError("API Error")

        assert await service.get_language_distribution("testuser") == {}

    @pytest.mark.asyncio
    async def test_fetches_run_concurrently(
        self, service: LanguageService, github: AsyncMock
    ) -> None:
        repos = [repo(f"repo{i}") for i in range(3)]
        github.get_user_repos.return_value = repos
        in_flight = 0
        peak = 0

        async def languages(_repo: dict) -> dict[str, int]:
            nonlocal in_flight, peak
            in_flight += 1
            peak = max(peak, in_flight)
            await asyncio.sleep(0.01)
            in_flight -= 1
            return {"Python": 100}

        github.get_repo_languages.side_effect = languages

        result = await service.get_language_distribution("testuser")

        assert peak == len(repos)
        assert result == {"Python": "100.00%"}
