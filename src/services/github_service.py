import httpx
import structlog
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential

from src.core.config import Settings, settings as default_settings

logger = structlog.get_logger()


def _is_retryable(exc: BaseException) -> bool:
    """Retry transport errors and server-side failures, not client errors."""
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code >= 500
    return isinstance(exc, httpx.TransportError)


github_retry = retry(
    retry=retry_if_exception(_is_retryable),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=2, max=10),
    reraise=True,
)


class GitHubService:
    """Service for interacting with the GitHub API."""

    def __init__(
        self,
        config: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        config = config or default_settings
        self.base_url = config.github_api_base_url.rstrip("/")
        self.timeout = config.github_request_timeout
        self.per_page = config.github_per_page
        self.max_pages = config.github_max_pages
        self.transport = transport
        self.headers = {"Accept": "application/vnd.github.v3+json"}
        if config.github_token:
            self.headers["Authorization"] = f"token {config.github_token}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=self.timeout,
            transport=self.transport,
        )

    async def get_user_repos(self, username: str) -> list[dict] | None:
        """Fetch all repositories owned by a user. None if the user does not exist."""
        return await self._get_paginated(f"/users/{username}/repos")

    async def get_user_events(self, username: str) -> list[dict] | None:
        """Fetch a user's public activity events. None if the user does not exist."""
        return await self._get_paginated(f"/users/{username}/events/public")

    @github_retry
    async def get_repo_languages(self, repo: dict) -> dict[str, int]:
        """Fetch the language byte counts of a repository."""
        owner, name = _owner_and_name(repo)
        async with self._client() as client:
            response = await client.get(f"/repos/{owner}/{name}/languages")
            response.raise_for_status()
            return response.json()

    async def _get_paginated(self, path: str) -> list[dict] | None:
        items: list[dict] = []
        for page in range(1, self.max_pages + 1):
            batch = await self._get_page(path, page)
            if batch is None:
                return None
            items.extend(batch)
            if len(batch) < self.per_page:
                break
        else:
            logger.info("Stopped paginating at page limit", path=path, pages=self.max_pages)

        return items

    @github_retry
    async def _get_page(self, path: str, page: int) -> list[dict] | None:
        async with self._client() as client:
            response = await client.get(
                path,
                params={"per_page": self.per_page, "page": page},
            )
            if response.status_code == 404:
                return None
            response.raise_for_status()
            return response.json()


def _owner_and_name(repo: dict) -> tuple[str, str]:
    owner = (repo.get("owner") or {}).get("login")
    name = repo.get("name")
    if (not owner or not name) and repo.get("full_name"):
        owner, _, name = repo["full_name"].partition("/")
    if not owner or not name:
        raise ValueError(f"Repository descriptor has no owner/name: {repo!r}")
    return owner, name
