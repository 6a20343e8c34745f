"""GitHub REST client fetching profile data for one user."""

import asyncio
from typing import Any, Optional

import httpx

from profile_sync.config import Settings
from profile_sync.core import (
    FetchError,
    GithubEvent,
    GithubUser,
    Language,
    LanguageInformation,
    ProfileFetcher,
    Repository,
    decode,
    event_from_api,
)


class GitHubClient(ProfileFetcher):
    """Fetch identity, repositories, languages and events over the REST API."""

    emoji = "🐙"
    name = "GitHub"

    def __init__(
        self,
        token: Optional[str] = None,
        api_base: str = "https://api.github.com",
        timeout: float = 30.0,
        per_page: int = 100,
        max_event_pages: int = 3,
        max_retries: int = 3,
        initial_retry_delay: float = 2.0,
    ) -> None:
        self.token = token
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.per_page = per_page
        self.max_event_pages = max_event_pages
        self.max_retries = max(1, max_retries)
        self.initial_retry_delay = initial_retry_delay

    @classmethod
    def from_settings(cls, settings: Settings, token: Optional[str] = None) -> "GitHubClient":
        """Build a client from settings; ``token`` overrides GITHUB_TOKEN."""
        return cls(
            token=token or settings.github_token,
            api_base=settings.github.api_base,
            timeout=settings.github.timeout,
            per_page=settings.github.per_page,
            max_event_pages=settings.github.max_event_pages,
            max_retries=settings.github.max_retries,
            initial_retry_delay=settings.github.initial_retry_delay,
        )

    async def get_identity(self, user: str) -> GithubUser:
        """Fetch account identity and counters."""
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            data = await self._get_json(client, f"/users/{user}")
        return decode(GithubUser, data)

    async def get_repositories(self, user: str) -> list[Repository]:
        """Fetch every repository owned by the user."""
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await self._list_repositories(client, user)

    async def get_languages(
        self,
        user: str,
        ignored_repositories: list[str],
        repositories: Optional[list[Repository]] = None,
    ) -> list[LanguageInformation]:
        """Fetch language breakdown for each repository not ignored."""
        ignored = set(ignored_repositories)
        infos: list[LanguageInformation] = []

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            repos = repositories
            if repos is None:
                repos = await self._list_repositories(client, user)
            for repo in repos:
                if repo.name in ignored or repo.full_name in ignored:
                    continue

                full_name = repo.full_name or f"{user}/{repo.name}"
                data = await self._get_json(client, f"/repos/{full_name}/languages")
                if not isinstance(data, dict):
                    raise FetchError(200, f"Unexpected languages response for {full_name}")

                languages = [
                    Language(name=name, size=int(size))
                    for name, size in data.items()
                ]
                infos.append(LanguageInformation(repository=repo.name, languages=languages))

        return infos

    async def get_activities(self, user: str) -> list[GithubEvent]:
        """Fetch recent public events, newest first as returned by the API."""
        events: list[GithubEvent] = []

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            for page in range(1, self.max_event_pages + 1):
                data = await self._get_json(
                    client,
                    f"/users/{user}/events",
                    params={"per_page": self.per_page, "page": page},
                )
                if not isinstance(data, list):
                    raise FetchError(200, f"Unexpected events response for {user}")

                events.extend(event_from_api(raw) for raw in data)
                if len(data) < self.per_page:
                    break

        return events

    async def _list_repositories(self, client: httpx.AsyncClient, user: str) -> list[Repository]:
        """Walk all pages of the user's repositories."""
        repos: list[Repository] = []
        page = 1

        while True:
            data = await self._get_json(
                client,
                f"/users/{user}/repos",
                params={"type": "owner", "per_page": self.per_page, "page": page},
            )
            if not isinstance(data, list):
                raise FetchError(200, f"Unexpected repositories response for {user}")

            repos.extend(decode(Repository, raw) for raw in data)
            if len(data) < self.per_page:
                break
            page += 1

        return repos

    async def _get_json(
        self,
        client: httpx.AsyncClient,
        path: str,
        params: Optional[dict[str, Any]] = None,
    ) -> Any:
        """GET with retry on rate limits, server and network errors."""
        url = f"{self.api_base}{path}"

        for attempt in range(self.max_retries):
            last_attempt = attempt == self.max_retries - 1

            try:
                response = await client.get(url, headers=self._get_headers(), params=params)
            except httpx.RequestError as e:
                if last_attempt:
                    raise FetchError(0, f"{path}: {e}")
                retry_delay = self.initial_retry_delay * (2 ** attempt)
                print(f"⚠️  Network error, retrying after {retry_delay:.1f}s")
                await asyncio.sleep(retry_delay)
                continue

            if response.status_code == 200:
                return response.json()

            if self._is_rate_limited(response) and not last_attempt:
                retry_after = self._get_retry_delay(response, attempt)
                print(f"⏳ Rate limit hit, retrying after {retry_after:.1f}s (attempt {attempt + 1}/{self.max_retries})")
                await asyncio.sleep(retry_after)
                continue

            if response.status_code >= 500 and not last_attempt:
                retry_delay = self.initial_retry_delay * (2 ** attempt)
                print(f"⚠️  Server error {response.status_code}, retrying after {retry_delay:.1f}s")
                await asyncio.sleep(retry_delay)
                continue

            raise FetchError(response.status_code, f"{path}: {self._error_message(response)}")

        raise FetchError(0, f"{path}: no attempts made")

    def _is_rate_limited(self, response: httpx.Response) -> bool:
        if response.status_code == 429:
            return True
        return response.status_code == 403 and response.headers.get("x-ratelimit-remaining") == "0"

    def _get_retry_delay(self, response: httpx.Response, attempt: int) -> float:
        """Calculate retry delay from response headers or use exponential backoff."""
        retry_after = response.headers.get("retry-after")
        if retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass

        return self.initial_retry_delay * (2 ** attempt)

    def _error_message(self, response: httpx.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return response.text or "unknown error"
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return response.text or "unknown error"

    def _get_headers(self) -> dict[str, str]:
        """Get headers for GitHub API requests."""
        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"

        return headers
