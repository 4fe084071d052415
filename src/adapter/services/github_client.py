import logging
from typing import List

import httpx
from pydantic import ValidationError

from src.app.services.repository_search import (
    IRepositorySearch,
    RepositoryOwnerNotFound,
    RepositorySearchError,
    RepositorySummary,
)

logger = logging.getLogger(__name__)


def build_http_client(
    base_url: str, timeout: float, token: str = ""
) -> httpx.AsyncClient:
    """Create the shared AsyncClient used for GitHub calls"""
    headers = {"Accept": "application/vnd.github+json"}
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return httpx.AsyncClient(base_url=base_url, headers=headers, timeout=timeout)


class GitHubClient(IRepositorySearch):
    """Read-only GitHub REST client for public repository listings"""

    def __init__(self, client: httpx.AsyncClient):
        # Caller owns the AsyncClient and closes it
        self.client = client

    async def list_user_repos(self, username: str) -> List[RepositorySummary]:
        try:
            resp = await self.client.get(f"/users/{username}/repos")
        except httpx.HTTPError as exc:
            logger.warning(f"GitHub request for {username} failed: {exc!r}")
            raise RepositorySearchError("Failed to reach GitHub") from exc

        if resp.status_code == 404:
            raise RepositoryOwnerNotFound(username)
        if not resp.is_success:
            logger.warning(
                f"GitHub returned {resp.status_code} listing repos for {username}"
            )
            raise RepositorySearchError(f"GitHub returned {resp.status_code}")

        try:
            return [RepositorySummary.model_validate(item) for item in resp.json()]
        except (ValueError, TypeError, ValidationError) as exc:
            logger.warning(f"Unexpected GitHub payload for {username}: {exc!r}")
            raise RepositorySearchError("Unexpected GitHub response") from exc
