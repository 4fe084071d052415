import re
from typing import List

from pydantic import BaseModel

from libs.result import Error, Result, Return
from src.app.services.repository_search import (
    IRepositorySearch,
    RepositoryOwnerNotFound,
    RepositorySearchError,
    RepositorySummary,
)


# GitHub login charset: letters, digits and hyphens, at most 39 characters
USERNAME_PATTERN = re.compile(r"[A-Za-z0-9-]{1,39}")


class SearchRepositoriesResponse(BaseModel):
    repositories: List[RepositorySummary]


class SearchRepositoriesUseCase:
    """Lists a GitHub user's public repositories, unchanged apart from field selection."""

    def __init__(self, search: IRepositorySearch):
        self.search = search

    async def execute(self, username: str) -> Result[SearchRepositoriesResponse]:
        username = (username or "").strip()
        if not username:
            return Return.err(Error("VALIDATION_ERROR", "Username is required"))
        if not USERNAME_PATTERN.fullmatch(username):
            return Return.err(Error("VALIDATION_ERROR", "Invalid GitHub username"))

        try:
            repositories = await self.search.list_user_repos(username)
        except RepositoryOwnerNotFound:
            return Return.err(Error("GITHUB_USER_NOT_FOUND", "User not found"))
        except RepositorySearchError:
            return Return.err(
                Error("GITHUB_FETCH_FAILED", "Failed to fetch repositories")
            )

        return Return.ok(SearchRepositoriesResponse(repositories=repositories))
