from abc import ABC, abstractmethod
from typing import List, Optional

from pydantic import BaseModel


class RepositorySummary(BaseModel):
    """Public repository fields shown in search results"""

    id: int
    name: str
    html_url: str
    description: Optional[str] = None
    language: Optional[str] = None
    stargazers_count: int = 0


class RepositoryOwnerNotFound(Exception):
    """The requested account does not exist upstream"""


class RepositorySearchError(Exception):
    """Upstream returned a non-2xx status or could not be reached"""


class IRepositorySearch(ABC):
    """Lists public repositories of an account - application layer"""

    @abstractmethod
    async def list_user_repos(self, username: str) -> List[RepositorySummary]:
        """
        Raises:
            RepositoryOwnerNotFound: account does not exist
            RepositorySearchError: any other failure
        """
        pass
