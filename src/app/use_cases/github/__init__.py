from .search_repositories_use_case import (
    SearchRepositoriesResponse,
    SearchRepositoriesUseCase,
)

__all__ = [
    "SearchRepositoriesUseCase",
    "SearchRepositoriesResponse",
]
