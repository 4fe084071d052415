"""
Use Cases

Organized into domain folders:
- auth/: Registration and login
- favorites/: Per-user favorite repositories
- github/: Public repository search
"""

from .auth import (
    RegisterUseCase,
    LoginUseCase,
)
from .favorites import (
    ListFavoritesUseCase,
    AddFavoriteUseCase,
    RemoveFavoriteUseCase,
)
from .github import (
    SearchRepositoriesUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    # Favorites
    "ListFavoritesUseCase",
    "AddFavoriteUseCase",
    "RemoveFavoriteUseCase",
    # GitHub
    "SearchRepositoriesUseCase",
]
