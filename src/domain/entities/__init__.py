"""
Domain Entities

Each entity in its own file, exported here.
"""

from .user import User
from .favorite import Favorite

__all__ = [
    "User",
    "Favorite",
]
