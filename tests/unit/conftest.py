import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock()
    uow.users.create = AsyncMock()

    uow.favorites = MagicMock()
    uow.favorites.get_by_user_id = AsyncMock()
    uow.favorites.create = AsyncMock()
    uow.favorites.delete_owned = AsyncMock()

    return uow
