from uuid import uuid4

import bcrypt
import pytest

from src.api.utils.jwt import verify_jwt
from src.app.repositories.errors import RepositoryError
from src.app.use_cases.auth.dtos import LoginCommand
from src.app.use_cases.auth.login_use_case import LoginUseCase
from src.domain.entities import User


def _user(email: str, password: str) -> User:
    password_hash = bcrypt.hashpw(password.encode(), bcrypt.gensalt(4))
    return User(id=uuid4(), email=email, password_hash=password_hash.decode())


@pytest.mark.asyncio
async def test_successful_login(mock_uow):
    """Correct credentials return a token carrying the user's id and email"""
    # Arrange
    password = "SecurePass123"
    mock_user = _user("user@acme.com", password)
    mock_uow.users.get_by_email.return_value = mock_user

    use_case = LoginUseCase(mock_uow)

    # Act
    result = await use_case.execute(LoginCommand(email="user@acme.com", password=password))

    # Assert
    assert result.is_ok()
    data = result.value
    assert data.message == "Login successful"
    assert data.user.id == str(mock_user.id)
    assert data.user.email == "user@acme.com"

    payload = verify_jwt(data.token)
    assert payload["userId"] == str(mock_user.id)
    assert payload["email"] == "user@acme.com"

    mock_uow.users.get_by_email.assert_called_once_with("user@acme.com")
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_login_normalizes_email(mock_uow):
    """Login applies the same trim + lower-case as registration"""
    mock_uow.users.get_by_email.return_value = _user("user@example.com", "SecurePass123")

    use_case = LoginUseCase(mock_uow)
    result = await use_case.execute(
        LoginCommand(email=" USER@example.com", password="SecurePass123")
    )

    assert result.is_ok()
    mock_uow.users.get_by_email.assert_called_once_with("user@example.com")


@pytest.mark.asyncio
async def test_login_invalid_credentials_wrong_password(mock_uow):
    """Wrong password - INVALID_CREDENTIALS"""
    mock_uow.users.get_by_email.return_value = _user("user@acme.com", "SecurePass123")

    use_case = LoginUseCase(mock_uow)
    result = await use_case.execute(
        LoginCommand(email="user@acme.com", password="WrongPassword1")
    )

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid credentials"


@pytest.mark.asyncio
async def test_login_invalid_credentials_nonexistent_user(mock_uow):
    """Unknown email gets exactly the same error as a wrong password"""
    mock_uow.users.get_by_email.return_value = None

    use_case = LoginUseCase(mock_uow)
    result = await use_case.execute(
        LoginCommand(email="nonexistent@acme.com", password="SomePassword1")
    )

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid credentials"


@pytest.mark.asyncio
async def test_login_missing_fields(mock_uow):
    """Missing email or password is a validation error, not a credentials error"""
    use_case = LoginUseCase(mock_uow)
    result = await use_case.execute(LoginCommand(email="user@acme.com"))

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    assert result.error.details == ["Password is required"]
    mock_uow.users.get_by_email.assert_not_called()


@pytest.mark.asyncio
async def test_login_store_failure(mock_uow):
    """Store failure yields INTERNAL_ERROR"""
    mock_uow.users.get_by_email.side_effect = RepositoryError("db down")

    use_case = LoginUseCase(mock_uow)
    result = await use_case.execute(
        LoginCommand(email="user@acme.com", password="SecurePass123")
    )

    assert result.is_err()
    assert result.error.code == "INTERNAL_ERROR"
