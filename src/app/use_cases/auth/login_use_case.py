"""
Login Use Case

Checks email/password and returns a session token.
"""

import logging

from libs.result import Error, Result, Return
from src.app.repositories.errors import RepositoryError
from src.app.services.password_hasher import burn_password_check, verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.api.utils.jwt import generate_jwt
from .dtos import AuthResponse, LoginCommand, UserInfo
from .validators import normalize_email

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid credentials")


class LoginUseCase:
    """
    Use case for user login and token issuance.

    Business Rules:
    - Email normalized exactly as at registration
    - Unknown email and wrong password return the same error
    - A dummy hash check runs for unknown emails so timing does not tell them apart
    - No store writes: tokens are stateless
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: LoginCommand) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            command: LoginCommand with raw email and password

        Returns:
            Result with AuthResponse, or Error(VALIDATION_ERROR |
            INVALID_CREDENTIALS | INTERNAL_ERROR)
        """
        email = normalize_email(command.email)
        password = command.password or ""

        missing = []
        if not email:
            missing.append("Email is required")
        if not password:
            missing.append("Password is required")
        if missing:
            return Return.err(
                Error("VALIDATION_ERROR", "; ".join(missing), details=missing)
            )

        try:
            async with self.uow:
                user = await self.uow.users.get_by_email(email)

                if user is None:
                    await burn_password_check(password)
                    return Return.err(INVALID_CREDENTIALS)

                if not await verify_password(password, user.password_hash):
                    return Return.err(INVALID_CREDENTIALS)

                # Read while the session still holds the row; exit rolls back
                # and expires it
                user_id, user_email = user.id, user.email
        except RepositoryError:
            logger.exception("Login failed while loading user")
            return Return.err(Error("INTERNAL_ERROR", "Failed to login"))

        token = generate_jwt(user_id=user_id, email=user_email)

        return Return.ok(
            AuthResponse(
                message="Login successful",
                user=UserInfo(id=str(user_id), email=user_email),
                token=token,
            )
        )
