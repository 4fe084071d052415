import logging

from libs.result import Error, Result, Return

from src.api.utils.jwt import generate_jwt
from src.app.repositories.errors import DuplicateRecordError, RepositoryError
from src.app.services.password_hasher import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import User
from .dtos import AuthResponse, RegisterCommand, UserInfo
from .validators import normalize_email, registration_violations

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (email/password as submitted)
    - Output: Result[AuthResponse]

    Business Logic:
    1. Normalize email (trim + lower-case)
    2. Validate email format and password policy, collecting every violation
    3. Hash password with bcrypt, before a connection is checked out
    4. Check if email already exists (fast path only)
    5. Create User; the unique email index is the final word on duplicates
    6. Commit, then mint the session token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with raw email and password

        Returns:
            Result[AuthResponse] with public user fields and token, or
            Error(VALIDATION_ERROR | EMAIL_ALREADY_EXISTS | INTERNAL_ERROR)
        """
        email = normalize_email(command.email)
        violations = registration_violations(email, command.password)
        if violations:
            return Return.err(
                Error("VALIDATION_ERROR", "; ".join(violations), details=violations)
            )

        password_hash = await hash_password(command.password)

        try:
            async with self.uow:
                existing_user = await self.uow.users.get_by_email(email)
                if existing_user:
                    return Return.err(
                        Error("EMAIL_ALREADY_EXISTS", "Email already in use")
                    )

                user = User(email=email, password_hash=password_hash)
                user = await self.uow.users.create(user)

                await self.uow.commit()
                user_id, user_email = user.id, user.email
        except DuplicateRecordError:
            # Lost a race with a concurrent registration for the same email
            logger.info("Registration rejected by unique email constraint")
            return Return.err(Error("EMAIL_ALREADY_EXISTS", "Email already in use"))
        except RepositoryError:
            logger.exception("Registration failed while writing user")
            return Return.err(Error("INTERNAL_ERROR", "Failed to register user"))

        token = generate_jwt(user_id=user_id, email=user_email)

        logger.info(f"User registered: {user_id}")
        return Return.ok(
            AuthResponse(
                message="User registered successfully",
                user=UserInfo(id=str(user_id), email=user_email),
                token=token,
            )
        )
