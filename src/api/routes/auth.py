from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import AuthError, ConflictError, InternalError, ValidationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    LoginCommand,
    LoginUseCase,
    RegisterCommand,
    RegisterUseCase,
)
from src.depends import get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Only the JSON shape is checked here. Email format and password policy are
    business rules enforced by RegisterUseCase so every violation is reported
    together as a 400.
    """

    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(
        None,
        description="Password: 8+ chars with uppercase, lowercase and a digit",
    )


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse
)
async def register(
    request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    User Registration

    Creates an account and returns a session token valid for 24 hours.

    Raises:
        - 400 Bad Request: Missing fields, bad email format or weak password
        - 409 Conflict: Email already registered
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(email=request.email, password=request.password)

    use_case = RegisterUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ValidationError(error)
        elif error.code == "EMAIL_ALREADY_EXISTS":
            raise ConflictError(error)
        raise InternalError(error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: Optional[str] = Field(None, description="User email address")
    password: Optional[str] = Field(None, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 400 Bad Request: Missing email or password
        - 401 Unauthorized: Invalid credentials (unknown email or wrong password)
        - 500 Internal Server Error: Server error
    """
    command = LoginCommand(email=request.email, password=request.password)

    use_case = LoginUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ValidationError(error)
        elif error.code == "INVALID_CREDENTIALS":
            raise AuthError(error)
        raise InternalError(error)

    return result.value
