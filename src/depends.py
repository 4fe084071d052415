from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from libs.result import Error
from src.adapter.services.github_client import GitHubClient
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import AuthError
from src.api.utils.jwt import verify_jwt
from src.app.services.repository_search import IRepositorySearch

# auto_error=False so a missing or non-Bearer header reaches get_current_user
# and is reported as 401 with our error body
security = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """Identity decoded from a verified session token"""

    user_id: UUID
    email: str


async def get_unit_of_work(request: Request):
    async with request.app.state.db.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_github_client(request: Request) -> IRepositorySearch:
    return GitHubClient(request.app.state.github_http)


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> CurrentUser:
    """
    Dependency to extract and verify the session token from the Authorization header.

    Stateless: no store lookup. The returned identity is the only source of
    user_id for protected handlers.

    Args:
        request: Incoming request; the identity is also stored on request.state.user
        credentials: Bearer token from Authorization header, None if absent

    Returns:
        CurrentUser with user_id and email

    Raises:
        AuthError: 401 if the header is missing, or the token is invalid or expired
    """
    if credentials is None:
        raise AuthError(Error("UNAUTHORIZED", "No token provided"))

    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise AuthError(Error("INVALID_TOKEN", "Invalid or expired token"))

    try:
        user_id = UUID(str(payload["userId"]))
    except ValueError:
        raise AuthError(Error("INVALID_TOKEN", "Invalid or expired token"))

    current_user = CurrentUser(user_id=user_id, email=payload["email"])
    request.state.user = current_user
    return current_user
