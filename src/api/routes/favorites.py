from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ConflictError, InternalError, NotFoundError, ValidationError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.favorites import (
    AddFavoriteCommand,
    AddFavoriteResponse,
    AddFavoriteUseCase,
    ListFavoritesResponse,
    ListFavoritesUseCase,
    RemoveFavoriteResponse,
    RemoveFavoriteUseCase,
)
from src.depends import CurrentUser, get_current_user, get_unit_of_work

router = APIRouter(prefix="/me/favorites", tags=["Favorites"])

# Every handler declares current_user before uow: the token is verified
# before a database session is opened.


@router.get("", status_code=status.HTTP_200_OK, response_model=ListFavoritesResponse)
async def list_favorites(
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List the caller's favorites

    Raises:
        - 401 Unauthorized: Missing, invalid or expired token
        - 500 Internal Server Error: Server error
    """
    use_case = ListFavoritesUseCase(uow)
    result = await use_case.execute(current_user.user_id)

    if result.is_err():
        raise InternalError(result.error)

    return result.value


class AddFavoriteRequest(BaseModel):
    """
    Add favorite HTTP request payload

    Any user_id in the body is ignored; the owner comes from the token.
    """

    repo_id: Optional[int] = Field(None, description="GitHub repository id")
    repo_name: Optional[str] = Field(None, description="Repository name")
    repo_url: Optional[str] = Field(None, description="Repository html URL")
    description: Optional[str] = None
    language: Optional[str] = None
    stars_count: Optional[int] = Field(None, ge=0)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AddFavoriteResponse)
async def add_favorite(
    request: AddFavoriteRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Save a repository to the caller's favorites

    Raises:
        - 400 Bad Request: repo_id, repo_name or repo_url missing
        - 401 Unauthorized: Missing, invalid or expired token
        - 409 Conflict: Repository already in the caller's favorites
        - 500 Internal Server Error: Server error
    """
    command = AddFavoriteCommand(**request.model_dump())

    use_case = AddFavoriteUseCase(uow)
    result = await use_case.execute(current_user.user_id, command)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ValidationError(error)
        elif error.code == "FAVORITE_ALREADY_EXISTS":
            raise ConflictError(error)
        raise InternalError(error)

    return result.value


@router.delete(
    "/{favorite_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveFavoriteResponse,
)
async def remove_favorite(
    favorite_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove one of the caller's favorites

    A favorite owned by another user is reported as not found.

    Raises:
        - 400 Bad Request: favorite_id is not a valid id
        - 401 Unauthorized: Missing, invalid or expired token
        - 404 Not Found: No such favorite for this user
        - 500 Internal Server Error: Server error
    """
    use_case = RemoveFavoriteUseCase(uow)
    result = await use_case.execute(current_user.user_id, favorite_id)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_FAVORITE_ID":
            raise ValidationError(error)
        elif error.code == "FAVORITE_NOT_FOUND":
            raise NotFoundError(error)
        raise InternalError(error)

    return result.value
