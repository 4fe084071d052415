from fastapi import APIRouter, Depends, status

from src.api.error import NotFoundError, UpstreamError, ValidationError
from src.app.services.repository_search import IRepositorySearch
from src.app.use_cases.github import (
    SearchRepositoriesResponse,
    SearchRepositoriesUseCase,
)
from src.depends import get_github_client

router = APIRouter(prefix="/github", tags=["GitHub"])


@router.get(
    "/users/{username}/repos",
    status_code=status.HTTP_200_OK,
    response_model=SearchRepositoriesResponse,
)
async def list_user_repos(
    username: str, search: IRepositorySearch = Depends(get_github_client)
):
    """
    List a GitHub user's public repositories

    Raises:
        - 400 Bad Request: Username is blank or not a valid GitHub login
        - 404 Not Found: GitHub user does not exist
        - 502 Bad Gateway: GitHub returned an error or could not be reached
    """
    use_case = SearchRepositoriesUseCase(search)
    result = await use_case.execute(username)

    if result.is_err():
        error = result.error
        if error.code == "VALIDATION_ERROR":
            raise ValidationError(error)
        elif error.code == "GITHUB_USER_NOT_FOUND":
            raise NotFoundError(error)
        raise UpstreamError(error)

    return result.value
