import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_list_user_repos(client: AsyncClient):
    response = await client.get("/github/users/octocat/repos")

    assert response.status_code == 200
    repositories = response.json()["repositories"]
    assert [r["name"] for r in repositories] == ["Hello-World", "boysenberry-repo-1"]
    assert set(repositories[0].keys()) == {
        "id",
        "name",
        "html_url",
        "description",
        "language",
        "stargazers_count",
    }


@pytest.mark.asyncio
async def test_list_user_repos_user_not_found(client: AsyncClient):
    response = await client.get("/github/users/ghost-user-404/repos")

    assert response.status_code == 404
    assert response.json()["error"] == {
        "code": "GITHUB_USER_NOT_FOUND",
        "message": "User not found",
    }


@pytest.mark.asyncio
async def test_list_user_repos_upstream_failure(client: AsyncClient, github_handler):
    github_handler.responses["octocat"] = (500, {"message": "boom"})

    response = await client.get("/github/users/octocat/repos")

    assert response.status_code == 502
    assert response.json()["error"] == {
        "code": "GITHUB_FETCH_FAILED",
        "message": "Failed to fetch repositories",
    }


@pytest.mark.asyncio
async def test_list_user_repos_rejects_encoded_query(client: AsyncClient):
    response = await client.get("/github/users/octocat%3Fx=1/repos")

    assert response.status_code == 400
    assert response.json()["error"] == {
        "code": "VALIDATION_ERROR",
        "message": "Invalid GitHub username",
    }
