import httpx
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain.entities  # noqa: F401
from tests.fixtures.json_loader import TestDataLoader
from src.depends import get_github_client, get_unit_of_work
from src.adapter.services.github_client import GitHubClient
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
def github_handler(test_data):
    """
    Stand-in for api.github.com. Tests may replace ``responses`` entries
    (status, json body) to change what a username returns.
    """
    responses = {
        "octocat": (200, test_data.get_copy("github_repos")),
    }

    def handler(request: httpx.Request) -> httpx.Response:
        parts = request.url.path.strip("/").split("/")
        username = parts[1] if len(parts) == 3 else ""
        status_code, body = responses.get(username, (404, {"message": "Not Found"}))
        return httpx.Response(status_code, json=body)

    handler.responses = responses
    return handler


@pytest_asyncio.fixture
async def app(session_factory, github_handler, monkeypatch):
    from src.api.app import create_app
    from config import ApplicationConfig

    monkeypatch.setattr(ApplicationConfig, "API_PREFIX", "")
    app = create_app(ApplicationConfig)

    # One session per request, as in production
    async def override_get_unit_of_work():
        async with session_factory() as session:
            yield SqlAlchemyUnitOfWork(session)

    github_http = httpx.AsyncClient(
        base_url="https://api.github.com",
        transport=httpx.MockTransport(github_handler),
    )

    async def override_get_github_client():
        return GitHubClient(github_http)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_github_client] = override_get_github_client

    yield app

    await github_http.aclose()


@pytest_asyncio.fixture
async def client(app):
    from httpx import ASGITransport

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def register_user(client):
    """Register a user and return (user, token)"""

    async def _register(email: str, password: str):
        response = await client.post(
            "/auth/register", json={"email": email, "password": password}
        )
        assert response.status_code == 201, response.text
        data = response.json()
        return data["user"], data["token"]

    return _register
