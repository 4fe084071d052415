import pytest
from httpx import AsyncClient

from src.api.utils.jwt import verify_jwt


@pytest.mark.asyncio
async def test_register_then_login_same_user(client: AsyncClient, test_data):
    """Tokens from register and login identify the same user"""
    alice = test_data.get_copy("alice")
    register_response = await client.post("/auth/register", json=alice)
    assert register_response.status_code == 201

    response = await client.post("/auth/login", json=alice)

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Login successful"
    assert data["user"] == register_response.json()["user"]
    assert (
        verify_jwt(data["token"])["userId"]
        == verify_jwt(register_response.json()["token"])["userId"]
    )


@pytest.mark.asyncio
async def test_login_email_normalization(client: AsyncClient):
    """Registered with mixed case and spaces, logs in with the canonical form"""
    register_response = await client.post(
        "/auth/register",
        json={"email": "  User@Example.COM ", "password": "Passw0rd1"},
    )
    assert register_response.status_code == 201
    assert register_response.json()["user"]["email"] == "user@example.com"

    response = await client.post(
        "/auth/login", json={"email": "user@example.com", "password": "Passw0rd1"}
    )

    assert response.status_code == 200


@pytest.mark.asyncio
async def test_login_invalid_credentials(client: AsyncClient, register_user, test_data):
    """Wrong password - 401 INVALID_CREDENTIALS"""
    alice = test_data.get_copy("alice")
    await register_user(alice["email"], alice["password"])

    response = await client.post(
        "/auth/login", json={"email": alice["email"], "password": "WrongPass1"}
    )

    assert response.status_code == 401
    assert response.json()["error"] == {
        "code": "INVALID_CREDENTIALS",
        "message": "Invalid credentials",
    }


@pytest.mark.asyncio
async def test_login_nonexistent_user_indistinguishable(
    client: AsyncClient, register_user, test_data
):
    """Unknown email and wrong password produce identical responses"""
    alice = test_data.get_copy("alice")
    await register_user(alice["email"], alice["password"])

    wrong_password = await client.post(
        "/auth/login", json={"email": alice["email"], "password": "WrongPass1"}
    )
    unknown_user = await client.post(
        "/auth/login", json={"email": "nobody@example.com", "password": "WrongPass1"}
    )

    assert wrong_password.status_code == unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()


@pytest.mark.asyncio
async def test_login_missing_password(client: AsyncClient):
    response = await client.post("/auth/login", json={"email": "a@example.com"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"
