"""Integration tests for accounts and sessions over HTTP."""

from typing import Any

import pytest
from httpx import AsyncClient

REGISTER = """
    mutation Register($email: String!, $password: String!) {
      user {
        register(input: {email: $email, username: "cook", password: $password}) {
          userId email username
        }
      }
    }
"""

LOGIN = """
    mutation Login($email: String!, $password: String!) {
      user { login(input: {email: $email, password: $password}) { token userId username } }
    }
"""

ME = "{ user { me { userId email username } } }"


async def _post(
    client: AsyncClient,
    query: str,
    variables: dict[str, Any] | None = None,
    token: str | None = None,
) -> Any:
    headers = {"X-Authorization": token} if token else {}
    return await client.post(
        "/graphql", json={"query": query, "variables": variables or {}}, headers=headers
    )


async def _gql(client: AsyncClient, query: str, **kwargs: Any) -> Any:
    response = await _post(client, query, **kwargs)
    assert response.status_code == 200
    return response.json()


def _credentials(password: str = "secret") -> dict[str, str]:
    return {"email": "cook@example.com", "password": password}


@pytest.mark.asyncio
async def test_register_login_me(client: AsyncClient) -> None:
    registered = await _gql(client, REGISTER, variables=_credentials())
    user = registered["data"]["user"]["register"]
    assert user["email"] == "cook@example.com"

    login = await _gql(client, LOGIN, variables=_credentials())
    session = login["data"]["user"]["login"]
    assert session["userId"] == user["userId"]
    assert session["username"] == "cook"

    me = await _gql(client, ME, token=session["token"])
    assert me["data"]["user"]["me"] == user


@pytest.mark.asyncio
async def test_me_is_null_when_anonymous(client: AsyncClient) -> None:
    body = await _gql(client, ME)

    assert body["data"]["user"]["me"] is None


@pytest.mark.asyncio
async def test_bearer_header_accepted(client: AsyncClient) -> None:
    await _gql(client, REGISTER, variables=_credentials())
    token = (await _gql(client, LOGIN, variables=_credentials()))["data"]["user"]["login"]["token"]

    response = await client.post(
        "/graphql", json={"query": ME}, headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 200
    assert response.json()["data"]["user"]["me"]["username"] == "cook"


@pytest.mark.asyncio
async def test_duplicate_registration(client: AsyncClient) -> None:
    await _gql(client, REGISTER, variables=_credentials())

    body = await _gql(client, REGISTER, variables=_credentials("another"))

    assert body["data"] is None
    assert body["errors"][0]["message"] == "Email already registered"


@pytest.mark.asyncio
async def test_wrong_password(client: AsyncClient) -> None:
    await _gql(client, REGISTER, variables=_credentials())

    body = await _gql(client, LOGIN, variables=_credentials("wrong"))

    assert body["data"] is None
    assert body["errors"][0]["message"] == "Invalid email or password"


@pytest.mark.asyncio
async def test_logout_invalidates_token(client: AsyncClient) -> None:
    await _gql(client, REGISTER, variables=_credentials())
    token = (await _gql(client, LOGIN, variables=_credentials()))["data"]["user"]["login"]["token"]

    body = await _gql(client, "mutation { user { logout { message } } }", token=token)
    assert body["data"]["user"]["logout"]["message"] == "Logged out successfully"

    response = await _post(client, ME, token=token)
    assert response.status_code == 401
    assert response.json()["error"] == "invalid_token"


@pytest.mark.asyncio
async def test_logout_requires_login(client: AsyncClient) -> None:
    body = await _gql(client, "mutation { user { logout { message } } }")

    assert body["data"] is None
    assert body["errors"][0]["message"] == "Not authenticated"
