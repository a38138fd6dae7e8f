"""Tests for registration, login and the token they issue."""

import pytest

USER = {"name": "Alice", "email": "alice@gmail.com", "password": "Sup3rSecret!", "avatar": "alice.png"}


@pytest.mark.asyncio
async def test_register_login_and_post(async_client):
    response = await async_client.post("/api/users/register", json=USER)
    assert response.status_code == 200
    body = response.json()
    assert body["email"] == "alice@gmail.com"
    assert "password" not in body

    response = await async_client.post("/api/users/login",
                                       json={"email": USER["email"], "password": USER["password"]})
    assert response.status_code == 200
    token = response.json()["token"]
    assert token.startswith("Bearer ")
    headers = {"Authorization": token}

    response = await async_client.get("/api/users/current", headers=headers)
    assert response.status_code == 200
    assert response.json()["id"] == body["id"]

    response = await async_client.post("/api/posts", json={"text": "My first post ever"}, headers=headers)
    assert response.status_code == 200
    assert response.json()["user"] == body["id"]
    assert response.json()["name"] == "Alice"
    assert response.json()["avatar"] == "alice.png"


@pytest.mark.asyncio
async def test_register_duplicate_email(async_client):
    await async_client.post("/api/users/register", json=USER)
    response = await async_client.post("/api/users/register", json=USER)
    assert response.status_code == 400
    assert response.json() == {"email": "Email already exists"}


@pytest.mark.asyncio
async def test_login_failures(async_client):
    response = await async_client.post("/api/users/login",
                                       json={"email": "nobody@gmail.com", "password": "x"})
    assert response.status_code == 404
    assert response.json() == {"email": "User not found"}

    await async_client.post("/api/users/register", json=USER)
    response = await async_client.post("/api/users/login",
                                       json={"email": USER["email"], "password": "wrong"})
    assert response.status_code == 400
    assert response.json() == {"password": "Password incorrect"}
