# tests/routes/conftest.py
"""Fixtures that create records through the API."""

from collections.abc import Awaitable, Callable
from typing import Any

import pytest
from httpx import AsyncClient

type Record = dict[str, Any]


async def create_user(client: AsyncClient, username: str) -> Record:
    response = await client.post(
        "/users",
        json={"username": username, "email": f"{username}@example.com"},
    )
    assert response.status_code == 201, response.text
    return response.json()["user"]


async def create_category(client: AsyncClient, user_id: str, title: str = "Frontend") -> Record:
    response = await client.post("/categories", params={"userId": user_id}, json={"title": title})
    assert response.status_code == 201, response.text
    return response.json()["category"]


@pytest.fixture
def category_factory(client: AsyncClient) -> Callable[..., Awaitable[Record]]:
    """Create a category for any user."""

    async def _make(user_id: str, title: str = "Frontend") -> Record:
        return await create_category(client, user_id, title)

    return _make


@pytest.fixture
async def owner(client: AsyncClient) -> Record:
    return await create_user(client, "owner")


@pytest.fixture
async def stranger(client: AsyncClient) -> Record:
    return await create_user(client, "stranger")


@pytest.fixture
async def category(client: AsyncClient, owner: Record) -> Record:
    return await create_category(client, owner["id"])


@pytest.fixture
def make_blog(
    client: AsyncClient,
    owner: Record,
    category: Record,
) -> Callable[..., Awaitable[Record]]:
    """Create a blog for `owner` in `category` unless told otherwise."""

    async def _make(
        title: str,
        description: str | None = None,
        *,
        user_id: str | None = None,
        category_id: str | None = None,
    ) -> Record:
        response = await client.post(
            "/blogs",
            params={
                "userId": user_id or owner["id"],
                "categoryId": category_id or category["id"],
            },
            json={"title": title, "description": description},
        )
        assert response.status_code == 201, response.text
        return response.json()["blog"]

    return _make
