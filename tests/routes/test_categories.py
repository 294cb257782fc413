# tests/routes/test_categories.py
"""End-to-end tests for the category endpoints."""

from collections.abc import Awaitable, Callable
from typing import Any
from uuid import uuid4

from httpx import AsyncClient

type Record = dict[str, Any]
type MakeCategory = Callable[..., Awaitable[Record]]


async def test_create_and_list(
    client: AsyncClient,
    owner: Record,
    stranger: Record,
    category_factory: MakeCategory,
) -> None:
    await category_factory(owner["id"], "Frontend")
    await category_factory(owner["id"], "Backend")
    await category_factory(stranger["id"], "Not mine")

    response = await client.get("/categories", params={"userId": owner["id"]})

    assert response.status_code == 200
    assert sorted(category["title"] for category in response.json()) == ["Backend", "Frontend"]
    assert {category["userId"] for category in response.json()} == {owner["id"]}


async def test_create_for_missing_user(client: AsyncClient) -> None:
    response = await client.post(
        "/categories",
        params={"userId": str(uuid4())},
        json={"title": "Orphan"},
    )
    assert response.status_code == 404
    assert response.json() == {"detail": "User not found"}


async def test_update_category(client: AsyncClient, owner: Record, category: Record) -> None:
    response = await client.patch(
        f"/categories/{category['id']}",
        params={"userId": owner["id"]},
        json={"title": "Web"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Category is updated"
    assert body["category"]["title"] == "Web"
    assert body["category"]["updatedAt"] is not None


async def test_update_requires_ownership(
    client: AsyncClient,
    stranger: Record,
    category: Record,
) -> None:
    response = await client.patch(
        f"/categories/{category['id']}",
        params={"userId": stranger["id"]},
        json={"title": "Taken"},
    )
    assert response.status_code == 404
    assert response.json() == {"detail": "Category not found"}


async def test_update_invalid_category_id(client: AsyncClient, owner: Record) -> None:
    response = await client.patch(
        "/categories/123",
        params={"userId": owner["id"]},
        json={"title": "Web"},
    )
    assert response.status_code == 400
    assert response.json() == {"detail": "Invalid category id"}


async def test_delete_category(client: AsyncClient, owner: Record, category: Record) -> None:
    response = await client.delete(f"/categories/{category['id']}", params={"userId": owner["id"]})
    assert response.status_code == 200
    assert response.json() == {"message": "Category deleted"}

    listing = await client.get("/categories", params={"userId": owner["id"]})
    assert listing.json() == []


async def test_delete_by_stranger(client: AsyncClient, stranger: Record, category: Record) -> None:
    response = await client.delete(
        f"/categories/{category['id']}",
        params={"userId": stranger["id"]},
    )
    assert response.status_code == 404
    assert response.json() == {"detail": "Category not found"}
