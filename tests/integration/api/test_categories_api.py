"""Integration tests for category admin endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

CATEGORIES = "/api/admin/categories"


async def _create(client: AsyncClient, name: str = "Rings", slug: str = "rings") -> dict:
    response = await client.post(CATEGORIES, json={"name": name, "slug": slug})
    assert response.status_code == 200
    return response.json()["category"]


class TestCategoriesApi:
    @pytest.mark.asyncio
    async def test_create_and_list(self, client: AsyncClient):
        created = await _create(client)

        response = await client.get(CATEGORIES)

        assert response.status_code == 200
        categories = response.json()["categories"]
        assert [c["id"] for c in categories] == [created["id"]]
        assert categories[0]["slug"] == "rings"

    @pytest.mark.asyncio
    async def test_update(self, client: AsyncClient):
        created = await _create(client)

        response = await client.put(
            CATEGORIES, json={"id": created["id"], "description": "Gold and silver rings"}
        )

        assert response.status_code == 200
        category = response.json()["category"]
        assert category["description"] == "Gold and silver rings"
        assert category["name"] == "Rings"

    @pytest.mark.asyncio
    async def test_update_without_id(self, client: AsyncClient):
        response = await client.put(CATEGORIES, json={"name": "x"})

        assert response.status_code == 400
        assert response.json()["error"] == "Category ID required"

    @pytest.mark.asyncio
    async def test_update_unknown_id(self, client: AsyncClient):
        response = await client.put(CATEGORIES, json={"id": str(uuid4()), "name": "x"})

        assert response.status_code == 404
        assert response.json()["error_code"] == "CATEGORY_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_duplicate_slug_is_backend_error(self, client: AsyncClient):
        await _create(client)

        response = await client.post(CATEGORIES, json={"name": "Other", "slug": "rings"})

        assert response.status_code == 500
        assert response.json()["error_code"] == "DATABASE_ERROR"

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient):
        created = await _create(client)

        response = await client.delete(CATEGORIES, params={"id": created["id"]})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert (await client.get(CATEGORIES)).json()["categories"] == []

    @pytest.mark.asyncio
    async def test_delete_without_id(self, client: AsyncClient):
        response = await client.delete(CATEGORIES)

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_create_rejects_missing_fields(self, client: AsyncClient):
        response = await client.post(CATEGORIES, json={"name": "Rings"})

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("field", ["name", "slug"])
    async def test_update_rejects_null_required_field(self, client: AsyncClient, field: str):
        created = await _create(client)

        response = await client.put(CATEGORIES, json={"id": created["id"], field: None})

        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"
        assert response.json()["details"][0]["field"] == f"body.{field}"

    @pytest.mark.asyncio
    async def test_update_clears_nullable_field(self, client: AsyncClient):
        created = (
            await client.post(
                CATEGORIES, json={"name": "Rings", "slug": "rings", "description": "Gold"}
            )
        ).json()["category"]

        response = await client.put(CATEGORIES, json={"id": created["id"], "description": None})

        assert response.status_code == 200
        assert response.json()["category"]["description"] is None
