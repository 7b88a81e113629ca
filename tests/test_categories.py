# ==============================================================================
# CATEGORY ENDPOINT TESTS
# ==============================================================================

import pytest
from httpx import AsyncClient


class TestCategories:
    """Tests for category CRUD endpoints."""

    @pytest.mark.asyncio
    async def test_create_and_fetch_category(self, client: AsyncClient, category_data: dict):
        """Create then fetch returns the submitted fields."""
        created = await client.post("/api/v1/categories", json=category_data)

        assert created.status_code == 201
        assert created.json()["message"] == "Category created successfully"
        category_id = created.json()["data"]["id"]

        response = await client.get(f"/api/v1/categories/{category_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Category retrieved successfully"
        assert body["data"]["title"] == category_data["title"]
        assert body["data"]["cover_image"] == category_data["cover_image"]

    @pytest.mark.asyncio
    async def test_list_categories(self, client: AsyncClient, category_data: dict):
        """All categories are listed."""
        for title in ("Laptops", "Tablets"):
            await client.post("/api/v1/categories", json={**category_data, "title": title})

        response = await client.get("/api/v1/categories")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Categories fetched successfully"
        assert [item["title"] for item in body["data"]] == ["Laptops", "Tablets"]

    @pytest.mark.asyncio
    async def test_title_is_required(self, client: AsyncClient):
        """Categories validate title rather than name."""
        response = await client.post(
            "/api/v1/categories",
            json={"name": "Laptops", "cover_image": "https://example.com/l.jpg"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "title is required"

    @pytest.mark.asyncio
    async def test_update_category(self, client: AsyncClient, category: dict):
        """PUT replaces every field."""
        response = await client.put(
            f"/api/v1/categories/{category['id']}",
            json={"title": "Phones", "cover_image": "https://example.com/phones.jpg"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Category updated successfully"
        assert body["data"]["title"] == "Phones"

    @pytest.mark.asyncio
    async def test_update_missing_category(self, client: AsyncClient, category_data: dict):
        """PUT on an unknown id is 404."""
        response = await client.put("/api/v1/categories/9999", json=category_data)

        assert response.status_code == 404
        assert response.json()["message"] == "Category not found"

    @pytest.mark.asyncio
    async def test_delete_category(self, client: AsyncClient, category: dict):
        """DELETE then GET gives 204 then 404."""
        deleted = await client.delete(f"/api/v1/categories/{category['id']}")
        fetched = await client.get(f"/api/v1/categories/{category['id']}")

        assert deleted.status_code == 204
        assert fetched.status_code == 404
        assert fetched.json()["message"] == "Category not found"
