# ==============================================================================
# BRAND ENDPOINT TESTS
# ==============================================================================
# Tests for brand CRUD endpoints
# ==============================================================================

import pytest
from httpx import AsyncClient


class TestBrandCreate:
    """Tests for POST /brands."""

    @pytest.mark.asyncio
    async def test_create_brand(self, client: AsyncClient, brand_data: dict):
        """Valid body creates a brand with a new id."""
        response = await client.post("/api/v1/brands", json=brand_data)

        assert response.status_code == 201
        body = response.json()

        assert body["status"] == "success"
        assert body["status_code"] == 201
        assert body["message"] == "Brand created successfully"
        assert body["data"]["name"] == "Acme"
        assert body["data"]["cover_image"] == "https://x.test/a.png"
        assert body["data"]["id"] > 0
        assert body["data"]["created_at"]
        assert body["data"]["updated_at"]

    @pytest.mark.asyncio
    async def test_ids_are_not_reused(self, client: AsyncClient, brand_data: dict):
        """Each create issues a fresh id, and a body id is ignored."""
        first = await client.post("/api/v1/brands", json=brand_data)
        second = await client.post("/api/v1/brands", json={**brand_data, "id": 1})

        assert first.status_code == 201
        assert second.status_code == 201
        assert second.json()["data"]["id"] != first.json()["data"]["id"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload, expected",
        [
            ({"cover_image": "https://x.test/a.png"}, "name is required"),
            ({"name": "A", "cover_image": "https://x.test/a.png"}, "name must be between 2 and 100 characters"),
            ({"name": "A" * 101, "cover_image": "https://x.test/a.png"}, "name must be between 2 and 100 characters"),
            ({"name": "Acme", "cover_image": "not a url"}, "cover_image must be a valid URL"),
            ({"name": "Acme"}, "cover_image is required"),
        ],
    )
    async def test_invalid_brand_rejected(
        self, client: AsyncClient, payload: dict, expected: str
    ):
        """Rule violations return 400 and store nothing."""
        response = await client.post("/api/v1/brands", json=payload)

        assert response.status_code == 400
        body = response.json()
        assert body["status"] == "error"
        assert expected in body["message"]

        listing = await client.get("/api/v1/brands")
        assert listing.json()["data"] == []

    @pytest.mark.asyncio
    async def test_violations_are_joined(self, client: AsyncClient):
        """Every broken rule is reported."""
        response = await client.post("/api/v1/brands", json={})

        assert response.status_code == 400
        assert response.json()["message"] == "name is required; cover_image is required"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "content",
        [b"not json", b"[1, 2]", b"", b'{"name": 123, "cover_image": "https://x.test/a.png"}'],
    )
    async def test_malformed_body(self, client: AsyncClient, content: bytes):
        """Unparseable or mistyped bodies are rejected before validation."""
        response = await client.post(
            "/api/v1/brands",
            content=content,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request body"


class TestBrandRead:
    """Tests for GET /brands and GET /brands/{id}."""

    @pytest.mark.asyncio
    async def test_get_brand(self, client: AsyncClient, brand: dict):
        """A stored brand is returned with its submitted fields."""
        response = await client.get(f"/api/v1/brands/{brand['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Brand retrieved successfully"
        assert body["data"]["name"] == brand["name"]
        assert body["data"]["cover_image"] == brand["cover_image"]

    @pytest.mark.asyncio
    async def test_list_brands_in_id_order(self, client: AsyncClient, brand_data: dict):
        """The list is ordered by id."""
        for name in ("Gamma", "Alpha", "Beta"):
            await client.post("/api/v1/brands", json={**brand_data, "name": name})

        response = await client.get("/api/v1/brands")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Brands fetched successfully"
        names = [item["name"] for item in body["data"]]
        ids = [item["id"] for item in body["data"]]
        assert names == ["Gamma", "Alpha", "Beta"]
        assert ids == sorted(ids)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("brand_id", ["9999", "abc", "0", "-1", "1.5"])
    async def test_missing_brand(self, client: AsyncClient, brand_id: str):
        """Unknown or non-numeric ids are 404."""
        response = await client.get(f"/api/v1/brands/{brand_id}")

        assert response.status_code == 404
        assert response.json()["message"] == "Brand not found"


class TestBrandUpdate:
    """Tests for PUT /brands/{id}."""

    @pytest.mark.asyncio
    async def test_update_brand(self, client: AsyncClient, brand: dict):
        """PUT replaces the fields and bumps updated_at."""
        response = await client.put(
            f"/api/v1/brands/{brand['id']}",
            json={"name": "Acme Corp", "cover_image": "https://x.test/b.png", "id": 777},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Brand updated successfully"
        assert body["data"]["id"] == brand["id"]
        assert body["data"]["name"] == "Acme Corp"
        assert body["data"]["cover_image"] == "https://x.test/b.png"
        assert body["data"]["updated_at"] >= brand["updated_at"]
        assert body["data"]["created_at"] == brand["created_at"]

    @pytest.mark.asyncio
    async def test_update_with_same_values_succeeds(self, client: AsyncClient, brand: dict):
        """Submitting identical values is still a successful update."""
        response = await client.put(
            f"/api/v1/brands/{brand['id']}",
            json={"name": brand["name"], "cover_image": brand["cover_image"]},
        )

        assert response.status_code == 200
        assert response.json()["data"]["updated_at"] >= brand["updated_at"]

    @pytest.mark.asyncio
    async def test_update_missing_brand_wins_over_bad_body(self, client: AsyncClient):
        """404 is reported even when the body is malformed."""
        response = await client.put(
            "/api/v1/brands/9999",
            content=b"garbage",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 404
        assert response.json()["message"] == "Brand not found"

    @pytest.mark.asyncio
    async def test_update_malformed_body(self, client: AsyncClient, brand: dict):
        """A malformed update body is 'Invalid input'."""
        response = await client.put(
            f"/api/v1/brands/{brand['id']}",
            content=b"garbage",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid input"

    @pytest.mark.asyncio
    async def test_update_invalid_leaves_row(self, client: AsyncClient, brand: dict):
        """A rejected update changes nothing."""
        response = await client.put(
            f"/api/v1/brands/{brand['id']}",
            json={"name": "", "cover_image": brand["cover_image"]},
        )
        assert response.status_code == 400

        stored = await client.get(f"/api/v1/brands/{brand['id']}")
        assert stored.json()["data"]["name"] == brand["name"]


class TestBrandDelete:
    """Tests for DELETE /brands/{id}."""

    @pytest.mark.asyncio
    async def test_delete_brand(self, client: AsyncClient, brand: dict):
        """DELETE returns 204 with no body and the brand is gone."""
        response = await client.delete(f"/api/v1/brands/{brand['id']}")

        assert response.status_code == 204
        assert response.content == b""

        follow_up = await client.get(f"/api/v1/brands/{brand['id']}")
        assert follow_up.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_missing_brand(self, client: AsyncClient):
        """Deleting an unknown brand is 404."""
        response = await client.delete("/api/v1/brands/9999")

        assert response.status_code == 404
        assert response.json()["message"] == "Brand not found"
