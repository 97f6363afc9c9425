"""
Store Admin Backend — Store Endpoint Tests
============================================
"""

import logging

import pytest

from conftest import OWNER_ID, STRANGER_ID


class TestCreateStore:

    @pytest.mark.asyncio
    async def test_create(self, test_client, auth_headers):
        response = await test_client.post(
            "/api/stores", json={"name": "Corner Shop"}, headers=auth_headers()
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Corner Shop"
        assert data["userId"] == OWNER_ID
        assert data["id"]

    @pytest.mark.asyncio
    async def test_user_id_comes_from_token(self, test_client, auth_headers):
        response = await test_client.post(
            "/api/stores",
            json={"name": "Corner Shop", "userId": STRANGER_ID},
            headers=auth_headers(),
        )
        assert response.json()["userId"] == OWNER_ID

    @pytest.mark.asyncio
    async def test_anonymous_is_401(self, test_client):
        response = await test_client.post("/api/stores", json={"name": "Corner Shop"})
        assert response.status_code == 401
        assert response.text == "Unauthorized"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": None}])
    async def test_missing_name_is_422(self, test_client, auth_headers, body):
        response = await test_client.post("/api/stores", json=body, headers=auth_headers())

        assert response.status_code == 422
        assert response.text == "Name is required"

    @pytest.mark.asyncio
    async def test_non_string_name_is_500_and_not_persisted(
        self, test_client, auth_headers, caplog
    ):
        with caplog.at_level(logging.ERROR, logger="app.services.entity_service"):
            response = await test_client.post(
                "/api/stores", json={"name": 7}, headers=auth_headers()
            )

        assert response.status_code == 500
        assert "[STORES_POST]" in caplog.text

        listed = await test_client.get("/api/stores", headers=auth_headers())
        assert listed.json() == []


class TestListStores:

    @pytest.mark.asyncio
    async def test_lists_only_own_stores(self, test_client, owned_store, auth_headers):
        await test_client.post("/api/stores", json={"name": "Theirs"}, headers=auth_headers(STRANGER_ID))

        response = await test_client.get("/api/stores", headers=auth_headers())

        assert response.status_code == 200
        assert [store["name"] for store in response.json()] == ["Main Street"]

    @pytest.mark.asyncio
    async def test_anonymous_is_401(self, test_client):
        response = await test_client.get("/api/stores")
        assert response.status_code == 401
