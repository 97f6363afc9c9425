"""
Store Admin Backend — Product Endpoint Tests
==============================================

What we test:
    ✅ Create with nested images, field-order validation messages
    ✅ Listing excludes archived products, newest first, relations inline
    ✅ categoryId / sizeId / colorId / isFeatured filters
    ✅ isFeatured keeps its literal behavior: any non-empty value filters
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.models import Category
from conftest import STRANGER_ID


@pytest.fixture
def product_body(catalog):
    return {
        "name": "Tee",
        "price": 19.99,
        "categoryId": catalog["category"].id,
        "sizeId": catalog["size"].id,
        "colorId": catalog["color"].id,
        "images": [{"url": "https://x/front.png"}, {"url": "https://x/back.png"}],
        "isFeatured": True,
        "isArchived": False,
    }


def _names(response):
    return [product["name"] for product in response.json()]


class TestCreateProduct:

    @pytest.mark.asyncio
    async def test_create(self, test_client, catalog, auth_headers, product_body):
        store_id = catalog["store"].id

        response = await test_client.post(
            f"/api/{store_id}/products", json=product_body, headers=auth_headers()
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Tee"
        assert data["price"] == "19.99"
        assert data["storeId"] == store_id
        assert data["isFeatured"] is True
        assert data["isArchived"] is False

        listed = await test_client.get(f"/api/{store_id}/products")
        (product,) = listed.json()
        assert [image["url"] for image in product["images"]] == [
            "https://x/front.png",
            "https://x/back.png",
        ]

    @pytest.mark.asyncio
    async def test_flags_default_to_false(self, test_client, catalog, auth_headers, product_body):
        del product_body["isFeatured"]
        del product_body["isArchived"]

        response = await test_client.post(
            f"/api/{catalog['store'].id}/products", json=product_body, headers=auth_headers()
        )

        assert response.json()["isFeatured"] is False
        assert response.json()["isArchived"] is False

    @pytest.mark.asyncio
    async def test_name_reported_before_price(self, test_client, catalog, auth_headers, product_body):
        del product_body["name"]
        del product_body["price"]

        response = await test_client.post(
            f"/api/{catalog['store'].id}/products", json=product_body, headers=auth_headers()
        )

        assert response.status_code == 422
        assert response.text == "Name is required"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "field,value,message",
        [
            ("images", [], "Images are required"),
            ("price", None, "Price is required"),
            ("categoryId", "", "Category id is required"),
            ("sizeId", None, "Size id is required"),
            ("colorId", None, "Color id is required"),
        ],
    )
    async def test_field_messages(
        self, test_client, catalog, auth_headers, product_body, field, value, message
    ):
        product_body[field] = value

        response = await test_client.post(
            f"/api/{catalog['store'].id}/products", json=product_body, headers=auth_headers()
        )

        assert response.status_code == 422
        assert response.text == message

    @pytest.mark.asyncio
    async def test_valid_fields_not_owner_is_403(
        self, test_client, catalog, auth_headers, product_body
    ):
        response = await test_client.post(
            f"/api/{catalog['store'].id}/products",
            json=product_body,
            headers=auth_headers(STRANGER_ID),
        )
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_anonymous_is_401(self, test_client, catalog, product_body):
        response = await test_client.post(f"/api/{catalog['store'].id}/products", json=product_body)
        assert response.status_code == 401


class TestListProducts:

    @pytest.mark.asyncio
    async def test_archived_never_listed(self, test_client, catalog, add_product):
        await add_product("Visible")
        await add_product("Archived", is_archived=True)
        await add_product("Archived Featured", is_archived=True, is_featured=True)
        store_id = catalog["store"].id

        assert _names(await test_client.get(f"/api/{store_id}/products")) == ["Visible"]
        featured = await test_client.get(f"/api/{store_id}/products", params={"isFeatured": "true"})
        assert featured.json() == []

    @pytest.mark.asyncio
    async def test_newest_first(self, test_client, catalog, add_product):
        now = datetime.now(timezone.utc)
        await add_product("Old", created_at=now - timedelta(days=2))
        await add_product("New", created_at=now)
        await add_product("Middle", created_at=now - timedelta(days=1))

        response = await test_client.get(f"/api/{catalog['store'].id}/products")

        assert _names(response) == ["New", "Middle", "Old"]

    @pytest.mark.asyncio
    async def test_relations_inline(self, test_client, catalog, add_product):
        await add_product("Tee")

        (product,) = (await test_client.get(f"/api/{catalog['store'].id}/products")).json()

        assert product["category"]["name"] == "Shirts"
        assert product["size"]["value"] == "L"
        assert product["color"]["value"] == "#000000"
        assert product["images"][0]["url"] == "https://x/Tee.png"

    @pytest.mark.asyncio
    async def test_featured_filter(self, test_client, catalog, add_product):
        await add_product("Plain")
        await add_product("Star", is_featured=True)
        store_id = catalog["store"].id

        everything = await test_client.get(f"/api/{store_id}/products")
        featured = await test_client.get(f"/api/{store_id}/products", params={"isFeatured": "true"})

        assert sorted(_names(everything)) == ["Plain", "Star"]
        assert _names(featured) == ["Star"]

    @pytest.mark.asyncio
    async def test_featured_false_still_filters(self, test_client, catalog, add_product):
        """Literal behavior: 'false' is a present value and filters to featured."""
        await add_product("Plain")
        await add_product("Star", is_featured=True)

        response = await test_client.get(
            f"/api/{catalog['store'].id}/products", params={"isFeatured": "false"}
        )

        assert _names(response) == ["Star"]

    @pytest.mark.asyncio
    async def test_empty_filter_values_are_ignored(self, test_client, catalog, add_product):
        await add_product("Plain")
        await add_product("Star", is_featured=True)

        response = await test_client.get(
            f"/api/{catalog['store'].id}/products",
            params={"isFeatured": "", "categoryId": ""},
        )

        assert sorted(_names(response)) == ["Plain", "Star"]

    @pytest.mark.asyncio
    async def test_category_filter(self, test_client, catalog, add_product, session_factory):
        async with session_factory() as session:
            hats = Category(
                store_id=catalog["store"].id, billboard_id=catalog["billboard"].id, name="Hats"
            )
            session.add(hats)
            await session.commit()

        await add_product("Tee")
        await add_product("Cap", category_id=hats.id)

        response = await test_client.get(
            f"/api/{catalog['store'].id}/products", params={"categoryId": hats.id}
        )

        assert _names(response) == ["Cap"]

    @pytest.mark.asyncio
    async def test_size_and_color_filters(self, test_client, catalog, add_product):
        await add_product("Tee")
        store_id = catalog["store"].id

        match = await test_client.get(
            f"/api/{store_id}/products",
            params={"sizeId": catalog["size"].id, "colorId": catalog["color"].id},
        )
        miss = await test_client.get(f"/api/{store_id}/products", params={"colorId": "nope"})

        assert _names(match) == ["Tee"]
        assert miss.json() == []
