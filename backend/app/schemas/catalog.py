"""
Store Admin Backend — Catalog Response Schemas
===============================================

What:  JSON shapes returned by the /api/{storeId}/... entity endpoints.
Who:   Referenced by EntityDefinition.response_model / list_response_model.

Request bodies are NOT modelled here: create handlers read the raw JSON
object so that missing or empty fields produce the plain-text 422 messages
of the request validator instead of FastAPI's structured 422.
"""

from decimal import Decimal
from typing import List

from pydantic import Field

from app.schemas.common import CamelModel, UtcDateTime


class BillboardResponse(CamelModel):
    id: str
    store_id: str
    label: str
    image_url: str
    created_at: UtcDateTime
    updated_at: UtcDateTime


class CategoryResponse(CamelModel):
    id: str
    store_id: str
    billboard_id: str
    name: str
    created_at: UtcDateTime
    updated_at: UtcDateTime


class SizeResponse(CamelModel):
    id: str
    store_id: str
    name: str
    value: str
    created_at: UtcDateTime
    updated_at: UtcDateTime


class ColorResponse(CamelModel):
    id: str
    store_id: str
    name: str
    value: str
    created_at: UtcDateTime
    updated_at: UtcDateTime


class ImageResponse(CamelModel):
    id: str
    product_id: str
    url: str
    created_at: UtcDateTime
    updated_at: UtcDateTime


class ProductResponse(CamelModel):
    """
    Product as returned by POST /api/{storeId}/products.

    Price is a decimal and serializes as a JSON string ("19.99") so no
    precision is lost in transit.
    """
    id: str
    store_id: str
    category_id: str
    size_id: str
    color_id: str
    name: str
    price: Decimal
    is_featured: bool
    is_archived: bool
    created_at: UtcDateTime
    updated_at: UtcDateTime


class ProductDetailResponse(ProductResponse):
    """Listing shape: the product plus its related rows inline."""
    category: CategoryResponse
    size: SizeResponse
    color: ColorResponse
    images: List[ImageResponse] = Field(default_factory=list)
