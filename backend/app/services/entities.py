"""
Store Admin Backend — Entity Definitions
=========================================

What:  One EntityDefinition per store-scoped resource. Everything that
       differs between billboards, categories, sizes, colors and products
       lives here; the request pipeline itself lives in entity_service.py.

Each definition declares:
    - name / plural / tag:   naming for routes and log tags ("[PRODUCTS_POST]")
    - model:                 ORM class with a store_id column
    - checks:                ordered required-field checks (first failure wins)
    - build:                 body + path storeId → new ORM row (body storeId ignored)
    - list_where:            query params → extra WHERE clauses for GET /api/...
    - list_order_by / list_options:  ordering and eager loads for GET /api/...
    - dashboard_options / present:   eager loads and row mapping for the dashboard
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple, Type

from pydantic import BaseModel
from sqlalchemy.orm import selectinload

from app.models import Billboard, Category, Color, Image, Product, Size
from app.schemas.catalog import (
    BillboardResponse,
    CategoryResponse,
    ColorResponse,
    ProductDetailResponse,
    ProductResponse,
    SizeResponse,
)
from app.schemas.dashboard import (
    BillboardRow,
    CategoryRow,
    ColorRow,
    ProductRow,
    SizeRow,
)
from app.services import presenter
from app.services.validation import FieldCheck, is_non_empty_list, required

QueryParams = Mapping[str, Optional[str]]


def _no_filters(params: QueryParams) -> List[Any]:
    return []


@dataclass(frozen=True)
class EntityDefinition:
    name: str
    plural: str
    model: Type[Any]
    checks: Tuple[FieldCheck, ...]
    build: Callable[[Mapping[str, Any], str], Any]
    response_model: Type[BaseModel]
    present: Callable[[Sequence[Any]], List[BaseModel]]
    row_model: Type[BaseModel]
    list_response_model: Optional[Type[BaseModel]] = None
    list_where: Callable[[QueryParams], List[Any]] = _no_filters
    list_order_by: Optional[Any] = None
    list_options: Tuple[Any, ...] = ()
    list_params: Tuple[str, ...] = ()
    dashboard_options: Tuple[Any, ...] = ()

    @property
    def tag(self) -> str:
        return self.plural.upper()

    @property
    def item_model(self) -> Type[BaseModel]:
        return self.list_response_model or self.response_model


# ── Billboards ────────────────────────────────────────────────────────────

def build_billboard(body: Mapping[str, Any], store_id: str) -> Billboard:
    return Billboard(
        store_id=store_id,
        label=body["label"],
        image_url=body["imageUrl"],
    )


BILLBOARDS = EntityDefinition(
    name="billboard",
    plural="billboards",
    model=Billboard,
    checks=(
        required("label", "Label is required"),
        required("imageUrl", "Image URL is required"),
    ),
    build=build_billboard,
    response_model=BillboardResponse,
    present=presenter.present_billboards,
    row_model=BillboardRow,
)


# ── Categories ────────────────────────────────────────────────────────────

def build_category(body: Mapping[str, Any], store_id: str) -> Category:
    return Category(
        store_id=store_id,
        name=body["name"],
        billboard_id=body["billboardId"],
    )


CATEGORIES = EntityDefinition(
    name="category",
    plural="categories",
    model=Category,
    checks=(
        required("name", "Name is required"),
        required("billboardId", "Billboard ID is required"),
    ),
    build=build_category,
    response_model=CategoryResponse,
    present=presenter.present_categories,
    row_model=CategoryRow,
    dashboard_options=(selectinload(Category.billboard),),
)


# ── Sizes & Colors ────────────────────────────────────────────────────────

def build_size(body: Mapping[str, Any], store_id: str) -> Size:
    return Size(store_id=store_id, name=body["name"], value=body["value"])


def build_color(body: Mapping[str, Any], store_id: str) -> Color:
    return Color(store_id=store_id, name=body["name"], value=body["value"])


SIZES = EntityDefinition(
    name="size",
    plural="sizes",
    model=Size,
    checks=(
        required("name", "Name is required"),
        required("value", "Value is required"),
    ),
    build=build_size,
    response_model=SizeResponse,
    present=presenter.present_sizes,
    row_model=SizeRow,
)

COLORS = EntityDefinition(
    name="color",
    plural="colors",
    model=Color,
    checks=(
        required("name", "Name is required"),
        required("value", "Value is required"),
    ),
    build=build_color,
    response_model=ColorResponse,
    present=presenter.present_colors,
    row_model=ColorRow,
)


# ── Products ──────────────────────────────────────────────────────────────

def to_price(value: Any) -> Decimal:
    """Accepts JSON numbers or numeric strings; anything else raises."""
    return Decimal(str(value)).quantize(Decimal("0.01"))


def to_flag(value: Any) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise TypeError(f"expected a boolean flag, got {type(value).__name__}")
    return value


def build_product(body: Mapping[str, Any], store_id: str) -> Product:
    return Product(
        store_id=store_id,
        name=body["name"],
        price=to_price(body["price"]),
        category_id=body["categoryId"],
        size_id=body["sizeId"],
        color_id=body["colorId"],
        is_featured=to_flag(body.get("isFeatured")),
        is_archived=to_flag(body.get("isArchived")),
        images=[
            Image(url=image["url"], position=position)
            for position, image in enumerate(body["images"])
        ],
    )


def product_filters(params: QueryParams) -> List[Any]:
    """
    Storefront filters. Empty or absent values are left out of the query.

    isFeatured: any non-empty value, "false" included, restricts the listing
    to featured products.
    """
    clauses: List[Any] = [Product.is_archived.is_(False)]
    if params.get("categoryId"):
        clauses.append(Product.category_id == params["categoryId"])
    if params.get("sizeId"):
        clauses.append(Product.size_id == params["sizeId"])
    if params.get("colorId"):
        clauses.append(Product.color_id == params["colorId"])
    if params.get("isFeatured"):
        clauses.append(Product.is_featured.is_(True))
    return clauses


PRODUCTS = EntityDefinition(
    name="product",
    plural="products",
    model=Product,
    checks=(
        required("name", "Name is required"),
        FieldCheck("images", "Images are required", is_non_empty_list),
        required("price", "Price is required"),
        required("categoryId", "Category id is required"),
        required("sizeId", "Size id is required"),
        required("colorId", "Color id is required"),
    ),
    build=build_product,
    response_model=ProductResponse,
    list_response_model=ProductDetailResponse,
    present=presenter.present_products,
    row_model=ProductRow,
    list_where=product_filters,
    list_order_by=Product.created_at.desc(),
    list_options=(
        selectinload(Product.images),
        selectinload(Product.category),
        selectinload(Product.size),
        selectinload(Product.color),
    ),
    list_params=("categoryId", "sizeId", "colorId", "isFeatured"),
    dashboard_options=(
        selectinload(Product.category),
        selectinload(Product.size),
        selectinload(Product.color),
    ),
)


ENTITY_DEFINITIONS: Tuple[EntityDefinition, ...] = (
    BILLBOARDS,
    CATEGORIES,
    SIZES,
    COLORS,
    PRODUCTS,
)
