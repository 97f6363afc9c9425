"""
Store Admin Backend — Listing Presenter
========================================

What:  Maps ORM records to display rows for the dashboard tables.
How:   Pure functions; no I/O, no hidden state, input order preserved
       (the caller's query already sorts newest first).

Formats:
    Dates:  "MMM do, yyyy" in UTC, e.g. "Nov 4th, 2023", "Jan 11th, 2024"
    Prices: US dollars, e.g. "$19.99", "$1,299.00", "-$5.00"
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Iterable, List, TypeVar, Union

from app.models import Billboard, Category, Color, Product, Size
from app.schemas.dashboard import (
    BillboardRow,
    CategoryRow,
    ColorRow,
    ProductRow,
    SizeRow,
)

R = TypeVar("R")
Row = TypeVar("Row")

# Fixed English abbreviations; strftime("%b") follows the process locale
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def ordinal(day: int) -> str:
    """1 → '1st', 2 → '2nd', 3 → '3rd', 11 → '11th', 22 → '22nd'."""
    if 11 <= day % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"


def format_date(value: datetime) -> str:
    # Naive values come back from SQLite and are stored as UTC
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return f"{_MONTHS[value.month - 1]} {ordinal(value.day)}, {value.year}"


def format_price(value: Union[Decimal, int, float]) -> str:
    amount = Decimal(str(value)).quantize(Decimal("0.01"))
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def present(records: Iterable[R], to_row: Callable[[R], Row]) -> List[Row]:
    return [to_row(record) for record in records]


# ── Row builders ──────────────────────────────────────────────────────────

def billboard_row(item: Billboard) -> BillboardRow:
    return BillboardRow(
        id=item.id,
        label=item.label,
        created_at=format_date(item.created_at),
    )


def category_row(item: Category) -> CategoryRow:
    # Requires Category.billboard to be eager-loaded by the caller
    return CategoryRow(
        id=item.id,
        name=item.name,
        billboard_label=item.billboard.label,
        created_at=format_date(item.created_at),
    )


def size_row(item: Size) -> SizeRow:
    return SizeRow(
        id=item.id,
        name=item.name,
        value=item.value,
        created_at=format_date(item.created_at),
    )


def color_row(item: Color) -> ColorRow:
    return ColorRow(
        id=item.id,
        name=item.name,
        value=item.value,
        created_at=format_date(item.created_at),
    )


def product_row(item: Product) -> ProductRow:
    # Requires category, size and color to be eager-loaded by the caller
    return ProductRow(
        id=item.id,
        name=item.name,
        is_featured=item.is_featured,
        is_archived=item.is_archived,
        price=format_price(item.price),
        category=item.category.name,
        size=item.size.name,
        color=item.color.value,
        created_at=format_date(item.created_at),
    )


def present_billboards(records: Iterable[Billboard]) -> List[BillboardRow]:
    return present(records, billboard_row)


def present_categories(records: Iterable[Category]) -> List[CategoryRow]:
    return present(records, category_row)


def present_sizes(records: Iterable[Size]) -> List[SizeRow]:
    return present(records, size_row)


def present_colors(records: Iterable[Color]) -> List[ColorRow]:
    return present(records, color_row)


def present_products(records: Iterable[Product]) -> List[ProductRow]:
    return present(records, product_row)
