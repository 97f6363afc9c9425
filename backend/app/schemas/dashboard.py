"""
Store Admin Backend — Dashboard Row Schemas
============================================

What:  Display-ready rows consumed by the admin dashboard tables.
How:   Built by app.services.presenter from ORM records; every field is
       already formatted (dates as "Nov 4th, 2023", prices as "$19.99").
"""

from app.schemas.common import CamelModel


class BillboardRow(CamelModel):
    id: str
    label: str
    created_at: str


class CategoryRow(CamelModel):
    id: str
    name: str
    billboard_label: str
    created_at: str


class SizeRow(CamelModel):
    id: str
    name: str
    value: str
    created_at: str


class ColorRow(CamelModel):
    id: str
    name: str
    value: str
    created_at: str


class ProductRow(CamelModel):
    id: str
    name: str
    is_featured: bool
    is_archived: bool
    price: str
    category: str
    size: str
    color: str
    created_at: str
