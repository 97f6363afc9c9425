"""
Store Admin Backend — ORM Models Package
=========================================

Importing this package registers every model with Base.metadata and lets
string-based relationships ("Category", "Image", ...) resolve.

Ownership tree:
    Store ─┬─ Billboard ── Category
           ├─ Size
           ├─ Color
           └─ Product ── Image
"""

from app.models.store import Store
from app.models.billboard import Billboard
from app.models.category import Category
from app.models.size import Size
from app.models.color import Color
from app.models.product import Image, Product

__all__ = [
    "Store",
    "Billboard",
    "Category",
    "Size",
    "Color",
    "Product",
    "Image",
]
