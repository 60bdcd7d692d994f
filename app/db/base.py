"""
Database base module - imports all models so their tables are registered
on ``Base.metadata``.

The schema is owned by the marketplace backend; this registry is used by
test fixtures and local seeding to create matching tables.
"""

from app.auth.models.user import User
from app.marketplace.models import Ads, Engineer, Product, Shop

__all__ = [
    "User",
    "Ads",
    "Engineer",
    "Product",
    "Shop",
]
