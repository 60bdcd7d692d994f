from app.marketplace.models.ads import Ads
from app.marketplace.models.engineer import Engineer
from app.marketplace.models.product import Product, ProductStatus
from app.marketplace.models.shop import Shop

__all__ = [
    "Ads",
    "Engineer",
    "Product",
    "ProductStatus",
    "Shop",
]
