"""Filtered, sorted, paginated admin lists."""

from collections.abc import Sequence
from typing import Any

from sqlalchemy.orm import Session, load_only, selectinload
from sqlalchemy.orm.interfaces import LoaderOption

from app.admin.schemas.admin_statistics import (
    AdListItem,
    AdsPage,
    EngineerListItem,
    EngineersPage,
    PendingProductsPage,
    ProductListItem,
    ShopListItem,
    ShopsPage,
)
from app.admin.schemas.list_query import ListQuery
from app.admin.services.statistics.metrics_service import MetricsService
from app.auth.models.user import User
from app.core.schemas import PaginationMeta
from app.marketplace.models import Ads, Engineer, Product, ProductStatus, Shop

PRODUCT_SORT_COLUMNS = {
    "createdAt": Product.created_at,
    "name": Product.name,
    "price": Product.price,
    "type": Product.type,
}
ENGINEER_SORT_COLUMNS = {
    "createdAt": Engineer.created_at,
    "name": Engineer.name,
    "experience": Engineer.experience,
}
SHOP_SORT_COLUMNS = {
    "createdAt": Shop.created_at,
    "name": Shop.name,
    "rating": Shop.rating,
}
AD_SORT_COLUMNS = {
    "createdAt": Ads.created_at,
    "title": Ads.title,
}

# Columns each list loads. Anything not named here (engineer and shop notes,
# shop verification documents) never leaves the database.
PRODUCT_COLUMNS = (
    Product.id,
    Product.name,
    Product.description,
    Product.price,
    Product.type,
    Product.governorate,
    Product.status,
    Product.user_id,
    Product.created_at,
    Product.updated_at,
)
ENGINEER_COLUMNS = (
    Engineer.id,
    Engineer.name,
    Engineer.phone,
    Engineer.email,
    Engineer.specialization,
    Engineer.experience,
    Engineer.governorate,
    Engineer.is_verified,
    Engineer.is_active,
    Engineer.added_by_id,
    Engineer.created_at,
    Engineer.updated_at,
)
SHOP_COLUMNS = (
    Shop.id,
    Shop.name,
    Shop.phone,
    Shop.address,
    Shop.governorate,
    Shop.rating,
    Shop.is_verified,
    Shop.is_active,
    Shop.owner_id,
    Shop.added_by_id,
    Shop.created_at,
    Shop.updated_at,
)
AD_COLUMNS = (
    Ads.id,
    Ads.title,
    Ads.description,
    Ads.image_url,
    Ads.link,
    Ads.active,
    Ads.created_at,
    Ads.updated_at,
)


class ListingService:
    """Service behind the four paginated admin lists."""

    @staticmethod
    def paginate(
        db: Session,
        model: type,
        criteria: Sequence[Any],
        query: ListQuery,
        sort_columns: dict[str, Any],
        options: Sequence[LoaderOption] = (),
    ) -> tuple[list[Any], int]:
        """Fetch one page of ``model`` rows and the total matching count.

        Rows are ordered by the requested column and then by primary key in
        the same direction, so repeated calls page identically.

        Args:
            db: Database session.
            model: Mapped class to list.
            criteria: Filter expressions shared by the page and the count.
            query: Parsed page, limit and sort parameters.
            sort_columns: ``sortBy`` value to column mapping.
            options: Loader options (projection, reference resolution).

        Returns:
            Tuple of (rows for the page, total matching rows).
        """
        column = sort_columns[query.sort_by]
        if query.ascending:
            ordering = (column.asc(), model.id.asc())  # type: ignore[attr-defined]
        else:
            ordering = (column.desc(), model.id.desc())  # type: ignore[attr-defined]

        items = (
            db.query(model)
            .options(*options)
            .filter(*criteria)
            .order_by(*ordering)
            .offset(query.skip)
            .limit(query.limit)
            .all()
        )
        total = MetricsService.count_by_filter(db, model, *criteria)
        return items, total

    @staticmethod
    def list_pending_products(db: Session, query: ListQuery) -> PendingProductsPage:
        criteria = [Product.status == ProductStatus.PENDING]
        items, total = ListingService.paginate(
            db,
            Product,
            criteria,
            query,
            PRODUCT_SORT_COLUMNS,
            options=(
                load_only(*PRODUCT_COLUMNS),
                selectinload(Product.user).load_only(User.id, User.name, User.phone, User.email),
            ),
        )
        return PendingProductsPage(
            products=[ProductListItem.model_validate(item) for item in items],
            pagination=PaginationMeta.from_query(total, query.page, query.limit),
        )

    @staticmethod
    def list_engineers(db: Session, query: ListQuery) -> EngineersPage:
        criteria = []
        if query.flag is not None:
            criteria.append(Engineer.is_verified == query.flag)

        items, total = ListingService.paginate(
            db,
            Engineer,
            criteria,
            query,
            ENGINEER_SORT_COLUMNS,
            options=(
                load_only(*ENGINEER_COLUMNS),
                selectinload(Engineer.added_by).load_only(User.id, User.name),
            ),
        )
        return EngineersPage(
            engineers=[EngineerListItem.model_validate(item) for item in items],
            pagination=PaginationMeta.from_query(total, query.page, query.limit),
        )

    @staticmethod
    def list_shops(db: Session, query: ListQuery) -> ShopsPage:
        criteria = [Shop.is_active == True]  # noqa: E712
        if query.flag is not None:
            criteria.append(Shop.is_verified == query.flag)

        items, total = ListingService.paginate(
            db,
            Shop,
            criteria,
            query,
            SHOP_SORT_COLUMNS,
            options=(
                load_only(*SHOP_COLUMNS),
                selectinload(Shop.added_by).load_only(User.id, User.name),
            ),
        )
        return ShopsPage(
            shops=[ShopListItem.model_validate(item) for item in items],
            pagination=PaginationMeta.from_query(total, query.page, query.limit),
        )

    @staticmethod
    def list_ads(db: Session, query: ListQuery) -> AdsPage:
        criteria = []
        if query.flag is not None:
            criteria.append(Ads.active == query.flag)

        items, total = ListingService.paginate(
            db, Ads, criteria, query, AD_SORT_COLUMNS, options=(load_only(*AD_COLUMNS),)
        )
        return AdsPage(
            ads=[AdListItem.model_validate(item) for item in items],
            pagination=PaginationMeta.from_query(total, query.page, query.limit),
        )
