"""Scalar counts and grouped product aggregates."""

from datetime import datetime
from typing import Any

from sqlalchemy import case, func
from sqlalchemy.orm import Session

from app.admin.schemas.admin_statistics import (
    CategoryStats,
    HeadlineCounts,
    ProductStatusCounts,
    RegionStats,
)
from app.admin.services.statistics.base import calculate_rate, start_of_local_day
from app.marketplace.models import Ads, Engineer, Product, ProductStatus, Shop


def _status_sum(status: ProductStatus) -> Any:
    return func.sum(case((Product.status == status, 1), else_=0))


class MetricsService:
    """Read-only counts over the marketplace collections."""

    @staticmethod
    def count_by_filter(db: Session, model: type, *criteria: Any) -> int:
        """Exact number of rows of ``model`` matching all ``criteria``.

        The list endpoints report ``totalItems`` through this same call, so a
        count and a listing built from the same criteria always agree.

        Args:
            db: Database session.
            model: Mapped class to count.
            *criteria: SQLAlchemy filter expressions, ANDed together.

        Returns:
            Row count.
        """
        result: int = db.query(model).filter(*criteria).count()
        return result

    @staticmethod
    def daily_count(
        db: Session,
        model: type,
        *criteria: Any,
        field: str = "created_at",
        since: datetime | None = None,
    ) -> int:
        """Count rows whose ``field`` falls on or after local midnight today.

        Args:
            db: Database session.
            model: Mapped class to count.
            *criteria: Additional filter expressions.
            field: Timestamp column to compare, ``updated_at`` for approvals
                and rejections.
            since: Naive UTC lower bound, defaults to ``start_of_local_day()``.

        Returns:
            Row count.
        """
        column = getattr(model, field)
        lower_bound = since if since is not None else start_of_local_day()
        return MetricsService.count_by_filter(db, model, column >= lower_bound, *criteria)

    @staticmethod
    def headline_counts(db: Session) -> HeadlineCounts:
        return HeadlineCounts(
            pending_approvals=MetricsService.count_by_filter(
                db, Product, Product.status == ProductStatus.PENDING
            ),
            total_engineers=MetricsService.count_by_filter(db, Engineer),
            verified_shops=MetricsService.count_by_filter(
                db,
                Shop,
                Shop.is_verified == True,  # noqa: E712
                Shop.is_active == True,  # noqa: E712
            ),
            active_ads=MetricsService.count_by_filter(db, Ads, Ads.active == True),  # noqa: E712
        )

    @staticmethod
    def product_status_counts(db: Session) -> ProductStatusCounts:
        """Total, pending, approved and rejected products in one grouped query."""
        rows = db.query(Product.status, func.count(Product.id)).group_by(Product.status).all()
        by_status = {status: count for status, count in rows}

        return ProductStatusCounts(
            total=sum(by_status.values()),
            pending=by_status.get(ProductStatus.PENDING, 0),
            approved=by_status.get(ProductStatus.APPROVED, 0),
            rejected=by_status.get(ProductStatus.REJECTED, 0),
        )

    @staticmethod
    def category_breakdown(db: Session) -> list[CategoryStats]:
        """Products grouped by category, largest category first.

        Returns:
            One CategoryStats per ``Product.type``, sorted by count descending
            then category name.
        """
        count = func.count(Product.id)
        rows = (
            db.query(
                Product.type,
                count,
                _status_sum(ProductStatus.PENDING),
                _status_sum(ProductStatus.APPROVED),
                _status_sum(ProductStatus.REJECTED),
            )
            .group_by(Product.type)
            .order_by(count.desc(), Product.type.asc())
            .all()
        )

        return [
            CategoryStats(
                category=category,
                count=total,
                pending=int(pending or 0),
                approved=int(approved or 0),
                rejected=int(rejected or 0),
                approval_rate=calculate_rate(approved or 0, max(total, 1)),
                rejection_rate=calculate_rate(rejected or 0, max(total, 1)),
            )
            for category, total, pending, approved, rejected in rows
        ]

    @staticmethod
    def regional_breakdown(db: Session, limit: int = 10) -> list[RegionStats]:
        """Product volume per governorate, busiest first, at most ``limit`` rows."""
        products = func.count(Product.id)
        rows = (
            db.query(Product.governorate, products, _status_sum(ProductStatus.PENDING))
            .group_by(Product.governorate)
            .order_by(products.desc(), Product.governorate.asc())
            .limit(limit)
            .all()
        )

        return [
            RegionStats(governorate=governorate, products=total, pending=int(pending or 0))
            for governorate, total, pending in rows
        ]
