"""Statistics routes for the admin dashboard."""

from typing import Literal

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.admin.schemas.admin_statistics import (
    AdsPage,
    DashboardCards,
    DashboardStats,
    EngineersPage,
    PendingProductsPage,
    ShopsPage,
)
from app.admin.schemas.list_query import (
    ListQuery,
    ads_query,
    engineers_query,
    pending_products_query,
    shops_query,
)
from app.admin.services.statistics import (
    DashboardService,
    ListingService,
    MetricsService,
    SyntheticMetrics,
    build_dashboard_cards,
    get_synthetic_metrics,
)
from app.auth.dependencies import require_admin
from app.core.exceptions import retrieval_errors
from app.core.schemas import ApiResponse, ErrorResponse, success_response
from app.db.session import get_db

router = APIRouter(
    prefix="/stats",
    tags=["admin-statistics"],
    dependencies=[Depends(require_admin)],
    responses={500: {"model": ErrorResponse}, 400: {"model": ErrorResponse}},
)

TimeRange = Literal["today", "week", "month", "quarter", "year", "all"]


@router.get("/dashboard-stats", response_model=ApiResponse[DashboardStats])
async def get_dashboard_stats(
    time_range: TimeRange = Query(
        "month", alias="timeRange", description="Accepted for compatibility, not applied"
    ),
    include_trends: bool = Query(
        True, alias="includeTrends", description="Accepted for compatibility, not applied"
    ),
    include_regional_data: bool = Query(
        True, alias="includeRegionalData", description="Accepted for compatibility, not applied"
    ),
    db: Session = Depends(get_db),
    synthetic: SyntheticMetrics = Depends(get_synthetic_metrics),
) -> ApiResponse[DashboardStats]:
    """
    Get the composite admin dashboard.

    Returns:
    - Headline cards (pending approvals, engineers, verified shops, active ads)
    - Overview, today's activity, approval rates and category breakdown
    - Governorate breakdown and top regions
    - Growth, quality and system-health placeholders
    """
    with retrieval_errors("Error retrieving statistics"):
        stats = DashboardService.get_dashboard_stats(db, synthetic)
    return success_response("Dashboard statistics retrieved successfully", stats)


@router.get("/dashboard-cards", response_model=ApiResponse[DashboardCards])
async def get_dashboard_cards(db: Session = Depends(get_db)) -> ApiResponse[DashboardCards]:
    """Get the four decorated headline cards."""
    with retrieval_errors("Error retrieving dashboard cards data"):
        cards = build_dashboard_cards(MetricsService.headline_counts(db))
    return success_response("Dashboard cards data retrieved successfully", cards)


@router.get("/pending-approvals", response_model=ApiResponse[PendingProductsPage])
async def get_pending_approvals(
    query: ListQuery = Depends(pending_products_query),
    db: Session = Depends(get_db),
) -> ApiResponse[PendingProductsPage]:
    """
    Get products awaiting approval.

    Each product carries its submitter's name, phone and email.
    """
    with retrieval_errors("Error retrieving pending approvals"):
        page = ListingService.list_pending_products(db, query)
    return success_response("Pending approvals retrieved successfully", page)


@router.get("/engineers", response_model=ApiResponse[EngineersPage])
async def get_engineers(
    query: ListQuery = Depends(engineers_query),
    db: Session = Depends(get_db),
) -> ApiResponse[EngineersPage]:
    """Get engineers, optionally filtered by ``verified``."""
    with retrieval_errors("Error retrieving engineers list"):
        page = ListingService.list_engineers(db, query)
    return success_response("Engineers list retrieved successfully", page)


@router.get("/shops", response_model=ApiResponse[ShopsPage])
async def get_shops(
    query: ListQuery = Depends(shops_query),
    db: Session = Depends(get_db),
) -> ApiResponse[ShopsPage]:
    """Get active shops, optionally filtered by ``verified``."""
    with retrieval_errors("Error retrieving shops list"):
        page = ListingService.list_shops(db, query)
    return success_response("Shops list retrieved successfully", page)


@router.get("/ads", response_model=ApiResponse[AdsPage])
async def get_ads(
    query: ListQuery = Depends(ads_query),
    db: Session = Depends(get_db),
) -> ApiResponse[AdsPage]:
    """Get advertisements, optionally filtered by ``active``."""
    with retrieval_errors("Error retrieving ads list"):
        page = ListingService.list_ads(db, query)
    return success_response("Ads list retrieved successfully", page)
