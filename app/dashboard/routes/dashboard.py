"""Public dashboard counts, no authentication."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.admin.schemas.admin_statistics import DashboardCards, HeadlineCounts
from app.admin.services.statistics import MetricsService, build_dashboard_cards
from app.core.exceptions import retrieval_errors
from app.core.rate_limit import limiter, public_rate_limit
from app.core.schemas import ApiResponse, ErrorResponse, success_response
from app.db.session import get_db

router = APIRouter(tags=["dashboard"], responses={500: {"model": ErrorResponse}})


@router.get("/counts", response_model=ApiResponse[DashboardCards])
@limiter.limit(public_rate_limit)
async def get_dashboard_counts(
    request: Request,
    db: Session = Depends(get_db),
) -> ApiResponse[DashboardCards]:
    """Headline counts decorated with card metadata."""
    with retrieval_errors("Error retrieving dashboard counts"):
        cards = build_dashboard_cards(MetricsService.headline_counts(db))
    return success_response("Dashboard counts retrieved successfully", cards)


@router.get("/simple-counts", response_model=ApiResponse[HeadlineCounts])
@limiter.limit(public_rate_limit)
async def get_simple_counts(
    request: Request,
    db: Session = Depends(get_db),
) -> ApiResponse[HeadlineCounts]:
    """Headline counts as bare integers."""
    with retrieval_errors("Error retrieving counts"):
        counts = MetricsService.headline_counts(db)
    return success_response("Counts retrieved successfully", counts)
