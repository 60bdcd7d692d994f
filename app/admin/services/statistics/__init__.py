"""Statistics module for the admin dashboard.

Split into focused services:
- base: rate, activity-level and day-boundary helpers
- metrics_service: scalar counts and grouped product aggregates
- cards: headline card metadata
- synthetic: declared placeholder figures
- dashboard_service: composite dashboard payload
- listing_service: paginated admin lists
"""

from app.admin.services.statistics.base import (
    activity_level,
    calculate_rate,
    start_of_local_day,
)
from app.admin.services.statistics.cards import CARD_DEFINITIONS, build_dashboard_cards
from app.admin.services.statistics.dashboard_service import DashboardService
from app.admin.services.statistics.listing_service import ListingService
from app.admin.services.statistics.metrics_service import MetricsService
from app.admin.services.statistics.synthetic import (
    DEFAULT_SYNTHETIC_METRICS,
    SyntheticMetrics,
    get_synthetic_metrics,
)

__all__ = [
    # Base utilities
    "activity_level",
    "calculate_rate",
    "start_of_local_day",
    # Cards and placeholders
    "CARD_DEFINITIONS",
    "build_dashboard_cards",
    "DEFAULT_SYNTHETIC_METRICS",
    "SyntheticMetrics",
    "get_synthetic_metrics",
    # Services
    "DashboardService",
    "ListingService",
    "MetricsService",
]
