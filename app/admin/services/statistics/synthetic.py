"""Placeholder figures for dashboard sections without a data source.

Growth, trend, quality and system-health numbers are not measured anywhere
in the platform yet. They are declared here, once, and injected into the
dashboard builder through ``get_synthetic_metrics`` so nothing downstream
presents a literal as if it had been computed.
"""

from pydantic import BaseModel, ConfigDict


class SyntheticMetrics(BaseModel):
    model_config = ConfigDict(frozen=True)

    # overview / activity
    user_growth_percentage: float = 15.5
    user_growth_period: str = "month"
    registrations_this_week: int = 85
    registrations_this_month: int = 340
    product_submissions_this_week: int = 56
    admin_average_response_time: str = "4.2 hours"

    # performance
    average_quality_score: float = 7.8
    complete_submissions: float = 92.5

    # regional
    region_growth_percentage: float = 22.5

    # system health
    database_status: str = "healthy"
    database_response_time: str = "12ms"
    database_connections: int = 15
    api_average_response_time: str = "125ms"
    api_error_rate: float = 0.02
    api_requests_per_minute: int = 45


DEFAULT_SYNTHETIC_METRICS = SyntheticMetrics()


def get_synthetic_metrics() -> SyntheticMetrics:
    return DEFAULT_SYNTHETIC_METRICS
