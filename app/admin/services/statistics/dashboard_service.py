"""Dashboard statistics service."""

from datetime import UTC, datetime

from sqlalchemy.orm import Session

from app.admin.schemas.admin_statistics import (
    Activity,
    AdminActions,
    ApiPerformance,
    ApprovalRates,
    DashboardStats,
    DatabaseHealth,
    EngineersOverview,
    GrowthFigure,
    Overview,
    Performance,
    PopularCategory,
    ProductsOverview,
    ProductSubmissions,
    QualityMetrics,
    RecentSubmissions,
    Regional,
    RegistrationActivity,
    ShopsOverview,
    SystemHealth,
    TopRegion,
    UsersOverview,
)
from app.admin.services.statistics.base import (
    activity_level,
    calculate_rate,
    start_of_local_day,
)
from app.admin.services.statistics.cards import build_dashboard_cards
from app.admin.services.statistics.metrics_service import MetricsService
from app.admin.services.statistics.synthetic import DEFAULT_SYNTHETIC_METRICS, SyntheticMetrics
from app.auth.models.user import User
from app.core.config import settings
from app.marketplace.models import Engineer, Product, ProductStatus, Shop


class DashboardService:
    """Service for the composite admin dashboard."""

    @staticmethod
    def get_dashboard_stats(
        db: Session, synthetic: SyntheticMetrics = DEFAULT_SYNTHETIC_METRICS
    ) -> DashboardStats:
        """Build the full dashboard payload.

        Counts and breakdowns come from ``MetricsService``; growth, quality
        and system-health sections are filled from ``synthetic``.

        ``last_updated`` is captured before the first query and
        ``generated_at`` after the last one, so the two bracket the
        assembly.

        Args:
            db: Database session.
            synthetic: Placeholder figures for unmeasured sections.

        Returns:
            DashboardStats ready for the response envelope.
        """
        last_updated = datetime.now(UTC)
        today_start = start_of_local_day()

        headline = MetricsService.headline_counts(db)
        products = MetricsService.product_status_counts(db)

        total_users = MetricsService.count_by_filter(db, User)
        total_shops = MetricsService.count_by_filter(db, Shop)
        verified_engineers = MetricsService.count_by_filter(
            db, Engineer, Engineer.is_verified == True  # noqa: E712
        )
        available_engineers = MetricsService.count_by_filter(
            db, Engineer, Engineer.is_active == True  # noqa: E712
        )

        # Today's activity
        registrations_today = MetricsService.daily_count(db, User, since=today_start)
        submissions_today = MetricsService.daily_count(db, Product, since=today_start)
        approvals_today = MetricsService.daily_count(
            db,
            Product,
            Product.status == ProductStatus.APPROVED,
            field="updated_at",
            since=today_start,
        )
        rejections_today = MetricsService.daily_count(
            db,
            Product,
            Product.status == ProductStatus.REJECTED,
            field="updated_at",
            since=today_start,
        )

        categories = MetricsService.category_breakdown(db)
        regions = MetricsService.regional_breakdown(db, limit=settings.REGIONAL_BREAKDOWN_LIMIT)

        overview = Overview(
            total_users=UsersOverview(
                count=total_users,
                growth=GrowthFigure(
                    percentage=synthetic.user_growth_percentage,
                    period=synthetic.user_growth_period,
                ),
            ),
            total_products=ProductsOverview(
                count=products.total,
                pending=headline.pending_approvals,
                approved=products.approved,
                rejected=products.rejected,
            ),
            total_shops=ShopsOverview(count=total_shops, verified=headline.verified_shops),
            total_engineers=EngineersOverview(
                count=headline.total_engineers,
                verified=verified_engineers,
                available=available_engineers,
            ),
        )

        activity = Activity(
            recent_registrations=RegistrationActivity(
                today=registrations_today,
                week=synthetic.registrations_this_week,
                month=synthetic.registrations_this_month,
            ),
            recent_submissions=RecentSubmissions(
                products=ProductSubmissions(
                    today=submissions_today,
                    week=synthetic.product_submissions_this_week,
                    pending_approval=headline.pending_approvals,
                )
            ),
            admin_actions=AdminActions(
                approvals_today=approvals_today,
                rejections_today=rejections_today,
                average_response_time=synthetic.admin_average_response_time,
            ),
        )

        performance = Performance(
            approval_rates=ApprovalRates(
                overall=calculate_rate(products.approved, products.total),
                by_category={cat.category: cat.approval_rate for cat in categories},
            ),
            rejection_rate=calculate_rate(products.rejected, products.total),
            popular_categories=[
                PopularCategory(
                    category=cat.category,
                    count=cat.count,
                    percentage=calculate_rate(cat.count, products.total),
                )
                for cat in categories
            ],
            quality_metrics=QualityMetrics(
                average_quality_score=synthetic.average_quality_score,
                complete_submissions=synthetic.complete_submissions,
            ),
        )

        regional = Regional(
            by_governorate=regions,
            top_regions=[
                TopRegion(
                    name=region.governorate,
                    activity=activity_level(region.products),
                    growth=synthetic.region_growth_percentage,
                )
                for region in regions[: settings.TOP_REGIONS_LIMIT]
            ],
        )

        system_health = SystemHealth(
            database=DatabaseHealth(
                status=synthetic.database_status,
                response_time=synthetic.database_response_time,
                connections=synthetic.database_connections,
            ),
            api_performance=ApiPerformance(
                average_response_time=synthetic.api_average_response_time,
                error_rate=synthetic.api_error_rate,
                requests_per_minute=synthetic.api_requests_per_minute,
            ),
        )

        return DashboardStats(
            dashboard_cards=build_dashboard_cards(headline),
            overview=overview,
            activity=activity,
            performance=performance,
            regional=regional,
            system_health=system_health,
            last_updated=last_updated,
            generated_at=datetime.now(UTC),
        )
