"""Statistics schemas for the admin dashboard.

Field names are snake_case in Python and camelCase on the wire
(see ``CamelModel``).
"""

import uuid

from pydantic import Field

from app.core.datetime_utils import UTCDatetime
from app.core.schemas import CamelModel, PaginationMeta
from app.marketplace.models.product import ProductStatus

# ============ Headline counts ============


class HeadlineCounts(CamelModel):
    """The four figures shown on every dashboard variant."""

    pending_approvals: int = Field(description="Products awaiting approval")
    total_engineers: int = Field(description="All registered engineers")
    verified_shops: int = Field(description="Shops that are both verified and active")
    active_ads: int = Field(description="Advertisements currently running")


class DashboardCard(CamelModel):
    count: int
    title: str
    subtitle: str
    icon: str
    color: str


class DashboardCards(CamelModel):
    pending_approvals: DashboardCard
    total_engineers: DashboardCard
    verified_shops: DashboardCard
    active_ads: DashboardCard


# ============ Aggregates ============


class ProductStatusCounts(CamelModel):
    total: int = 0
    pending: int = 0
    approved: int = 0
    rejected: int = 0


class CategoryStats(CamelModel):
    """Products of one category (``Product.type``) split by status."""

    category: str
    count: int
    pending: int
    approved: int
    rejected: int
    approval_rate: float = Field(description="approved / count * 100, one decimal")
    rejection_rate: float = Field(description="rejected / count * 100, one decimal")


class RegionStats(CamelModel):
    governorate: str
    products: int
    pending: int


# ============ Composite dashboard ============


class GrowthFigure(CamelModel):
    percentage: float
    period: str


class UsersOverview(CamelModel):
    count: int
    growth: GrowthFigure


class ProductsOverview(CamelModel):
    count: int
    pending: int
    approved: int
    rejected: int


class ShopsOverview(CamelModel):
    count: int
    verified: int


class EngineersOverview(CamelModel):
    count: int
    verified: int
    available: int


class Overview(CamelModel):
    total_users: UsersOverview
    total_products: ProductsOverview
    total_shops: ShopsOverview
    total_engineers: EngineersOverview


class RegistrationActivity(CamelModel):
    today: int
    week: int
    month: int


class ProductSubmissions(CamelModel):
    today: int
    week: int
    pending_approval: int


class RecentSubmissions(CamelModel):
    products: ProductSubmissions


class AdminActions(CamelModel):
    approvals_today: int
    rejections_today: int
    average_response_time: str


class Activity(CamelModel):
    recent_registrations: RegistrationActivity
    recent_submissions: RecentSubmissions
    admin_actions: AdminActions


class ApprovalRates(CamelModel):
    overall: float
    by_category: dict[str, float]


class PopularCategory(CamelModel):
    category: str
    count: int
    percentage: float


class QualityMetrics(CamelModel):
    average_quality_score: float
    complete_submissions: float


class Performance(CamelModel):
    approval_rates: ApprovalRates
    rejection_rate: float
    popular_categories: list[PopularCategory]
    quality_metrics: QualityMetrics


class TopRegion(CamelModel):
    name: str
    activity: str
    growth: float


class Regional(CamelModel):
    by_governorate: list[RegionStats]
    top_regions: list[TopRegion]


class DatabaseHealth(CamelModel):
    status: str
    response_time: str
    connections: int


class ApiPerformance(CamelModel):
    average_response_time: str
    error_rate: float
    requests_per_minute: int


class SystemHealth(CamelModel):
    database: DatabaseHealth
    api_performance: ApiPerformance


class DashboardStats(CamelModel):
    """Payload of ``GET /admin/stats/dashboard-stats``."""

    dashboard_cards: DashboardCards
    overview: Overview
    activity: Activity
    performance: Performance
    regional: Regional
    system_health: SystemHealth
    last_updated: UTCDatetime
    generated_at: UTCDatetime


# ============ List endpoints ============


class UserSummary(CamelModel):
    """Submitting user as shown next to a pending product."""

    id: uuid.UUID
    name: str
    phone: str | None = None
    email: str


class AddedBySummary(CamelModel):
    id: uuid.UUID
    name: str


class ProductListItem(CamelModel):
    id: uuid.UUID
    name: str
    description: str | None = None
    price: float
    type: str
    governorate: str
    status: ProductStatus
    user: UserSummary | None = Field(default=None, alias="userId")
    created_at: UTCDatetime
    updated_at: UTCDatetime


class EngineerListItem(CamelModel):
    id: uuid.UUID
    name: str
    phone: str | None = None
    email: str | None = None
    specialization: str | None = None
    experience: int
    governorate: str | None = None
    is_verified: bool
    is_active: bool
    added_by: AddedBySummary | None = None
    created_at: UTCDatetime
    updated_at: UTCDatetime


class ShopListItem(CamelModel):
    id: uuid.UUID
    name: str
    phone: str | None = None
    address: str | None = None
    governorate: str | None = None
    rating: float
    is_verified: bool
    is_active: bool
    owner_id: uuid.UUID | None = None
    added_by: AddedBySummary | None = None
    created_at: UTCDatetime
    updated_at: UTCDatetime


class AdListItem(CamelModel):
    id: uuid.UUID
    title: str
    description: str | None = None
    image_url: str | None = None
    link: str | None = None
    active: bool
    created_at: UTCDatetime
    updated_at: UTCDatetime


class PendingProductsPage(CamelModel):
    products: list[ProductListItem]
    pagination: PaginationMeta


class EngineersPage(CamelModel):
    engineers: list[EngineerListItem]
    pagination: PaginationMeta


class ShopsPage(CamelModel):
    shops: list[ShopListItem]
    pagination: PaginationMeta


class AdsPage(CamelModel):
    ads: list[AdListItem]
    pagination: PaginationMeta
