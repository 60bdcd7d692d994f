from datetime import timedelta

from app.admin.services.statistics import MetricsService
from app.auth.models.user import User
from app.core.datetime_utils import utcnow
from app.marketplace.models import Ads, Engineer, Product, ProductStatus, Shop
from tests.utils.factories import (
    create_ad_factory,
    create_engineer_factory,
    create_product_factory,
    create_shop_factory,
    create_user_factory,
)


def _seed_scenario_products(db_session):
    create_product_factory(db_session, type="Panel", governorate="Sanaa")
    create_product_factory(
        db_session, type="Panel", governorate="Aden", status=ProductStatus.APPROVED
    )
    create_product_factory(
        db_session, type="Battery", governorate="Sanaa", status=ProductStatus.REJECTED
    )


class TestCountByFilter:
    def test_should_count_all_rows_without_criteria(self, db_session):
        for _ in range(3):
            create_engineer_factory(db_session)

        assert MetricsService.count_by_filter(db_session, Engineer) == 3

    def test_should_apply_every_criterion(self, db_session):
        create_shop_factory(db_session, is_verified=True, is_active=True)
        create_shop_factory(db_session, is_verified=True, is_active=False)
        create_shop_factory(db_session, is_verified=False, is_active=True)

        count = MetricsService.count_by_filter(
            db_session,
            Shop,
            Shop.is_verified == True,  # noqa: E712
            Shop.is_active == True,  # noqa: E712
        )

        assert count == 1

    def test_should_return_zero_for_empty_table(self, db_session):
        assert MetricsService.count_by_filter(db_session, Ads) == 0


class TestHeadlineCounts:
    def test_should_count_the_four_dashboard_figures(self, db_session):
        create_product_factory(db_session)
        create_product_factory(db_session)
        create_product_factory(db_session, status=ProductStatus.APPROVED)
        create_engineer_factory(db_session)
        create_shop_factory(db_session, is_verified=True)
        create_shop_factory(db_session, is_verified=True, is_active=False)
        create_ad_factory(db_session, active=True)
        create_ad_factory(db_session, active=False)

        counts = MetricsService.headline_counts(db_session)

        assert counts.pending_approvals == 2
        assert counts.total_engineers == 1
        assert counts.verified_shops == 1
        assert counts.active_ads == 1


class TestProductStatusCounts:
    def test_should_split_products_by_status(self, db_session):
        _seed_scenario_products(db_session)

        counts = MetricsService.product_status_counts(db_session)

        assert (counts.total, counts.pending, counts.approved, counts.rejected) == (3, 1, 1, 1)

    def test_should_return_zeros_when_no_products(self, db_session):
        counts = MetricsService.product_status_counts(db_session)

        assert (counts.total, counts.pending, counts.approved, counts.rejected) == (0, 0, 0, 0)


class TestCategoryBreakdown:
    def test_should_group_by_category_sorted_by_count(self, db_session):
        _seed_scenario_products(db_session)

        rows = MetricsService.category_breakdown(db_session)

        assert [row.model_dump(exclude={"rejection_rate"}) for row in rows] == [
            {
                "category": "Panel",
                "count": 2,
                "pending": 1,
                "approved": 1,
                "rejected": 0,
                "approval_rate": 50.0,
            },
            {
                "category": "Battery",
                "count": 1,
                "pending": 0,
                "approved": 0,
                "rejected": 1,
                "approval_rate": 0.0,
            },
        ]

    def test_should_keep_approval_and_rejection_rates_within_hundred(self, db_session):
        _seed_scenario_products(db_session)
        create_product_factory(db_session, type="Inverter", status=ProductStatus.APPROVED)
        create_product_factory(db_session, type="Inverter", status=ProductStatus.REJECTED)

        for row in MetricsService.category_breakdown(db_session):
            assert row.approval_rate + row.rejection_rate <= 100.0
            if row.pending == 0:
                assert row.approval_rate + row.rejection_rate == 100.0

    def test_should_break_count_ties_by_category_name(self, db_session):
        create_product_factory(db_session, type="Inverter")
        create_product_factory(db_session, type="Battery")

        rows = MetricsService.category_breakdown(db_session)

        assert [row.category for row in rows] == ["Battery", "Inverter"]

    def test_should_return_empty_list_when_no_products(self, db_session):
        assert MetricsService.category_breakdown(db_session) == []


class TestRegionalBreakdown:
    def test_should_group_by_governorate_sorted_by_products(self, db_session):
        _seed_scenario_products(db_session)

        rows = MetricsService.regional_breakdown(db_session)

        assert [row.model_dump() for row in rows] == [
            {"governorate": "Sanaa", "products": 2, "pending": 1},
            {"governorate": "Aden", "products": 1, "pending": 0},
        ]

    def test_should_never_exceed_limit(self, db_session):
        for index in range(12):
            for _ in range(index + 1):
                create_product_factory(db_session, governorate=f"Region {index:02d}")

        rows = MetricsService.regional_breakdown(db_session, limit=10)

        assert len(rows) == 10
        products = [row.products for row in rows]
        assert products == sorted(products, reverse=True)
        assert rows[0].governorate == "Region 11"


class TestDailyCount:
    def test_should_only_count_rows_created_today(self, db_session):
        create_user_factory(db_session)
        create_user_factory(db_session, created_at=utcnow() - timedelta(days=2))

        assert MetricsService.daily_count(db_session, User) == 1

    def test_should_use_updated_at_for_reviews(self, db_session):
        two_days_ago = utcnow() - timedelta(days=2)
        create_product_factory(
            db_session,
            status=ProductStatus.APPROVED,
            created_at=two_days_ago,
            updated_at=utcnow(),
        )
        create_product_factory(
            db_session,
            status=ProductStatus.APPROVED,
            created_at=two_days_ago,
            updated_at=two_days_ago,
        )

        approvals_today = MetricsService.daily_count(
            db_session,
            Product,
            Product.status == ProductStatus.APPROVED,
            field="updated_at",
        )
        submissions_today = MetricsService.daily_count(db_session, Product)

        assert approvals_today == 1
        assert submissions_today == 0
