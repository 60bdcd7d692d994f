"""Presentation metadata for the four headline dashboard cards."""

from app.admin.schemas.admin_statistics import DashboardCard, DashboardCards, HeadlineCounts

CARD_DEFINITIONS: dict[str, dict[str, str]] = {
    "pending_approvals": {
        "title": "Pending Approvals",
        "subtitle": "Products awaiting approval",
        "icon": "file-cabinet",
        "color": "orange",
    },
    "total_engineers": {
        "title": "Total Engineers",
        "subtitle": "Engineers registered in the system",
        "icon": "engineer",
        "color": "blue",
    },
    "verified_shops": {
        "title": "Verified Shops",
        "subtitle": "Verified and certified shops",
        "icon": "storefront",
        "color": "green",
    },
    "active_ads": {
        "title": "Active Ads",
        "subtitle": "Currently active advertisements",
        "icon": "megaphone",
        "color": "purple",
    },
}


def build_dashboard_cards(counts: HeadlineCounts) -> DashboardCards:
    """Decorate each headline count with its card metadata."""
    cards = {
        key: DashboardCard(count=getattr(counts, key), **meta)
        for key, meta in CARD_DEFINITIONS.items()
    }
    return DashboardCards(**cards)
