"""Query-string parsing for the admin list endpoints.

Malformed values are rejected with 400 instead of being coerced to a
default: ``page``/``limit`` bounds are enforced by FastAPI (mapped to 400 in
``app.core.exceptions``), everything else is checked here.
"""

from dataclasses import dataclass, replace

from fastapi import Depends, Query

from app.core.config import settings
from app.core.exceptions import ValidationError

PRODUCT_SORT_FIELDS = ("createdAt", "name", "price", "type")
ENGINEER_SORT_FIELDS = ("createdAt", "name", "experience")
SHOP_SORT_FIELDS = ("createdAt", "name", "rating")
AD_SORT_FIELDS = ("createdAt", "title")

ASCENDING = 1
DESCENDING = -1


@dataclass(frozen=True)
class ListQuery:
    page: int = 1
    limit: int = 10
    sort_by: str = "createdAt"
    sort_order: int = DESCENDING
    # verified / active, None when the parameter was not sent
    flag: bool | None = None

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def ascending(self) -> bool:
        return self.sort_order == ASCENDING


def parse_bool_flag(value: str | None, field: str) -> bool | None:
    """Tri-state boolean filter: absent, "true" or "false"."""
    if value is None:
        return None
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValidationError(f"'{field}' must be 'true' or 'false'", field=field)


def _check_sort_field(query: ListQuery, allowed: tuple[str, ...]) -> ListQuery:
    if query.sort_by not in allowed:
        raise ValidationError(
            f"'sortBy' must be one of: {', '.join(allowed)}",
            field="sortBy",
        )
    return query


async def pagination_params(
    page: int = Query(1, ge=1, le=settings.PAGINATION_MAX_PAGE, description="Page number"),
    limit: int = Query(
        settings.PAGINATION_DEFAULT_LIMIT,
        ge=1,
        le=settings.PAGINATION_MAX_LIMIT,
        description="Number of items per page",
    ),
    sort_by: str = Query("createdAt", alias="sortBy", description="Field to sort by"),
    sort_order: int = Query(
        DESCENDING, alias="sortOrder", description="1 for ascending, -1 for descending"
    ),
) -> ListQuery:
    if sort_order not in (ASCENDING, DESCENDING):
        raise ValidationError("'sortOrder' must be 1 or -1", field="sortOrder")
    return ListQuery(page=page, limit=limit, sort_by=sort_by, sort_order=sort_order)


async def pending_products_query(base: ListQuery = Depends(pagination_params)) -> ListQuery:
    return _check_sort_field(base, PRODUCT_SORT_FIELDS)


async def engineers_query(
    base: ListQuery = Depends(pagination_params),
    verified: str | None = Query(None, description="Filter by verification status"),
) -> ListQuery:
    query = _check_sort_field(base, ENGINEER_SORT_FIELDS)
    return replace(query, flag=parse_bool_flag(verified, "verified"))


async def shops_query(
    base: ListQuery = Depends(pagination_params),
    verified: str | None = Query(None, description="Filter by verification status"),
) -> ListQuery:
    query = _check_sort_field(base, SHOP_SORT_FIELDS)
    return replace(query, flag=parse_bool_flag(verified, "verified"))


async def ads_query(
    base: ListQuery = Depends(pagination_params),
    active: str | None = Query(None, description="Filter by active status"),
) -> ListQuery:
    query = _check_sort_field(base, AD_SORT_FIELDS)
    return replace(query, flag=parse_bool_flag(active, "active"))
