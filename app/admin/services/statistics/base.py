"""Base utilities and helpers for statistics services."""

from datetime import UTC, datetime


def calculate_rate(part: int | float, total: int | float) -> float:
    """Share of ``part`` in ``total`` as a percentage.

    Args:
        part: Numerator, e.g. approved products.
        total: Denominator, e.g. all products.

    Returns:
        Percentage rounded to 1 decimal place, 0.0 when total is 0.
    """
    if total <= 0:
        return 0.0
    return round(part / total * 100, 1)


def activity_level(products: int) -> str:
    """Bucket a region by product volume: above 50 is high, above 20 medium."""
    if products > 50:
        return "high"
    if products > 20:
        return "medium"
    return "low"


def start_of_local_day(now: datetime | None = None) -> datetime:
    """Midnight of the current server-local calendar day.

    Timestamps are stored as naive UTC, so the local midnight is converted
    to UTC and returned without tzinfo, ready for column comparisons.

    Args:
        now: Reference instant. Naive values are read as server-local time.
            Defaults to the current time.

    Returns:
        Naive UTC datetime of local midnight.
    """
    local_now = (now or datetime.now(UTC)).astimezone()
    local_midnight = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    return local_midnight.astimezone(UTC).replace(tzinfo=None)
