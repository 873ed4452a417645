"""Calendar anchor resolution.

The anchor is the Sunday that week 0, day 0 of a drawing lands on.
"""

from datetime import date, datetime, timedelta
from enum import Enum

# Columns a profile calendar shows
CALENDAR_WEEKS = 53


class AnchorPolicy(str, Enum):
    """How far back the visible calendar window starts."""

    FIFTY_THREE_WEEKS = "fifty_three_weeks"
    ONE_YEAR = "one_year"


def normalize_to_sunday(day: date) -> date:
    """Round a date down to the Sunday of its week."""
    # date.weekday(): Monday=0 .. Sunday=6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def _one_year_before(day: date) -> date:
    try:
        return day.replace(year=day.year - 1)
    except ValueError:
        # Feb 29 has no counterpart in the previous year
        return day.replace(year=day.year - 1, day=28)


def resolve_anchor(
    today: date | None = None,
    policy: AnchorPolicy = AnchorPolicy.FIFTY_THREE_WEEKS,
) -> date:
    """Compute the Sunday the visible contribution window begins on.

    Args:
        today: Base date, defaults to the current local date.
        policy: Lookback policy.

    Returns:
        A Sunday on or before ``today``.
    """
    base = today or date.today()
    if policy is AnchorPolicy.ONE_YEAR:
        start = _one_year_before(base)
    else:
        start = base - timedelta(weeks=CALENDAR_WEEKS)
    return normalize_to_sunday(start)


def parse_anchor_date(text: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` date and normalize it to its Sunday.

    Raises:
        ValueError: If the text is not a valid date in that format.
    """
    try:
        parsed = datetime.strptime(text.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValueError("Please enter a valid date in YYYY-MM-DD format.") from None
    return normalize_to_sunday(parsed)


def plan_date(anchor: date, week: int, day: int) -> date:
    """Calendar date of a pixel relative to the anchor."""
    return anchor + timedelta(weeks=week, days=day)
