"""Date utilities for spendlog.

Pure functions for calendar-window classification. Stored dates carry no
time component, so everything here works on local calendar dates and never
shifts through a time zone.
"""

from datetime import date, datetime, timedelta

from spendlog.domain.models import IsoDate

DateLike = date | datetime | str


def parse_iso_date(value: DateLike) -> date:
    """Parse a value into a calendar date.

    Args:
        value: YYYY-MM-DD string (anything after the first 10 characters,
            such as a time portion, is ignored), date, or datetime.

    Returns:
        The calendar date. A datetime keeps its own calendar date.

    Raises:
        ValueError: If the string is not a valid ISO date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value.strip()[:10])


def today_iso(today: date) -> IsoDate:
    """Format a calendar date as YYYY-MM-DD."""
    return IsoDate(parse_iso_date(today).isoformat())


def week_start(value: DateLike) -> date:
    """Get the Monday on or before the given date.

    Sunday counts as day 7 of the week that started six days earlier.

    Args:
        value: Date to locate.

    Returns:
        Monday of that week.
    """
    d = parse_iso_date(value)
    return d - timedelta(days=d.isoweekday() - 1)


def is_same_week(value: DateLike, now: DateLike) -> bool:
    """Check whether a date falls in the same Monday-Sunday week as now."""
    return week_start(value) == week_start(now)


def is_same_month(value: DateLike, now: DateLike) -> bool:
    """Check whether a date falls in the same calendar month as now."""
    d = parse_iso_date(value)
    ref = parse_iso_date(now)
    return d.year == ref.year and d.month == ref.month
