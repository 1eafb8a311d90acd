"""Journal query model and calendar helpers."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta


@dataclass(frozen=True)
class ByDay:
    """Entries written on one day."""

    day: int
    month: int
    year: int


@dataclass(frozen=True)
class ByMonth:
    """All entries in one month."""

    month: int
    year: int


@dataclass(frozen=True)
class ByYear:
    """All entries in one year."""

    year: int


@dataclass(frozen=True)
class ByWeek:
    """Entries in the Monday-Sunday week containing `anchor`."""

    anchor: date


Query = ByDay | ByMonth | ByYear | ByWeek


def build_query(
    day: int | None = None,
    month: int | None = None,
    year: int | None = None,
    week: bool = False,
    now: datetime | None = None,
) -> Query:
    """
    Build a query from optional date parts.

    Unset month and year default to the current ones. Priority:
    week, then day, then month, then year alone. With nothing set
    the query is today.
    """
    now = now or datetime.now()

    if week:
        if day is not None:
            raise ValueError("week and day cannot be combined")
        return ByWeek(now.date())

    target_year = year if year is not None else now.year
    target_month = month if month is not None else now.month

    if day is not None:
        return ByDay(day, target_month, target_year)
    if month is not None:
        return ByMonth(target_month, target_year)
    if year is not None:
        return ByYear(target_year)
    return ByDay(now.day, now.month, now.year)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    if month in (4, 6, 9, 11):
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return 31


def week_bounds(anchor: date) -> tuple[date, date]:
    """Monday and Sunday of the week containing `anchor`."""
    start = anchor - timedelta(days=anchor.weekday())
    return start, start + timedelta(days=6)


def week_days(anchor: date) -> list[tuple[int, int, int]]:
    """(year, month, day) for each day of the week containing `anchor`."""
    start, end = week_bounds(anchor)

    if (start.year, start.month) == (end.year, end.month):
        return [(start.year, start.month, d) for d in range(start.day, end.day + 1)]

    # Week crosses a month (and maybe year) boundary
    last = days_in_month(start.month, start.year)
    days = [(start.year, start.month, d) for d in range(start.day, last + 1)]
    days.extend((end.year, end.month, d) for d in range(1, end.day + 1))
    return days
