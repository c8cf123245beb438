# calgrid/utils.py - date helpers shared by the grid and the renderers
from datetime import date, datetime
import calendar


def parse_yyyy_mm_dd(text: str):
    try:
        return datetime.strptime(text.strip(), '%Y-%m-%d').date()
    except Exception:
        return None


def to_date(value) -> date:
    """Return a fresh ``date`` for a date, datetime or YYYY-MM-DD string."""
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return date(value.year, value.month, value.day)
    if isinstance(value, str):
        parsed = parse_yyyy_mm_dd(value)
        if parsed is not None:
            return parsed
    raise ValueError(f'Cannot interpret {value!r} as a date')


def weekday(d: date) -> int:
    """Weekday number with 0 = Sunday ... 6 = Saturday."""
    return d.isoweekday() % 7


def last_day_of_month(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])


def add_months(d: date, months: int) -> date:
    """First day of the month ``months`` away from ``d``."""
    index = d.year * 12 + (d.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def days_between(start, end):
    return (end - start).days + 1
