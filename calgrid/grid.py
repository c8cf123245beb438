# calgrid/grid.py - month and week date grids around a movable cursor
import logging
from datetime import date, timedelta

from calgrid.utils import add_months, days_between, last_day_of_month, to_date, weekday

logger = logging.getLogger(__name__)

ONE_DAY = timedelta(days=1)
ONE_WEEK = timedelta(days=7)


class ConfigurationError(ValueError):
    """Raised when a calendar is built with invalid settings."""


def walk_to_weekday(start: date, target: int, step: int) -> list:
    """Step from ``start`` one day at a time until a date falls on ``target``.

    Every stepped date is collected in walk order, the last one being the
    first date whose weekday (0 = Sunday) equals ``target``. ``start`` itself
    is never included, so the result is empty when it already falls on
    ``target``. At most six steps are taken.
    """
    dates = []
    d = start
    while weekday(d) != target:
        d = d + step * ONE_DAY
        dates.append(d)
    return dates


class CalendarGrid:
    """Cursor over the date in view plus month/week grid queries.

    Weekdays are numbered 0 = Sunday ... 6 = Saturday. Grid queries only read
    the cursor; the navigation methods are the only writers. An instance is
    not locked, callers sharing one between threads must serialize access.
    """

    def __init__(self, first_weekday: int = 0, initial_date=None, include_adjacent_dates: bool = True):
        if isinstance(first_weekday, bool) or not isinstance(first_weekday, int):
            raise ConfigurationError(f'Week day must be an integer, got {first_weekday!r}')
        if not 0 <= first_weekday <= 6:
            raise ConfigurationError('Week day must be between 0 and 6.')
        self._first_weekday = first_weekday
        self._last_weekday = 6 if first_weekday == 0 else first_weekday - 1
        self._include_adjacent_dates = bool(include_adjacent_dates)
        if initial_date is None:
            initial_date = date.today()
        try:
            self._cursor = to_date(initial_date)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

    def __repr__(self):
        return (f'CalendarGrid(first_weekday={self._first_weekday}, '
                f'initial_date={self._cursor.isoformat()!r}, '
                f'include_adjacent_dates={self._include_adjacent_dates})')

    @property
    def first_weekday(self) -> int:
        return self._first_weekday

    @property
    def last_weekday(self) -> int:
        return self._last_weekday

    @property
    def include_adjacent_dates(self) -> bool:
        return self._include_adjacent_dates

    @property
    def cursor(self) -> date:
        """The date currently in view."""
        return self._cursor

    # queries

    def month_grid(self, include_adjacent_dates=None) -> list:
        """Dates of the cursor's month, padded to whole weeks by default.

        ``include_adjacent_dates=None`` falls back to the value given at
        construction.
        """
        if include_adjacent_dates is None:
            include_adjacent_dates = self._include_adjacent_dates
        first = self._cursor.replace(day=1)
        last = last_day_of_month(first.year, first.month)
        month_dates = [first + i * ONE_DAY for i in range(days_between(first, last))]
        if not include_adjacent_dates:
            return month_dates
        return self._start_of_week(first) + month_dates + self._end_of_week(last)

    def week_grid(self) -> list:
        """The seven dates of the cursor's week."""
        return self._start_of_week(self._cursor) + [self._cursor] + self._end_of_week(self._cursor)

    def _start_of_week(self, d: date) -> list:
        dates = walk_to_weekday(d, self._first_weekday, -1)
        dates.reverse()
        return dates

    def _end_of_week(self, d: date) -> list:
        return walk_to_weekday(d, self._last_weekday, 1)

    # navigation

    def next_month(self):
        self._move_to(add_months(self._cursor, 1))

    def previous_month(self):
        self._move_to(add_months(self._cursor, -1))

    def next_week(self):
        self._move_to(self._cursor + ONE_WEEK)

    def previous_week(self):
        self._move_to(self._cursor - ONE_WEEK)

    def go_to(self, value):
        """Move the cursor to a date, datetime or YYYY-MM-DD string."""
        self._move_to(to_date(value))

    def today(self):
        self._move_to(date.today())

    def _move_to(self, d: date):
        logger.debug('cursor %s -> %s', self._cursor, d)
        self._cursor = d
