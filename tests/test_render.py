from datetime import date

import pytest

from calgrid.grid import CalendarGrid, ConfigurationError
from calgrid.render import CalendarView, render_rows, weekday_headers


def test_render_rows_chunks_by_week():
    dates = CalendarGrid(0, date(2024, 2, 1)).month_grid()
    rows = render_rows(dates, lambda d: d.day)
    assert len(rows) == 5
    assert rows[0] == [28, 29, 30, 31, 1, 2, 3]
    assert rows[-1] == [25, 26, 27, 28, 29, 1, 2]


def test_render_rows_partial_last_row():
    rows = render_rows(CalendarGrid(0, date(2024, 2, 1)).month_grid(False), str)
    assert [len(r) for r in rows] == [7, 7, 7, 7, 1]


def test_render_rows_rejects_zero_columns():
    with pytest.raises(ValueError):
        render_rows([], str, columns=0)


def test_weekday_headers_follow_first_weekday():
    dates = CalendarGrid(1, date(2024, 2, 1)).week_grid()
    assert weekday_headers(dates) == ['Mo', 'Tu', 'We', 'Th', 'Fr', 'Sa', 'Su']
    assert weekday_headers(dates, abbr=False)[0] == 'Monday'


def test_unknown_view():
    with pytest.raises(ConfigurationError):
        CalendarView(CalendarGrid(0, date(2024, 2, 1)), 'year')


def test_month_view_hides_adjacent_dates_when_disabled():
    view = CalendarView(CalendarGrid(0, date(2024, 2, 1), include_adjacent_dates=False))
    rows = view.rows(lambda d: d.day, blank='')
    assert len(view.dates()) == 35
    assert rows[0] == ['', '', '', '', 1, 2, 3]
    assert rows[-1][-2:] == ['', '']


def test_month_view_hides_adjacent_dates_in_last_supported_month():
    view = CalendarView(CalendarGrid(6, date(9999, 12, 31), include_adjacent_dates=False))
    rows = view.rows(lambda d: d.day, blank='')
    assert rows[0] == ['', '', '', '', 1, 2, 3]
    assert rows[-1] == [25, 26, 27, 28, 29, 30, 31]


def test_month_view_shows_adjacent_dates_by_default():
    view = CalendarView(CalendarGrid(0, date(2024, 2, 1)))
    assert view.is_visible(date(2024, 1, 28))
    assert view.rows(lambda d: d.day)[0][0] == 28


def test_week_view_shows_every_date():
    view = CalendarView(CalendarGrid(0, date(2024, 2, 29), include_adjacent_dates=False), 'week')
    assert all(view.is_visible(d) for d in view.dates())
    assert view.rows(lambda d: d.day) == [[25, 26, 27, 28, 29, 1, 2]]


def test_view_navigation_dispatches_by_view():
    month = CalendarView(CalendarGrid(0, date(2024, 1, 31)), 'month')
    month.next()
    assert month.grid.cursor == date(2024, 2, 1)
    month.previous()
    assert month.grid.cursor == date(2024, 1, 1)

    week = CalendarView(CalendarGrid(0, date(2024, 1, 31)), 'week')
    week.next()
    assert week.grid.cursor == date(2024, 2, 7)
    week.previous()
    assert week.grid.cursor == date(2024, 1, 31)


def test_title():
    view = CalendarView(CalendarGrid(0, date(2024, 2, 29)))
    assert view.title() == 'February 2024'
