# calgrid/render.py - turn grid dates into rows of cells for any front end
from datetime import date

from calgrid.grid import CalendarGrid, ConfigurationError
from calgrid.utils import weekday

# 0 = Sunday, matching calgrid.utils.weekday
WEEKDAY_NAMES = ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday']
WEEKDAY_ABBR = [name[:2] for name in WEEKDAY_NAMES]
MONTH_NAMES = ['', 'January', 'February', 'March', 'April', 'May', 'June', 'July',
               'August', 'September', 'October', 'November', 'December']

VIEWS = ('month', 'week')


def weekday_headers(dates, abbr: bool = True) -> list:
    """Labels for the first week of ``dates``."""
    names = WEEKDAY_ABBR if abbr else WEEKDAY_NAMES
    return [names[weekday(d)] for d in list(dates)[:7]]


def render_rows(dates, render_cell, columns: int = 7) -> list:
    """Map every date through ``render_cell`` and chunk the cells into rows."""
    if columns < 1:
        raise ValueError('columns must be at least 1')
    cells = [render_cell(d) for d in dates]
    return [cells[i:i + columns] for i in range(0, len(cells), columns)]


class CalendarView:
    """A CalendarGrid shown as either a month or a week.

    Month views always lay out whole weeks. When the grid was built with
    ``include_adjacent_dates=False`` the borrowed dates are still present but
    reported as hidden, so front ends can leave those cells blank.
    """

    def __init__(self, grid: CalendarGrid, view: str = 'month'):
        if view not in VIEWS:
            raise ConfigurationError(f'Unknown view {view!r}, expected one of {VIEWS}')
        self.grid = grid
        self.view = view

    def dates(self) -> list:
        if self.view == 'month':
            return self.grid.month_grid(True)
        return self.grid.week_grid()

    def is_visible(self, d: date) -> bool:
        if self.view == 'week' or self.grid.include_adjacent_dates:
            return True
        cursor = self.grid.cursor
        return (d.year, d.month) == (cursor.year, cursor.month)

    def next(self):
        if self.view == 'month':
            self.grid.next_month()
        else:
            self.grid.next_week()

    def previous(self):
        if self.view == 'month':
            self.grid.previous_month()
        else:
            self.grid.previous_week()

    def title(self) -> str:
        cursor = self.grid.cursor
        return f'{MONTH_NAMES[cursor.month]} {cursor.year}'

    def headers(self, abbr: bool = True) -> list:
        return weekday_headers(self.dates(), abbr)

    def rows(self, render_cell, blank=None) -> list:
        """Rendered rows of the view; hidden dates become ``blank``."""
        def cell(d):
            return render_cell(d) if self.is_visible(d) else blank
        return render_rows(self.dates(), cell)
