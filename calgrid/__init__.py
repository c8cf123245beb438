# calgrid - calendar month/week grids with a configurable first weekday
from calgrid.grid import CalendarGrid, ConfigurationError, walk_to_weekday
from calgrid.render import CalendarView, render_rows, weekday_headers

__all__ = [
    'CalendarGrid',
    'CalendarView',
    'ConfigurationError',
    'render_rows',
    'walk_to_weekday',
    'weekday_headers',
]
