# calgrid/web.py - demo page with a month and a week calendar, plus JSON endpoints
import logging
from urllib.parse import urlencode

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
import uvicorn

from calgrid import settings
from calgrid.grid import CalendarGrid, ConfigurationError
from calgrid.render import CalendarView

logger = logging.getLogger(__name__)

app = FastAPI()


def make_grid(date_text: str, first_weekday: int, adjacent: bool) -> CalendarGrid:
    try:
        return CalendarGrid(first_weekday, date_text or None, adjacent)
    except ConfigurationError as e:
        logger.info('rejected calendar request: %s', e)
        raise HTTPException(status_code=400, detail=str(e))


def out_of_range(e: Exception) -> HTTPException:
    logger.info('calendar request outside the supported dates: %s', e)
    return HTTPException(status_code=400, detail='Date is outside the supported range')


def _moved(grid: CalendarGrid, view_name: str, forward: bool) -> str:
    view = CalendarView(CalendarGrid(grid.first_weekday, grid.cursor, grid.include_adjacent_dates), view_name)
    if forward:
        view.next()
    else:
        view.previous()
    return view.grid.cursor.isoformat()


def calendar_html(view: CalendarView, params: dict, date_param: str) -> str:
    grid = view.grid

    def link(forward: bool) -> str:
        query = dict(params)
        query[date_param] = _moved(grid, view.view, forward)
        return '/?' + urlencode(query)

    def cell(d):
        classes = 'calendar-date'
        if d == grid.cursor:
            classes += ' current'
        return f"<div class='{classes}' data-date='{d.isoformat()}'>{d.day}</div>"

    html = f"<div class='{view.view}-calendar-control'>"
    html += f"<a class='prev' href='{link(False)}'>&lt;</a> <span>{view.title()}</span> "
    html += f"<a class='next' href='{link(True)}'>&gt;</a></div>"
    html += f"<div class='calendar {view.view}-calendar'>"
    for h in view.headers(abbr=False):
        html += f"<div class='calendar-header'>{h}</div>"
    for row in view.rows(cell, blank="<div class='calendar-date'></div>"):
        html += ''.join(row)
    html += "</div>"
    return html


@app.get('/', response_class=HTMLResponse)
async def index(month_date: str = '', week_date: str = '',
                first_weekday: int = settings.FIRST_WEEKDAY, adjacent: bool = settings.INCLUDE_ADJACENT_DATES):
    month_grid = make_grid(month_date, first_weekday, adjacent)
    week_grid = make_grid(week_date, first_weekday, adjacent)
    params = {
        'month_date': month_grid.cursor.isoformat(),
        'week_date': week_grid.cursor.isoformat(),
        'first_weekday': first_weekday,
        'adjacent': 'true' if adjacent else 'false',
    }
    html = "<html><head><title>Calendar</title></head><body>"
    # prev/next links and padding can step past date.min/date.max
    try:
        html += "<h1>Month calendar</h1>"
        html += calendar_html(CalendarView(month_grid, 'month'), params, 'month_date')
        html += "<h1>Week calendar</h1>"
        html += calendar_html(CalendarView(week_grid, 'week'), params, 'week_date')
    except (OverflowError, ValueError) as e:
        raise out_of_range(e)
    html += "</body></html>"
    return HTMLResponse(content=html)


def _payload(grid: CalendarGrid, dates: list) -> dict:
    return {
        'cursor': grid.cursor.isoformat(),
        'first_weekday': grid.first_weekday,
        'last_weekday': grid.last_weekday,
        'dates': [d.isoformat() for d in dates],
    }


@app.get('/api/month')
async def month_api(date: str = '', first_weekday: int = settings.FIRST_WEEKDAY,
                    adjacent: bool = settings.INCLUDE_ADJACENT_DATES):
    grid = make_grid(date, first_weekday, adjacent)
    try:
        return _payload(grid, grid.month_grid())
    except OverflowError as e:
        raise out_of_range(e)


@app.get('/api/week')
async def week_api(date: str = '', first_weekday: int = settings.FIRST_WEEKDAY):
    grid = make_grid(date, first_weekday, True)
    try:
        return _payload(grid, grid.week_grid())
    except OverflowError as e:
        raise out_of_range(e)


def main():
    logging.basicConfig(level=settings.LOG_LEVEL)
    logger.info('Serving calendar page on %s:%s', settings.APP_HOST, settings.APP_PORT)
    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == '__main__':
    main()
