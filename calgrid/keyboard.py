# calgrid/keyboard.py - month/week calendars as Telegram inline keyboards
from collections import namedtuple

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from calgrid.render import CalendarView, VIEWS
from calgrid.utils import parse_yyyy_mm_dd

NOOP = 'noop'
DIRECTIONS = ('prev', 'next')

CalendarCallback = namedtuple('CalendarCallback', ['prefix', 'action', 'date', 'view', 'direction'])


def _noop(text: str) -> dict:
    return {'text': text, 'callback_data': NOOP}


# returns keyboard as list of lists for InlineKeyboardMarkup

def build_keyboard(view: CalendarView, prefix: str) -> list:
    cursor = view.grid.cursor
    kb = [[_noop(h) for h in view.headers()]]

    def day_cell(d):
        text = f'*{d.day}' if d == cursor else str(d.day)
        return {'text': text, 'callback_data': f'{prefix}:day:{d.isoformat()}'}

    kb.extend(view.rows(day_cell, blank=_noop(' ')))

    iso = cursor.isoformat()
    kb.append([
        {'text': '<', 'callback_data': f'{prefix}:nav:prev:{view.view}:{iso}'},
        _noop(view.title()),
        {'text': '>', 'callback_data': f'{prefix}:nav:next:{view.view}:{iso}'},
    ])
    other = 'week' if view.view == 'month' else 'month'
    kb.append([{'text': f'{other.capitalize()} view', 'callback_data': f'{prefix}:view:{other}:{iso}'}])
    return kb


def parse_callback(data: str):
    """Decode callback data made by build_keyboard, None if it is not ours."""
    if not data or data == NOOP:
        return None
    parts = data.split(':')
    if len(parts) < 3:
        return None
    prefix, action = parts[0], parts[1]
    if action == 'day' and len(parts) == 3:
        d = parse_yyyy_mm_dd(parts[2])
        if d is None:
            return None
        return CalendarCallback(prefix, action, d, None, None)
    if action == 'nav' and len(parts) == 5:
        direction, view_name, text = parts[2], parts[3], parts[4]
        d = parse_yyyy_mm_dd(text)
        if direction not in DIRECTIONS or view_name not in VIEWS or d is None:
            return None
        return CalendarCallback(prefix, action, d, view_name, direction)
    if action == 'view' and len(parts) == 4:
        view_name = parts[2]
        d = parse_yyyy_mm_dd(parts[3])
        if view_name not in VIEWS or d is None:
            return None
        return CalendarCallback(prefix, action, d, view_name, None)
    return None


def to_inline_markup(kb: list) -> InlineKeyboardMarkup:
    keyboard = [[InlineKeyboardButton(cell['text'], callback_data=cell['callback_data']) for cell in row] for row in kb]
    return InlineKeyboardMarkup(keyboard)
