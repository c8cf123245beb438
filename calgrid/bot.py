# calgrid/bot.py - Telegram bot showing navigable month and week calendars
import logging

from telegram import Update
from telegram.ext import ApplicationBuilder, CallbackQueryHandler, CommandHandler, ContextTypes

from calgrid import settings
from calgrid.grid import CalendarGrid
from calgrid.keyboard import build_keyboard, parse_callback, to_inline_markup
from calgrid.render import WEEKDAY_NAMES, CalendarView
from calgrid.utils import parse_yyyy_mm_dd, weekday

logger = logging.getLogger(__name__)

PREFIX = 'cal'

# Calendar of each chat is kept in chat_data['calendar'], in memory only


def grid_for_chat(context: ContextTypes.DEFAULT_TYPE, at=None) -> CalendarGrid:
    grid = context.chat_data.get('calendar')
    if grid is None:
        grid = CalendarGrid(settings.FIRST_WEEKDAY, at, settings.INCLUDE_ADJACENT_DATES)
        context.chat_data['calendar'] = grid
    elif at is not None:
        grid.go_to(at)
    return grid


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(
        "Calendar bot\nCommands:\n/month [YYYY-MM-DD] - month calendar\n/week [YYYY-MM-DD] - week calendar"
    )


async def _show(update: Update, context: ContextTypes.DEFAULT_TYPE, view_name: str):
    at = None
    if context.args:
        at = parse_yyyy_mm_dd(context.args[0])
        if at is None:
            await update.message.reply_text('Please use the date format YYYY-MM-DD.')
            return
    try:
        grid = grid_for_chat(context, at)
        view = CalendarView(grid, view_name)
        await update.message.reply_text(view.title(), reply_markup=to_inline_markup(build_keyboard(view, PREFIX)))
    except Exception:
        logger.exception('show %s calendar', view_name)
        await update.message.reply_text('Sorry, the calendar could not be shown. Please try again later.')


async def month_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await _show(update, context, 'month')


async def week_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await _show(update, context, 'week')


async def calendar_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()
    cb = parse_callback(query.data)
    if cb is None:
        return
    try:
        # picking a day leaves the chat's cursor where it is
        if cb.action == 'day':
            d = cb.date
            await query.message.reply_text(f'You picked {WEEKDAY_NAMES[weekday(d)]}, {d.isoformat()}')
            return
        view = CalendarView(grid_for_chat(context, cb.date), cb.view)
        if cb.action == 'nav':
            if cb.direction == 'next':
                view.next()
            else:
                view.previous()
        await query.edit_message_text(view.title(), reply_markup=to_inline_markup(build_keyboard(view, PREFIX)))
    except Exception:
        logger.exception('calendar_callback')
        await query.edit_message_text('Calendar error. Try /month again.')


def build_application(token: str):
    application = ApplicationBuilder().token(token).build()
    application.add_handler(CommandHandler('start', start))
    application.add_handler(CommandHandler('month', month_cmd))
    application.add_handler(CommandHandler('week', week_cmd))
    application.add_handler(CallbackQueryHandler(calendar_callback, pattern=f'^{PREFIX}:'))
    return application


def main():
    logging.basicConfig(level=settings.LOG_LEVEL)
    if not settings.BOT_TOKEN:
        raise SystemExit('BOT_TOKEN is not set')
    application = build_application(settings.BOT_TOKEN)
    logger.info('Starting bot...')
    application.run_polling()


if __name__ == '__main__':
    main()
