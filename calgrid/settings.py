# calgrid/settings.py - environment configuration used across modules
import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning('Ignoring %s=%r, not an integer; using %s', name, raw, default)
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    return raw.strip().lower() not in ('0', 'false', 'no', 'off')


BOT_TOKEN = os.getenv('BOT_TOKEN')
# 0 = Sunday ... 6 = Saturday; range is checked by CalendarGrid
FIRST_WEEKDAY = _int_env('FIRST_WEEKDAY', 0)
INCLUDE_ADJACENT_DATES = _bool_env('INCLUDE_ADJACENT_DATES', True)
APP_HOST = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT = _int_env('APP_PORT', 8080)
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
