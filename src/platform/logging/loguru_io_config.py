"""
Loguru setup shared by the API process, scripts and tests.

- One bound logger (custom_logger) carries service_context, chain_start_time
  and call_target so every sink can print them.
- Stdlib logging (uvicorn, sqlalchemy, aiosqlite) is routed into loguru, and
  uvicorn access lines get a level from their HTTP status.
- LOG_JSON switches stdout to one serialized JSON object per line.
- DEBUG adds an hourly file sink under logs/ (TEST_LOG_DIR in tests).
"""

from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
import logging
import os
import re
import sys
from typing import TYPE_CHECKING

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR as DEFAULT_LOG_DIR
from src.platform.logging.service_context import get_service_context


LOG_DIR = os.environ.get('TEST_LOG_DIR', str(DEFAULT_LOG_DIR))

SENSITIVE_KEYWORDS = {
    'password',
    'plain_password',
    'hashed_password',
    'token',
    'secret',
}
TRUNCATE_LIMIT = 1000

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


# '127.0.0.1:50000 - "POST /api/buy-now HTTP/1.1" 409'
_ACCESS_LINE = re.compile(r' - "[A-Z]+ \S+ HTTP/[\d.]+" (?P<status>\d{3})')

# Highest floor first
_STATUS_LEVELS = (
    (500, 'CRITICAL'),
    (400, 'ERROR'),
    (300, 'WARNING'),
    (200, 'SUCCESS'),
    (100, 'INFO'),
)

# Drivers that log every statement or cursor call at DEBUG
_CHATTY_LOGGERS = {
    'aiosqlite': logging.INFO,
    'asyncio': logging.INFO,
    'sqlalchemy.engine': logging.WARNING,
}


def access_log_level(message: str) -> str | None:
    if not (match := _ACCESS_LINE.search(message)):
        return None
    status_code = int(match.group('status'))
    return next((level for floor, level in _STATUS_LEVELS if status_code >= floor), None)


def _default_extra() -> dict[str, object]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


class InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()

        level: str | int | None = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        # Walk out of the logging module so {file}:{line} shows the real caller
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        custom_logger.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)

min_log_level = 'DEBUG' if settings.DEBUG else 'INFO'


def _configure_sinks(bound: 'LoguruLogger') -> None:
    if settings.LOG_JSON:
        bound.add(sys.stdout, serialize=True, level=min_log_level, enqueue=True)
    else:
        bound.add(sys.stdout, format=io_log_format, level=min_log_level, enqueue=True)

    if not settings.DEBUG:
        return

    hour = datetime.now(timezone.utc).strftime('%Y-%m-%d_%H')
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    bound.add(
        f'{LOG_DIR}/{prefix}{hour}.log',
        format=io_log_format,
        rotation='1 hour',
        retention='7 days',
        compression='gz',
        enqueue=True,
        level=min_log_level,
    )


loguru_logger.remove()
custom_logger = loguru_logger.bind(**_default_extra())
_configure_sinks(custom_logger)

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
for _name, _level in _CHATTY_LOGGERS.items():
    logging.getLogger(_name).setLevel(_level)
