"""
Structured logging for the mailer package.

Provides a JSON formatter and an idempotent setup function that attaches a
single handler to the ``mailer`` logger. The root logger is left alone so the
host application keeps control of its own logging.
"""

import logging
import json
import sys
import traceback
from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Dict, Any, Optional, TextIO

from .config import MailerSettings, get_settings

PACKAGE_LOGGER_NAME = "mailer"

_RESERVED_RECORD_ATTRS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'message', 'taskName'
}


@dataclass
class LogEntry:
    """Structured log entry"""
    timestamp: str
    level: str
    logger_name: str
    message: str
    operation: Optional[str] = None
    duration_ms: Optional[float] = None
    status_code: Optional[int] = None
    extra: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        result = asdict(self)
        # Remove None values to reduce log size
        return {k: v for k, v in result.items() if v is not None}


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def __init__(self, include_extra: bool = True):
        super().__init__()
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON"""
        extra = {}
        if self.include_extra:
            extra = {
                key: value for key, value in record.__dict__.items()
                if key not in _RESERVED_RECORD_ATTRS
            }

        if record.exc_info:
            extra['exception'] = {
                'type': record.exc_info[0].__name__,
                'message': str(record.exc_info[1]),
                'traceback': traceback.format_exception(*record.exc_info)
            }

        log_entry = LogEntry(
            timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            level=record.levelname,
            logger_name=record.name,
            message=record.getMessage(),
            operation=extra.pop('operation', None),
            duration_ms=extra.pop('duration_ms', None),
            status_code=extra.pop('status_code', None),
            extra=extra if extra else None
        )

        return json.dumps(log_entry.to_dict(), ensure_ascii=False, default=str)


def setup_logging(
    log_level: str = "INFO",
    enable_json: bool = True,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach a single stream handler to the ``mailer`` logger.

    Calling this again replaces the handler installed by a previous call
    instead of adding a second one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper()))

    for handler in list(logger.handlers):
        if getattr(handler, '_mailer_handler', False):
            logger.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler(stream or sys.stderr)
    if enable_json:
        handler.setFormatter(StructuredFormatter())
    else:
        handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
    handler._mailer_handler = True
    logger.addHandler(handler)
    return logger


def setup_logging_from_settings(settings: Optional[MailerSettings] = None) -> logging.Logger:
    """Setup logging with values from ``MailerSettings``"""
    settings = settings or get_settings()
    return setup_logging(log_level=settings.log_level, enable_json=settings.log_json)

