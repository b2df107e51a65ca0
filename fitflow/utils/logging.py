"""
Logging for FitFlow.

Decoder modules log through structlog loggers from get_logger(). Events are
rendered either directly by structlog (console or JSON lines on stderr) or,
with structlog disabled, handed to the stdlib handlers built here so they
share the console/file setup of any host application.
"""

import json
import logging
import logging.config
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import structlog
from structlog.typing import FilteringBoundLogger, Processor


LOGGER_NAME = 'fitflow'
LOG_FORMATS = ('console', 'json')
TEXT_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Attributes every LogRecord carries; anything else came in through `extra`
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord('', 0, '', 0, '', None, None))) | {'message', 'asctime'}

_configured = False


class JSONFormatter(logging.Formatter):
    """One JSON object per line, keyed like structlog's JSON events"""

    def format(self, record: logging.LogRecord) -> str:
        event: Dict[str, Any] = {
            'timestamp': datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            'level': record.levelname.lower(),
            'logger': record.name,
            'event': record.getMessage(),
        }
        event.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES
        )
        if record.exc_info:
            event['exception'] = self.formatException(record.exc_info)
        return json.dumps(event, default=str)


class ColoredFormatter(logging.Formatter):
    """Text formatter with the level name colored for terminals"""

    COLORS = {
        'DEBUG': '\033[36m',
        'INFO': '\033[32m',
        'WARNING': '\033[33m',
        'ERROR': '\033[31m',
        'CRITICAL': '\033[35m',
    }
    RESET = '\033[0m'

    def formatMessage(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().formatMessage(record)
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().formatMessage(record)
        finally:
            record.levelname = original


def _level(level: str) -> int:
    return getattr(logging, str(level).upper(), logging.INFO)


def build_logging_config(level: str = "INFO", format_type: str = "console",
                         log_file: Optional[str] = None) -> Dict[str, Any]:
    """
    dictConfig for the fitflow logger.

    Console output always goes to stderr so decoded JSON on stdout stays
    clean. A log file, when given, is rotated at 10 MB.
    """
    numeric_level = _level(level)
    handler_names: List[str] = ['console']
    handlers: Dict[str, Any] = {
        'console': {
            'class': 'logging.StreamHandler',
            'level': numeric_level,
            'formatter': format_type,
            'stream': sys.stderr,
        },
    }
    if log_file:
        handlers['file'] = {
            'class': 'logging.handlers.RotatingFileHandler',
            'level': numeric_level,
            'formatter': 'text',
            'filename': log_file,
            'maxBytes': 10_000_000,
            'backupCount': 5,
            'encoding': 'utf-8',
        }
        handler_names.append('file')

    return {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'console': {
                'class': f'{__name__}.ColoredFormatter',
                'format': TEXT_FORMAT,
                'datefmt': DATE_FORMAT,
            },
            'json': {'class': f'{__name__}.JSONFormatter'},
            'text': {'format': TEXT_FORMAT, 'datefmt': DATE_FORMAT},
        },
        'handlers': handlers,
        'loggers': {
            LOGGER_NAME: {
                'level': numeric_level,
                'handlers': handler_names,
                'propagate': False,
            },
        },
    }


def _shared_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def setup_structlog(level: str = "INFO", format_type: str = "console") -> None:
    """Render events with structlog itself, filtered at the given level"""
    renderer: Processor
    if format_type == 'json':
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=_shared_processors() + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def setup_stdlib_structlog() -> None:
    """Hand structlog events to the stdlib handlers of the fitflow logger"""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=['event'], drop_missing=True),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def setup_logging(
    level: str = "INFO",
    format_type: str = "console",
    enable_structlog: bool = True,
    log_file: Optional[str] = None,
) -> None:
    """
    Configure FitFlow logging.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        format_type: 'console' or 'json'; anything else falls back to console
        enable_structlog: Render with structlog instead of stdlib handlers
        log_file: Optional rotating log file
    """
    global _configured

    if format_type not in LOG_FORMATS:
        format_type = 'console'

    logging.config.dictConfig(build_logging_config(level, format_type, log_file))
    if enable_structlog:
        setup_structlog(level, format_type)
    else:
        setup_stdlib_structlog()

    _configured = True


def is_configured() -> bool:
    return _configured


def get_logger(name: str, **context) -> FilteringBoundLogger:
    """
    Get a structlog logger, optionally with context bound.

    Args:
        name: Logger name, usually __name__
        **context: Key/value pairs added to every event
    """
    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger
