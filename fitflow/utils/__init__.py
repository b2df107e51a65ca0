"""
FitFlow Utils Package
"""
from .logging import (
    JSONFormatter,
    ColoredFormatter,
    build_logging_config,
    setup_logging,
    setup_structlog,
    is_configured,
    get_logger,
)

__all__ = [
    'JSONFormatter',
    'ColoredFormatter',
    'build_logging_config',
    'setup_logging',
    'setup_structlog',
    'is_configured',
    'get_logger',
]
