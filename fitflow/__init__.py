#!/usr/bin/env python3
"""
FitFlow - FIT binary telemetry decoder with data repair and unit normalization
"""

# Setup logging first
from .config import get_settings
from .utils import setup_logging, is_configured

if not is_configured():
    _logging_config = get_settings().logging
    setup_logging(
        level=get_settings().log_level,
        format_type=_logging_config.format,
        enable_structlog=_logging_config.structlog,
        log_file=_logging_config.file,
    )

# Exceptions
from .exceptions import (
    FitFlowError, ConfigurationError, InvalidOptionError, FitSourceError,
    FitDecodeError, MalformedHeaderError, TruncatedStreamError,
    UnsupportedHeaderVariantError, MalformedRecordError, UndefinedMessageError,
)

# Data model
from .processors import (
    UnitSystem, FixCategory, DecodeOptions,
    FileHeader, DefinitionMessage, Scalar, Series, FieldValue,
    DeveloperField, MessageTable, RawDecodeResult,
)

# Public API
from .decoder import decode, decode_bytes, decode_raw
from .profile import enum_data

__version__ = "0.1.0"

__all__ = [
    # API
    'decode', 'decode_bytes', 'decode_raw', 'enum_data',

    # Data model
    'UnitSystem', 'FixCategory', 'DecodeOptions',
    'FileHeader', 'DefinitionMessage', 'Scalar', 'Series', 'FieldValue',
    'DeveloperField', 'MessageTable', 'RawDecodeResult',

    # Exceptions
    'FitFlowError', 'ConfigurationError', 'InvalidOptionError', 'FitSourceError',
    'FitDecodeError', 'MalformedHeaderError', 'TruncatedStreamError',
    'UnsupportedHeaderVariantError', 'MalformedRecordError', 'UndefinedMessageError',
]
