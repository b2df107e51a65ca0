"""
Custom exception classes for FitFlow.

This module defines the exception hierarchy used throughout the FitFlow
decoder for better error handling and debugging. Every fatal decode path
raises a subclass of FitDecodeError; callers never receive partial tables.
"""

from typing import Optional, Any, Dict


class FitFlowError(Exception):
    """
    Base exception for all FitFlow errors.

    All custom exceptions in this package should inherit from this class.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class ConfigurationError(FitFlowError):
    """
    Raised when there are configuration-related errors.

    Examples:
    - Invalid environment variable values
    - Unreadable .env files
    """
    pass


class InvalidOptionError(FitFlowError):
    """
    Raised when decode options are rejected.

    Examples:
    - Unknown units system
    - Pace flag that is neither boolean nor 'true'/'false'
    - Unknown fix_data category
    - Unknown option key
    """
    pass


class FitSourceError(FitFlowError):
    """
    Raised when the FIT source cannot be read.

    Examples:
    - Empty file path
    - File does not exist
    """
    pass


class FitDecodeError(FitFlowError):
    """
    Base class for fatal errors raised while decoding a FIT stream.
    """
    pass


class MalformedHeaderError(FitDecodeError):
    """
    Raised when the file header is invalid.

    Examples:
    - Header size other than 12 or 14
    - Data type tag other than '.FIT'
    - Non-positive data size
    """
    pass


class TruncatedStreamError(FitDecodeError):
    """
    Raised when the stream length disagrees with the declared data size.

    Examples:
    - data_size does not match the bytes between header and file CRC
    - A record runs past the end of the data region
    """
    pass


class UnsupportedHeaderVariantError(FitDecodeError):
    """
    Raised when a compressed-timestamp record header is encountered.
    """
    pass


class MalformedRecordError(FitDecodeError):
    """
    Raised when a definition record cannot be interpreted.

    Examples:
    - Architecture byte other than 0 (little endian) or 1 (big endian)
    """
    pass


class UndefinedMessageError(FitDecodeError):
    """
    Raised when a data record references a local message type that no
    definition record has been assigned to.
    """
    pass


# Convenience functions for creating common exceptions

def invalid_option(message: str, **details) -> InvalidOptionError:
    """Create an invalid option error with details."""
    return InvalidOptionError(message, details)


def malformed_header(message: str, **details) -> MalformedHeaderError:
    """Create a malformed header error with details."""
    return MalformedHeaderError(message, details)


def truncated_stream(message: str, **details) -> TruncatedStreamError:
    """Create a truncated stream error with details."""
    return TruncatedStreamError(message, details)


def unsupported_header_variant(message: str, **details) -> UnsupportedHeaderVariantError:
    """Create an unsupported header variant error with details."""
    return UnsupportedHeaderVariantError(message, details)


def malformed_record(message: str, **details) -> MalformedRecordError:
    """Create a malformed record error with details."""
    return MalformedRecordError(message, details)


def undefined_message(message: str, **details) -> UndefinedMessageError:
    """Create an undefined message error with details."""
    return UndefinedMessageError(message, details)
