#!/usr/bin/env python3
"""
FitFlow public API - decode FIT files into repaired message tables
"""
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from .config import get_settings
from .exceptions import FitSourceError, InvalidOptionError
from .processors import (
    DataRepairPipeline, DecodeOptions, MessageStreamDecoder, MessageTable, RawDecodeResult,
    read_header,
)
from .utils import get_logger


logger = get_logger(__name__)

OptionsLike = Union[DecodeOptions, Mapping[str, Any], None]


def resolve_options(options: OptionsLike = None) -> DecodeOptions:
    """Validate options; None falls back to the configured defaults"""
    try:
        if options is None:
            return get_settings().decoder.to_options()
        return DecodeOptions.parse(options)
    except InvalidOptionError as e:
        logger.warning("Decode options rejected", **e.details)
        raise


def read_source(path: Union[str, Path]) -> bytes:
    """Read a whole FIT file into memory"""
    if path is None or str(path).strip() == '':
        raise FitSourceError("Empty FIT file path")

    file_path = Path(path)
    if not file_path.is_file():
        raise FitSourceError("FIT file does not exist", {'path': str(file_path)})
    try:
        return file_path.read_bytes()
    except OSError as e:
        raise FitSourceError("FIT file could not be read", {'path': str(file_path), 'error': str(e)}) from e


def decode_raw(data: bytes, garmin_timestamps: bool = False,
               overwrite_with_dev_data: bool = False) -> RawDecodeResult:
    """
    Decode a FIT buffer without running the repair pipeline.

    Args:
        data: Complete file contents
        garmin_timestamps: Keep timestamps in the FIT epoch
        overwrite_with_dev_data: Let developer fields replace native record fields

    Returns:
        RawDecodeResult with record timestamps in arrival order
    """
    data = bytes(data)
    header = read_header(data)
    decoder = MessageStreamDecoder(
        data, header,
        garmin_timestamps=garmin_timestamps,
        overwrite_with_dev_data=overwrite_with_dev_data,
    )
    return decoder.decode()


def decode_bytes(data: bytes, options: OptionsLike = None) -> MessageTable:
    """
    Decode and repair an in-memory FIT buffer.

    Options are validated before any byte is read.

    Raises:
        InvalidOptionError: Rejected options
        FitDecodeError: Any fatal decode problem
    """
    resolved = resolve_options(options)
    raw = decode_raw(
        data,
        garmin_timestamps=resolved.garmin_timestamps,
        overwrite_with_dev_data=resolved.overwrite_with_dev_data,
    )
    return DataRepairPipeline(resolved).run(raw)


def decode(path: Union[str, Path], options: OptionsLike = None) -> MessageTable:
    """
    Decode and repair a FIT file.

    Args:
        path: Path to the .fit file
        options: DecodeOptions or a mapping of option values

    Returns:
        MessageTable keyed by message name then field name

    Raises:
        InvalidOptionError: Rejected options
        FitSourceError: Empty path or missing file
        FitDecodeError: Any fatal decode problem
    """
    resolved = resolve_options(options)
    data = read_source(path)
    logger.debug("FIT file loaded", path=str(path), size=len(data))
    return decode_bytes(data, resolved)
