"""
FitFlow Processors - FIT stream decoding and data repair
"""

from .interface import (
    UnitSystem, FixCategory,
    FileHeader, FieldDefinition, DeveloperFieldDefinition, DefinitionMessage,
    DeveloperFieldDescription, DeveloperField,
    Scalar, Series, FieldValue,
    RawDecodeResult, MessageTable, DecodeOptions,
)
from .header import read_header
from .fields import FieldDecoder
from .stream import MessageStreamDecoder
from .repair import DataRepairPipeline, correct_sign, interpolate_missing
from .units import UnitNormalizer
from .hr import backfill_heart_rate, unpack_event_timestamp_12

__all__ = [
    # Data model
    'UnitSystem', 'FixCategory',
    'FileHeader', 'FieldDefinition', 'DeveloperFieldDefinition', 'DefinitionMessage',
    'DeveloperFieldDescription', 'DeveloperField',
    'Scalar', 'Series', 'FieldValue',
    'RawDecodeResult', 'MessageTable', 'DecodeOptions',

    # Decoding
    'read_header', 'FieldDecoder', 'MessageStreamDecoder',

    # Repair
    'DataRepairPipeline', 'correct_sign', 'interpolate_missing',
    'UnitNormalizer', 'backfill_heart_rate', 'unpack_event_timestamp_12',
]
