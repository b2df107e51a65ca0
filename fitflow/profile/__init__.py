#!/usr/bin/env python3
"""
Profile module - static FIT schema catalog, base types and enumerations
"""

from .base_types import ByteOrder, BaseType, TypeCodec, BASE_TYPES, BASE_TYPE_TABLES, get_codec
from .messages import (
    FieldProfile, MessageProfile, MESSAGE_PROFILE, MESSAGE_NUMBERS,
    get_message_profile, get_message_profile_by_name
)
from .enums import ENUM_DATA, enum_data

__all__ = [
    # Base types
    'ByteOrder', 'BaseType', 'TypeCodec', 'BASE_TYPES', 'BASE_TYPE_TABLES', 'get_codec',

    # Schema catalog
    'FieldProfile', 'MessageProfile', 'MESSAGE_PROFILE', 'MESSAGE_NUMBERS',
    'get_message_profile', 'get_message_profile_by_name',

    # Enumerations
    'ENUM_DATA', 'enum_data',
]
