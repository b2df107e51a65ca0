#!/usr/bin/env python3
"""
Field Decoder - turns the bytes of one field into a scaled Python value
"""
from typing import Any, List, Optional

from ..const import FIT_UNIX_TS_DIFF, TIMESTAMP_FIELD_NUMBER
from ..profile import ByteOrder, FieldProfile, get_codec


def sanitize_string(raw: bytes) -> Optional[str]:
    """Cut at the first NUL and keep printable characters; empty means no value"""
    text = raw.split(b'\x00', 1)[0].decode('utf-8', errors='ignore')
    text = ''.join(ch for ch in text if ch.isprintable())
    return text or None


def apply_scale(value: Any, scale, offset) -> Any:
    """value / scale - offset, keeping integers exact when scale is 1"""
    if scale == 1:
        return value - offset if offset else value
    return value / scale - offset


class FieldDecoder:
    """
    Decodes single fields of data records.

    A decoded value of None means the field carried no value (sentinel,
    empty string or unknown base type) and must be dropped by the caller.
    """

    def __init__(self, garmin_timestamps: bool = False):
        self.garmin_timestamps = garmin_timestamps

    def read(self, buffer: bytes, offset: int, size: int, base_type: int,
             byte_order: ByteOrder, check_invalid: bool = True) -> Any:
        """
        Read the unscaled value of a field.

        Returns:
            int/float, str, a list for array fields, or None
        """
        codec = get_codec(base_type, byte_order)
        if codec is None:
            return None

        width = codec.base_type.size
        if codec.base_type.is_string:
            return sanitize_string(buffer[offset:offset + size])
        if size < width:
            return None

        count = size // width
        if count == 1:
            value, is_invalid = codec.read(buffer, offset)
            if check_invalid and is_invalid:
                return None
            return value

        values: List[Any] = []
        all_invalid = True
        for i in range(count):
            value, is_invalid = codec.read(buffer, offset + i * width)
            if check_invalid and is_invalid:
                values.append(None)
            else:
                all_invalid = False
                values.append(value)
        return None if all_invalid else values

    def decode(self, buffer: bytes, offset: int, size: int, base_type: int,
               byte_order: ByteOrder, field_profile: FieldProfile,
               check_invalid: bool = True) -> Any:
        """Read a catalog field and apply its scale, offset and epoch correction"""
        value = self.read(buffer, offset, size, base_type, byte_order, check_invalid)
        if value is None or isinstance(value, str):
            return value

        if isinstance(value, list):
            value = [
                None if v is None else apply_scale(v, field_profile.scale, field_profile.offset)
                for v in value
            ]
        else:
            value = apply_scale(value, field_profile.scale, field_profile.offset)

        if field_profile.number == TIMESTAMP_FIELD_NUMBER and not self.garmin_timestamps:
            if isinstance(value, list):
                value = [None if v is None else v + FIT_UNIX_TS_DIFF for v in value]
            else:
                value += FIT_UNIX_TS_DIFF
        return value
