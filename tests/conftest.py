"""
Pytest configuration and fixtures for FitFlow tests.

This module provides an in-memory FIT byte builder and shared fixtures for
decoding tests.
"""

import struct
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pytest

from fitflow.const import FIT_UNIX_TS_DIFF


# Base type code -> struct format used when encoding test values
ENCODE_FORMATS = {
    0: 'B', 1: 'b', 2: 'B', 10: 'B', 13: 'B',
    131: 'h', 132: 'H', 133: 'i', 134: 'I', 136: 'f', 137: 'd',
    139: 'H', 140: 'I', 142: 'q', 143: 'Q', 144: 'Q',
}

# Base type codes
ENUM, SINT8, UINT8, STRING, BYTE = 0, 1, 2, 7, 13
SINT16, UINT16, SINT32, UINT32, FLOAT32 = 131, 132, 133, 134, 136

# Unix start time of the sample activity, and the same instant in the FIT epoch
START_UNIX = 1_600_000_000
START_FIT = START_UNIX - FIT_UNIX_TS_DIFF

Field = Tuple[int, int, int]


class FitBuilder:
    """
    Builds FIT byte streams for tests.

    Fields are (field number, size, base type) triples. Data values are
    encoded with the base type format of their field; bytes are written
    verbatim, lists are written as arrays.
    """

    def __init__(self, header_size: int = 14, protocol_version: int = 0x20, profile_version: int = 2093):
        self.header_size = header_size
        self.protocol_version = protocol_version
        self.profile_version = profile_version
        self.records = bytearray()
        self._layouts: Dict[int, Tuple[str, List[Field], List[Field]]] = {}

    def definition(self, local: int, global_number: int, fields: Sequence[Field],
                   big_endian: bool = False,
                   developer_fields: Optional[Sequence[Field]] = None) -> 'FitBuilder':
        order = '>' if big_endian else '<'
        record_header = 0x40 | local | (0x20 if developer_fields else 0)
        self.records += bytes([record_header, 0, 1 if big_endian else 0])
        self.records += struct.pack(order + 'H', global_number)
        self.records += bytes([len(fields)])
        for triple in fields:
            self.records += bytes(triple)
        if developer_fields:
            self.records += bytes([len(developer_fields)])
            for triple in developer_fields:
                self.records += bytes(triple)
        self._layouts[local] = (order, list(fields), list(developer_fields or []))
        return self

    def data(self, local: int, *values: Any, developer: Sequence[bytes] = ()) -> 'FitBuilder':
        order, fields, developer_fields = self._layouts[local]
        self.records += bytes([local & 0x0F])
        for (_, size, base_type), value in zip(fields, values):
            self.records += encode_value(value, size, base_type, order)
        for (_, size, _), raw in zip(developer_fields, developer):
            assert len(raw) == size
            self.records += raw
        return self

    def raw(self, data: bytes) -> 'FitBuilder':
        self.records += data
        return self

    def header_bytes(self, data_size: Optional[int] = None, data_type: bytes = b'.FIT') -> bytes:
        size = len(self.records) if data_size is None else data_size
        header = struct.pack('<BBHI4s', self.header_size, self.protocol_version,
                             self.profile_version, size, data_type)
        if self.header_size == 14:
            header += b'\x00\x00'
        return header

    def build(self, data_size: Optional[int] = None, data_type: bytes = b'.FIT') -> bytes:
        return self.header_bytes(data_size, data_type) + bytes(self.records) + b'\x00\x00'


def encode_value(value: Any, size: int, base_type: int, order: str = '<') -> bytes:
    if isinstance(value, (bytes, bytearray)):
        assert len(value) == size
        return bytes(value)
    if base_type == STRING:
        encoded = value.encode('utf-8')
        return encoded[:size].ljust(size, b'\x00')
    fmt = order + ENCODE_FORMATS[base_type]
    if isinstance(value, (list, tuple)):
        return b''.join(struct.pack(fmt, v) for v in value)
    return struct.pack(fmt, value)


def degrees_to_semicircles(degrees: float) -> int:
    return int(round(degrees * 2 ** 31 / 180))


RECORD_FIELDS = [
    (253, 4, UINT32),   # timestamp
    (0, 4, SINT32),     # position_lat
    (1, 4, SINT32),     # position_long
    (2, 2, UINT16),     # altitude
    (3, 1, UINT8),      # heart_rate
    (4, 1, UINT8),      # cadence
    (5, 4, UINT32),     # distance
    (6, 2, UINT16),     # speed
    (7, 2, UINT16),     # power
    (13, 1, SINT8),     # temperature
]


def activity_builder() -> FitBuilder:
    """
    Small cycling activity: file_id, device_info, five records with gaps,
    a lap and a session.

    The second record has no heart rate, the third no cadence, distance or
    speed, the fourth no position.
    """
    builder = FitBuilder()
    builder.definition(0, 0, [(0, 1, ENUM), (1, 2, UINT16), (2, 2, UINT16), (4, 4, UINT32)])
    builder.data(0, 4, 1, 1, START_FIT)

    builder.definition(1, 23, [(253, 4, UINT32), (2, 2, UINT16), (4, 2, UINT16)])
    builder.data(1, START_FIT, 1, 1)

    builder.definition(2, 20, RECORD_FIELDS)
    lat = degrees_to_semicircles(51.5)
    lon = degrees_to_semicircles(-0.12)
    builder.data(2, START_FIT, lat, lon, (100 + 500) * 5, 118, 80, 0, 5000, 200, 20)
    builder.data(2, START_FIT + 1, lat + 100, lon - 100, (101 + 500) * 5, 0xFF, 82, 500, 5000, 210, 21)
    builder.data(2, START_FIT + 2, lat + 200, lon - 200, (102 + 500) * 5, 117, 0xFF, 0xFFFFFFFF, 0xFFFF, 220, 21)
    builder.data(2, START_FIT + 3, 0x7FFFFFFF, 0x7FFFFFFF, (103 + 500) * 5, 120, 84, 1500, 6000, 230, -2)
    builder.data(2, START_FIT + 4, lat + 400, lon - 400, (104 + 500) * 5, 121, 85, 2000, 6000, 240, -3)

    builder.definition(3, 19, [(253, 4, UINT32), (2, 4, UINT32), (9, 4, UINT32), (13, 2, UINT16)])
    builder.data(3, START_FIT + 4, START_FIT, 2000, 5500)

    builder.definition(4, 18, [(253, 4, UINT32), (2, 4, UINT32), (5, 1, ENUM), (9, 4, UINT32), (14, 2, UINT16)])
    builder.data(4, START_FIT + 4, START_FIT, 2, 2000, 5500)
    return builder


@pytest.fixture
def builder():
    """Empty FIT builder."""
    return FitBuilder()


@pytest.fixture
def activity_bytes():
    """Encoded sample activity."""
    return activity_builder().build()


@pytest.fixture
def activity_file(tmp_path, activity_bytes):
    """Sample activity written to disk."""
    path = tmp_path / "activity.fit"
    path.write_bytes(activity_bytes)
    return path
