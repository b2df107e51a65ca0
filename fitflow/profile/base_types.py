#!/usr/bin/env python3
"""
FIT base types and their invalid values.

Protocol table "FIT Base Types and Invalid Values": each base type code maps
to a wire width, a struct format and the sentinel meaning "no value". Two
decode tables exist, one per architecture byte of a definition record.

sint16, sint32 and sint64 are read as unsigned integers of the same width;
their sign is restored by the repair pipeline, which knows the scale and
offset that were applied afterwards.
"""
import struct
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple


class ByteOrder(Enum):
    """Architecture byte of a definition record"""
    LITTLE = 0
    BIG = 1

    @property
    def struct_prefix(self) -> str:
        return '<' if self is ByteOrder.LITTLE else '>'


@dataclass(frozen=True)
class BaseType:
    """Wire description of a FIT base type"""
    code: int
    name: str
    size: int
    format: Optional[str]
    invalid: int
    signed_bits: Optional[int] = None

    @property
    def is_string(self) -> bool:
        return self.format is None

    @property
    def is_float(self) -> bool:
        return self.format in ('f', 'd')


BASE_TYPES: Mapping[int, BaseType] = MappingProxyType({
    bt.code: bt for bt in (
        BaseType(0, 'enum', 1, 'B', 0xFF),
        BaseType(1, 'sint8', 1, 'b', 0x7F),
        BaseType(2, 'uint8', 1, 'B', 0xFF),
        BaseType(7, 'string', 1, None, 0x00),
        BaseType(10, 'uint8z', 1, 'B', 0x00),
        BaseType(13, 'byte', 1, 'B', 0xFF),
        BaseType(131, 'sint16', 2, 'H', 0x7FFF, signed_bits=16),
        BaseType(132, 'uint16', 2, 'H', 0xFFFF),
        BaseType(133, 'sint32', 4, 'I', 0x7FFFFFFF, signed_bits=32),
        BaseType(134, 'uint32', 4, 'I', 0xFFFFFFFF),
        BaseType(136, 'float32', 4, 'f', 0xFFFFFFFF),
        BaseType(137, 'float64', 8, 'd', 0xFFFFFFFFFFFFFFFF),
        BaseType(139, 'uint16z', 2, 'H', 0x0000),
        BaseType(140, 'uint32z', 4, 'I', 0x00000000),
        BaseType(142, 'sint64', 8, 'Q', 0x7FFFFFFFFFFFFFFF, signed_bits=64),
        BaseType(143, 'uint64', 8, 'Q', 0xFFFFFFFFFFFFFFFF),
        BaseType(144, 'uint64z', 8, 'Q', 0x0000000000000000),
    )
})

# Unsigned formats used to read the bit pattern of float fields
_BIT_PATTERN_FORMATS = {4: 'I', 8: 'Q'}


class TypeCodec:
    """Decodes one base type in one byte order"""

    def __init__(self, base_type: BaseType, byte_order: ByteOrder):
        self.base_type = base_type
        self.byte_order = byte_order
        self._value = None
        self._bits = None
        if not base_type.is_string:
            prefix = byte_order.struct_prefix
            self._value = struct.Struct(prefix + base_type.format)
            if base_type.is_float:
                self._bits = struct.Struct(prefix + _BIT_PATTERN_FORMATS[base_type.size])

    def read(self, buffer: bytes, offset: int) -> Tuple[Any, bool]:
        """
        Read one value at offset.

        Returns:
            (value, is_invalid) where is_invalid tells whether the raw value
            equals the base type's sentinel
        """
        value = self._value.unpack_from(buffer, offset)[0]
        if self._bits is not None:
            raw = self._bits.unpack_from(buffer, offset)[0]
        else:
            raw = value
        return value, raw == self.base_type.invalid

    def __repr__(self) -> str:
        return f"TypeCodec({self.base_type.name}, {self.byte_order.name.lower()})"


def _build_tables() -> Mapping[ByteOrder, Mapping[int, TypeCodec]]:
    return MappingProxyType({
        order: MappingProxyType({code: TypeCodec(bt, order) for code, bt in BASE_TYPES.items()})
        for order in ByteOrder
    })


BASE_TYPE_TABLES = _build_tables()


def get_codec(base_type_code: int, byte_order: ByteOrder) -> Optional[TypeCodec]:
    """Look up the codec for a base type code, None when the code is unknown"""
    return BASE_TYPE_TABLES[byte_order].get(base_type_code)
