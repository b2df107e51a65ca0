#!/usr/bin/env python3
"""
Processors Interface - data structures shared by the stream decoder and the repair pipeline
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, FrozenSet, Iterator, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..exceptions import invalid_option
from ..profile import ByteOrder, enum_data


class UnitSystem(str, Enum):
    """Unit systems applied by the normalization step"""
    METRIC = "metric"
    STATUTE = "statute"
    RAW = "raw"


class FixCategory(str, Enum):
    """Record fields the repair pipeline can fill"""
    ALL = "all"
    CADENCE = "cadence"
    DISTANCE = "distance"
    HEART_RATE = "heart_rate"
    LAT_LON = "lat_lon"
    SPEED = "speed"
    POWER = "power"


@dataclass(frozen=True)
class FileHeader:
    """Fixed-size preamble of a FIT file"""
    header_size: int
    protocol_version: int
    profile_version: int
    data_size: int
    data_type: str
    crc: Optional[int] = None

    @property
    def data_end(self) -> int:
        """Offset one past the last record byte"""
        return self.header_size + self.data_size

    def to_dict(self) -> Dict[str, Any]:
        return {
            'header_size': self.header_size,
            'protocol_version': self.protocol_version,
            'profile_version': self.profile_version,
            'data_size': self.data_size,
            'data_type': self.data_type,
            'crc': self.crc,
        }


@dataclass(frozen=True)
class FieldDefinition:
    field_number: int
    size: int
    base_type: int


@dataclass(frozen=True)
class DeveloperFieldDefinition:
    field_number: int
    size: int
    developer_data_index: int


@dataclass(frozen=True)
class DefinitionMessage:
    """Wire layout bound to a local message type by a definition record"""
    local_message_type: int
    global_message_number: int
    byte_order: ByteOrder
    fields: Tuple[FieldDefinition, ...]
    total_size: int
    developer_fields: Tuple[DeveloperFieldDefinition, ...] = ()


@dataclass(frozen=True)
class DeveloperFieldDescription:
    """Description registered by a field_description message"""
    developer_data_index: int
    field_definition_number: int
    field_name: str
    base_type: int
    units: str = ''
    native_field_number: Optional[int] = None


@dataclass
class DeveloperField:
    """Values of one developer field in arrival order"""
    name: str
    units: str
    values: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class Scalar:
    """A field that carried exactly one sample"""
    value: Any


@dataclass(frozen=True)
class Series:
    """A field with several samples, keyed by timestamp (record) or arrival index"""
    values: Mapping[int, Any]

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __getitem__(self, key: int) -> Any:
        return self.values[key]

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def keys(self):
        return self.values.keys()

    def items(self):
        return self.values.items()

    def first(self) -> Any:
        return next(iter(self.values.values()))

    def last(self) -> Any:
        return next(reversed(self.values.values()))

    def to_list(self) -> List[Any]:
        return list(self.values.values())


FieldValue = Union[Scalar, Series]


@dataclass
class RawDecodeResult:
    """
    Message table as produced by the stream decoder, before any repair.

    messages maps message name -> field name -> key -> value. Record values
    are keyed by timestamp; record_timestamps keeps one entry per committed
    record message, duplicates included.
    """
    header: FileHeader
    messages: Dict[str, Dict[str, Dict[int, Any]]] = field(default_factory=dict)
    record_timestamps: List[int] = field(default_factory=list)
    definitions: List[DefinitionMessage] = field(default_factory=list)
    developer_data: Dict[str, DeveloperField] = field(default_factory=dict)
    garmin_timestamps: bool = False

    def count(self, message: str, field_name: str) -> int:
        """Number of samples decoded for a field, 0 when absent"""
        if message == 'record' and field_name == 'timestamp':
            return len(self.record_timestamps)
        return len(self.messages.get(message, {}).get(field_name, {}))


class MessageTable:
    """
    Decoded and repaired FIT data, keyed by message name then field name.

    Each field is either a Scalar (exactly one sample) or a Series. Record
    series are keyed by Unix timestamp (FIT timestamp with garmin_timestamps),
    every other message by arrival sequence number.
    """

    def __init__(self, header: FileHeader,
                 messages: Dict[str, Dict[str, FieldValue]],
                 developer_data: Optional[Dict[str, DeveloperField]] = None):
        self.header = header
        self.messages = messages
        self.developer_data = developer_data or {}

    def __getitem__(self, message: str) -> Dict[str, FieldValue]:
        return self.messages[message]

    def __contains__(self, message: object) -> bool:
        return message in self.messages

    def __iter__(self) -> Iterator[str]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)

    def message_names(self) -> List[str]:
        return list(self.messages)

    def get(self, message: str, field_name: str, default: Optional[FieldValue] = None) -> Optional[FieldValue]:
        return self.messages.get(message, {}).get(field_name, default)

    def first_value(self, message: str, field_name: str, default: Any = None) -> Any:
        """First sample of a field regardless of its arity"""
        value = self.get(message, field_name)
        if value is None:
            return default
        if isinstance(value, Scalar):
            return value.value
        return value.first()

    def record_timestamps(self) -> List[int]:
        """Ordered record timestamps, empty when the file has no record messages"""
        value = self.get('record', 'timestamp')
        if value is None:
            return []
        if isinstance(value, Scalar):
            return [value.value]
        return list(value.keys())

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        """Plain nested dicts: scalars stay bare, series become {key: value}"""
        result = {}
        for message, fields in self.messages.items():
            result[message] = {
                name: value.value if isinstance(value, Scalar) else dict(value.values)
                for name, value in fields.items()
            }
        if self.developer_data:
            result['developer_data'] = {
                name: {'units': dev_field.units, 'data': list(dev_field.values)}
                for name, dev_field in self.developer_data.items()
            }
        return result

    def enum_value(self, enum_type: str, message: str, field_name: str) -> str:
        value = self.first_value(message, field_name)
        if isinstance(value, list):
            value = value[0] if value else None
        return enum_data(enum_type, value)

    def manufacturer(self) -> str:
        return self.enum_value('manufacturer', 'device_info', 'manufacturer')

    def product(self) -> str:
        return self.enum_value('product', 'device_info', 'product')

    def sport(self) -> str:
        return self.enum_value('sport', 'session', 'sport')


def _parse_flag(value: Any) -> bool:
    if isinstance(value, (list, tuple)) and len(value) == 1:
        value = value[0]
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ('true', 'false'):
        return value.strip().lower() == 'true'
    raise ValueError(f"expected a boolean or 'true'/'false', got {value!r}")


def _option_text(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, str):
        return value.strip().lower()
    return value


class DecodeOptions(BaseModel):
    """Options accepted by decode()"""

    model_config = ConfigDict(extra='forbid', frozen=True)

    fix_data: Tuple[FixCategory, ...] = ()
    units: UnitSystem = UnitSystem.METRIC
    pace: bool = False
    data_every_second: bool = False
    garmin_timestamps: bool = False
    overwrite_with_dev_data: bool = False

    @field_validator('fix_data', mode='before')
    @classmethod
    def _normalize_fix_data(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, (str, Enum)):
            value = [value]
        return tuple(_option_text(v) for v in value)

    @field_validator('units', mode='before')
    @classmethod
    def _normalize_units(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)) and value:
            value = value[0]
        return _option_text(value)

    @field_validator('pace', 'data_every_second', 'garmin_timestamps', 'overwrite_with_dev_data',
                     mode='before')
    @classmethod
    def _normalize_flags(cls, value: Any) -> bool:
        return _parse_flag(value)

    @property
    def fix_categories(self) -> FrozenSet[FixCategory]:
        """Requested categories; data_every_second alone implies 'all'"""
        if not self.fix_data and self.data_every_second:
            return frozenset({FixCategory.ALL})
        return frozenset(self.fix_data)

    @classmethod
    def parse(cls, options: Union['DecodeOptions', Mapping[str, Any], None] = None) -> 'DecodeOptions':
        """Build options from a mapping, raising InvalidOptionError on bad values"""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        try:
            return cls.model_validate(dict(options))
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise invalid_option("Decode options not valid", errors=errors) from e
