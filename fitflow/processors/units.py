#!/usr/bin/env python3
"""
Unit normalization for session, lap, record and segment_lap messages
"""
from typing import Any, Callable, Dict, Iterable, Optional

from ..const import (
    ALTITUDE_FIELDS, DISTANCE_FIELDS, METERS_TO_FEET, METERS_TO_KILOMETERS, METERS_TO_MILES,
    MPS_TO_KPH, MPS_TO_MPH, POSITION_FIELDS, SEMICIRCLES_TO_DEGREES, SPEED_FIELDS,
    TEMPERATURE_FIELDS, UNIT_MESSAGES,
)
from ..utils import get_logger
from .interface import FieldValue, Scalar, Series, UnitSystem


logger = get_logger(__name__)

Converter = Callable[[Any], Any]


def celsius_to_fahrenheit(value):
    return round(value * 9 / 5 + 32, 2)


def meters_to_miles(value):
    return round(value * METERS_TO_MILES, 2)


def meters_to_kilometers(value):
    return round(value * METERS_TO_KILOMETERS, 2)


def meters_to_feet(value):
    return round(value * METERS_TO_FEET, 1)


def semicircles_to_degrees(value):
    return round(value * SEMICIRCLES_TO_DEGREES, 5)


def speed_converter(factor: float, pace: bool) -> Converter:
    """m/s to km/h or mph, or to minutes per km / per mile when pace is set"""
    if pace:
        def convert(value):
            if value == 0:
                return 0
            return round(60 / factor / value, 3)
    else:
        def convert(value):
            return round(value * factor, 3)
    return convert


def converters_for(units: UnitSystem, pace: bool) -> Dict[str, Converter]:
    """Field name -> converter for one unit system"""
    table: Dict[str, Converter] = {}

    def assign(fields: Iterable[str], converter: Converter) -> None:
        for name in fields:
            table[name] = converter

    if units is UnitSystem.STATUTE:
        assign(TEMPERATURE_FIELDS, celsius_to_fahrenheit)
        assign(DISTANCE_FIELDS, meters_to_miles)
        assign(ALTITUDE_FIELDS, meters_to_feet)
        assign(SPEED_FIELDS, speed_converter(MPS_TO_MPH, pace))
        assign(POSITION_FIELDS, semicircles_to_degrees)
    elif units is UnitSystem.METRIC:
        assign(DISTANCE_FIELDS, meters_to_kilometers)
        assign(SPEED_FIELDS, speed_converter(MPS_TO_KPH, pace))
        assign(POSITION_FIELDS, semicircles_to_degrees)
    return table


def _convert(value: Any, converter: Converter) -> Any:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, list):
        return [_convert(v, converter) for v in value]
    return converter(value)


def convert_field(value: FieldValue, converter: Converter) -> FieldValue:
    if isinstance(value, Scalar):
        return Scalar(_convert(value.value, converter))
    return Series({key: _convert(v, converter) for key, v in value.items()})


class UnitNormalizer:
    """Applies one unit system to a message table in place"""

    def __init__(self, units: UnitSystem = UnitSystem.METRIC, pace: bool = False):
        self.units = units
        self.pace = pace
        self.converters = converters_for(units, pace)

    def apply(self, messages: Dict[str, Dict[str, FieldValue]],
              message_names: Optional[Iterable[str]] = None) -> int:
        """
        Convert known fields of the unit messages.

        Returns:
            Number of fields converted
        """
        if not self.converters:
            return 0

        converted = 0
        for message in message_names or UNIT_MESSAGES:
            fields = messages.get(message)
            if not fields:
                continue
            for name, converter in self.converters.items():
                if name in fields:
                    fields[name] = convert_field(fields[name], converter)
                    converted += 1

        logger.debug("Units applied", units=self.units.value, pace=self.pace, fields=converted)
        return converted
