#!/usr/bin/env python3
"""
Data Repair Pipeline - turns the raw decoded table into a MessageTable.

Steps, in order:
    1. date_time epoch correction
    2. sign correction of sint16/sint32/sint64 fields
    3. heart-rate backfill from hr messages
    4. record timestamp dedup and sort
    5. optional densification to one key per second
    6. missing-sample fill and interpolation
    7. singleton collapse
    8. unit and pace normalization
"""
from numbers import Number
from typing import Any, Dict, Iterable, List, Tuple

import numpy as np

from ..const import DATE_TIME_FIELDS, DATE_TIME_MIN, DEVELOPER_DATA_MESSAGE, FIT_UNIX_TS_DIFF, RECORD_MESSAGE
from ..profile import BASE_TYPES, FieldProfile, get_message_profile
from ..utils import get_logger
from .fields import apply_scale
from .hr import backfill_heart_rate
from .interface import (
    DecodeOptions, DefinitionMessage, DeveloperField, FieldValue, FixCategory, MessageTable, RawDecodeResult,
    Scalar, Series,
)
from .units import UnitNormalizer


logger = get_logger(__name__)

# Category -> record fields it fills
CATEGORY_FIELDS = {
    FixCategory.CADENCE: ('cadence',),
    FixCategory.DISTANCE: ('distance',),
    FixCategory.HEART_RATE: ('heart_rate',),
    FixCategory.LAT_LON: ('position_lat', 'position_long'),
    FixCategory.SPEED: ('speed',),
    FixCategory.POWER: ('power',),
}


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def correct_sign(value: Any, bits: int, scale, offset) -> Any:
    """
    Reinterpret a value read as unsigned as a two's complement integer.

    The pre-scale raw magnitude is recovered from the scaled value, checked
    against the signed maximum for the width and scaled again. Values already
    in the signed range are returned unchanged.
    """
    if value is None:
        return None
    if isinstance(value, list):
        return [correct_sign(v, bits, scale, offset) for v in value]
    if not _is_number(value):
        return value

    if scale == 1:
        raw = value + offset
    else:
        raw = round((value + offset) * scale)
    if raw <= (1 << (bits - 1)) - 1:
        return value
    return apply_scale(raw - (1 << bits), scale, offset)


def interpolate_missing(series: Dict[int, Any], missing: Iterable[int]) -> Dict[int, Any]:
    """
    Fill missing keys of a series by linear interpolation.

    Interpolation runs over positions in the sorted union of known and
    missing keys: a run of g missing keys between v0 and v1 gets
    v0 + k * (v1 - v0) / (g + 1). Keys outside the known range take the
    nearest edge value.

    Returns:
        New dict sorted by key
    """
    missing = [k for k in missing if k not in series]
    known = sorted(k for k, v in series.items() if _is_number(v))
    if not missing or not known:
        return dict(sorted(series.items()))

    union = sorted(set(series) | set(missing))
    position = {key: i for i, key in enumerate(union)}
    xp = np.array([position[k] for k in known], dtype=float)
    fp = np.array([series[k] for k in known], dtype=float)
    filled = np.interp(np.array([position[k] for k in missing], dtype=float), xp, fp)

    result = dict(series)
    for key, value in zip(missing, filled):
        result[key] = float(value)
    return dict(sorted(result.items()))


class DataRepairPipeline:
    """
    Repairs a RawDecodeResult according to decode options.

    The raw table is owned by the pipeline and modified in place; the
    returned MessageTable shares no mutable state with it.
    """

    def __init__(self, options: DecodeOptions):
        self.options = options

    def run(self, raw: RawDecodeResult) -> MessageTable:
        self.fix_date_times(raw)
        self.correct_signs(raw)
        backfill_heart_rate(raw)

        timestamps = self.dedupe_timestamps(raw.record_timestamps)
        if self.options.data_every_second:
            timestamps = self.densify(timestamps)

        record = raw.messages.get(RECORD_MESSAGE)
        if record is not None:
            self.fill_missing(record, timestamps)
            for name, values in record.items():
                record[name] = dict(sorted(values.items()))

        messages = self.collapse(raw.messages, timestamps)
        UnitNormalizer(self.options.units, self.options.pace).apply(messages)

        logger.debug(
            "Repair complete",
            messages=len(messages),
            timestamps=len(timestamps),
            units=self.options.units.value,
        )
        developer_data = {
            name: DeveloperField(dev_field.name, dev_field.units, list(dev_field.values))
            for name, dev_field in raw.developer_data.items()
        }
        return MessageTable(raw.header, messages, developer_data)

    def fix_date_times(self, raw: RawDecodeResult) -> None:
        """Shift date_time fields other than field 253 to the Unix epoch"""
        if self.options.garmin_timestamps:
            return
        for message, field_name in DATE_TIME_FIELDS:
            values = raw.messages.get(message, {}).get(field_name)
            if not values:
                continue
            for key, value in values.items():
                if isinstance(value, list):
                    values[key] = [None if v is None else v + FIT_UNIX_TS_DIFF for v in value]
                elif _is_number(value):
                    values[key] = value + FIT_UNIX_TS_DIFF

    def signed_fields(self, definitions: List[DefinitionMessage]) -> Dict[Tuple[str, str], Tuple[int, FieldProfile]]:
        """(message, field) -> (bit width, catalog entry) for every signed field in the definition history"""
        found = {}
        for definition in definitions:
            profile = get_message_profile(definition.global_message_number)
            if profile is None:
                continue
            for field_def in definition.fields:
                base_type = BASE_TYPES.get(field_def.base_type)
                field_profile = profile.field(field_def.field_number)
                if base_type is None or base_type.signed_bits is None or field_profile is None:
                    continue
                found[(profile.name, field_profile.name)] = (base_type.signed_bits, field_profile)
        return found

    def correct_signs(self, raw: RawDecodeResult) -> None:
        for (message, field_name), (bits, field_profile) in self.signed_fields(raw.definitions).items():
            values = raw.messages.get(message, {}).get(field_name)
            if not values:
                continue
            for key, value in values.items():
                values[key] = correct_sign(value, bits, field_profile.scale, field_profile.offset)

    @staticmethod
    def dedupe_timestamps(timestamps: List[int]) -> List[int]:
        return sorted(set(timestamps))

    @staticmethod
    def densify(timestamps: List[int]) -> List[int]:
        """
        One key per second from the first to the last timestamp.

        Relative keys (below DATE_TIME_MIN, e.g. synthesized for records
        without a timestamp) preceding absolute ones are kept as they are;
        only the absolute span is filled.
        """
        if not timestamps:
            return []
        relative = [t for t in timestamps if t < DATE_TIME_MIN]
        if not relative or len(relative) == len(timestamps):
            return list(range(timestamps[0], timestamps[-1] + 1))

        first = timestamps[len(relative)]
        logger.warning(
            "Relative record timestamps left out of densification",
            relative=len(relative),
            first_absolute=first,
        )
        return relative + list(range(first, timestamps[-1] + 1))

    def enabled_categories(self, record: Dict[str, Dict[int, Any]], timestamp_count: int) -> List[FixCategory]:
        requested = self.options.fix_categories
        if not requested:
            return []

        enabled = []
        for category, fields in CATEGORY_FIELDS.items():
            if not all(name in record for name in fields):
                continue
            if FixCategory.ALL in requested:
                enabled.append(category)
            elif category in requested:
                if all(len(record[name]) == timestamp_count for name in fields):
                    logger.debug("Category already complete", category=category.value)
                    continue
                enabled.append(category)
        return enabled

    def fill_missing(self, record: Dict[str, Dict[int, Any]], timestamps: List[int]) -> None:
        for category in self.enabled_categories(record, len(timestamps)):
            for name in CATEGORY_FIELDS[category]:
                series = record[name]
                missing = [t for t in timestamps if t not in series]
                if category is FixCategory.CADENCE:
                    for key in missing:
                        series[key] = 0
                    record[name] = dict(sorted(series.items()))
                else:
                    record[name] = interpolate_missing(series, missing)
                logger.debug("Missing samples filled", field=name, filled=len(missing))

    @staticmethod
    def collapse(raw_messages: Dict[str, Dict[str, Dict[int, Any]]],
                 timestamps: List[int]) -> Dict[str, Dict[str, FieldValue]]:
        """Wrap every field as Scalar (one sample) or Series"""
        messages: Dict[str, Dict[str, FieldValue]] = {}
        for message, fields in raw_messages.items():
            if message == DEVELOPER_DATA_MESSAGE:
                continue
            collapsed: Dict[str, FieldValue] = {}
            if message == RECORD_MESSAGE and timestamps:
                collapsed['timestamp'] = _wrap({t: t for t in timestamps})
            for name, values in fields.items():
                if values:
                    collapsed[name] = _wrap(values)
            messages[message] = collapsed
        return messages


def _wrap(values: Dict[int, Any]) -> FieldValue:
    if len(values) == 1:
        return Scalar(next(iter(values.values())))
    return Series(dict(values))

