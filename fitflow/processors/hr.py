#!/usr/bin/env python3
"""
Heart-rate backfill from hr messages.

hr messages carry batches of filtered_bpm samples with event times in
1/1024 s units. The first event time of a batch is a full 32-bit value
(event_timestamp); later ones may arrive packed as 12-bit deltas
(event_timestamp_12), two values per three bytes.
"""
import math
from typing import Any, Dict, List, Tuple

from ..const import RECORD_MESSAGE
from ..utils import get_logger
from .interface import RawDecodeResult


logger = get_logger(__name__)

EVENT_TIMESTAMP_SCALE = 1024.0


def unpack_event_timestamp_12(packed: List[int]) -> List[int]:
    """Unpack little-endian 12-bit values from a byte list"""
    values = []
    for n in range(len(packed) * 2 // 3):
        o = n * 3 // 2
        if n % 2 == 0:
            values.append(packed[o] | ((packed[o + 1] & 0x0F) << 8))
        else:
            values.append((packed[o] >> 4) | (packed[o + 1] << 4))
    return values


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, list):
        return value
    return [value]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def event_times(hr: Dict[str, Dict[int, Any]]) -> Tuple[List[int], List[Any]]:
    """
    Collect (event time, bpm) streams in arrival order.

    Returns:
        Tuple of raw event times (1/1024 s) and bpm samples; the two lists
        are paired by position
    """
    times: List[int] = []
    bpm: List[Any] = []
    full = hr.get('event_timestamp', {})
    packed = hr.get('event_timestamp_12', {})
    filtered = hr.get('filtered_bpm', {})

    sequences = sorted(set(full) | set(packed) | set(filtered))
    last = None
    for seq in sequences:
        if seq in full:
            for value in _as_list(full[seq]):
                if value is not None:
                    times.append(int(value))
                    last = int(value)
        elif seq in packed and last is not None:
            for delta in unpack_event_timestamp_12([v or 0 for v in _as_list(packed[seq])]):
                previous = last & 0xFFF
                last = (last & ~0xFFF) + delta
                if delta < previous:
                    last += 0x1000
                times.append(last)
        if seq in filtered:
            bpm.extend(v for v in _as_list(filtered[seq]) if v is not None)
    return times, bpm


def backfill_heart_rate(raw: RawDecodeResult) -> int:
    """
    Write per-second averaged hr samples into record.heart_rate.

    Only seconds inside the record time range are written.

    Returns:
        Number of seconds written
    """
    hr = raw.messages.get('hr')
    if not hr or not raw.record_timestamps:
        return 0

    times, bpm = event_times(hr)
    hr_timestamps = hr.get('timestamp', {})
    if not times or not bpm or not hr_timestamps:
        return 0

    anchor = hr_timestamps[min(hr_timestamps)]
    start = anchor - times[0] / EVENT_TIMESTAMP_SCALE
    lowest = min(raw.record_timestamps)
    highest = max(raw.record_timestamps)

    buckets: Dict[int, List[float]] = {}
    for event_time, sample in zip(times, bpm):
        second = _round_half_up(start + event_time / EVENT_TIMESTAMP_SCALE)
        if lowest <= second <= highest:
            total = buckets.setdefault(second, [0.0, 0])
            total[0] += sample
            total[1] += 1

    heart_rate = raw.messages.setdefault(RECORD_MESSAGE, {}).setdefault('heart_rate', {})
    for second, (total, count) in buckets.items():
        heart_rate[second] = _round_half_up(total / count)

    logger.debug("Heart rate backfilled from hr messages", seconds=len(buckets), samples=len(bpm))
    return len(buckets)
