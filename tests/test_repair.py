"""
Tests for the data repair pipeline.
"""

import pytest

from fitflow import Scalar, Series, decode_bytes, decode_raw
from fitflow.processors import DataRepairPipeline, DecodeOptions, correct_sign, interpolate_missing

from conftest import (
    FitBuilder, RECORD_FIELDS, SINT16, SINT32, START_FIT, START_UNIX, UINT8, UINT16, UINT32,
    degrees_to_semicircles,
)


RAW = {'units': 'raw'}


class TestSignCorrection:
    """Test two's complement reconstruction."""

    @pytest.mark.parametrize("value, bits, expected", [
        (0xFFFE, 16, -2),
        (0x7FFF - 1, 16, 0x7FFE),
        (0x8000, 16, -0x8000),
        (0xFFFFFFFF, 32, -1),
        (2 ** 64 - 5, 64, -5),
        (12, 32, 12),
    ])
    def test_unscaled(self, value, bits, expected):
        """Test widths 16, 32 and 64."""
        assert correct_sign(value, bits, 1, 0) == expected

    def test_scaled_value(self):
        """Test recovery of the raw magnitude before scaling."""
        scaled = 0xFFF6 / 100
        assert correct_sign(scaled, 16, 100, 0) == pytest.approx(-0.1)

    def test_list_and_none(self):
        """Test element-wise correction."""
        assert correct_sign([0xFFFF, None, 3], 16, 1, 0) == [-1, None, 3]

    def test_idempotent(self):
        """Test that corrected values stay corrected."""
        once = correct_sign(0xFFFE, 16, 1, 0)
        assert correct_sign(once, 16, 1, 0) == once

    def test_pipeline_uses_definition_history(self, builder):
        """Test signed fields across messages."""
        builder.definition(0, 20, [(253, 4, UINT32), (1, 4, SINT32)])
        lon = degrees_to_semicircles(-0.12)
        builder.data(0, START_FIT, lon)
        builder.data(0, START_FIT + 1, lon - 10)
        builder.definition(1, 19, [(253, 4, UINT32), (4, 4, SINT32)])
        builder.data(1, START_FIT + 1, lon)

        table = decode_bytes(builder.build(), RAW)
        assert table['record']['position_long'].to_list() == [lon, lon - 10]
        assert table['lap']['start_position_long'] == Scalar(lon)

    def test_history_outlives_slot_redefinition(self, builder):
        """Test values decoded before their slot was reassigned keep their sign."""
        builder.definition(0, 20, [(253, 4, UINT32), (9, 2, SINT16)])
        builder.data(0, START_FIT, -150)
        builder.data(0, START_FIT + 1, -250)
        builder.definition(0, 21, [(253, 4, UINT32), (0, 1, UINT8)])
        builder.data(0, START_FIT + 2, 0)

        table = decode_bytes(builder.build(), RAW)
        assert dict(table['record']['grade'].items()) == {
            START_UNIX: pytest.approx(-1.5), START_UNIX + 1: pytest.approx(-2.5),
        }


class TestInterpolation:
    """Test missing-sample interpolation."""

    def test_single_gap(self):
        """Test one missing slot between two values."""
        assert interpolate_missing({1: 118, 3: 117}, [2]) == {1: 118, 2: 117.5, 3: 117}

    def test_run_of_gaps(self):
        """Test v0 + k * (v1 - v0) / (g + 1)."""
        result = interpolate_missing({0: 0, 4: 8}, [1, 2, 3])
        assert result == {0: 0, 1: 2.0, 2: 4.0, 3: 6.0, 4: 8}

    def test_positional_not_temporal(self):
        """Test interpolation over slot positions."""
        result = interpolate_missing({10: 0, 40: 30}, [11])
        assert result[11] == 15.0

    def test_edges_clamp(self):
        """Test keys outside the known range take the edge value."""
        result = interpolate_missing({5: 50, 6: 60}, [3, 4, 7, 8])
        assert result == {3: 50, 4: 50, 5: 50, 6: 60, 7: 60, 8: 60}
        assert list(result) == [3, 4, 5, 6, 7, 8]

    def test_nothing_missing(self):
        """Test a complete series is only sorted."""
        assert list(interpolate_missing({2: 1, 1: 1}, [])) == [1, 2]


class TestDataRepairPipeline:
    """Test the pipeline on decoded streams."""

    def test_timestamps_unique_and_ascending(self, builder):
        """Test dedup and ordering of record keys."""
        builder.definition(0, 20, [(253, 4, UINT32), (3, 1, UINT8)])
        for offset in (3, 1, 1, 2, 3):
            builder.data(0, START_FIT + offset, 100 + offset)

        table = decode_bytes(builder.build(), RAW)
        keys = table.record_timestamps()
        assert keys == [START_UNIX + 1, START_UNIX + 2, START_UNIX + 3]
        assert table['record']['timestamp'] == Series({k: k for k in keys})
        assert list(table['record']['heart_rate'].keys()) == keys

    def test_data_every_second(self, builder):
        """Test densification yields t1 - t0 + 1 keys."""
        builder.definition(0, 20, [(253, 4, UINT32), (3, 1, UINT8), (4, 1, UINT8)])
        builder.data(0, START_FIT, 100, 80)
        builder.data(0, START_FIT + 4, 104, 84)
        builder.data(0, START_FIT + 9, 109, 89)

        table = decode_bytes(builder.build(), {'units': 'raw', 'data_every_second': True})
        keys = table.record_timestamps()
        assert keys == list(range(START_UNIX, START_UNIX + 10))
        assert len(table['record']['heart_rate']) == 10
        assert table['record']['heart_rate'][START_UNIX + 2] == 102.0
        assert table['record']['cadence'][START_UNIX + 2] == 0

    def test_data_every_second_skips_relative_keys(self, builder):
        """Test a synthesized key 0 does not stretch densification back to the epoch."""
        builder.definition(0, 20, [(3, 1, UINT8)])
        builder.data(0, 90)
        builder.definition(1, 20, [(253, 4, UINT32), (3, 1, UINT8)])
        builder.data(1, START_FIT, 100)
        builder.data(1, START_FIT + 3, 103)

        table = decode_bytes(builder.build(), {'units': 'raw', 'data_every_second': True})
        assert table.record_timestamps() == [0] + list(range(START_UNIX, START_UNIX + 4))
        assert table['record']['heart_rate'][0] == 90
        assert table['record']['heart_rate'][START_UNIX + 1] == 101.0

    def test_densify_keys(self):
        """Test densify on bare key lists."""
        densify = DataRepairPipeline.densify
        assert densify([]) == []
        assert densify([3, 5]) == [3, 4, 5]
        assert densify([0, 1, START_UNIX, START_UNIX + 2]) == [0, 1, START_UNIX, START_UNIX + 1, START_UNIX + 2]

    def test_fix_all(self, activity_bytes):
        """Test every category filled on the sample activity."""
        table = decode_bytes(activity_bytes, {'units': 'raw', 'fix_data': ['all']})
        record = table['record']
        t = START_UNIX

        assert record['heart_rate'][t + 1] == 117.5
        assert record['cadence'][t + 2] == 0
        assert record['distance'][t + 2] == 10.0
        assert record['speed'][t + 2] == 5.5
        lat = degrees_to_semicircles(51.5)
        assert record['position_lat'][t + 3] == lat + 300
        for name in ('heart_rate', 'cadence', 'distance', 'speed', 'position_lat', 'position_long', 'power'):
            assert list(record[name].keys()) == table.record_timestamps()

    def test_fix_single_category(self, activity_bytes):
        """Test only requested categories are filled."""
        table = decode_bytes(activity_bytes, {'units': 'raw', 'fix_data': ['heart_rate']})
        record = table['record']

        assert record['heart_rate'][START_UNIX + 1] == 117.5
        assert START_UNIX + 2 not in record['distance']
        assert START_UNIX + 2 not in record['cadence']

    def test_no_fix_by_default(self, activity_bytes):
        """Test that gaps remain without fix_data."""
        table = decode_bytes(activity_bytes, RAW)
        assert START_UNIX + 1 not in table['record']['heart_rate']

    def test_road_cycling_counts(self):
        """Test 4317 timestamps with gaps in position, distance, speed and heart rate."""
        builder = FitBuilder()
        builder.definition(0, 20, RECORD_FIELDS)
        lat = degrees_to_semicircles(45.0)
        lon = degrees_to_semicircles(7.0)
        no_position = set(range(100, 108))
        no_heart_rate = {2000}
        for i in range(4317):
            gap = i in no_position
            builder.data(
                0,
                START_FIT + i,
                0x7FFFFFFF if gap else lat + i,
                0x7FFFFFFF if gap else lon + i,
                3000,
                0xFF if i in no_heart_rate else 120 + i % 20,
                85,
                0xFFFFFFFF if gap else i * 500,
                0xFFFF if gap else 5000 + i % 7,
                200,
                20,
            )
        data = builder.build()

        raw = decode_raw(data)
        assert len(raw.record_timestamps) == 4317
        for name in ('position_lat', 'position_long', 'distance', 'speed'):
            assert raw.count('record', name) == 4309
        assert raw.count('record', 'heart_rate') == 4316

        table = decode_bytes(data, {'units': 'raw', 'fix_data': ['all']})
        for name in ('timestamp', 'position_lat', 'position_long', 'distance', 'speed', 'heart_rate'):
            assert len(table['record'][name]) == 4317
        assert table['record']['distance'][START_UNIX + 100] == pytest.approx(500.0)

    def test_singleton_collapse(self, builder):
        """Test one-sample fields become scalars."""
        builder.definition(0, 20, [(253, 4, UINT32), (3, 1, UINT8)])
        builder.data(0, START_FIT, 120)
        builder.definition(1, 21, [(253, 4, UINT32), (0, 1, UINT8)])
        builder.data(1, START_FIT, 0)
        builder.data(1, START_FIT + 1, 4)

        table = decode_bytes(builder.build(), RAW)
        assert table['record']['timestamp'] == Scalar(START_UNIX)
        assert table['record']['heart_rate'] == Scalar(120)
        assert isinstance(table['event']['event'], Series)

    def test_date_time_fields(self, activity_bytes):
        """Test start_time and time_created moved to the Unix epoch."""
        table = decode_bytes(activity_bytes, RAW)
        assert table['file_id']['time_created'] == Scalar(START_UNIX)
        assert table['session']['start_time'] == Scalar(START_UNIX)
        assert table['lap']['start_time'] == Scalar(START_UNIX)

    def test_date_time_fields_garmin(self, activity_bytes):
        """Test garmin_timestamps leaves date_time fields alone."""
        table = decode_bytes(activity_bytes, {'units': 'raw', 'garmin_timestamps': True})
        assert table['file_id']['time_created'] == Scalar(START_FIT)
        assert table.record_timestamps()[0] == START_FIT

    def test_signed_sint16_field(self, builder):
        """Test a negative sint16 with scale."""
        builder.definition(0, 20, [(253, 4, UINT32), (9, 2, SINT16)])
        builder.data(0, START_FIT, -150)
        builder.data(0, START_FIT + 1, 250)

        table = decode_bytes(builder.build(), RAW)
        assert table['record']['grade'].to_list() == [pytest.approx(-1.5), 2.5]

    def test_developer_data_not_collapsed(self):
        """Test developer data keeps its value list."""
        builder = FitBuilder()
        builder.definition(0, 206, [(0, 1, UINT8), (1, 1, UINT8), (2, 1, UINT8), (3, 8, 7), (8, 4, 7)])
        builder.data(0, 0, 0, UINT16, 'cp', 'w')
        builder.definition(1, 20, [(253, 4, UINT32)], developer_fields=[(0, 2, 0)])
        builder.data(1, START_FIT, developer=[b'\x2c\x01'])

        table = decode_bytes(builder.build(), RAW)
        assert table.developer_data['cp'].values == [300]
        assert 'developer_data' not in table.messages

    def test_pipeline_accepts_options_model(self, activity_bytes):
        """Test running the pipeline directly."""
        raw = decode_raw(activity_bytes)
        table = DataRepairPipeline(DecodeOptions(units='raw')).run(raw)
        assert table.header == raw.header
        assert len(table.record_timestamps()) == 5
