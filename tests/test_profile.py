"""
Tests for the schema catalog and enumerated labels.
"""

import pytest

from fitflow import decode_bytes
from fitflow.profile import (
    ENUM_DATA, MESSAGE_NUMBERS, enum_data, get_message_profile, get_message_profile_by_name,
)

from conftest import START_FIT, UINT8, UINT32


class TestMessageCatalog:
    """Test catalog lookups."""

    def test_record_profile(self):
        """Test scale, offset and units of record fields."""
        record = get_message_profile(20)
        assert record.name == 'record'
        altitude = record.fields[2]
        assert (altitude.name, altitude.scale, altitude.offset, altitude.units) == ('altitude', 5, 500, 'm')
        assert record.fields[6].scale == 1000

    def test_lookup_by_name(self):
        """Test name to number mapping."""
        assert MESSAGE_NUMBERS['session'] == 18
        assert get_message_profile_by_name('hr').number == 132

    def test_unknown_message(self):
        """Test unknown numbers and names."""
        assert get_message_profile(0xFF00) is None
        assert get_message_profile_by_name('nope') is None

    def test_catalog_is_read_only(self):
        """Test the enum tables cannot be mutated."""
        with pytest.raises(TypeError):
            ENUM_DATA['sport'][2] = 'Riding'


class TestEnumData:
    """Test enum label resolution."""

    @pytest.mark.parametrize("enum_type, value, expected", [
        ('manufacturer', 1, 'Garmin'),
        ('product', 1, 'hrm1'),
        ('sport', 2, 'Cycling'),
        ('sport', 1, 'Running'),
        ('event', 0, 'timer'),
    ])
    def test_known_values(self, enum_type, value, expected):
        """Test profile labels."""
        assert enum_data(enum_type, value) == expected

    def test_unknown_value(self):
        """Test values missing from the profile."""
        assert enum_data('sport', 200) == 'unknown'
        assert enum_data('no_such_type', 1) == 'unknown'
        assert enum_data('sport', None) == 'unknown'

    def test_list_value(self):
        """Test element-wise resolution."""
        assert enum_data('sport', [1, 2, 200]) == ['Running', 'Cycling', 'unknown']

    def test_activity_summary(self, activity_bytes):
        """Test manufacturer, product and sport of the sample activity."""
        table = decode_bytes(activity_bytes, {'units': 'raw'})
        assert table.manufacturer() == 'Garmin'
        assert table.product() == 'hrm1'
        assert table.sport() == 'Cycling'

    def test_summary_without_messages(self, builder):
        """Test files lacking device_info and session."""
        builder.definition(0, 20, [(253, 4, UINT32), (3, 1, UINT8)])
        builder.data(0, START_FIT, 100)

        table = decode_bytes(builder.build(), {'units': 'raw'})
        assert table.manufacturer() == 'unknown'
        assert table.sport() == 'unknown'
