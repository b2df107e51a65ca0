"""
Tests for single-field decoding and the base type tables.
"""

import struct

import pytest

from fitflow.const import FIT_UNIX_TS_DIFF
from fitflow.processors.fields import FieldDecoder, apply_scale, sanitize_string
from fitflow.profile import BASE_TYPES, ByteOrder, FieldProfile, get_codec


LITTLE = ByteOrder.LITTLE
BIG = ByteOrder.BIG


class TestBaseTypes:
    """Test the base type tables."""

    def test_both_byte_orders_cover_every_type(self):
        """Test that each order has a codec for every base type."""
        for code in BASE_TYPES:
            assert get_codec(code, LITTLE) is not None
            assert get_codec(code, BIG) is not None

    def test_unknown_base_type(self):
        """Test lookup of an unknown code."""
        assert get_codec(99, LITTLE) is None

    def test_signed_types_read_unsigned(self):
        """Test that sint16/32/64 carry their width for sign correction."""
        assert BASE_TYPES[131].signed_bits == 16
        assert BASE_TYPES[133].signed_bits == 32
        assert BASE_TYPES[142].signed_bits == 64
        value, invalid = get_codec(131, LITTLE).read(struct.pack('<h', -2), 0)
        assert value == 0xFFFE
        assert invalid is False

    def test_float_sentinel_bit_pattern(self):
        """Test float sentinels are compared on raw bits."""
        _, invalid = get_codec(136, LITTLE).read(b'\xff\xff\xff\xff', 0)
        assert invalid is True
        value, invalid = get_codec(136, BIG).read(struct.pack('>f', 1.5), 0)
        assert value == 1.5
        assert invalid is False


class TestFieldDecoder:
    """Test FieldDecoder."""

    def setup_method(self):
        """Set up test fixtures."""
        self.decoder = FieldDecoder()
        self.speed = FieldProfile(6, 'speed', 1000, 0, 'm/s')
        self.altitude = FieldProfile(2, 'altitude', 5, 500, 'm')
        self.heart_rate = FieldProfile(3, 'heart_rate', 1, 0, 'bpm')
        self.timestamp = FieldProfile(253, 'timestamp', 1, 0, 's')

    def test_scale_and_offset(self):
        """Test value = raw / scale - offset."""
        data = struct.pack('<H', 3000)
        assert self.decoder.decode(data, 0, 2, 132, LITTLE, self.altitude) == 100.0
        assert self.decoder.decode(struct.pack('<H', 5500), 0, 2, 132, LITTLE, self.speed) == 5.5

    def test_integer_kept_when_scale_is_one(self):
        """Test that unscaled values stay integers."""
        value = self.decoder.decode(b'\x78', 0, 1, 2, LITTLE, self.heart_rate)
        assert value == 120
        assert isinstance(value, int)

    def test_big_endian(self):
        """Test decoding with the big-endian table."""
        data = struct.pack('>H', 5500)
        assert self.decoder.decode(data, 0, 2, 132, BIG, self.speed) == 5.5

    def test_sentinel_dropped(self):
        """Test that invalid values decode to None."""
        assert self.decoder.decode(b'\xff', 0, 1, 2, LITTLE, self.heart_rate) is None
        assert self.decoder.decode(b'\xff\xff', 0, 2, 132, LITTLE, self.speed) is None

    def test_sentinel_check_disabled(self):
        """Test raw byte streams keep sentinel values."""
        assert self.decoder.decode(b'\xff', 0, 1, 2, LITTLE, self.heart_rate, check_invalid=False) == 255

    def test_timestamp_epoch(self):
        """Test FIT epoch to Unix epoch conversion of field 253."""
        data = struct.pack('<I', 1000)
        assert self.decoder.decode(data, 0, 4, 134, LITTLE, self.timestamp) == 1000 + FIT_UNIX_TS_DIFF

    def test_garmin_timestamps(self):
        """Test that garmin_timestamps keeps the FIT epoch."""
        decoder = FieldDecoder(garmin_timestamps=True)
        data = struct.pack('<I', 1000)
        assert decoder.decode(data, 0, 4, 134, LITTLE, self.timestamp) == 1000

    def test_unknown_base_type_skipped(self):
        """Test unknown base types decode to None."""
        assert self.decoder.decode(b'\x01\x02', 0, 2, 99, LITTLE, self.speed) is None

    def test_array_field(self):
        """Test a field holding several values."""
        data = struct.pack('<3H', 1000, 0xFFFF, 3000)
        assert self.decoder.decode(data, 0, 6, 132, LITTLE, self.speed) == [1.0, None, 3.0]

    def test_array_all_invalid(self):
        """Test an array with every element invalid is dropped."""
        data = struct.pack('<2H', 0xFFFF, 0xFFFF)
        assert self.decoder.decode(data, 0, 4, 132, LITTLE, self.speed) is None

    def test_offset_within_buffer(self):
        """Test reading at a non-zero offset."""
        data = b'\x00\x00' + struct.pack('<H', 2000)
        assert self.decoder.decode(data, 2, 2, 132, LITTLE, self.speed) == 2.0


class TestStrings:
    """Test string sanitizing."""

    def test_cut_at_nul(self):
        """Test that text after the first NUL is dropped."""
        assert sanitize_string(b'Edge\x00junk') == 'Edge'

    def test_non_printable_removed(self):
        """Test that control characters are removed."""
        assert sanitize_string(b'ab\x07c\n') == 'abc'

    def test_empty_is_invalid(self):
        """Test that an empty string means no value."""
        assert sanitize_string(b'\x00\x00\x00') is None

    def test_string_field(self):
        """Test a string field through the decoder."""
        name = FieldProfile(3, 'field_name', 1, 0, '')
        data = b'Power\x00\x00\x00'
        assert FieldDecoder().decode(data, 0, 8, 7, LITTLE, name) == 'Power'


@pytest.mark.parametrize("value, scale, offset, expected", [
    (10, 1, 0, 10),
    (10, 1, 3, 7),
    (3000, 5, 500, 100.0),
    (5500, 1000, 0, 5.5),
])
def test_apply_scale(value, scale, offset, expected):
    """Test the scale/offset transform."""
    assert apply_scale(value, scale, offset) == expected
