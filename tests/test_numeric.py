import struct
from datetime import datetime, timezone

import pytest

from parsers.qt_numeric import (
    MAC_EPOCH_OFFSET,
    be_float32,
    be_int16,
    be_int32_array,
    bit_string,
    fixed_16_16,
    format_date,
    format_matrix,
    format_number,
    frac_2_30,
    group_digits,
    mac_date,
    matrix_3x3,
    printable,
)
from movie_builder import IDENTITY_MATRIX


def test_signed_integers():
    assert be_int16(b'\xff\xfe') == -2
    assert fixed_16_16(struct.pack('>i', 0x18000)) == 1.5
    assert fixed_16_16(struct.pack('>i', -0x10000)) == -1.0
    assert frac_2_30(struct.pack('>i', 0x40000000)) == 1.0


def test_float32_is_big_endian():
    assert be_float32(struct.pack('>f', 2.5)) == 2.5


def test_identity_matrix():
    rows = matrix_3x3(IDENTITY_MATRIX)
    assert rows == [(1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)]
    assert format_matrix(rows) == "1 0 0  / 0 1 0  / 0 0 1 "


def test_matrix_needs_36_bytes():
    with pytest.raises(ValueError):
        matrix_3x3(bytes(20))


def test_int32_array():
    assert list(be_int32_array(struct.pack('>3i', 1, -2, 3))) == [1, -2, 3]
    assert len(be_int32_array(b'\x00\x01')) == 0


@pytest.mark.parametrize("value, expected", [
    (1200 / 600, '2'),
    (7, '7'),
    (0.5, '0.5'),
    (1 / 3, '0.333333333333333'),
])
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_group_digits_and_bits():
    assert group_digits(1234567) == '1,234,567'
    assert group_digits(12) == '12'
    assert bit_string(b'\x00\x00\x05') == '000000000000000000000101'


def test_mac_date_uses_explicit_epoch():
    assert mac_date(MAC_EPOCH_OFFSET) == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert format_date(0) == 'Fri Jan  1 00:00:00 1904'
    assert mac_date(100, epoch_offset=0) == datetime(1970, 1, 1, 0, 1, 40, tzinfo=timezone.utc)


def test_printable_escapes_control_and_high_bytes():
    assert printable(b'ab\x00\xa9c') == 'ab\\x00\\xa9c'
