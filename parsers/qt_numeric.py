import struct
from datetime import datetime, timedelta, timezone

import numpy as np

# Seconds from the QuickTime epoch (1904-01-01) to the Unix epoch (1970-01-01)
MAC_EPOCH_OFFSET = 2082844800

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def be_int16(data):
    return struct.unpack('>h', data[:2])[0]


def be_uint16(data):
    return struct.unpack('>H', data[:2])[0]


def be_int32(data):
    return struct.unpack('>i', data[:4])[0]


def be_uint32(data):
    return struct.unpack('>I', data[:4])[0]


def be_uint64(data):
    return struct.unpack('>Q', data[:8])[0]


def be_float32(data):
    return struct.unpack('>f', data[:4])[0]


def fixed_16_16(data):
    return be_int32(data) / 0x10000


def frac_2_30(data):
    return be_int32(data) / 0x40000000


def be_uint32_array(data):
    if len(data) < 4:
        return np.zeros(0, dtype='>u4')
    return np.frombuffer(data, dtype='>u4', count=len(data) // 4)


def be_int32_array(data):
    if len(data) < 4:
        return np.zeros(0, dtype='>i4')
    return np.frombuffer(data, dtype='>i4', count=len(data) // 4)


def matrix_3x3(data):
    """
    Decodes a 36 byte transformation matrix into three rows of
    (16.16 fixed, 16.16 fixed, 2.30 fraction).
    """
    if len(data) < 36:
        raise ValueError(f"Insufficient data for matrix: {len(data)} bytes")
    rows = []
    for row in range(3):
        base = row * 12
        rows.append((
            fixed_16_16(data[base:base + 4]),
            fixed_16_16(data[base + 4:base + 8]),
            frac_2_30(data[base + 8:base + 12]),
        ))
    return rows


def format_matrix(rows):
    parts = []
    for a, b, c in rows:
        parts.append(f"{format_number(a)} {format_number(b)} {format_number(c)} ")
    return ' / '.join(parts)


def format_number(value):
    # integral values print without a fraction, others with 15 significant digits
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    value = float(value)
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))
    return '%.15g' % value


def group_digits(value):
    return f"{int(value):,}"


def bit_string(data):
    return format(int.from_bytes(data, 'big'), f"0{len(data) * 8}b")


def mac_date(stamp, epoch_offset=MAC_EPOCH_OFFSET):
    """Converts seconds since the file's epoch into an aware UTC datetime.

    ``epoch_offset`` is the number of seconds between the file epoch and the
    Unix epoch; it is never guessed from the host platform.
    """
    return UNIX_EPOCH + timedelta(seconds=stamp - epoch_offset)


def format_date(stamp, epoch_offset=MAC_EPOCH_OFFSET):
    return mac_date(stamp, epoch_offset).ctime()


def printable(data):
    """Renders raw bytes with control and high bytes escaped as \\xNN."""
    out = []
    for b in data:
        if b < 0x20 or b >= 0x80:
            out.append(f"\\x{b:02x}")
        else:
            out.append(chr(b))
    return ''.join(out)
