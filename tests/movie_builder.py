import struct

IDENTITY_MATRIX = struct.pack('>9i', 0x10000, 0, 0, 0, 0x10000, 0, 0, 0, 0x40000000)


def atom(tag, payload=b''):
    if isinstance(tag, str):
        tag = tag.encode('latin-1')
    return struct.pack('>I', 8 + len(payload)) + tag + payload


def version_flags(version=0, flags=0):
    return bytes([version]) + flags.to_bytes(3, 'big')


def mvhd(timescale=600, duration=1200, next_track=2):
    payload = version_flags()
    payload += struct.pack('>IIII', 0, 0, timescale, duration)
    payload += struct.pack('>IH', 0x10000, 0x100) + bytes(10)
    payload += IDENTITY_MATRIX
    payload += struct.pack('>7I', 0, 0, 0, 0, 0, 0, next_track)
    return atom('mvhd', payload)


def mdhd(timescale=30, duration=60):
    payload = version_flags()
    payload += struct.pack('>IIII', 0, 0, timescale, duration)
    payload += struct.pack('>hH', 0, 0)
    return atom('mdhd', payload)


def hdlr(component, sub_component, name=b''):
    payload = version_flags()
    payload += component + sub_component + b'appl'
    payload += bytes(8)
    payload += bytes([len(name)]) + name
    return atom('hdlr', payload)


def table(tag, *rows):
    payload = version_flags() + struct.pack('>i', len(rows))
    for row in rows:
        payload += struct.pack(f'>{len(row)}i', *row)
    return atom(tag, payload)


def elst(duration, start=0, rate=0x10000):
    payload = version_flags() + struct.pack('>iiii', 1, duration, start, rate)
    return atom('elst', payload)
