import logging
import re
import struct
from collections import Counter
from dataclasses import dataclass

from bytereader.bytereader import ByteReader
from bytereader.error import EmptyTagError, EndOfStream, ShortReadError
from parsers.qt_atoms import default_registry
from parsers.qt_context import ROOT_TAG, ContextStack
from parsers.qt_numeric import (
    MAC_EPOCH_OFFSET,
    be_int32,
    be_uint16,
    be_uint32,
    be_uint64,
    bit_string,
    format_date,
    format_matrix,
    format_number,
    group_digits,
    matrix_3x3,
    printable,
)
from parsers.qt_registry import AtomRegistry

logger = logging.getLogger(__name__)

INDENT_STR = '.  '
PREVIEW_BYTES = 16
UNKNOWN_SECONDS = '---'

_CONTROL_BYTES = re.compile(r'[\x00-\x1f]')
_NON_WORD = re.compile(r'[^\w \d_]', re.ASCII)


@dataclass
class AtomRecord:
    tag: str
    name: str
    offset: int
    length: int
    depth: int
    handled: bool


def sanitize_tag(raw):
    """
    Turns the four raw tag bytes into a dispatch key: tags holding control
    bytes become 'x' + hex, spaces become underscores and any other non word
    character is replaced by its two digit hex value ('\\xa9nam' -> 'A9nam').
    """
    key = raw.decode('latin-1')
    if _CONTROL_BYTES.search(key):
        key = 'x' + raw.hex()
    key = key.replace(' ', '_')
    return _NON_WORD.sub(lambda m: f"{ord(m.group(0)):02X}", key)


def unpack_header(data):
    """Splits an 8 byte atom header into (length, sanitized tag)."""
    length, raw = struct.unpack('>I4s', data[:8])
    return length, sanitize_tag(raw)


def atom_header_line(tag, name, pos, length):
    label = f"{name} " if name else ''
    return (f"'{tag}' {label}@ {group_digits(pos)} (0x{pos:08x}) "
            f"for {group_digits(length)} (0x{length:08x}):")


class Report:
    """Append-only text with an indent prefix applied at every line start."""

    def __init__(self, indent_str=INDENT_STR):
        self.indent_str = indent_str
        self.indent = ''
        self.chunks = []
        self._line_start = False

    def append(self, *parts):
        text = ''.join(str(part) for part in parts)
        if not text:
            return
        if self._line_start:
            self.chunks.append(self.indent)
        self.chunks.append(text)
        self._line_start = text.endswith('\n')

    def push_indent(self):
        self.indent += self.indent_str

    def pop_indent(self):
        self.indent = self.indent[:len(self.indent) - len(self.indent_str)]

    @property
    def text(self):
        return ''.join(self.chunks)

    def __str__(self):
        return self.text


class QuickTimeDumper:
    def __init__(self, source, progress=None, registry=None, extra_atoms=None,
                 indent_str=INDENT_STR, epoch_offset=MAC_EPOCH_OFFSET):
        if isinstance(source, ByteReader):
            self.reader = source
            if progress is not None:
                self.reader.progress = progress
        else:
            self.reader = ByteReader(source, progress)

        self.registry = default_registry() if registry is None else registry.copy()
        if extra_atoms:
            self.registry.update(extra_atoms)

        self.indent_str = indent_str
        self.epoch_offset = epoch_offset
        self._running = False
        self._reset()

    def _reset(self):
        self.report = Report(self.indent_str)
        self.context = ContextStack()
        self.atoms = []
        self.unknown_atoms = Counter()
        self.reader.reset()

    def register(self, tag, decode=None, name=None):
        if self._running:
            raise RuntimeError(f"cannot register '{tag}' while a dump is running")
        return self.registry.register(tag, decode, name)

    def run(self):
        self._reset()
        self._running = True
        self.context.push(ROOT_TAG)
        pos = 0
        try:
            while True:
                pos, end_of_list = self._describe_atom(pos)
                if end_of_list:
                    break
        except EndOfStream:
            pass
        except (ShortReadError, EmptyTagError) as e:
            e.partial_report = self.result()
            raise
        finally:
            self._running = False
        return self.result()

    def result(self):
        return self.report.text

    def close(self):
        self.reader.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    # Traversal

    def _read_rest(self, length, header_size, pos):
        try:
            return self.reader.read(length)
        except EndOfStream:
            # the header stops where the stream does
            raise ShortReadError(header_size, header_size - length, pos)

    def _read_header(self, pos):
        head = self.reader.read(4, pos)
        if be_uint32(head) == 0:
            return 0, None
        return unpack_header(head + self._read_rest(4, 8, pos))

    def _describe_atom(self, pos):
        length, tag = self._read_header(pos)
        if length == 0:
            self.append("End entry\n")
            return pos + 4, True
        if not tag:
            raise EmptyTagError(pos)

        # decoders see the 64-bit size field as part of a header starting 8 bytes later
        body_pos = pos
        if length == 1:
            length = be_uint64(self._read_rest(8, 16, pos))
            body_pos = pos + 8

        if length < body_pos - pos + 8:
            self.append(f"'{tag}' corrupt length {length} @ {group_digits(pos)} (0x{pos:08x})\n")
            logger.error("Corrupt atom '%s' with length %d at %s (0x%08x)", tag, length, group_digits(pos), pos)
            return pos + 8, True

        entry = self.registry.lookup(tag)
        name = entry.name(self) if entry is not None and entry.name else ''
        handled = entry is not None and entry.decode is not None

        self.append(atom_header_line(tag, name, pos, length), "\n")
        self.atoms.append(AtomRecord(tag, name, pos, length, self.context.depth - 1, handled))

        body_length = length - (body_pos - pos)
        self.report.push_indent()
        try:
            if handled:
                self.context.push(tag)
                try:
                    entry.decode(self, body_pos, body_length)
                finally:
                    self.context.pop()
            else:
                self._unhandled(tag, body_pos, body_length)
        finally:
            self.report.pop_indent()
        return pos + length, False

    def _unhandled(self, tag, pos, length):
        self.append("   Unhandled: length = ", group_digits(length), "\n")
        if length > 8:
            self.dump_block(pos + 8, min(PREVIEW_BYTES, length - 8))

        self.unknown_atoms[tag] += 1
        if self.unknown_atoms[tag] == 1:
            logger.warning("Unknown atom '%s' %s (0x%08x) long at %s (0x%08x)",
                           tag, group_digits(length), length, group_digits(pos), pos)

    def decode_one(self, pos):
        return self._describe_atom(pos)[0]

    def decode_count(self, pos, count):
        for _ in range(count):
            pos, end_of_list = self._describe_atom(pos)
            if end_of_list:
                break
        return pos

    def decode_until(self, pos, end):
        while pos < end:
            pos, end_of_list = self._describe_atom(pos)
            if end_of_list:
                break
        return pos

    def decode_children(self, pos, length):
        return self.decode_until(pos + 8, pos + length)

    def decode_list(self, pos, length):
        self.show_version_flags()
        self.read(4)
        return self.decode_until(pos + 16, pos + length)

    # Reading and output helpers used by atom decoders

    def read(self, length, offset=None):
        return self.reader.read(length, offset)

    def credit(self, length):
        self.reader.credit(length)

    def remaining(self, pos, length):
        return pos + length - self.reader.tell()

    def append(self, *parts):
        self.report.append(*parts)

    def get_4char(self):
        return self.read(4).decode('latin-1')

    def ticks_to_seconds(self, duration, scale=None):
        if scale is None:
            scale = self.context.find_value('timescale')
        if not scale:
            return UNKNOWN_SECONDS
        return format_number(duration / scale)

    def show_version_flags(self, width=10):
        self.append(f"{'Version:':<{width}}", self.read(1)[0], "\n")
        self.append(f"{'Flags:':<{width}}", bit_string(self.read(3)), "\n")

    def show_date(self, stamp=None):
        if stamp is None:
            stamp = self.read(4)
        return format_date(int.from_bytes(stamp, 'big'), self.epoch_offset)

    def show_matrix(self, data=None):
        if data is None:
            data = self.read(36)
        return format_matrix(matrix_3x3(data))

    def show_rgb(self):
        self.append("Red:   ", be_uint16(self.read(2)), "\n")
        self.append("Green: ", be_uint16(self.read(2)), "\n")
        self.append("Blue:  ", be_uint16(self.read(2)), "\n")

    def show_unknown(self):
        for index in range(1, 4):
            self.append(f"Unknown {index}: ", group_digits(be_int32(self.read(4))), "\n")

    def show_bogus(self):
        self.show_version_flags()
        self.append("Reserved\n")
        self.read(8)

    def dump_block(self, pos, length):
        while length > 0:
            chunk = min(length, PREVIEW_BYTES)
            self.append(printable(self.read(chunk, pos)), "\n")
            pos += chunk
            length -= chunk

    def dump_text(self, pos, length):
        if length <= 0:
            self.append("\n")
            return
        text = self.read(length, pos).decode('latin-1').rstrip('\x00')
        self.append(text, "\n")

    def dump_unicode_text(self, pos, length):
        if length <= 0:
            self.append("\n")
            return
        text = self.read(length, pos).decode('utf-16-le', errors='replace').rstrip('\x00')
        self.append(text, "\n")
