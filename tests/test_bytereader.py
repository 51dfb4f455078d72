import io

import pytest

from bytereader.bytereader import PROGRESS_STEPS, ByteReader
from bytereader.error import EndOfStream, ShortReadError


def test_sequential_and_positioned_reads():
    reader = ByteReader(b'0123456789')
    assert reader.read(3) == b'012'
    assert reader.read(2) == b'34'
    assert reader.read(4, 1) == b'1234'
    assert reader.tell() == 5
    assert reader.consumed == 9


def test_end_of_stream_when_nothing_left():
    reader = ByteReader(b'abcd')
    reader.read(4)
    with pytest.raises(EndOfStream):
        reader.read(1)
    with pytest.raises(EndOfStream):
        reader.read(4, 100)


def test_short_read_reports_sizes():
    reader = ByteReader(b'abcdef')
    with pytest.raises(ShortReadError) as info:
        reader.read(8, 2)
    assert info.value.requested == 8
    assert info.value.received == 4
    assert info.value.offset == 2


def test_accepts_file_objects_and_paths(tmp_path):
    path = tmp_path / 'movie.mov'
    path.write_bytes(b'xyz')

    with ByteReader(str(path)) as reader:
        assert reader.size == 3
        assert reader.read(3) == b'xyz'
    assert reader.handle.closed

    handle = io.BytesIO(b'qrst')
    reader = ByteReader(handle)
    reader.close()
    assert not handle.closed


def test_progress_fires_once_per_checkpoint():
    calls = []
    reader = ByteReader(bytes(1000), progress=lambda pos, total: calls.append((pos, total)))
    for _ in range(100):
        reader.read(10)

    assert len(calls) == PROGRESS_STEPS
    positions = [pos for pos, _ in calls]
    assert positions == sorted(positions)
    assert calls[-1] == (1000, 1000)


def test_progress_skips_checkpoints_crossed_in_one_read():
    calls = []
    reader = ByteReader(bytes(1000), progress=lambda pos, total: calls.append(pos))
    reader.read(5)
    assert calls == []
    reader.read(500)
    reader.read(1)
    assert calls == [505]
    assert reader.next_update > reader.consumed


def test_credit_counts_skipped_bytes():
    calls = []
    reader = ByteReader(bytes(200), progress=lambda pos, total: calls.append(pos))
    reader.credit(150)
    assert reader.consumed == 150
    assert calls == [150]
    reader.reset()
    assert reader.consumed == 0
    assert reader.tell() == 0
