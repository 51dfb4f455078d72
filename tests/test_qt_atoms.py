import struct

from movie_builder import IDENTITY_MATRIX, atom, hdlr, mdhd, table, version_flags
from parsers.qt_atoms import atom_decoders, atom_names, default_registry
from qtdumper import QuickTimeDumper


def dump(data):
    dumper = QuickTimeDumper(data)
    return dumper, dumper.run()


def test_every_decoder_has_a_name():
    assert set(atom_decoders) <= set(atom_names)
    registry = default_registry()
    assert registry.lookup('moov').name(None) == "Movie container"
    assert registry.lookup('minf').name(None) == "Media information"


def test_ftyp_brands():
    data = atom('ftyp', b'qt  ' + struct.pack('>I', 0x200) + b'qt  isom')
    _, text = dump(data)
    assert ".  qt  \n" in text
    assert "Minor version: 512\n" in text
    assert "Compatible:    qt   isom\n" in text


def test_chunk_offsets_expand_sprite_samples():
    # 12 bytes of sample header, then the sample's own atom at offset 20
    media = atom('mdat', bytes(12) + atom('free'))
    stbl = atom('stbl', table('stco', (8,)))
    minf = atom('minf', hdlr(b'dhlr', b'alis') + stbl)
    moov = atom('moov', atom('trak', atom('mdia', hdlr(b'mhlr', b'sprt') + minf)))

    dumper, text = dump(media + moov)

    assert "Media data 20 bytes long.\n" in text
    assert "  1 sprt @ 8 (0x0008)\n" in text
    assert "'free' Unused space @ 20 (0x00000014) for 8 (0x00000008):" in text

    frees = [a for a in dumper.atoms if a.tag == 'free']
    assert len(frees) == 1
    assert frees[0].depth == 6


def test_chunk_offsets_for_video_not_expanded():
    stbl = atom('stbl', table('stco', (0,)))
    data = atom('mdia', hdlr(b'mhlr', b'vide') + atom('minf', stbl))
    _, text = dump(data)
    assert "  1 vide @ 0 (0x0000)\n" in text
    assert "    Not expanded\n" in text


def test_sample_durations_use_media_time_scale():
    stbl = atom('stbl', table('stts', (4, 60)))
    data = atom('mdia', mdhd(timescale=30, duration=60) + atom('minf', stbl))
    _, text = dump(data)

    assert "Time scale:        30 ticks per second\n" in text
    assert "Sample count: 4\n" in text
    assert "Duration:   60 ticks (2 seconds)\n" in text


def test_sample_size_table():
    payload = version_flags() + struct.pack('>ii', 0, 3) + struct.pack('>3i', 10, 20, 30)
    _, text = dump(atom('stsz', payload))
    assert "Version: 0\n" in text
    for index, size in enumerate((10, 20, 30), start=1):
        assert f"  {index}: sample size {size}\n" in text


def test_constant_sample_size():
    payload = version_flags() + struct.pack('>ii', 512, 100)
    _, text = dump(atom('stsz', payload))
    assert "Sample size: 512\n" in text
    assert "Samples:     100\n" in text


def test_table_longer_than_atom_is_capped():
    payload = version_flags() + struct.pack('>i', 50) + struct.pack('>i', 7)
    dumper, text = dump(atom('stss', payload) + atom('free'))
    assert "key frame sample # 7\n" in text
    assert [a.tag for a in dumper.atoms] == ['stss', 'free']


def test_sample_descriptions():
    entry = struct.pack('>I', 16) + b'jpeg' + bytes(6) + struct.pack('>h', 1)
    payload = version_flags() + struct.pack('>i', 1) + entry
    _, text = dump(atom('stsd', payload))
    assert "    format:  jpeg\n" in text
    assert "    index:   1\n" in text


def test_user_text():
    data = atom(b'\xa9nam', struct.pack('>HH', 5, 0) + b'Hello')
    _, text = dump(data)
    assert "'A9nam' Title @ 0" in text
    assert ".  Hello\n" in text


def test_video_header_outside_media_information():
    _, text = dump(atom('vmhd'))
    assert "Unhandled context (global) for VideoMediaInfo atom\n" in text


def test_video_header():
    payload = version_flags() + struct.pack('>h3H', 0x40, 0x8000, 0x8000, 0x8000)
    _, text = dump(atom('minf', atom('vmhd', payload)))
    assert "Mode:  ditherCopy\n" in text
    assert "Red:   32768\n" in text


def _wired_action(action, parm_payload):
    whic = atom('whic', struct.pack('>4i', 0, 0, 0, action))
    parm = atom('parm', parm_payload)
    return atom('actn', struct.pack('>i', 8) + bytes(8) + whic + parm)


def test_action_parameter_follows_which_type():
    data = _wired_action(1024, struct.pack('>3ih', 1, 0, 0, 7))
    _, text = dump(data)
    assert "Action type: mcActionPlay\n" in text
    assert "Type: kActionMovieSetVolume\n" in text
    assert "Value: 7\n" in text


def test_action_parameter_by_name():
    data = _wired_action(1028, struct.pack('>3i', 1, 0, 0) + b'chapter2\x00')
    _, text = dump(data)
    assert "Type: kActionMovieGoToTimeByName\n" in text
    assert "chapter2\n" in text


def test_unknown_action_parameter():
    data = _wired_action(9999, struct.pack('>3i', 1, 0, 0))
    _, text = dump(data)
    assert "Type: Unknown - 9999\n" in text
    assert "Unhandled parameter for action: Unknown - 9999\n" in text


def test_property_atom_name_depends_on_parent():
    matrix = atom(b'\x00\x00\x00\x01', version_flags() + bytes(8) + IDENTITY_MATRIX)
    _, text = dump(matrix)
    assert "'x00000001' kSpritePropertyMatrix @ 0" in text
    assert "Matrix structure:  1 0 0  / 0 1 0  / 0 0 1 \n" in text

    operand = atom('oprn', bytes(12) + atom(b'\x00\x00\x00\x01', bytes(12)))
    _, text = dump(operand)
    assert "'x00000001' @ 20 (0x00000014)" in text
    assert "Unknown 3: 0\n" in text


def test_idle_events_frequency():
    payload = version_flags() + bytes(8) + struct.pack('>I', 0xffffffff)
    _, text = dump(atom(b'\x00\x00\x00\x6b', payload))
    assert "Idle Events: off\n" in text

    payload = version_flags() + bytes(8) + struct.pack('>I', 30)
    _, text = dump(atom(b'\x00\x00\x00\x6b', payload))
    assert "Idle Events: 2 Hz\n" in text


def test_window_location_hex():
    _, text = dump(atom('WLOC', struct.pack('>hh', 10, 20)))
    assert "000a0014\n" in text


def test_edit_list_count_capped_to_atom():
    payload = version_flags() + struct.pack('>i', 50) + struct.pack('>iii', 600, 0, 0x10000)
    data = atom('moov', atom('elst', payload) + atom('free')) + atom('free')
    dumper, text = dump(data)

    assert "    Duration: 600 ticks" in text
    assert "  2\n" not in text
    assert [a.tag for a in dumper.atoms] == ['moov', 'elst', 'free', 'free']
