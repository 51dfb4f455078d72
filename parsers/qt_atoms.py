"""
Decoders for the atom types the dumper recognizes out of the box.

Every decoder is called as ``decoder(dumper, pos, length)`` after the atom's
8 byte header has been read, so sequential ``dumper.read`` calls start at the
payload. Decoders for container atoms recurse through ``dumper.decode_*``.
"""

import logging
import re

from parsers.qt_numeric import (
    be_float32,
    be_int16,
    be_int32,
    be_uint16,
    be_uint32,
    bit_string,
    be_int32_array,
    fixed_16_16,
    format_number,
    group_digits,
)
from parsers.qt_registry import AtomRegistry
from parsers.qt_tables import (
    ParamShape,
    graphics_modes,
    movie_controller_actions,
    param_shapes,
    play_mode_flags,
    transfer_modes,
    wired_actions,
)

logger = logging.getLogger(__name__)

SAMPLE_OWNER_TYPES = re.compile(r'sprt|moov')


# Containers

def dump_container(dumper, pos, length):
    dumper.decode_children(pos, length)


def dump_atom_list(dumper, pos, length):
    dumper.decode_list(pos, length)


def dump_prefixed_container(dumper, pos, length):
    # three unknown longs precede the child atoms
    dumper.show_unknown()
    dumper.decode_children(pos + 12, length - 12)


def dump_list(dumper, pos, length):
    dumper.append("Id:    ", be_int32(dumper.read(4)), "\n")
    dumper.append("Items: ", be_int32(dumper.read(4)), "\n")
    dumper.decode_children(pos + 8, length - 8)


def dump_sean(dumper, pos, length):
    dumper.decode_until(pos + 20, pos + length)


def dump_nothing(dumper, pos, length):
    pass


# Movie, track and media headers

def dump_ftyp(dumper, pos, length):
    dumper.append(dumper.get_4char(), "\n")
    if dumper.remaining(pos, length) < 4:
        return
    dumper.append("Minor version: ", be_uint32(dumper.read(4)), "\n")
    count = dumper.remaining(pos, length) // 4
    if count > 0:
        brands = [dumper.get_4char() for _ in range(count)]
        dumper.append("Compatible:    ", ' '.join(brands), "\n")


def _read_times(dumper, version):
    size = 8 if version == 1 else 4
    created = dumper.show_date(dumper.read(size))
    modified = dumper.show_date(dumper.read(size))
    return created, modified, size


def dump_mvhd(dumper, pos, length):
    version = dumper.read(1)[0]
    if version not in (0, 1):
        raise ValueError(f"Unsupported mvhd version: {version}")
    dumper.append("Version:       ", version, "\n")
    dumper.append("Flags:         ", bit_string(dumper.read(3)), "\n")

    created, modified, size = _read_times(dumper, version)
    dumper.append("Created:       ", created, "\n")
    dumper.append("Modified:      ", modified, "\n")

    timescale = be_int32(dumper.read(4))
    dumper.context.set_on_parent('timescale', timescale)
    dumper.append(f"Time scale:    {timescale} ticks per second\n")

    duration = int.from_bytes(dumper.read(size), 'big')
    seconds = dumper.ticks_to_seconds(duration, timescale)
    dumper.append(f"Duration:      {duration} ticks ({seconds} seconds)\n")

    # short headers stop after the duration
    if dumper.remaining(pos, length) < 80:
        return

    dumper.append("Pref rate:     ", format_number(fixed_16_16(dumper.read(4))), "\n")
    dumper.append("Pref vol:      ", be_uint16(dumper.read(2)), "\n")
    dumper.append("Reserved\n")
    dumper.read(10)
    dumper.append("Matrix:        ", dumper.show_matrix(), "\n")
    dumper.append("Preview start: ", be_uint32(dumper.read(4)), "\n")
    dumper.append("Preview time:  ", be_uint32(dumper.read(4)), "\n")
    dumper.append("Poster loc:    ", be_uint32(dumper.read(4)), "\n")
    dumper.append("Sel start:     ", be_uint32(dumper.read(4)), "\n")
    dumper.append("Sel time:      ", be_uint32(dumper.read(4)), "\n")
    dumper.append("Time now:      ", be_uint32(dumper.read(4)), "\n")
    next_track_id = be_uint32(dumper.read(4))
    dumper.append(f"Next track: {next_track_id}\n")
    dumper.context.set_on_parent('tracks', next_track_id - 1)


def dump_mdhd(dumper, pos, length):
    version = dumper.read(1)[0]
    if version not in (0, 1):
        raise ValueError(f"Unsupported mdhd version: {version}")
    dumper.append("Version:  ", version, "\n")
    dumper.append("Flags:    ", bit_string(dumper.read(3)), "\n")

    created, modified, size = _read_times(dumper, version)
    dumper.append("Creation time:     ", created, "\n")
    dumper.append("Modification time: ", modified, "\n")

    timescale = be_int32(dumper.read(4))
    dumper.context.set_on_parent('timescale', timescale)
    dumper.append(f"Time scale:        {timescale} ticks per second\n")

    duration = int.from_bytes(dumper.read(size), 'big')
    seconds = dumper.ticks_to_seconds(duration, timescale)
    dumper.append(f"Duration:          {duration} ticks ({seconds} seconds)\n")
    dumper.append("Locale:            ", be_int16(dumper.read(2)), "\n")
    dumper.append("Quality:           ", bit_string(dumper.read(2)), "\n")


def dump_tkhd(dumper, pos, length):
    version = dumper.read(1)[0]
    if version not in (0, 1):
        raise ValueError(f"Unsupported tkhd version: {version}")
    dumper.append("Version:  ", version, "\n")
    dumper.append("Flags:    ", bit_string(dumper.read(3)), "\n")

    created, modified, size = _read_times(dumper, version)
    dumper.append("Creation time:     ", created, "\n")
    dumper.append("Modification time: ", modified, "\n")
    dumper.append("Track ID:          ", be_uint32(dumper.read(4)), "\n")
    dumper.append("Reserved\n")
    dumper.read(4)

    duration = int.from_bytes(dumper.read(size), 'big')
    seconds = dumper.ticks_to_seconds(duration)
    dumper.append(f"Duration:          {duration} ticks ({seconds} seconds)\n")
    dumper.append("Reserved\n")
    dumper.read(8)
    dumper.append("Layer:             ", be_int16(dumper.read(2)), "\n")
    dumper.append("Alternate group:   ", be_int16(dumper.read(2)), "\n")
    dumper.append("Volume:            ", be_uint16(dumper.read(2)), "\n")
    dumper.append("Reserved\n")
    dumper.read(2)
    dumper.append("Matrix structure:  ", dumper.show_matrix(), "\n")
    dumper.append("Track width:       ", format_number(fixed_16_16(dumper.read(4))), "\n")
    dumper.append("Track height:      ", format_number(fixed_16_16(dumper.read(4))), "\n")


def dump_hdlr(dumper, pos, length):
    dumper.show_version_flags()

    component = dumper.get_4char()
    dumper.append("Component type:     ", component, "\n")
    sub_component = dumper.get_4char()
    dumper.append("Component sub type: ", sub_component, "\n")

    dumper.context.set_on_parent('HdlrCmpt', component)
    dumper.context.set_on_parent('HdlrSubCmpt', sub_component)

    dumper.append("Manufacturer:       ", dumper.get_4char(), "\n")
    dumper.append("Flags:              ", bit_string(dumper.read(4)), "\n")
    dumper.append("Mask:               ", bit_string(dumper.read(4)), "\n")

    left = dumper.remaining(pos, length)
    if left <= 0:
        return
    name_length = min(dumper.read(1)[0], left - 1)
    name = dumper.read(name_length).decode('latin-1') if name_length > 0 else ''
    dumper.append("Name:               ", name, "\n")


def dump_vmhd(dumper, pos, length):
    parent = dumper.context.parent_tag()
    if parent != 'minf':
        dumper.append(f"Unhandled context ({parent}) for VideoMediaInfo atom\n")
        return

    dumper.show_version_flags()
    mode = be_int16(dumper.read(2))
    if mode in transfer_modes:
        dumper.append("Mode:  ", transfer_modes[mode], "\n")
    else:
        dumper.append("Mode:  unknown - ", mode, "\n")
    dumper.show_rgb()


def dump_gmin(dumper, pos, length):
    dumper.show_version_flags()
    mode = be_int16(dumper.read(2))
    dumper.append("Graphics mode: ", graphics_modes.get(mode, f"unknown - {mode}"), "\n")
    dumper.show_rgb()
    dumper.append("Balance:  ", be_int16(dumper.read(2)), "\n")
    dumper.append("Reserved\n")
    dumper.read(2)


def dump_dcom(dumper, pos, length):
    dumper.append("Compression type: ", dumper.get_4char(), "\n")


def dump_alis(dumper, pos, length):
    dumper.append("File #", group_digits(be_int32(dumper.read(4))), "\n")


# Sample tables

def _entry_table(dumper, pos, length, columns):
    """Reads an entry count and at most that many rows of big-endian longs."""
    entries = be_int32(dumper.read(4))
    fit = max(0, dumper.remaining(pos, length)) // (4 * columns)
    count = max(0, min(entries, fit))
    if count < entries:
        logger.debug("Entry table at %d claims %d entries, %d fit", pos, entries, count)
    table = be_int32_array(dumper.read(count * 4 * columns))
    return entries, table.reshape(-1, columns)


def dump_elst(dumper, pos, length):
    dumper.show_version_flags()
    items = be_int32(dumper.read(4))
    fit = max(0, dumper.remaining(pos, length)) // 12
    if items > fit:
        logger.debug("Edit list at %d claims %d entries, %d fit", pos, items, fit)
        items = fit
    for index in range(1, items + 1):
        dumper.append(f"  {index}\n")
        duration = be_int32(dumper.read(4))
        seconds = dumper.ticks_to_seconds(duration)
        dumper.append(f"    Duration: {duration} ticks ({seconds} seconds)\n")
        dumper.append("    Start:    ", be_int32(dumper.read(4)), "\n")
        dumper.append("    Rate:     ", format_number(fixed_16_16(dumper.read(4))), "\n")


def dump_stts(dumper, pos, length):
    dumper.show_version_flags()
    entries, table = _entry_table(dumper, pos, length, 2)
    digits = len(str(entries))
    scale = dumper.context.find_value('timescale')

    for index, (count, duration) in enumerate(table, start=1):
        seconds = dumper.ticks_to_seconds(int(duration), scale)
        dumper.append(f"  {index:>{digits}}\n")
        dumper.append("    Sample count: ", int(count), "\n")
        dumper.append(f"    Duration:   {int(duration)} ticks ({seconds} seconds)\n")


def dump_stss(dumper, pos, length):
    dumper.show_version_flags()
    entries, table = _entry_table(dumper, pos, length, 1)
    digits = len(str(entries))

    for index, (sample,) in enumerate(table, start=1):
        dumper.append(f"  {index:>{digits}} key frame sample # {int(sample)}\n")


def dump_stsc(dumper, pos, length):
    dumper.show_version_flags()
    entries, table = _entry_table(dumper, pos, length, 3)
    digits = len(str(entries))

    for index, (first_chunk, per_chunk, desc_id) in enumerate(table, start=1):
        dumper.append(f"  {index:>{digits}}\n")
        dumper.append("    first chunk: ", int(first_chunk), "\n")
        dumper.append("    samp per chunk: ", int(per_chunk), "\n")
        dumper.append("    samp desc id:   ", int(desc_id), "\n")


def dump_stsh(dumper, pos, length):
    dumper.show_version_flags(width=9)
    entries, table = _entry_table(dumper, pos, length, 2)
    digits = len(str(entries))

    for index, (frame_diff, sync) in enumerate(table, start=1):
        dumper.append(f"{index:>{digits}} frame diff samp # {int(frame_diff)}"
                      f" => sync samp # {int(sync)}\n")


def dump_stsz(dumper, pos, length):
    dumper.show_version_flags(width=9)
    sample_size = be_int32(dumper.read(4))

    if sample_size:
        entries = be_int32(dumper.read(4))
        dumper.append(f"Sample size: {sample_size}\n")
        dumper.append(f"Samples:     {entries}\n")
        return

    entries, table = _entry_table(dumper, pos, length, 1)
    digits = len(str(entries))
    for index, (size,) in enumerate(table, start=1):
        dumper.append(f"  {index:>{digits}}: sample size {int(size)}\n")


def dump_stsd(dumper, pos, length):
    dumper.show_version_flags()
    entries = be_int32(dumper.read(4))
    digits = len(str(entries))
    end = pos + length
    entry_pos = pos + 16

    for index in range(1, entries + 1):
        if entry_pos + 16 > end:
            break
        size = be_uint32(dumper.read(4, entry_pos))
        dumper.append(f"  {index:>{digits}}\n")
        dumper.append("    format:  ", dumper.get_4char(), "\n")
        dumper.append("    Reserved\n")
        dumper.read(6)
        dumper.append("    index:   ", be_int16(dumper.read(2)), "\n")
        if size < 16:
            break
        entry_pos += size


def dump_stco(dumper, pos, length):
    frame = dumper.context.find('HdlrSubCmpt', '^(?!alis)')
    dumper.show_version_flags()

    entries = be_int32(dumper.read(4))
    digits = len(str(entries))
    kind = frame.attributes['HdlrSubCmpt'] if frame is not None else ''
    table_pos = pos + 16

    for index in range(1, entries + 1):
        # chunk samples live elsewhere in the file so every read is positioned
        offset = be_int32(dumper.read(4, table_pos))
        table_pos += 4
        dumper.append(f"  {index:>{digits}} ")
        dumper.append(f"{kind} @ {offset} (0x{offset:04x})\n")
        if SAMPLE_OWNER_TYPES.search(kind):
            dumper.decode_one(offset + 12)
        elif kind == 'vide':
            dumper.append("    Not expanded\n")
        else:
            logger.debug("stco doesn't handle %s chunks", kind)


# Media payloads

def dump_mdat(dumper, pos, length):
    dumper.append(f"Media data {group_digits(length - 8)} bytes long.\n")
    dumper.credit(length - 8)


def dump_imda(dumper, pos, length):
    dumper.append(f"Image data {group_digits(length - 8)} bytes long\n")
    dumper.credit(length - 8)


def dump_free(dumper, pos, length):
    dumper.append(f"Padding = {length} bytes\n")
    dumper.credit(length - 8)


# Text

def dump_user_text(dumper, pos, length):
    # text size and language code precede the string
    dumper.dump_text(pos + 12, length - 12)


def dump_text(dumper, pos, length):
    dumper.dump_text(pos + 8, length - 8)


def dump_name(dumper, pos, length):
    if dumper.context.parent_tag() == 'imag':
        dumper.show_unknown()
        dumper.dump_unicode_text(pos + 20, length - 20)
    else:
        dumper.dump_text(pos + 8, length - 8)


def dump_WLOC(dumper, pos, length):
    dumper.append(dumper.read(length - 8).hex(), "\n")


def dump_enabled(dumper, pos, length):
    dumper.append("Enabled: ", dumper.read(1)[0], "\n")


# Wired sprites

def dump_actn(dumper, pos, length):
    action = movie_controller_actions.get(be_int32(dumper.read(4)), 'unknown')
    dumper.append(f"Action type: {action}\n")
    dumper.append("Reserved\n")
    dumper.decode_children(pos + 12, length - 12)


def dump_evnt(dumper, pos, length):
    dumper.append("Event type:     ", dumper.get_4char(), "\n")
    dumper.read(4)
    dumper.append("Reserved\n")
    dumper.read(4)
    dumper.decode_children(pos + 12, length - 12)


def dump_oper(dumper, pos, length):
    dumper.append("Operation: ", dumper.get_4char(), "\n")
    dumper.append("Operands:  ", be_int32(dumper.read(4)), "\n")
    dumper.append("Reserved\n")
    dumper.read(4)
    dumper.decode_children(pos + 12, length - 12)


def dump_whic(dumper, pos, length):
    dumper.show_unknown()
    action = be_int32(dumper.read(4))
    action_name = wired_actions.get(action, f"Unknown - {action}")
    dumper.append(f"Type: {action_name}\n")
    # the sibling 'parm' atoms decode their payload against this action
    dumper.context.set_on_parent('ActionType', action_name)


def dump_parm(dumper, pos, length):
    param_id = be_int32(dumper.read(4))
    dumper.append("ID:        ", param_id, "\n")
    dumper.append("Unknown 2: ", be_int32(dumper.read(4)), "\n")
    dumper.append("Unknown 3: ", be_int32(dumper.read(4)), "\n")

    action = dumper.context.find_value('ActionType', default='')
    shape = param_shapes.get(action)

    if shape in (ParamShape.ATOMS, ParamShape.TIME):
        dumper.decode_children(pos + 12, length - 12)
    elif shape is ParamShape.FLAGS:
        dumper.append("Flags: ", bit_string(dumper.read(4)), "\n")
    elif shape is ParamShape.FIXED:
        dumper.append("Value: ", format_number(fixed_16_16(dumper.read(4))), "\n")
    elif shape is ParamShape.FIXED_FIXED_BOOL:
        dumper.append("Value 1:    ", format_number(fixed_16_16(dumper.read(4))), "\n")
        dumper.append("Value 2:    ", format_number(fixed_16_16(dumper.read(4))), "\n")
        dumper.append("Bool value: ", dumper.read(1)[0], "\n")
    elif shape is ParamShape.LONG:
        dumper.append("Value: ", group_digits(be_int32(dumper.read(4))), "\n")
    elif shape is ParamShape.NAME:
        dumper.dump_text(pos + 20, length - 20)
    elif shape is ParamShape.QUAD_FLOAT:
        if param_id == 1:
            dumper.append("ID: ", be_int32(dumper.read(4)), "\n")
        else:
            dumper.append("value: ", format_number(be_float32(dumper.read(4))), "\n")
    elif shape is ParamShape.RGN_HANDLE:
        for label in ("Size:   ", "Top:    ", "Left:   ", "Bottom: ", "Right:  "):
            dumper.append(label, be_int16(dumper.read(2)), "\n")
    elif shape is ParamShape.SHORT:
        dumper.append("Value: ", be_int16(dumper.read(2)), "\n")
    else:
        dumper.append(f"Unhandled parameter for action: {action}\n")
        logger.info("Unhandled parameter for action: %s", action)


def dump_sprite_track_variable(dumper, pos, length):
    dumper.context.set_on_parent('ActionType', 'kOperandSpriteTrackVariable')
    dumper.show_unknown()
    dumper.decode_children(pos + 12, length - 12)


def dump_imrg(dumper, pos, length):
    dumper.show_unknown()
    dumper.append("X:         ", format_number(fixed_16_16(dumper.read(4))), "\n")
    dumper.append("Y:         ", format_number(fixed_16_16(dumper.read(4))), "\n")


def dump_track_index(dumper, pos, length):
    dumper.show_unknown()
    dumper.append("Track index: ", be_int32(dumper.read(4)), "\n")


def dump_spid(dumper, pos, length):
    dumper.show_unknown()
    dumper.append("Sprite id: ", be_int32(dumper.read(4)), "\n")


def dump_mmdr(dumper, pos, length):
    dumper.show_bogus()
    dumper.append("Unknown:  ", dumper.get_4char(), "\n")
    dumper.append("Unknown:  ", be_int32(dumper.read(4)), "\n")
    dumper.decode_until(pos + 28, pos + length)


# Sprite and sprite track properties

def dump_x00000001(dumper, pos, length):
    if dumper.context.parent_tag() == 'oprn':
        dumper.show_unknown()
        dumper.decode_children(pos + 12, length - 12)
    else:
        dumper.show_bogus()
        dumper.append("Matrix structure:  ", dumper.show_matrix(), "\n")


def name_x00000001(dumper):
    # names are resolved before the atom's own frame is pushed
    if dumper.context.top_tag() == 'oprn':
        return ''
    return 'kSpritePropertyMatrix'


def dump_x00000002(dumper, pos, length):
    dumper.show_unknown()
    dumper.append("Value:     ", group_digits(be_int16(dumper.read(2))), "\n")


def _bogus_then(label, reader):
    def dump(dumper, pos, length):
        dumper.show_bogus()
        dumper.append(label, reader(dumper), "\n")
    return dump


def _short(dumper):
    return be_int16(dumper.read(2))


def _byte(dumper):
    return dumper.read(1)[0]


def dump_x00000006(dumper, pos, length):
    flags = be_int32(dumper.read(4))
    names = [name for bit, name in play_mode_flags if flags & bit]
    dumper.append("Play mode flags: ", ' '.join(names), "\n")
    dumper.show_bogus()
    dumper.show_rgb()


def dump_x00000065(dumper, pos, length):
    dumper.append("Background colour:\n")
    dumper.show_bogus()
    dumper.show_rgb()


def dump_x0000006b(dumper, pos, length):
    dumper.show_bogus()
    interval = be_uint32(dumper.read(4))
    if interval == 0xffffffff:
        frequency = 'off'
    elif interval:
        frequency = f"{format_number(60.0 / interval)} Hz"
    else:
        frequency = 'fastest'
    dumper.append(f"Idle Events: {frequency}\n")


atom_decoders = {
    # containers
    'moov': dump_container,
    'cmov': dump_container,
    'clip': dump_container,
    'data': dump_container,
    'dinf': dump_container,
    'edts': dump_container,
    'gmhd': dump_container,
    'imgp': dump_container,
    'mdia': dump_container,
    'minf': dump_container,
    'stbl': dump_container,
    'trak': dump_container,
    'udta': dump_container,
    'dref': dump_atom_list,
    'dflt': dump_atom_list,
    'sprt': dump_atom_list,
    'code': dump_prefixed_container,
    'expr': dump_prefixed_container,
    'imag': dump_prefixed_container,
    'imct': dump_prefixed_container,
    'oprn': dump_prefixed_container,
    'targ': dump_prefixed_container,
    'test': dump_prefixed_container,
    'list': dump_list,
    'sean': dump_sean,
    # headers
    'ftyp': dump_ftyp,
    'mvhd': dump_mvhd,
    'mdhd': dump_mdhd,
    'tkhd': dump_tkhd,
    'hdlr': dump_hdlr,
    'vmhd': dump_vmhd,
    'gmin': dump_gmin,
    'dcom': dump_dcom,
    'alis': dump_alis,
    # sample tables
    'elst': dump_elst,
    'stts': dump_stts,
    'stss': dump_stss,
    'stsc': dump_stsc,
    'stsh': dump_stsh,
    'stsz': dump_stsz,
    'stsd': dump_stsd,
    'stco': dump_stco,
    # payloads
    'mdat': dump_mdat,
    'imda': dump_imda,
    'free': dump_free,
    'skip': dump_free,
    'wide': dump_nothing,
    # text
    'A9cmt': dump_user_text,
    'A9cpy': dump_user_text,
    'A9des': dump_user_text,
    'A9inf': dump_user_text,
    'A9nam': dump_user_text,
    'MCPS': dump_text,
    'name': dump_name,
    'WLOC': dump_WLOC,
    'enfs': dump_enabled,
    'play': dump_enabled,
    'slau': dump_enabled,
    'slgr': dump_enabled,
    'slti': dump_enabled,
    'sltr': dump_enabled,
    # wired sprites
    'actn': dump_actn,
    'evnt': dump_evnt,
    'oper': dump_oper,
    'whic': dump_whic,
    'parm': dump_parm,
    'imrg': dump_imrg,
    'motx': dump_track_index,
    'trin': dump_track_index,
    'spid': dump_spid,
    'mmdr': dump_mmdr,
    'x00000001': dump_x00000001,
    'x00000002': dump_x00000002,
    'x00000004': _bogus_then("Visible:  ", _short),
    'x00000005': _bogus_then("Layer:  ", _short),
    'x00000006': dump_x00000006,
    'x00000015': dump_nothing,
    'x00000064': _bogus_then("Image index: ", _short),
    'x00000065': dump_x00000065,
    'x00000066': _bogus_then("Offscreen bit depth: ", _short),
    'x00000067': _bogus_then("Sample format: ", _short),
    'x00000069': _bogus_then("Has Actions: ", _byte),
    'x0000006a': _bogus_then("Scale sprites: ", _byte),
    'x0000006b': dump_x0000006b,
    'x00000c00': dump_nothing,
    'x00000c01': dump_nothing,
    'x00000c02': dump_nothing,
    'x00000c03': dump_nothing,
    'x00000c04': dump_nothing,
    'x00000c05': dump_nothing,
    'x00000c06': dump_nothing,
    'x00000c07': dump_sprite_track_variable,
    'x00001400': dump_nothing,
    'x00001401': dump_nothing,
    'x00001402': dump_nothing,
}

atom_names = {
    'A9cmt': "Comment",
    'A9cpy': "Copyright",
    'A9des': "Description",
    'A9inf': "Information",
    'A9nam': "Title",
    'actn': "Action",
    'alis': "File alias",
    'clip': "Clipping region",
    'cmov': "Compressed movie",
    'code': "Code resource",
    'data': "Data resource",
    'dcom': "Compression type",
    'dflt': "Shared frame",
    'dinf': "Media location",
    'dref': "Data references",
    'edts': "Edit list",
    'elst': "Media edit segment defs",
    'enfs': "Enable Frame Stepping",
    'evnt': "Sprite event",
    'expr': "Expression",
    'free': "Unused space",
    'ftyp': "File type",
    'gmhd': "Generic media header",
    'gmin': "Generic media information",
    'hdlr': "Media data handler",
    'imag': "Image",
    'imct': "Image container",
    'imda': "Image data",
    'imgp': "Panorama image container",
    'imrg': "Image group container",
    'list': "List",
    'MCPS': "Movie controller settings",
    'mdat': "Media data",
    'mdhd': "Media header",
    'mdia': "Media container",
    'minf': "Media information",
    'mmdr': "Media data reference",
    'moov': "Movie container",
    'motx': "Media track index",
    'mvhd': "Movie header",
    'name': "Name",
    'oper': "Operation",
    'oprn': "Operand",
    'parm': "Parameter",
    'play': "Auto play",
    'sean': "Sprite scene container",
    'skip': "Unused space",
    'slau': "Slave audio",
    'slgr': "Slave graphics mode",
    'slti': "Slave time",
    'sltr': "Slave track duration",
    'spid': "Sprite ID",
    'sprt': "Sprite key frame",
    'stbl': "Media time to sample data",
    'stco': "Media data chunk locations",
    'stsc': "Sample number to chunk number mapping",
    'stsd': "Sample description container",
    'stsh': "Shadow sync table",
    'stss': "Key frame sample numbers table",
    'stsz': "Sample size table",
    'stts': "Sample number to duration maps",
    'targ': "Action target",
    'test': "Conditional test",
    'tkhd': "Media track header",
    'trak': "Media track container",
    'trin': "Track index",
    'udta': "User data",
    'vmhd': "Video media header",
    'whic': "Which action type",
    'wide': "64 bit expansion place holder",
    'WLOC': "Default window location",
    'x00000001': name_x00000001,
    'x00000002': "Constant",
    'x00000004': "kSpritePropertyVisible",
    'x00000005': "kSpritePropertyLayer",
    'x00000006': "kSpritePropertyGraphicsMode",
    'x00000015': "Quicktime version",
    'x00000064': "kSpritePropertyImageIndex",
    'x00000065': "kSpriteTrackPropertyBackgroundColor",
    'x00000066': "kSpriteTrackPropertyOffscreenBitDepth",
    'x00000067': "kSpriteTrackPropertySampleFormat",
    'x00000069': "kSpriteTrackPropertyHasActions",
    'x0000006a': "kSpriteTrackPropertyScaleSpritesToScaleWorld",
    'x0000006b': "kSpriteTrackPropertyQTIdleEventsFrequency",
    'x00000c00': "kOperandSpriteBoundsLeft",
    'x00000c01': "kOperandSpriteBoundsTop",
    'x00000c02': "kOperandSpriteBoundsRight",
    'x00000c03': "kOperandSpriteBoundsBottom",
    'x00000c04': "kOperandSpriteImageIndex",
    'x00000c05': "kOperandSpriteVisible",
    'x00000c06': "kOperandSpriteLayer",
    'x00000c07': "kOperandSpriteTrackVariable",
    'x00001400': "kOperandMouseLocalHLoc",
    'x00001401': "kOperandMouseLocalVLoc",
    'x00001402': "kOperandKeyIsDown",
}


def default_registry():
    registry = AtomRegistry()
    for tag in sorted(set(atom_decoders) | set(atom_names)):
        registry.register(tag, atom_decoders.get(tag), atom_names.get(tag))
    return registry
