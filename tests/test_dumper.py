"""
Tests for the hex dump renderer.
"""

import pytest

from hexshim.core.dumper import HexDumper, NarrowHexDump, WideHexDump, hex_dump
from hexshim.core.errors import HexShimError, InvalidArgumentError


def test_three_bytes_with_ascii():
    dumper = NarrowHexDump(bytes([0x41, 0x42, 0x43]), 3)

    assert dumper.line_size == 65
    assert dumper.line_count == 1
    assert dumper.text() == '41 42 43' + ' ' * 40 + 'ABC' + ' ' * 13


def test_without_ascii_pads_unused_slots():
    dumper = NarrowHexDump(bytes([0x00, 0xFF]), 2, bytes_per_line=4, show_ascii=False)

    assert dumper.line_size == 12
    assert dumper.text() == '00 FF' + ' ' * 6


def test_empty_input_is_a_single_terminator():
    dumper = NarrowHexDump(b'')

    assert dumper.text() == ''
    assert dumper.line_count == 0
    assert dumper.view()[0] == 0
    assert dumper.is_inline
    assert dumper.allocations == 0


def test_none_data_with_zero_length():
    assert NarrowHexDump(None).text() == ''
    assert NarrowHexDump(None, 0).text() == ''


def test_lines_are_newline_separated_except_the_last():
    data = bytes(range(0x41, 0x41 + 20))
    lines = NarrowHexDump(data).text().split('\n')

    assert len(lines) == 2
    assert lines[0] == ' '.join('%02X' % b for b in data[:16]) + ' ' + data[:16].decode()
    assert lines[1] == (
        '51 52 53 54' + ' ' * 37 + 'QRST' + ' ' * 12
    )
    assert all(len(line) == 64 for line in lines)


@pytest.mark.parametrize("length", [1, 7, 8, 9, 16, 17, 100])
@pytest.mark.parametrize("bytes_per_line", [1, 3, 8, 16])
@pytest.mark.parametrize("show_ascii", [True, False])
def test_visible_length(length, bytes_per_line, show_ascii):
    dumper = NarrowHexDump(bytes(length), bytes_per_line=bytes_per_line,
                           show_ascii=show_ascii, indent=2)

    line_count = -(-length // bytes_per_line)
    assert dumper.line_count == line_count
    assert len(dumper.text()) == dumper.line_size * line_count - 1
    assert dumper.text().count('\n') == line_count - 1


def test_required_capacity_is_exact_once_grown():
    dumper = NarrowHexDump(bytes(1000))

    assert not dumper.is_inline
    assert dumper.allocations == 1
    assert dumper.capacity == dumper.line_size * dumper.line_count + 1
    view = dumper.view()
    assert view[-1] == 0
    assert view[-2] == 0


def test_small_output_stays_inline():
    dumper = NarrowHexDump(bytes(15))

    assert dumper.is_inline
    assert dumper.allocations == 0


def test_inline_size_override_forces_growth():
    dumper = NarrowHexDump(b'AB', inline_size=4)

    assert dumper.allocations == 1
    assert dumper.capacity == dumper.line_size + 1


def test_hex_pairs_round_trip():
    data = bytes(range(256))
    dumper = NarrowHexDump(data, show_ascii=False)

    pairs = dumper.text().split()
    assert [int(pair, 16) for pair in pairs] == list(data)
    assert all(pair == pair.upper() for pair in pairs)


def test_ascii_gutter_printable_range():
    data = bytes(range(256))
    lines = NarrowHexDump(data).text().split('\n')
    gutter = ''.join(line[16 * 3:] for line in lines)

    for value, ch in zip(data, gutter):
        if 0x20 <= value < 0x80:
            assert ch == chr(value)
        else:
            assert ch == '.'


def test_gutter_boundaries():
    text = NarrowHexDump(bytes([0x1F, 0x20, 0x7E, 0x7F, 0x80, 0xFF]), bytes_per_line=6).text()

    assert text[18:] == '. ~\x7f..'


def test_signed_values_are_normalized():
    dumper = NarrowHexDump([-1, -128, 65], bytes_per_line=3)

    assert dumper.text() == 'FF 80 41 ..A'


def test_indent_shifts_hex_and_gutter():
    text = NarrowHexDump(b'\x01A', indent=3, bytes_per_line=2).text()

    assert text == '   01 41 .A'


def test_indent_applies_to_every_line():
    lines = NarrowHexDump(b'abcd', indent=2, bytes_per_line=2, show_ascii=False).text().split('\n')

    assert lines == ['  61 62', '  63 64']


def test_length_limits_the_dump():
    assert NarrowHexDump(b'ABCDEF', 2, bytes_per_line=4).text() == '41 42       AB  '


def test_memoryview_input():
    data = memoryview(b'\x00\x10\x20')

    assert NarrowHexDump(data, show_ascii=False, bytes_per_line=3).text() == '00 10 20'


def test_output_is_idempotent():
    data = bytes(range(0, 256, 7))

    first = NarrowHexDump(data, indent=1, bytes_per_line=5).text()
    second = NarrowHexDump(data, indent=1, bytes_per_line=5).text()
    assert first == second


@pytest.mark.parametrize("show_ascii", [True, False])
def test_narrow_and_wide_layouts_match(show_ascii):
    data = bytes(range(256)) * 5

    narrow = NarrowHexDump(data, indent=4, bytes_per_line=12, show_ascii=show_ascii)
    wide = WideHexDump(data, indent=4, bytes_per_line=12, show_ascii=show_ascii)

    assert narrow.text() == wide.text()
    assert narrow.capacity == wide.capacity
    assert wide.view().itemsize > narrow.view().itemsize


def test_narrow_dump_converts_to_bytes():
    assert bytes(NarrowHexDump(b'\x7f', bytes_per_line=1, show_ascii=False)) == b'7F'


def test_default_is_narrow():
    assert HexDumper.CHAR_TYPE.name == 'narrow'
    assert WideHexDump.CHAR_TYPE.name == 'wide'


def test_gap_is_fixed_at_zero():
    assert HexDumper.GAP == 0


def test_hex_dump_helper():
    assert hex_dump(b'AB', bytes_per_line=2) == '41 42 AB'
    assert hex_dump(b'AB', bytes_per_line=2, wide=True) == '41 42 AB'
    assert hex_dump(b'') == ''


@pytest.mark.parametrize("kwargs", [
    {'data': b'abc', 'bytes_per_line': 0},
    {'data': b'abc', 'bytes_per_line': -4},
    {'data': b'abc', 'indent': -1},
    {'data': b'abc', 'length': -1},
    {'data': b'abc', 'length': 4},
    {'data': None, 'length': 1},
])
def test_invalid_arguments(kwargs):
    with pytest.raises(InvalidArgumentError) as excinfo:
        NarrowHexDump(**kwargs)

    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value, HexShimError)
