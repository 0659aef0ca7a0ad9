"""
Hex dump module rendering byte ranges into hex and ASCII text.
"""

from typing import Final, Optional, Sequence, Union

from .buffer import NARROW, WIDE, CharType, FormatBuffer
from .errors import InvalidArgumentError

ByteSource = Union[bytes, bytearray, memoryview, Sequence[int]]

HEX_DIGITS: Final[str] = '0123456789ABCDEF'
PRINTABLE_MIN: Final[int] = 0x20
PRINTABLE_END: Final[int] = 0x80

_DIGIT_CODES: Final = tuple(ord(c) for c in HEX_DIGITS)
_SPACE: Final[int] = ord(' ')
_DOT: Final[int] = ord('.')
_NEWLINE: Final[int] = ord('\n')


class HexDumper(FormatBuffer):
    """
    Renders a byte range as rows of uppercase hex pairs with an optional
    ASCII gutter.

    The whole dump is produced by the constructor. Every line except the
    last ends with a newline, and unused byte slots on the last line stay
    filled with spaces.
    """

    CHAR_TYPE: CharType = NARROW
    DEFAULT_BYTES_PER_LINE = 16
    GAP = 0

    def __init__(self, data: Optional[ByteSource], length: Optional[int] = None,
                 indent: int = 0, bytes_per_line: int = DEFAULT_BYTES_PER_LINE,
                 show_ascii: bool = True, inline_size: int = 0) -> None:
        """
        Render data into the buffer.

        Args:
            data: Bytes-like object or sequence of (possibly signed) byte values
            length (int): Number of bytes to dump, defaults to len(data)
            indent (int): Spaces placed before each line
            bytes_per_line (int): Bytes shown on each line
            show_ascii (bool): Whether to append the ASCII gutter
            inline_size (int): Inline storage size, 0 for the class default

        Raises:
            InvalidArgumentError: If the layout or data arguments are invalid
            AllocationError: If the output does not fit and cannot be allocated
        """

        if bytes_per_line < 1:
            raise InvalidArgumentError("bytes_per_line must be at least 1")
        if indent < 0:
            raise InvalidArgumentError("indent must not be negative")

        if length is None:
            length = 0 if data is None else len(data)
        if length < 0:
            raise InvalidArgumentError("length must not be negative")
        if data is None and length > 0:
            raise InvalidArgumentError("data is required when length is non-zero")
        if data is not None and length > len(data):
            raise InvalidArgumentError(
                f"length {length} exceeds the {len(data)} bytes available"
            )

        super().__init__(self.CHAR_TYPE, inline_size)

        self.length = length
        self.indent = indent
        self.bytes_per_line = bytes_per_line
        self.show_ascii = show_ascii

        self.ensure_capacity(self.line_size * self.line_count + 1)
        self._hex_dump(data)

    @property
    def line_size(self) -> int:
        """Characters per output line, including the trailing newline."""

        if self.show_ascii:
            return self.bytes_per_line * 4 + self.indent + self.GAP + 1

        return self.bytes_per_line * 3 - 1 + self.indent + 1

    @property
    def line_count(self) -> int:
        """Number of output lines."""

        return (self.length + self.bytes_per_line - 1) // self.bytes_per_line

    def _hex_dump(self, data: Optional[ByteSource]) -> None:
        buf = self._buf
        line_size = self.line_size
        ascii_pos = self.indent + self.bytes_per_line * 3 + self.GAP

        line = 0
        for start in range(0, self.length, self.bytes_per_line):
            for i in range(line, line + line_size):
                buf[i] = _SPACE

            for j in range(min(self.bytes_per_line, self.length - start)):
                v = (data[start + j] + 256) % 256
                pos = line + self.indent + j * 3
                buf[pos] = _DIGIT_CODES[v // 16]
                buf[pos + 1] = _DIGIT_CODES[v % 16]

                if self.show_ascii:
                    buf[line + ascii_pos + j] = v if PRINTABLE_MIN <= v < PRINTABLE_END else _DOT

            buf[line + line_size - 1] = _NEWLINE
            line += line_size

        buf[line] = 0
        if line > 0:
            buf[line - 1] = 0


class NarrowHexDump(HexDumper):
    """Hex dump stored as 8-bit characters."""

    CHAR_TYPE = NARROW

    def __bytes__(self) -> bytes:
        return self.text().encode('latin-1')


class WideHexDump(HexDumper):
    """Hex dump stored as wide characters."""

    CHAR_TYPE = WIDE


def hex_dump(data: Optional[ByteSource], length: Optional[int] = None, indent: int = 0,
             bytes_per_line: int = HexDumper.DEFAULT_BYTES_PER_LINE,
             show_ascii: bool = True, wide: bool = False) -> str:
    """Render data and return the dump as a string."""

    dumper_class = WideHexDump if wide else NarrowHexDump
    with dumper_class(data, length, indent, bytes_per_line, show_ascii) as dumper:
        return dumper.text()
