"""
Buffer module providing an inline-or-heap character buffer for formatted output.
"""

import logging
from array import array
from dataclasses import dataclass
from typing import Any, Callable, Final

from .errors import AllocationError

logger = logging.getLogger(__name__)


def _decode_narrow(chars: array) -> str:
    return chars.tobytes().decode('latin-1')


def _decode_wide(chars: array) -> str:
    return ''.join(map(chr, chars))


@dataclass(frozen=True)
class CharType:
    """Describes the width of the characters a buffer stores."""
    name: str
    typecode: str
    decode: Callable[[array], str]

    @property
    def itemsize(self) -> int:
        """Size of one stored character in bytes."""

        return array(self.typecode).itemsize


NARROW: Final[CharType] = CharType('narrow', 'B', _decode_narrow)
WIDE: Final[CharType] = CharType('wide', 'I', _decode_wide)


class FormatBuffer:
    """
    Character buffer that starts on fixed inline storage and switches to a
    separate allocation once a caller asks for more room than that.

    Subclasses fill ``_buf`` after calling ``ensure_capacity`` with the size
    they actually need. Callers only ever get read-only access.
    """

    INLINE_SIZE = 1024

    def __init__(self, char_type: CharType = NARROW, inline_size: int = 0) -> None:
        if inline_size < 0:
            raise ValueError("Inline size must not be negative")

        self.char_type = char_type
        self.inline_size = inline_size or self.INLINE_SIZE
        self.allocations = 0

        self._inline = array(char_type.typecode, [0]) * self.inline_size
        self._buf = self._inline
        self._capacity = self.inline_size

    @property
    def capacity(self) -> int:
        """Number of character slots currently available."""

        return self._capacity

    @property
    def is_inline(self) -> bool:
        """Whether the buffer is still backed by its inline storage."""

        return self._buf is self._inline

    def ensure_capacity(self, new_size: int) -> None:
        """
        Grow the buffer so it holds at least new_size characters.

        Growing discards the previous contents and any earlier separate
        allocation. Requests that already fit are ignored.

        Args:
            new_size (int): Number of character slots required

        Raises:
            AllocationError: If the new storage cannot be allocated
        """

        if new_size < 0:
            raise ValueError("Buffer size must not be negative")

        if new_size <= self._capacity:
            return

        self._free()

        try:
            self._buf = array(self.char_type.typecode, [0]) * new_size
        except MemoryError as e:
            raise AllocationError(
                f"Failed to allocate {new_size} {self.char_type.name} characters"
            ) from e

        self._capacity = new_size
        self.allocations += 1
        logger.debug("Grew %s buffer to %d characters", self.char_type.name, new_size)

    def view(self) -> memoryview:
        """Get a read-only view of the current storage."""

        return memoryview(self._buf).toreadonly()

    def text(self) -> str:
        """Get the buffer contents up to the terminator."""

        try:
            end = self._buf.index(0)
        except ValueError:
            end = self._capacity

        return self.char_type.decode(self._buf[:end])

    def close(self) -> None:
        """Release any separate allocation and fall back to inline storage."""

        self._free()

    def _free(self) -> None:
        if self.is_inline:
            return

        logger.debug("Released %d character %s buffer", self._capacity, self.char_type.name)
        self._buf = self._inline
        self._capacity = self.inline_size

    def __str__(self) -> str:
        return self.text()

    def __len__(self) -> int:
        return len(self.text())

    def __enter__(self) -> 'FormatBuffer':
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __copy__(self) -> None:
        raise TypeError(f"{type(self).__name__} instances cannot be copied")

    def __deepcopy__(self, memo: Any) -> None:
        raise TypeError(f"{type(self).__name__} instances cannot be copied")
