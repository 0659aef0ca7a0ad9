"""
Core package for hex dump rendering.

This package implements the FormatBuffer class, a character buffer that
keeps small outputs in inline storage, and the HexDumper renderer built on
top of it in narrow and wide character variants.
"""

from .buffer import CharType, FormatBuffer, NARROW, WIDE
from .dumper import HexDumper, NarrowHexDump, WideHexDump, hex_dump
from .errors import AllocationError, HexShimError, InvalidArgumentError

__all__ = [
    'CharType',
    'FormatBuffer',
    'NARROW',
    'WIDE',
    'HexDumper',
    'NarrowHexDump',
    'WideHexDump',
    'hex_dump',
    'AllocationError',
    'HexShimError',
    'InvalidArgumentError'
]
