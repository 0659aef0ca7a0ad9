"""
hexshim - render byte buffers as hexadecimal dumps.
"""

from .core import (
    AllocationError,
    FormatBuffer,
    HexDumper,
    HexShimError,
    InvalidArgumentError,
    NarrowHexDump,
    WideHexDump,
    hex_dump
)

__version__ = '0.1.0'

__all__ = [
    'AllocationError',
    'FormatBuffer',
    'HexDumper',
    'HexShimError',
    'InvalidArgumentError',
    'NarrowHexDump',
    'WideHexDump',
    'hex_dump'
]
