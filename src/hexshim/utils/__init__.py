"""
Utility package for input parsing and output highlighting.
"""

from .hex_utils import parse_hex_string, get_byte_range
from .highlight import highlight_dump

__all__ = [
    'parse_hex_string',
    'get_byte_range',
    'highlight_dump'
]
