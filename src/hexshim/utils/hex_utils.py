"""
Utility functions for preparing input to the hex dumper.
"""

from typing import Optional, Tuple


def parse_hex_string(hex_str: str) -> Optional[bytes]:
    """
    Parse a hex string into bytes.

    Args:
        hex_str (str): String of hex values (e.g. "FF 00 A5")

    Returns:
        bytes: Parsed bytes or None if invalid
    """

    clean_str = ''.join(hex_str.split())
    if not all(c in '0123456789ABCDEFabcdef' for c in clean_str):
        return None

    try:
        return bytes.fromhex(clean_str)
    except ValueError:
        pass

    return None


def get_byte_range(data: bytes, start: int, length: int = -1) -> Tuple[bytes, int]:
    """
    Get a range of bytes and the actual number of bytes returned.

    Args:
        data (bytes): Source bytes
        start (int): Starting offset
        length (int): Number of bytes to get, negative for everything after start

    Returns:
        Tuple[bytes, int]: The bytes and actual length returned
    """

    start = max(0, min(start, len(data)))
    if length < 0:
        end = len(data)
    else:
        end = min(start + length, len(data))

    return data[start:end], end - start
