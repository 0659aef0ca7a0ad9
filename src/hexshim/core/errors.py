"""
Exception types raised by the hexshim core.
"""


class HexShimError(Exception):
    """Base class for all hexshim errors."""


class AllocationError(HexShimError, MemoryError):
    """Raised when a buffer cannot allocate storage beyond its inline capacity."""


class InvalidArgumentError(HexShimError, ValueError):
    """Raised when a renderer is constructed with arguments it cannot honour."""
