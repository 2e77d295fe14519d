"""Error classification codes.

Codes are plain integers so callers can define their own ranges with an
``IntEnum`` (or bare ints). ``UNCLASSIFIED`` (0) is reserved: it marks wrap
layers and chains started from a foreign error.

Usage:
    from enum import IntEnum

    class StorageErrorCode(IntEnum):
        DISK_FULL = 5
        PERMISSION_DENIED = 6
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Library-reserved error codes."""

    UNCLASSIFIED = 0
