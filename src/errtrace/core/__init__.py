"""Core shared kernel.

- Chain error node and classification codes
- Result types for railway-oriented programming
- Settings and the composition root

The core module has NO dependencies on the application layer at import time.
"""

from errtrace.core.enums import Environment, ErrorCode
from errtrace.core.errors import ChainError
from errtrace.core.result import Failure, Result, Success

__all__ = [
    "ChainError",
    "Environment",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
