"""Core enums package.

Usage:
    from errtrace.core.enums import ErrorCode, Environment
"""

from errtrace.core.enums.environment import Environment
from errtrace.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
