"""Core errors package.

Usage:
    from errtrace.core.errors import ChainError
"""

from errtrace.core.errors.chain_error import ChainError

__all__ = ["ChainError"]
