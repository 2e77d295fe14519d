"""Protocol for foreign error values.

Anything that can describe what went wrong as text can start a chain:
built-in exceptions, ``DomainError``-style dataclasses, or plain strings.
Types without a useful ``__str__`` adapt with a thin wrapper at the call
boundary.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ErrorSourceProtocol(Protocol):
    """A value with a textual description."""

    def __str__(self) -> str:
        """Describe the failure."""
        ...
