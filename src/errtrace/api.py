"""Module-level shortcuts backed by the container's factory.

Usage:
    import errtrace

    def save(path: str) -> Result[None, ChainError]:
        try:
            write(path)
        except OSError as exc:
            return Failure(error=errtrace.new(exc, StorageErrorCode.DISK_FULL))
        return Success(value=None)

    result = errtrace.wrap_failure(save("/tmp/x"), "failed to save file", "path", "/tmp/x")
"""

from typing import Any, TypeGuard

from errtrace.core.container import get_chain_factory
from errtrace.core.errors import ChainError
from errtrace.core.result import Failure, Result
from errtrace.domain.protocols import ErrorSourceProtocol


def new(
    cause: ErrorSourceProtocol | None,
    code: int,
    *metadata: Any,
    stacklevel: int = 1,
) -> ChainError | None:
    """Start a chain from ``cause``; see ErrorChainFactory.new."""
    return get_chain_factory().new(cause, code, *metadata, stacklevel=stacklevel + 1)


def wrap(
    cause: ErrorSourceProtocol | None,
    message: str,
    *metadata: Any,
    stacklevel: int = 1,
) -> ChainError | None:
    """Annotate ``cause`` with a new layer; see ErrorChainFactory.wrap."""
    return get_chain_factory().wrap(
        cause, message, *metadata, stacklevel=stacklevel + 1
    )


def is_error(value: object) -> TypeGuard[ChainError]:
    """Whether ``value`` is a chain node created by this library."""
    return get_chain_factory().is_chain(value)


def wrap_failure[T](
    result: Result[T, Any],
    message: str,
    *metadata: Any,
    stacklevel: int = 1,
) -> Result[T, Any]:
    """Wrap the error of a Failure; pass a Success through untouched.

    Args:
        result: Outcome of an operation.
        message: Description of this layer.
        *metadata: Diagnostic values attached to the new node.
        stacklevel: Which caller to record as the call site.

    Returns:
        The same Success, or a new Failure holding the wrapped error.
    """
    if not isinstance(result, Failure):
        return result
    return Failure(
        error=wrap(result.error, message, *metadata, stacklevel=stacklevel + 1)
    )
