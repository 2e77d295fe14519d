"""Error chain factory: creation, wrapping and discrimination.

The factory owns the two collaborators a chain node needs at creation time:
a call-site capturer and a logger. Both are injected, so tests can supply
deterministic frames and a mock logger.

Frame accounting:
    ``stacklevel`` follows ``warnings.warn``: 1 attributes the node to the
    code that called ``new``/``wrap``, 2 to that code's caller, and so on.
    Helpers that forward to the factory add one per forwarding frame.

Usage:
    factory = ErrorChainFactory(
        capturer=FrameInspectionCapturer(),
        logger=get_logger(),
    )
    root = factory.new(OSError("disk full"), StorageErrorCode.DISK_FULL)
    outer = factory.wrap(root, "failed to save file", "path", "/tmp/x")
"""

from typing import Any, TypeGuard

from errtrace.core.enums import ErrorCode
from errtrace.core.errors import ChainError
from errtrace.domain.protocols import (
    CallSiteCapturerProtocol,
    ErrorSourceProtocol,
    LoggerProtocol,
)
from errtrace.domain.value_objects.call_site import CallSite


class ErrorChainFactory:
    """Build and extend error chains.

    Args:
        capturer: Call-stack introspection adapter.
        logger: Structured logger for creation events.
    """

    def __init__(
        self,
        *,
        capturer: CallSiteCapturerProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._capturer = capturer
        self._logger = logger

    def new(
        self,
        cause: ErrorSourceProtocol | None,
        code: int,
        *metadata: Any,
        stacklevel: int = 1,
    ) -> ChainError | None:
        """Start a chain from a foreign error.

        Args:
            cause: Any value with a textual description, or None.
            code: Classification code for the chain.
            *metadata: Diagnostic values attached to the source node.
            stacklevel: Which caller to record as the call site.

        Returns:
            The source node, or None when ``cause`` is None.
        """
        if cause is None:
            return None
        return self._build_source(cause, code, metadata, skip=stacklevel)

    def wrap(
        self,
        cause: ErrorSourceProtocol | None,
        message: str,
        *metadata: Any,
        stacklevel: int = 1,
    ) -> ChainError | None:
        """Add an annotation layer on top of ``cause``.

        A foreign cause starts a new unclassified chain instead, and
        ``message`` is not recorded anywhere in it.

        Args:
            cause: A chain node, any other error-like value, or None.
            message: Description of this layer.
            *metadata: Diagnostic values attached to the new node.
            stacklevel: Which caller to record as the call site.

        Returns:
            The new outer node, or None when ``cause`` is None.
        """
        if cause is None:
            return None

        inner = self.as_chain(cause)
        if inner is None:
            self._logger.warning(
                "wrap_message_dropped",
                cause_type=type(cause).__name__,
                dropped_message=message,
            )
            return self._build_source(
                cause, ErrorCode.UNCLASSIFIED, metadata, skip=stacklevel
            )

        call_site = self._capture(skip=stacklevel)
        node = ChainError(
            message=message,
            metadata=metadata,
            call_site=call_site,
            wrapper=inner,
            source=inner.source,
        )
        self._logger.debug(
            "error_chain_wrapped",
            message=message,
            depth=node.depth,
            call_site=str(call_site),
        )
        return node

    @staticmethod
    def is_chain(value: object) -> TypeGuard[ChainError]:
        """Whether ``value`` is a node created by this library.

        Args:
            value: Anything, including None.

        Returns:
            True only for ChainError instances.
        """
        return value is not None and isinstance(value, ChainError)

    @classmethod
    def as_chain(cls, value: object) -> ChainError | None:
        """Downcast ``value`` to a chain node.

        Returns:
            The node, or None when ``value`` is not a chain node.
        """
        return value if cls.is_chain(value) else None

    def _build_source(
        self,
        cause: ErrorSourceProtocol,
        code: int,
        metadata: tuple[Any, ...],
        *,
        skip: int,
    ) -> ChainError:
        call_site = self._capture(skip=skip + 1)
        node = ChainError(
            message=str(cause),
            code=code,
            metadata=metadata,
            call_site=call_site,
        )
        self._logger.debug(
            "error_chain_created",
            code=int(code),
            cause_type=type(cause).__name__,
            call_site=str(call_site),
        )
        return node

    def _capture(self, *, skip: int) -> CallSite:
        # skip=0 names the function that called _capture
        call_site = self._capturer.capture(skip + 1)
        if not call_site.is_known:
            self._logger.debug("call_site_unavailable", skip=skip)
        return call_site
