"""LoggerProtocol definition for structured logging.

The chain factory reports what it does through this protocol so that the
logging backend stays swappable. Calls are structured: a snake_case event
name plus key-value context.

Log Levels used by the library:
    - DEBUG: node creation, wrap, call-site fallback
    - WARNING: lossy behaviour (wrap message dropped on a foreign cause)

Usage:
    from errtrace.core.container import get_logger

    logger = get_logger()
    logger.warning("wrap_message_dropped", dropped_message=message)
"""

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Implementations may enrich logs with timestamp and level.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level event.

        Args:
            message: Event name.
            **context: Structured key-value context fields.
        """
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level event.

        Args:
            message: Event name.
            **context: Structured key-value context fields.
        """
        ...
