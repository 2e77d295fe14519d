"""Logging adapters."""

from errtrace.infrastructure.logging.stdlib_adapter import (
    LOGGER_NAME,
    StdlibLoggingAdapter,
)

__all__ = ["LOGGER_NAME", "StdlibLoggingAdapter"]
