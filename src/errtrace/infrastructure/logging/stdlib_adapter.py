"""Standard-library logging adapter.

Renders structured events with structlog and hands them to the ``errtrace``
logger from the ``logging`` module. The host application's handlers decide
where they go; the package installs only a ``NullHandler``, so nothing is
written anywhere until the host configures logging.

- Development: human-readable key=value rendering
- Testing/CI/production: JSON rendering for machine parsing

Implementation intentionally does NOT inherit from LoggerProtocol (PEP 544
structural subtyping).
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

LOGGER_NAME = "errtrace"


class StdlibLoggingAdapter:
    """Structured logger writing through ``logging.getLogger("errtrace")``.

    Args:
        use_json (bool): JSON rendering when True, human-readable when False.
        level (int): Minimum level emitted, as a ``logging`` constant.
    """

    def __init__(self, *, use_json: bool = False, level: int = logging.WARNING) -> None:
        processors: list[structlog.types.Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
        ]

        if use_json:
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer(colors=False))

        self._logger = structlog.wrap_logger(
            structlog.stdlib.LoggerFactory()(LOGGER_NAME),
            processors=processors,
            wrapper_class=structlog.make_filtering_bound_logger(level),
            context_class=dict,
        )

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug event.

        Args:
            message (str): Event name.
            **context: Structured key-value context.
        """
        self._logger.debug(message, **context)

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning event.

        Args:
            message (str): Event name.
            **context: Structured key-value context.
        """
        self._logger.warning(message, **context)
