"""errtrace: structured error annotation chains.

Wrap a failure with a classification code, a message, diagnostic metadata
and the call site of each wrap, then print the chain as an ordered trace.

Usage:
    import errtrace

    root = errtrace.new(OSError("disk full"), 5)
    outer = errtrace.wrap(root, "failed to save file", "path", "/tmp/x")
    print(outer)
"""

import logging

from errtrace.api import is_error, new, wrap, wrap_failure
from errtrace.application.chain_factory import ErrorChainFactory
from errtrace.core.config import Settings, get_settings
from errtrace.core.enums import ErrorCode
from errtrace.core.errors import ChainError
from errtrace.core.result import Failure, Result, Success
from errtrace.domain.value_objects.call_site import UNKNOWN_CALL_SITE, CallSite
from errtrace.presentation.trace_renderer import render_trace

# Silent until the host application configures logging.
logging.getLogger("errtrace").addHandler(logging.NullHandler())

__all__ = [
    "CallSite",
    "ChainError",
    "ErrorChainFactory",
    "ErrorCode",
    "Failure",
    "Result",
    "Settings",
    "Success",
    "UNKNOWN_CALL_SITE",
    "get_settings",
    "is_error",
    "new",
    "render_trace",
    "wrap",
    "wrap_failure",
]
