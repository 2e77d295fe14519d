"""Domain protocols (ports).

Infrastructure adapters satisfy these structurally (PEP 544); none of them
inherit from the protocols.
"""

from errtrace.domain.protocols.call_site_protocol import CallSiteCapturerProtocol
from errtrace.domain.protocols.error_source_protocol import ErrorSourceProtocol
from errtrace.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "CallSiteCapturerProtocol",
    "ErrorSourceProtocol",
    "LoggerProtocol",
]
