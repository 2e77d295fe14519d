"""Call-site capturer that records nothing.

Selected when ``ERRTRACE_CAPTURE_CALL_SITES=false``.
"""

from errtrace.domain.value_objects.call_site import UNKNOWN_CALL_SITE, CallSite


class NullCallSiteCapturer:
    """Always report the unknown call site."""

    def capture(self, skip: int = 0) -> CallSite:
        return UNKNOWN_CALL_SITE
