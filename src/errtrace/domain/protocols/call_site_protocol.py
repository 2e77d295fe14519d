"""Call-site capture protocol (port).

Stack introspection is platform machinery, so the chain factory only sees
this port. Infrastructure provides the adapters:

    - FrameInspectionCapturer: walks live interpreter frames
    - NullCallSiteCapturer: always reports the unknown call site

Tests pass their own implementation to get deterministic frames.
"""

from typing import Protocol

from errtrace.domain.value_objects.call_site import CallSite


class CallSiteCapturerProtocol(Protocol):
    """Protocol for call-stack introspection."""

    def capture(self, skip: int = 0) -> CallSite:
        """Return the location of one frame on the current stack.

        Args:
            skip: Frames to skip above the function that called ``capture``.
                0 names that function, 1 its caller, and so on.

        Returns:
            The captured location, or ``UNKNOWN_CALL_SITE`` when the stack is
            not deep enough or introspection is unavailable. Never raises.
        """
        ...
