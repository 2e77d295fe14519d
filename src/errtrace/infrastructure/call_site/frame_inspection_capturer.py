"""Call-site capture from live interpreter frames.

Implementation intentionally does NOT inherit from CallSiteCapturerProtocol
(PEP 544 structural subtyping).
"""

import sys
from types import FrameType

from errtrace.domain.value_objects.call_site import UNKNOWN_CALL_SITE, CallSite


class FrameInspectionCapturer:
    """Capture call sites with ``sys._getframe``.

    Function names are qualified with the defining module, e.g.
    ``app.storage.Store.save``. Module-level code reports ``<module>``.
    """

    def capture(self, skip: int = 0) -> CallSite:
        """Return the location ``skip`` frames above the caller of capture().

        Args:
            skip: Extra frames to skip above the calling function.

        Returns:
            CallSite: The frame location, or UNKNOWN_CALL_SITE when the stack
            is not that deep or the interpreter has no frame support.
        """
        if skip < 0:
            return UNKNOWN_CALL_SITE
        try:
            # +1 steps over capture() itself
            frame = sys._getframe(skip + 1)
        except (AttributeError, ValueError):
            return UNKNOWN_CALL_SITE
        return self._describe(frame)

    @staticmethod
    def _describe(frame: FrameType) -> CallSite:
        code = frame.f_code
        module = frame.f_globals.get("__name__", "")
        function = f"{module}.{code.co_qualname}" if module else code.co_qualname
        return CallSite(
            file=code.co_filename,
            line=frame.f_lineno or 0,
            function=function,
        )
