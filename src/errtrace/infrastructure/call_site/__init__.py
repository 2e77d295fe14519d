"""Call-site capture adapters."""

from errtrace.infrastructure.call_site.frame_inspection_capturer import (
    FrameInspectionCapturer,
)
from errtrace.infrastructure.call_site.null_capturer import NullCallSiteCapturer

__all__ = ["FrameInspectionCapturer", "NullCallSiteCapturer"]
