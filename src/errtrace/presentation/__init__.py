"""Presentation layer: text rendering of error chains."""

from errtrace.presentation.trace_renderer import (
    render_metadata,
    render_node,
    render_trace,
)

__all__ = ["render_metadata", "render_node", "render_trace"]
