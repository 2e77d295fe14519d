"""Trace rendering for error chains.

Output is ordered source first, outermost wrap last. Each node prints one
primary line::

    <file>:<line>: <function> | <message>

Every non-source primary line ends with a tab after the newline, indenting
the next line under it. A node with metadata prints a second line holding
the whole metadata sequence, also followed by a tab.

Example (one root, one wrap with metadata; ``<TAB>`` is a tab)::

    app/disk.py:10: app.disk.write | disk full
    app/files.py:22: app.files.save | failed to save file
    <TAB>[path /tmp/x]
    <TAB>
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from errtrace.core.errors import ChainError

_CONTINUATION = "\t"


def render_metadata(metadata: Iterable[Any]) -> str:
    """Render a metadata sequence as ``[item item ...]``.

    Args:
        metadata: Values attached to one chain node.

    Returns:
        str: Items rendered with ``str()`` and joined by single spaces. An
        item whose ``__str__`` raises renders as
        ``<unprintable TYPE: ERROR_TYPE>`` instead.
    """
    return "[" + " ".join(_render_item(item) for item in metadata) + "]"


def _render_item(item: Any) -> str:
    try:
        return str(item)
    except Exception as exc:
        return f"<unprintable {type(item).__name__}: {type(exc).__name__}>"


def render_node(node: ChainError) -> str:
    """Render a single node's primary line and optional metadata line.

    Args:
        node: Node to render; its wrapper is not rendered.

    Returns:
        str: The node's lines, including newline and continuation markers.
    """
    site = node.call_site
    text = f"{site.file}:{site.line}: {site.function} | {node.message}\n"
    if not node.is_source:
        text += _CONTINUATION
    if node.metadata:
        text += f"{render_metadata(node.metadata)}\n{_CONTINUATION}"
    return text


def render_trace(node: ChainError | None) -> str:
    """Render a chain from its source up to ``node``.

    The walk is iterative so long chains never reach the recursion limit.

    Args:
        node: Outermost node to render, or None.

    Returns:
        str: The full trace, or an empty string for None.
    """
    if node is None:
        return ""
    layers = list(node.unwrap())
    layers.reverse()
    return "".join(render_node(layer) for layer in layers)
