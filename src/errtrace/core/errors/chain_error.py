"""Chain error: one annotated layer of a failure.

A chain starts at a *source* node built from a foreign error and grows by
wrapping: each wrap creates a new outer node pointing at the node it wraps.
Nodes are immutable and are passed around as data (``Failure(error=...)``),
never raised.

Architecture:
- Does NOT inherit from Exception
- Frozen dataclass; the chain only grows outward
- Identity semantics (``eq=False``)

Usage:
    from errtrace import new, wrap

    root = new(OSError("disk full"), StorageErrorCode.DISK_FULL)
    outer = wrap(root, "failed to save file", "path", "/tmp/x")
    print(outer)  # source first, outermost wrap last
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from errtrace.core.enums import ErrorCode
from errtrace.domain.value_objects.call_site import UNKNOWN_CALL_SITE, CallSite


@dataclass(frozen=True, slots=True, kw_only=True, eq=False)
class ChainError:
    """One node of an error chain.

    Attributes:
        message: Description of this layer (the foreign error text for a source).
        code: Classification code; 0 (``ErrorCode.UNCLASSIFIED``) for wrap layers.
        metadata: Opaque diagnostic values attached at this layer.
        call_site: Location that created this node.
        wrapper: Node this one wraps; None only for the source node.
        source: First node of the chain. Filled in with ``self`` for a source.
        depth: Number of nodes from this one back to the source, inclusive.
            Computed at construction from the wrapped node.

    Raises:
        ValueError: If ``wrapper`` is given without ``source``, or a node
            without ``wrapper`` names another node as its source.
    """

    message: str
    code: int = ErrorCode.UNCLASSIFIED
    metadata: tuple[Any, ...] = ()
    call_site: CallSite = UNKNOWN_CALL_SITE
    wrapper: ChainError | None = field(default=None, repr=False)
    source: ChainError = field(default=None, repr=False)  # type: ignore[assignment]
    depth: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Normalize metadata, link a source node to itself and record depth."""
        if not isinstance(self.metadata, tuple):
            object.__setattr__(self, "metadata", tuple(self.metadata))

        if self.wrapper is None:
            if self.source is not None and self.source is not self:
                raise ValueError("a node without a wrapper must be its own source")
            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(self, "source", self)
        elif self.source is None:
            raise ValueError("a wrapping node must carry the chain source")

        depth = 1 if self.wrapper is None else self.wrapper.depth + 1
        object.__setattr__(self, "depth", depth)

    @property
    def is_source(self) -> bool:
        """Whether this node started the chain."""
        return self.source is self

    def unwrap(self) -> Iterator[ChainError]:
        """Iterate the chain from this node back to the source.

        Yields:
            ChainError: This node first, the source node last.
        """
        node: ChainError | None = self
        while node is not None:
            yield node
            node = node.wrapper

    def __str__(self) -> str:
        """Render the chain as a trace, source first."""
        from errtrace.presentation.trace_renderer import render_trace

        return render_trace(self)
