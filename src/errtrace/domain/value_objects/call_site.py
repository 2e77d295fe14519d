"""Call site value object.

Immutable description of the code location that created a chain node.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CallSite:
    """Source location captured when a chain node is created.

    Attributes:
        file: Path of the source file.
        line: Line number within ``file``.
        function: Fully qualified function name (``module.Qual.name``).

    Example:
        >>> site = CallSite(file="app/storage.py", line=42, function="app.storage.save")
        >>> str(site)
        'app/storage.py:42: app.storage.save'
    """

    file: str
    line: int
    function: str

    @property
    def is_known(self) -> bool:
        """Whether introspection produced a real location."""
        return self != UNKNOWN_CALL_SITE

    def __str__(self) -> str:
        return f"{self.file}:{self.line}: {self.function}"


# Stored when stack introspection yields no frame.
UNKNOWN_CALL_SITE = CallSite(file="", line=0, function="")
