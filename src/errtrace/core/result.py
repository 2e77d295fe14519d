"""Result types for railway-oriented programming.

Chain errors are data, not exceptions, so they travel inside ``Failure``.

Usage:
    def load(path: str) -> Result[bytes, ChainError]:
        try:
            return Success(value=read_bytes(path))
        except OSError as exc:
            return Failure(error=new(exc, StorageErrorCode.IO, "path", path))

    match load("/tmp/x"):
        case Success(value=data):
            ...
        case Failure(error=error):
            print(error)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
