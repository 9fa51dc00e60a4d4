"""
Result type for transcoder.

A transcoding step either succeeds with a value or fails with exactly one
human-readable message. The two variants are frozen dataclasses compared by
value, so ``run(t, x) == Success(22)`` reads naturally in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from transcoder.exceptions import UnwrapError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful outcome carrying the produced value."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure:
    """Failed outcome carrying a single error message."""

    error: str

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def unwrap(self):
        raise UnwrapError(self.error)

    def unwrap_or(self, default: T) -> T:
        return default


Result = Union[Success[T], Failure]


def from_optional(value: T | None, error: str) -> Result[T]:
    """Treat ``None`` as absence: ``Failure(error)``, otherwise ``Success``."""
    if value is None:
        return Failure(error)
    return Success(value)
