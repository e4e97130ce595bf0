"""Explicit success/failure values returned by store operations.

Repositories return ``Ok(value)`` or ``Err(error)`` for writes whose
failures the service must translate instead of propagate.  The service
pattern-matches on the variant; the captured error is kept for inspection
but never surfaced to RPC callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    error: Exception


Result = Union[Ok[T], Err]
