"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that domain-specific
repository interfaces extend.  Service-layer code depends on this
abstraction, never on Django ORM directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, TypeVar

from modules.core.results import Result

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` represents the domain entity managed by the
    repository (e.g. ``Product``).
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> T:
        """Insert a new entity and return it with its assigned id."""

    @abstractmethod
    def list_by_ids(self, ids: List[int]) -> List[T]:
        """Retrieve every entity whose primary key is in ``ids``."""

    @abstractmethod
    def update(self, id: int, data: Dict[str, Any]) -> Result[T]:
        """Apply ``data`` to the entity with the given id."""
