"""Product repository interface.

Extends ``IRepository[Product]`` with the availability-aware look-ups the
catalog listing and ``find_one`` need.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def count_available(self) -> int:
        """Count products whose ``available`` flag is set."""

    @abstractmethod
    def list_available(self, offset: int, limit: int) -> List["Product"]:
        """Return at most ``limit`` available products, skipping ``offset``."""

    @abstractmethod
    def get_available(self, id: int) -> Optional["Product"]:
        """Retrieve a product by id only if it is still available."""
