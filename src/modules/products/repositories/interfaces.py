"""Product repository interface.

Extends ``IRepository[Product]`` with the look-ups required by the
catalogue queries and by business rule RN-PRO-001 (unique name).
"""

from __future__ import annotations

from abc import abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product entity."""

    @abstractmethod
    def list(self) -> List["Product"]:
        """List every product."""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional["Product"]:
        """Retrieve a product by name (case-insensitive exact match)."""

    @abstractmethod
    def get_by_price(self, price: Decimal) -> Optional["Product"]:
        """Retrieve a product with exactly the given price."""

    @abstractmethod
    def get_by_stock(self, stock: int) -> Optional["Product"]:
        """Retrieve a product with exactly the given stock level."""

    @abstractmethod
    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        """Check whether a product with ``name`` exists (case-insensitive).

        ``exclude_id`` leaves one record out of the check, so a product
        can keep its own name on update.
        """
