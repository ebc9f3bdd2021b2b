"""Product service layer (Use Cases).

Orchestrates business logic for the Product entity, delegating
persistence to the injected ``IProductRepository``.

Business rules enforced here:
- RN-PRO-001: Name must be unique (case-insensitive).
- RN-PRO-002: Price must be greater than zero (validated by DTO).
- RN-PRO-003: Stock must be greater than zero (validated by DTO).
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

import structlog
from django.db import transaction

from modules.products.exceptions import ProductAlreadyExists, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import PartialProductInputDTO, ProductInputDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: ProductInputDTO) -> Product:
        """Create a new product after enforcing uniqueness rules.

        Raises:
            ProductAlreadyExists: if the name is already taken (RN-PRO-001).
        """
        self._ensure_name_available(dto.name)

        product = Product(
            name=dto.name,
            description=dto.description,
            price=dto.price,
            stock=dto.stock,
        )
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id, name=product.name)
        return product

    @transaction.atomic
    def update_product(self, id: int, dto: ProductInputDTO) -> Product:
        """Overwrite every field of an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductAlreadyExists: if the new name belongs to another product.
        """
        product = self._get_or_raise(id)
        self._ensure_name_available(dto.name, exclude_id=product.id)

        product.name = dto.name
        product.description = dto.description
        product.price = dto.price
        product.stock = dto.stock

        product = self._repo.save(product)
        logger.info("product.updated", product_id=id, partial=False)
        return product

    @transaction.atomic
    def update_product_partial(self, id: int, dto: PartialProductInputDTO) -> Product:
        """Update only the supplied, non-empty fields of a product.

        Blank strings for ``name`` / ``description`` count as absent.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductAlreadyExists: if a new name belongs to another product.
        """
        product = self._get_or_raise(id)

        if not _is_blank(dto.name):
            self._ensure_name_available(dto.name, exclude_id=product.id)
            product.name = dto.name

        if not _is_blank(dto.description):
            product.description = dto.description

        if dto.price is not None:
            product.price = dto.price

        if dto.stock is not None:
            product.stock = dto.stock

        product = self._repo.save(product)
        logger.info(
            "product.updated",
            product_id=id,
            partial=True,
            fields=sorted(dto.model_dump(exclude_none=True)),
        )
        return product

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Remove a product permanently.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        if not self._repo.delete(id):
            logger.info("product.not_found", key="ID", value=id)
            raise ProductNotFound("ID", id)
        logger.info("product.deleted", product_id=id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product."""
        return self._repo.list()

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        return self._get_or_raise(id)

    def get_product_by_name(self, name: str) -> Product:
        return self._found(self._repo.get_by_name(name), "name", name)

    def get_product_by_price(self, price: Decimal) -> Product:
        return self._found(self._repo.get_by_price(price), "price", price)

    def get_product_by_stock(self, stock: int) -> Product:
        return self._found(self._repo.get_by_stock(stock), "stock", stock)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: int) -> Product:
        return self._found(self._repo.get_by_id(id), "ID", id)

    def _found(self, product: Optional[Product], key: str, value: object) -> Product:
        if product is None:
            logger.info("product.not_found", key=key, value=str(value))
            raise ProductNotFound(key, value)
        return product

    def _ensure_name_available(self, name: str, exclude_id: Optional[int] = None) -> None:
        if self._repo.exists_by_name(name, exclude_id=exclude_id):
            logger.warning("product.duplicate_name", name=name)
            raise ProductAlreadyExists(name)
