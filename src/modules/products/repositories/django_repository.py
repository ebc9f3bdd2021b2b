"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

import structlog

from django.db import IntegrityError, transaction

from modules.products.exceptions import ProductAlreadyExists
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

NAME_UNIQUE_CONSTRAINT = "products_name_ci_unique"


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key."""
        return Product.objects.filter(id=id).first()

    def list(self) -> List[Product]:
        return list(Product.objects.all())

    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product.

        A write that trips the case-insensitive name index (two requests
        racing past the service-level check) is reported as
        ``ProductAlreadyExists``.
        """
        try:
            with transaction.atomic():
                entity.save()
        except IntegrityError as exc:
            if NAME_UNIQUE_CONSTRAINT not in str(exc) and not self._name_taken(entity):
                raise
            logger.warning("product.duplicate_name", name=entity.name, source="db")
            raise ProductAlreadyExists(entity.name) from exc
        return entity

    @transaction.atomic
    def delete(self, id: int) -> bool:
        """Delete a product by ID.

        Returns ``True`` if the product was found and removed,
        ``False`` if no product exists with the given ID.
        """
        deleted, _ = Product.objects.filter(id=id).delete()
        return deleted > 0

    def get_by_name(self, name: str) -> Optional[Product]:
        return Product.objects.filter(name__iexact=name).first()

    # Price and stock are not unique: the lowest id wins.
    def get_by_price(self, price: Decimal) -> Optional[Product]:
        return Product.objects.filter(price=price).order_by("id").first()

    def get_by_stock(self, stock: int) -> Optional[Product]:
        return Product.objects.filter(stock=stock).order_by("id").first()

    def exists_by_name(self, name: str, exclude_id: Optional[int] = None) -> bool:
        queryset = Product.objects.filter(name__iexact=name)
        if exclude_id is not None:
            queryset = queryset.exclude(id=exclude_id)
        return queryset.exists()

    def _name_taken(self, entity: Product) -> bool:
        return self.exists_by_name(entity.name, exclude_id=entity.pk)
