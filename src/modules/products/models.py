"""Product model with case-insensitive name uniqueness.

Business rules implemented:
- RN-PRO-001: Name must be unique in the system (case-insensitive).
- RN-PRO-002: Price must be greater than zero.
- RN-PRO-003: Stock must be greater than zero.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models.functions import Lower


class Product(models.Model):
    """Product entity.

    ``id`` is assigned by the datastore.  Name uniqueness is checked by
    the service before every write and backed by a functional UNIQUE
    INDEX on ``LOWER(name)``, so "Widget" and "widget" cannot coexist
    even when two requests race past the service-level check.
    """

    id = models.BigAutoField(primary_key=True, db_column="product_id")
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    stock = models.PositiveIntegerField(validators=[MinValueValidator(1)])

    class Meta:
        db_table = "tb_product"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["price"], name="products_price_idx"),
            models.Index(fields=["stock"], name="products_stock_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                Lower("name"),
                name="products_name_ci_unique",
            ),
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
            models.CheckConstraint(
                condition=models.Q(stock__gt=0),
                name="products_stock_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if not self.name or not self.name.strip():
            raise ValidationError({"name": "Name must not be blank."})
        if self.price is not None and self.price <= 0:
            raise ValidationError({"price": "Price must be greater than zero."})
        if self.stock is not None and self.stock <= 0:
            raise ValidationError({"stock": "Stock must be greater than zero."})

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
