"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
``modules.core.exception_handler`` translates them into HTTP
responses by their base kind.
"""

from __future__ import annotations

from modules.core.exceptions import EntityAlreadyExists, EntityNotFound


class ProductAlreadyExists(EntityAlreadyExists):
    """A product with the same name (case-insensitive) already exists.

    Covers RN-PRO-001 (unique name).
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Product already exists with the name: {name}")


class ProductNotFound(EntityNotFound):
    """The requested product does not exist."""

    def __init__(self, key: str, value: object) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Product not found with {key}: {value}")
