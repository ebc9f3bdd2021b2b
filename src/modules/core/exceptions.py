"""Base domain exceptions shared by every module.

Each module derives its own exceptions from these bases so that the
API layer can map an error *kind* to an HTTP status in a single place
(see ``modules.core.exception_handler``).
"""

from __future__ import annotations


class DomainError(Exception):
    """Root of all business-rule violations raised by the Service Layer."""


class EntityNotFound(DomainError):
    """The lookup / update / delete target does not exist."""


class EntityAlreadyExists(DomainError):
    """A uniqueness rule would be violated by the requested write."""
