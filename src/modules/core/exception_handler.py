"""Process-wide translation of exceptions into HTTP responses.

Registered as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``.  Views never
catch domain exceptions themselves; everything raised while handling a
request ends up here and is mapped by *kind*:

- ``EntityNotFound``       -> 404
- ``EntityAlreadyExists``  -> 409
- ``pydantic.ValidationError`` -> 400 with field-level errors
- DRF ``APIException``     -> DRF's default response
- anything else            -> 500
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from modules.core.exceptions import EntityAlreadyExists, EntityNotFound

logger = structlog.get_logger(__name__)

VALIDATION_MESSAGE = (
    "Please, fill the required fields: name (must not be blank), "
    "price and stock (must not be negative or null)."
)


def format_validation_errors(exc: PydanticValidationError) -> List[Dict[str, str]]:
    """Flatten a Pydantic error report into ``[{"field", "message"}]``."""
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())) or "body"
        message = error.get("msg", "")
        # Messages from our own validators come prefixed by Pydantic.
        message = message.removeprefix("Value error, ")
        errors.append({"field": field, "message": message})
    return errors


def domain_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    view = context.get("view")
    log = logger.bind(view=type(view).__name__ if view else None)

    if isinstance(exc, EntityNotFound):
        log.info("api.error", kind="not_found", detail=str(exc))
        return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, EntityAlreadyExists):
        log.info("api.error", kind="already_exists", detail=str(exc))
        return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)

    if isinstance(exc, PydanticValidationError):
        errors = format_validation_errors(exc)
        log.info("api.error", kind="validation_failed", errors=errors)
        return Response(
            {"detail": VALIDATION_MESSAGE, "errors": errors},
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = drf_exception_handler(exc, context)
    if response is not None:
        log.info("api.error", kind="framework", status_code=response.status_code)
        return response

    log.exception("api.error", kind="unexpected")
    return Response(
        {"detail": f"An unexpected error occurred: {exc}"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
