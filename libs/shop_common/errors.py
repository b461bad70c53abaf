"""
HTTP exception helpers for enveloped endpoints.

Raised errors bypass the response envelope. FastAPI renders them as
``{"detail": {"error": ..., "detail": ...}}`` with an ``ErrorResponse`` body.
"""

from typing import Optional, Union

from fastapi import HTTPException, status
from pydantic import ValidationError

from .models import ErrorResponse
from .resources import to_camel


def _http_error(status_code: int, error: str, detail: str) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail=ErrorResponse(error=error, detail=detail).model_dump(),
    )


def validation_error(
    detail: str = "Invalid input parameters", field: Optional[str] = None
) -> HTTPException:
    """
    Create a 422 exception for input the service rejected.

    Args:
        detail: What was wrong with the input
        field: Optional request field (camelCase, as the client sent it)
    """
    if field:
        detail = f"{detail} for field '{field}'"
    return _http_error(status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation Error", detail)


def invalid_fields_error(exc: ValidationError) -> HTTPException:
    """
    Create a 422 exception listing every field a model rejected.

    Locations are reported in camelCase so they match the request body,
    e.g. ``name: Input should be a valid string; categoryIds: ...``.
    """
    problems = []
    for error in exc.errors():
        location = ".".join(to_camel(str(part)) for part in error["loc"]) or "body"
        problems.append(f"{location}: {error['msg']}")
    return validation_error("; ".join(problems))


def not_found_error(entity_type: str, entity_id: Union[str, int]) -> HTTPException:
    """Create a 404 exception, e.g. ``Product with ID 'SKU-404' not found``."""
    return _http_error(
        status.HTTP_404_NOT_FOUND,
        "Not Found",
        f"{entity_type.title()} with ID '{entity_id}' not found",
    )
