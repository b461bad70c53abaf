# libs/shop_common/models.py
"""
Shared Pydantic models used across all services.
"""

from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .status import OutcomeKey

# Generic type for paginated results
T = TypeVar("T")


class PaginationParams(BaseModel):
    """
    Page-based pagination parameters.

    Both values are optional; missing or out-of-range values are replaced
    with defaults by ``paginate``.
    """

    model_config = ConfigDict(populate_by_name=True)

    page: Optional[int] = Field(None, ge=1, description="1-based page number")
    page_size: Optional[int] = Field(
        None, ge=1, alias="pageSize", description="Number of items per page"
    )


class PaginationMeta(BaseModel):
    """
    Pagination metadata attached to paginated results.

    Example:
        {
            "currentPage": 1,
            "totalPages": 5,
            "pageSize": 10,
            "totalItems": 42,
            "itemsOnPage": 10
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    current_page: int = Field(..., alias="currentPage")
    total_pages: int = Field(..., alias="totalPages")
    page_size: int = Field(..., alias="pageSize")
    total_items: int = Field(..., alias="totalItems")
    items_on_page: int = Field(..., alias="itemsOnPage")


class PaginatedResult(BaseModel, Generic[T]):
    """
    A page of items as returned by services.

    The ``paginations`` field name is what the response normalizer looks for
    to emit list semantics (``items`` + ``pagination``).
    """

    items: List[T] = Field(..., description="Items in this page")
    paginations: PaginationMeta = Field(..., description="Page metadata")


class BaseResponse(BaseModel, Generic[T]):
    """
    Optional wrapper a handler returns to pre-declare its outcome.

    Serialized as ``{"statusKey": "...", "data": ...}``.
    """

    model_config = ConfigDict(populate_by_name=True)

    status_key: OutcomeKey = Field(..., alias="statusKey")
    data: Optional[T] = None


class HttpEnvelope(BaseModel):
    """
    Uniform HTTP response body.

    Example:
        {
            "success": true,
            "statusCode": 200,
            "message": "Product list retrieved",
            "payload": [{"skuId": "SKU-1"}]
        }
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = Field(..., description="Derived from status code and outcome")
    status_code: int = Field(..., alias="statusCode")
    message: str
    payload: Any = Field(default_factory=dict)


class GraphQLEnvelope(BaseModel):
    """
    Uniform GraphQL resolver result.

    Only the fields that were set are emitted, so a result carries either
    ``data`` or ``items`` with ``pagination``, never both.
    """

    success: bool
    message: str
    data: Any = None
    items: Any = None
    pagination: Any = None


class ErrorResponse(BaseModel):
    """
    Standard error response model used across all services.

    Example:
        {
            "error": "Not Found",
            "detail": "Product with ID 'SKU-404' not found"
        }
    """

    error: str = Field(..., description="Error code or type")
    detail: Optional[str] = Field(None, description="Human-readable error details")


class HealthStatus(str, Enum):
    """Health status reported by /health endpoints."""

    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


class HealthResponse(BaseModel):
    """
    Standard health check response model for /health endpoints.

    Example:
        {
            "status": "ok",
            "version": "1.0.0",
            "details": {"products": 3, "languages": ["en", "vi"]}
        }
    """

    status: HealthStatus = Field(..., description="Overall health status")
    version: str = Field(..., description="Service version identifier")
    details: Dict[str, Any] = Field(
        default_factory=dict, description="Service-specific health details"
    )
