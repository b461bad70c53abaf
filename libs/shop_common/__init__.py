"""
Shared utilities for the shop backend services.

This package provides the response envelope pipeline (status keys, payload
shaping, localized messages) together with the common configuration,
logging, middleware and models used by every service.
"""

# Configuration
from .config import BaseServiceConfig, ResponseConfig

# Error helpers
from .errors import invalid_fields_error, not_found_error, validation_error

# Translation
from .i18n import TranslationService, resolve_language, resolve_message

# Logging
from .logging import get_logger

# Middleware
from .middleware import CorrelationIdMiddleware

# Models
from .models import (
    BaseResponse,
    ErrorResponse,
    GraphQLEnvelope,
    HealthResponse,
    HealthStatus,
    HttpEnvelope,
    PaginatedResult,
    PaginationMeta,
    PaginationParams,
)

# Normalization
from .normalizer import ResponseNormalizer
from .pagination import paginate
from .payload import (
    ClassifiedPayload,
    PayloadKind,
    build_base_response,
    classify_payload,
    is_empty_payload,
    unwrap_envelope,
)
from .resources import ResourceAction, ResourceRegistry
from .status import OutcomeKey, resolve_status_key, resolve_success

# Transport adapters
from .resolvers import graphql_envelope
from .routing import envelope_route_class

__all__ = [
    # Configuration
    "BaseServiceConfig",
    "ResponseConfig",
    # Errors
    "validation_error",
    "not_found_error",
    "invalid_fields_error",
    # Translation
    "TranslationService",
    "resolve_language",
    "resolve_message",
    # Logging
    "get_logger",
    # Middleware
    "CorrelationIdMiddleware",
    # Models
    "BaseResponse",
    "ErrorResponse",
    "GraphQLEnvelope",
    "HealthResponse",
    "HealthStatus",
    "HttpEnvelope",
    "PaginatedResult",
    "PaginationMeta",
    "PaginationParams",
    # Normalization
    "ResponseNormalizer",
    "paginate",
    "ClassifiedPayload",
    "PayloadKind",
    "build_base_response",
    "classify_payload",
    "is_empty_payload",
    "unwrap_envelope",
    "ResourceAction",
    "ResourceRegistry",
    "OutcomeKey",
    "resolve_status_key",
    "resolve_success",
    # Transport adapters
    "graphql_envelope",
    "envelope_route_class",
]
