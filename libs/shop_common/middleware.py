# libs/shop_common/middleware.py
"""
ASGI middleware components for FastAPI applications.

This module provides middleware for correlation ID propagation and request
language resolution.
"""

import uuid
from typing import Callable, Iterable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from .i18n import resolve_language
from .logging import get_logger


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """
    Middleware to generate and propagate correlation IDs.

    Also resolves the request language from Accept-Language once, so route
    handlers and the response envelope use the same language.
    """

    def __init__(
        self,
        app: ASGIApp,
        supported_languages: Iterable[str] = ("en",),
        fallback_language: str = "en",
        header_name: str = "X-Correlation-ID",
    ):
        """
        Initialize the middleware.

        Args:
            app: The ASGI application
            supported_languages: Languages the translation catalog provides
            fallback_language: Language used when none of the requested ones match
            header_name: The header name for the correlation ID
        """
        super().__init__(app)
        self.header_name = header_name
        self.supported_languages = tuple(supported_languages)
        self.fallback_language = fallback_language
        self.logger = get_logger("correlation")

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        correlation_id = request.headers.get(self.header_name)

        if not correlation_id:
            correlation_id = str(uuid.uuid4())
            self.logger.debug(
                f"Generated new correlation ID: {correlation_id}",
                extra={"correlation_id": correlation_id},
            )

        request.state.correlation_id = correlation_id
        request.state.language = resolve_language(
            request.headers.get("accept-language"),
            self.supported_languages,
            self.fallback_language,
        )

        response = await call_next(request)
        response.headers[self.header_name] = correlation_id
        return response
