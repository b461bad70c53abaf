# libs/shop_common/routing.py
"""
FastAPI route class that wraps endpoint results in the HTTP envelope.

Usage:
    router = APIRouter(route_class=envelope_route_class(normalizer, registry))

Endpoints keep returning plain data (or a ``BaseResponse``); FastAPI
serializes it as usual and the route handler rewrites the JSON body as
``{success, statusCode, message, payload}``.
"""

import json
from typing import Any, Callable, Coroutine, Optional, Type

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute
from starlette.responses import StreamingResponse

from .i18n import resolve_language
from .logging import get_logger
from .normalizer import ResponseNormalizer
from .resources import ResourceRegistry
from .status import NO_CONTENT

logger = get_logger(__name__)

SKIPPED_HEADERS = {b"content-length", b"content-type"}


def request_language(request: Request, normalizer: ResponseNormalizer) -> str:
    """Language set by middleware, else parsed from Accept-Language."""
    language = getattr(request.state, "language", None)
    if language:
        return language
    return resolve_language(
        request.headers.get("accept-language"),
        normalizer.config.supported_languages,
        normalizer.config.fallback_language,
    )


def _is_json(response: Response) -> bool:
    if isinstance(response, StreamingResponse) or not hasattr(response, "body"):
        return False
    content_type = response.headers.get("content-type", "")
    return content_type.startswith("application/json")


def envelope_route_class(
    normalizer: ResponseNormalizer, registry: ResourceRegistry
) -> Type[APIRoute]:
    """
    Build an ``APIRoute`` subclass bound to a normalizer and a registry.

    Args:
        normalizer: Shared ResponseNormalizer
        registry: Route name to (resource, action) configuration

    Returns:
        Route class for ``APIRouter(route_class=...)``
    """

    class EnvelopeRoute(APIRoute):
        def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
            original_route_handler = super().get_route_handler()
            route = self

            async def envelope_route_handler(request: Request) -> Response:
                # Exceptions propagate to the app's exception handlers
                response = await original_route_handler(request)
                return wrap_response(route, request, response)

            return envelope_route_handler

    def wrap_response(route: APIRoute, request: Request, response: Response) -> Response:
        if not _is_json(response):
            return response

        try:
            raw = json.loads(response.body) if response.body else None
        except ValueError as e:
            logger.warning(f"Response of '{route.name}' is not valid JSON, left as is: {e}")
            return response

        hint: Optional[str] = str(route.tags[0]) if route.tags else None
        resource, action = registry.resolve(route.name, route.endpoint, hint=hint)
        envelope = normalizer.normalize_http(
            raw,
            response.status_code,
            resource,
            action,
            lang=request_language(request, normalizer),
        )

        if envelope.status_code == NO_CONTENT:
            # 204 responses cannot carry a body
            wrapped = Response(status_code=NO_CONTENT)
        else:
            wrapped = JSONResponse(
                envelope.model_dump(by_alias=True), status_code=envelope.status_code
            )

        wrapped.raw_headers.extend(
            (name, value)
            for name, value in response.raw_headers
            if name.lower() not in SKIPPED_HEADERS
        )
        wrapped.background = response.background
        return wrapped

    return EnvelopeRoute
