# libs/shop_common/resolvers.py
"""
Resolver decorator that wraps GraphQL results in the GraphQL envelope.
"""

import functools
import inspect
from collections.abc import Mapping
from typing import Any, Callable, Optional

from fastapi.encoders import jsonable_encoder
from strawberry.types import Info

from .logging import get_logger
from .normalizer import ResponseNormalizer
from .resources import ResourceRegistry
from .routing import request_language

logger = get_logger(__name__)


def _find_info(args: tuple, kwargs: dict) -> Optional[Info]:
    for value in (*kwargs.values(), *args):
        if isinstance(value, Info):
            return value
    return None


def _language(info: Optional[Info], normalizer: ResponseNormalizer) -> Optional[str]:
    if info is None:
        return None
    context = info.context
    request = context.get("request") if isinstance(context, Mapping) else getattr(
        context, "request", None
    )
    if request is None:
        return None
    return request_language(request, normalizer)


def graphql_envelope(
    normalizer: ResponseNormalizer,
    registry: ResourceRegistry,
    resource: Optional[str] = None,
    action: Optional[str] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """
    Decorate a sync or async resolver so its result is normalized.

    Args:
        normalizer: Shared ResponseNormalizer
        registry: Resolver name to (resource, action) configuration
        resource: Optional resource name registered for this resolver
        action: Optional action name registered for this resolver

    Resolvers must declare a ``strawberry.Info`` parameter for the request
    language to be honored; without it the fallback language is used.
    """

    def decorator(resolver: Callable[..., Any]) -> Callable[..., Any]:
        name = resolver.__name__
        if resource or action:
            if name in registry:
                logger.warning(f"Resolver '{name}' registered twice, last names win")
            registry.register(name, resource, action)

        def shape(result: Any, info: Optional[Info]) -> dict:
            names = registry.resolve(name, resolver)
            return normalizer.normalize_graphql(
                jsonable_encoder(result),
                names.resource,
                names.action,
                lang=_language(info, normalizer),
            )

        if inspect.iscoroutinefunction(resolver):

            @functools.wraps(resolver)
            async def async_wrapper(*args: Any, **kwargs: Any) -> dict:
                result = await resolver(*args, **kwargs)
                return shape(result, _find_info(args, kwargs))

            return async_wrapper

        @functools.wraps(resolver)
        def wrapper(*args: Any, **kwargs: Any) -> dict:
            return shape(resolver(*args, **kwargs), _find_info(args, kwargs))

        return wrapper

    return decorator
