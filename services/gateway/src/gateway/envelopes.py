# gateway/envelopes.py
"""
Response envelope wiring for the gateway.

The translation catalog and normalizer are built once at import time and
shared by every request. Route and resolver names map to message resources
here rather than through annotations on the handlers.
"""

from libs.shop_common.i18n import TranslationService
from libs.shop_common.normalizer import ResponseNormalizer
from libs.shop_common.resources import ResourceAction, ResourceRegistry
from libs.shop_common.routing import envelope_route_class

from .config import config

translator = TranslationService.from_directory(
    config.locales_dir, fallback_language=config.fallback_language
)
normalizer = ResponseNormalizer(translator, config)

http_routes = ResourceRegistry(
    {
        "list_products": ResourceAction("product", "getAll"),
        "get_product": ResourceAction("product", "getById"),
        "update_product": ResourceAction("product", "update"),
        "delete_product": ResourceAction("product", "delete"),
        "get_profile": ResourceAction("user", "getProfile"),
        "update_profile": ResourceAction("user", "updateProfile"),
    },
    resource_fallback=config.resource_name_fallback,
    action_fallback=config.resource_action_fallback,
)

# Resolvers register their resource when decorated
graphql_resolvers = ResourceRegistry(
    resource_fallback=config.resource_name_fallback,
    action_fallback=config.resource_action_fallback,
)

EnvelopeRoute = envelope_route_class(normalizer, http_routes)
