# libs/shop_common/resources.py
"""
Resource/action naming for response message keys.

Routes and resolvers are mapped explicitly to a (resource, action) pair.
Handlers without an entry get names derived from the handler itself:
``ProductController.get_all`` becomes ``("product", "getAll")``.
"""

import re
from typing import Any, Callable, Dict, Mapping, NamedTuple, Optional, Tuple, Union

from .logging import get_logger

logger = get_logger(__name__)

OWNER_SUFFIXES = ("Controller", "Resolver", "Router", "Service")


class ResourceAction(NamedTuple):
    resource: str
    action: str


RouteEntry = Union[ResourceAction, Mapping[str, str]]


def to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def derive_resource_name(handler: Callable[..., Any], hint: Optional[str] = None) -> str:
    """
    Derive a resource name from the class owning ``handler``.

    Plain functions use ``hint`` (typically the first route tag) or the last
    component of their module name.
    """
    parts = handler.__qualname__.split(".")
    owner = parts[-2] if len(parts) >= 2 and parts[-2] != "<locals>" else None
    if owner:
        name = re.sub(f"({'|'.join(OWNER_SUFFIXES)})$", "", owner)
        return name.lower()
    if hint:
        return hint.lower()
    return handler.__module__.rsplit(".", 1)[-1].lower()


def derive_action_name(handler: Callable[..., Any]) -> str:
    return to_camel(handler.__name__)


class ResourceRegistry:
    """
    Explicit ``route name -> (resource, action)`` configuration.

    Entries may set only one of the two names; the other is derived.
    """

    def __init__(
        self,
        routes: Optional[Mapping[str, RouteEntry]] = None,
        resource_fallback: str = "resource",
        action_fallback: str = "action",
    ):
        self._routes: Dict[str, Tuple[Optional[str], Optional[str]]] = {}
        self.resource_fallback = resource_fallback
        self.action_fallback = action_fallback
        for name, entry in (routes or {}).items():
            if isinstance(entry, ResourceAction):
                self.register(name, entry.resource, entry.action)
            else:
                self.register(name, entry.get("resource"), entry.get("action"))

    def register(
        self, name: str, resource: Optional[str] = None, action: Optional[str] = None
    ) -> None:
        self._routes[name] = (resource, action)

    def __contains__(self, name: str) -> bool:
        return name in self._routes

    def resolve(
        self,
        name: str,
        handler: Optional[Callable[..., Any]] = None,
        hint: Optional[str] = None,
    ) -> ResourceAction:
        """
        Resolve the (resource, action) pair for a route or resolver.

        Args:
            name: Route or resolver name used as registry key
            handler: The endpoint function, used for name derivation
            hint: Optional resource hint for plain functions (e.g. a route tag)

        Returns:
            ResourceAction; never raises
        """
        resource, action = self._routes.get(name, (None, None))

        if not resource:
            try:
                resource = derive_resource_name(handler, hint)
                logger.warning(
                    f"No resource configured for '{name}', derived '{resource}'"
                )
            except Exception as e:
                logger.error(
                    f"[Get Resource Name Error]:: {e!r}. "
                    f"Fallback to {self.resource_fallback}"
                )
                resource = self.resource_fallback

        if not action:
            try:
                action = derive_action_name(handler)
                logger.warning(f"No action configured for '{name}', derived '{action}'")
            except Exception as e:
                logger.error(
                    f"[Get Resource Action Error]:: {e!r}. "
                    f"Fallback to {self.action_fallback}"
                )
                action = self.action_fallback

        return ResourceAction(resource, action)
