# gateway/dependencies.py
"""FastAPI dependency providers."""

from typing import Any, Dict, Optional

from fastapi import Depends

from .config import config
from .services.catalog_service import CatalogService
from .stores.memory_store import InMemoryCatalogStore

_catalog_service: Optional[CatalogService] = None


def get_catalog_service() -> CatalogService:
    """
    Dependency provider for CatalogService.
    In tests, this can be overridden to provide a service over a fresh store.
    """
    global _catalog_service
    if _catalog_service is None:
        store = (
            InMemoryCatalogStore.with_sample_data()
            if config.seed_sample_data
            else InMemoryCatalogStore()
        )
        _catalog_service = CatalogService(
            store,
            default_page_size=config.default_page_size,
            max_page_size=config.max_page_size,
        )
    return _catalog_service


async def get_graphql_context(
    catalog: CatalogService = Depends(get_catalog_service),
) -> Dict[str, Any]:
    """Strawberry merges request/response into this dict."""
    return {"catalog": catalog}
