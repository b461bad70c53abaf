# gateway/app.py
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from strawberry.fastapi import GraphQLRouter

from libs.shop_common.errors import invalid_fields_error, not_found_error, validation_error
from libs.shop_common.logging import get_logger
from libs.shop_common.middleware import CorrelationIdMiddleware
from libs.shop_common.models import HealthResponse, HealthStatus, PaginationParams

from .config import config
from .dependencies import get_catalog_service, get_graphql_context
from .envelopes import EnvelopeRoute, translator
from .models import ProductUpdate, UserProfileUpdate
from .schema import schema
from .services.catalog_service import CatalogService

logger = get_logger(__name__, config.log_level)

app = FastAPI(
    title="API Gateway",
    description="Product, user profile and category endpoints with uniform response envelopes",
    version=config.version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(
    CorrelationIdMiddleware,
    supported_languages=config.supported_languages,
    fallback_language=config.fallback_language,
)


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health(service: CatalogService = Depends(get_catalog_service)):
    """
    Service health check endpoint.
    Not wrapped in the response envelope.
    """
    try:
        store_ready = service.store.health_check()
        return HealthResponse(
            status=HealthStatus.OK if store_ready else HealthStatus.WARNING,
            version=app.version,
            details={
                "store": "ready" if store_ready else "unavailable",
                "products": service.store.count(),
                "languages": sorted(translator.languages),
            },
        )
    except Exception as e:
        logger.error("Health check failed", exc_info=e)
        return HealthResponse(
            status=HealthStatus.ERROR, version=app.version, details={"error": str(e)}
        )


products = APIRouter(prefix="/admin/products", tags=["product"], route_class=EnvelopeRoute)


@products.get("")
async def list_products(
    page: Optional[int] = Query(None, ge=1, description="1-based page number"),
    page_size: Optional[int] = Query(None, ge=1, alias="pageSize"),
    service: CatalogService = Depends(get_catalog_service),
):
    """List products page by page; the payload carries items and pagination."""
    return service.list_products(PaginationParams(page=page, page_size=page_size))


@products.get("/{sku_id}")
async def get_product(sku_id: str, service: CatalogService = Depends(get_catalog_service)):
    try:
        return service.get_product(sku_id)
    except KeyError:
        raise not_found_error("product", sku_id)


@products.patch("/{sku_id}")
async def update_product(
    sku_id: str,
    update: ProductUpdate,
    service: CatalogService = Depends(get_catalog_service),
):
    """
    Apply a partial update.

    Responds 204 without a body when nothing changed.
    """
    try:
        return service.update_product(sku_id, update)
    except KeyError:
        raise not_found_error("product", sku_id)
    except ValidationError as e:
        raise invalid_fields_error(e)
    except ValueError as e:
        raise validation_error(str(e), field="categoryIds")


@products.delete("/{sku_id}")
async def delete_product(sku_id: str, service: CatalogService = Depends(get_catalog_service)):
    try:
        return service.delete_product(sku_id)
    except KeyError:
        raise not_found_error("product", sku_id)


users = APIRouter(prefix="/users/profile", tags=["user"], route_class=EnvelopeRoute)


@users.get("/{user_id}")
async def get_profile(user_id: int, service: CatalogService = Depends(get_catalog_service)):
    try:
        return service.get_profile(user_id)
    except KeyError:
        raise not_found_error("user", user_id)


@users.patch("/{user_id}")
async def update_profile(
    user_id: int,
    update: UserProfileUpdate,
    service: CatalogService = Depends(get_catalog_service),
):
    try:
        return service.update_profile(user_id, update)
    except KeyError:
        raise not_found_error("user", user_id)
    except ValidationError as e:
        raise invalid_fields_error(e)


app.include_router(products)
app.include_router(users)
app.include_router(
    GraphQLRouter(schema, context_getter=get_graphql_context), prefix="/graphql"
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=config.port, log_level=config.log_level.lower())
