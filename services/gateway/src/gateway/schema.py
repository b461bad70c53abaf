# gateway/schema.py
"""
GraphQL schema for category management.

Resolvers return plain service results; ``graphql_envelope`` turns them into
``{success, message, data}`` or ``{success, message, items, pagination}``
dictionaries, which the schema's default resolver reads by key.
"""

from collections.abc import Mapping
from typing import Any, List, Optional

import strawberry
from strawberry.schema.config import StrawberryConfig
from strawberry.types import Info

from libs.shop_common.models import PaginationParams
from libs.shop_common.resolvers import graphql_envelope
from libs.shop_common.resources import to_camel

from .envelopes import graphql_resolvers, normalizer
from .services.catalog_service import CatalogService


def resolve_field(source: Any, field_name: str) -> Any:
    """Read fields from envelope dicts (camelCase keys) or objects."""
    if isinstance(source, Mapping):
        if field_name in source:
            return source[field_name]
        return source.get(to_camel(field_name))
    return getattr(source, field_name)


@strawberry.type
class CategoryType:
    id: int
    name: str
    parent_id: Optional[int] = None


@strawberry.type
class PaginationType:
    current_page: int
    total_pages: int
    page_size: int
    total_items: int
    items_on_page: int


@strawberry.type
class CategoriesResponse:
    success: bool
    message: str
    items: List[CategoryType]
    pagination: Optional[PaginationType] = None


@strawberry.type
class CategoryResponse:
    success: bool
    message: str
    data: Optional[CategoryType] = None


@strawberry.input
class CategoryInput:
    name: str
    parent_id: Optional[int] = None


@strawberry.input
class UpdateCategoryInput:
    id: int
    name: Optional[str] = None
    parent_id: Optional[int] = None


def _catalog(info: Info) -> CatalogService:
    return info.context["catalog"]


def _category_not_found(category_id: Any) -> ValueError:
    return ValueError(f"Category with ID '{category_id}' not found")


@strawberry.type
class Query:
    @strawberry.field
    @graphql_envelope(
        normalizer, graphql_resolvers, resource="category", action="getCategories"
    )
    def get_categories(
        self,
        info: Info,
        page: Optional[int] = None,
        page_size: Optional[int] = None,
    ) -> CategoriesResponse:
        return _catalog(info).list_categories(
            PaginationParams(page=page, page_size=page_size)
        )


@strawberry.type
class Mutation:
    @strawberry.mutation
    @graphql_envelope(
        normalizer, graphql_resolvers, resource="category", action="createCategory"
    )
    def create_category(self, info: Info, input: CategoryInput) -> CategoryResponse:
        try:
            return _catalog(info).create_category(input.name, input.parent_id)
        except KeyError as e:
            raise _category_not_found(e.args[0]) from e

    @strawberry.mutation
    @graphql_envelope(
        normalizer, graphql_resolvers, resource="category", action="updateCategory"
    )
    def update_category(
        self, info: Info, input: UpdateCategoryInput
    ) -> CategoryResponse:
        try:
            return _catalog(info).update_category(
                input.id, name=input.name, parent_id=input.parent_id
            )
        except KeyError as e:
            raise _category_not_found(e.args[0]) from e


schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(default_resolver=resolve_field),
)
