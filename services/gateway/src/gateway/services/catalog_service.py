# gateway/services/catalog_service.py
"""
Storage-agnostic business logic for products, categories and user profiles.

Update operations return a ``BaseResponse`` so the envelope can tell a real
change (``success``) from a no-op (``unchanged``).
"""

from typing import Any, Dict, Optional, TypeVar

from pydantic import BaseModel

from libs.shop_common.logging import get_logger
from libs.shop_common.models import BaseResponse, PaginatedResult, PaginationParams
from libs.shop_common.pagination import paginate
from libs.shop_common.payload import build_base_response
from libs.shop_common.status import OutcomeKey

from ..interfaces import CatalogStoreInterface
from ..models import Category, Product, ProductUpdate, UserProfile, UserProfileUpdate

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class CatalogService:
    """
    Pure business logic layer that depends only on the CatalogStoreInterface.
    Can work with any storage backend that implements the interface.
    """

    def __init__(
        self,
        store: CatalogStoreInterface,
        default_page_size: int = 10,
        max_page_size: int = 50,
    ):
        self.store = store
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    def _paginate(self, items, params: Optional[PaginationParams]) -> PaginatedResult:
        return paginate(
            items,
            params,
            default_page_size=self.default_page_size,
            max_page_size=self.max_page_size,
        )

    @staticmethod
    def _changes(current: Any, update: Any) -> Dict[str, Any]:
        """Fields of ``update`` that were sent and differ from ``current``."""
        requested = update.model_dump(exclude_unset=True)
        return {
            field: value
            for field, value in requested.items()
            if getattr(current, field) != value
        }

    @staticmethod
    def _rebuild(current: ModelT, changes: Dict[str, Any]) -> ModelT:
        """
        Apply ``changes`` to a copy of ``current``, re-running field validation.

        Raises:
            pydantic.ValidationError: e.g. an explicit ``null`` for a required field
        """
        return type(current).model_validate({**current.model_dump(), **changes})

    # Products

    def list_products(self, params: Optional[PaginationParams] = None) -> PaginatedResult:
        return self._paginate(self.store.list_products(), params)

    def get_product(self, sku_id: str) -> Product:
        product = self.store.get_product(sku_id)
        if product is None:
            raise KeyError(sku_id)
        return product

    def update_product(self, sku_id: str, update: ProductUpdate) -> BaseResponse:
        product = self.get_product(sku_id)
        changes = self._changes(product, update)
        if not changes:
            logger.info(f"Product {sku_id} unchanged")
            return build_base_response(OutcomeKey.UNCHANGED, product)

        if changes.get("category_ids"):
            self._validate_categories(changes["category_ids"])

        updated = self.store.save_product(self._rebuild(product, changes))
        logger.info(f"Product {sku_id} updated: {sorted(changes)}")
        return build_base_response(OutcomeKey.SUCCESS, updated)

    def delete_product(self, sku_id: str) -> Product:
        removed = self.store.delete_product(sku_id)
        if removed is None:
            raise KeyError(sku_id)
        logger.info(f"Product {sku_id} deleted")
        return removed

    def _validate_categories(self, category_ids) -> None:
        missing = [cid for cid in category_ids if self.store.get_category(cid) is None]
        if missing:
            raise ValueError(f"Unknown category ids: {missing}")

    # Users

    def get_profile(self, user_id: int) -> UserProfile:
        profile = self.store.get_user(user_id)
        if profile is None:
            raise KeyError(user_id)
        return profile

    def update_profile(self, user_id: int, update: UserProfileUpdate) -> BaseResponse:
        profile = self.get_profile(user_id)
        changes = self._changes(profile, update)
        if not changes:
            return build_base_response(OutcomeKey.UNCHANGED, profile)
        updated = self.store.save_user(self._rebuild(profile, changes))
        return build_base_response(OutcomeKey.SUCCESS, updated)

    # Categories

    def list_categories(self, params: Optional[PaginationParams] = None) -> PaginatedResult:
        return self._paginate(self.store.list_categories(), params)

    def _check_name_available(self, name: str, exclude_id: Optional[int] = None) -> None:
        for category in self.store.list_categories():
            if category.id != exclude_id and category.name.lower() == name.lower():
                raise ValueError(f"Category '{name}' already exists")

    def _check_parent(self, parent_id: Optional[int], category_id: Optional[int] = None) -> None:
        if parent_id is None:
            return
        if parent_id == category_id:
            raise ValueError("A category cannot be its own parent")
        if self.store.get_category(parent_id) is None:
            raise KeyError(parent_id)

    def create_category(self, name: str, parent_id: Optional[int] = None) -> Category:
        name = name.strip()
        if not name:
            raise ValueError("Category name cannot be empty")
        self._check_name_available(name)
        self._check_parent(parent_id)

        category = Category(id=self.store.next_category_id(), name=name, parent_id=parent_id)
        logger.info(f"Category {category.id} created: {name}")
        return self.store.save_category(category)

    def update_category(
        self,
        category_id: int,
        name: Optional[str] = None,
        parent_id: Optional[int] = None,
    ) -> Category:
        category = self.store.get_category(category_id)
        if category is None:
            raise KeyError(category_id)

        changes: Dict[str, Any] = {}
        if name is not None:
            name = name.strip()
            if not name:
                raise ValueError("Category name cannot be empty")
            self._check_name_available(name, exclude_id=category_id)
            changes["name"] = name
        if parent_id is not None:
            self._check_parent(parent_id, category_id)
            changes["parent_id"] = parent_id

        return self.store.save_category(self._rebuild(category, changes))
