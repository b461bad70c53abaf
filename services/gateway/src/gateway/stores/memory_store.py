# gateway/stores/memory_store.py
"""
In-memory catalog store.
"""

import threading
from typing import Dict, Iterable, List, Optional

from libs.shop_common.logging import get_logger

from ..interfaces import CatalogStoreInterface
from ..models import Category, Product, UserProfile

logger = get_logger(__name__)


SAMPLE_CATEGORIES = [
    Category(id=1, name="Electronics"),
    Category(id=2, name="Audio", parent_id=1),
    Category(id=3, name="Home"),
    Category(id=4, name="Kitchen", parent_id=3),
]

SAMPLE_PRODUCTS = [
    Product(sku_id="SKU-001", name="Wireless Headphones", price=99.99, stock=25, category_ids=[1, 2]),
    Product(sku_id="SKU-002", name="Bluetooth Speaker", price=149.99, stock=10, category_ids=[1, 2]),
    Product(sku_id="SKU-003", name="USB-C Charger", price=19.99, stock=120, category_ids=[1]),
    Product(sku_id="SKU-004", name="Smart Watch", price=199.0, stock=8, category_ids=[1]),
    Product(sku_id="SKU-005", name="Rice Cooker", price=59.5, stock=30, category_ids=[3, 4]),
    Product(sku_id="SKU-006", name="Electric Kettle", price=29.9, stock=40, category_ids=[3, 4]),
    Product(sku_id="SKU-007", name="Desk Lamp", price=24.0, stock=15, category_ids=[3]),
    Product(sku_id="SKU-008", name="Blender", price=79.0, stock=0, category_ids=[3, 4]),
    Product(sku_id="SKU-009", name="Soundbar", price=249.0, stock=5, category_ids=[1, 2]),
    Product(sku_id="SKU-010", name="Air Fryer", price=89.0, stock=12, category_ids=[3, 4]),
    Product(sku_id="SKU-011", name="Earbuds", price=49.0, stock=60, category_ids=[1, 2]),
    Product(sku_id="SKU-012", name="Toaster", price=34.0, stock=22, category_ids=[3, 4]),
]

SAMPLE_USERS = [
    UserProfile(user_id=1, name="Nguyen Van A", email="a@example.com", phone="0900000001"),
    UserProfile(user_id=2, name="Tran Thi B", email="b@example.com", address="Da Nang"),
]


class InMemoryCatalogStore(CatalogStoreInterface):
    """Dictionary-backed store guarded by a single lock."""

    def __init__(
        self,
        products: Iterable[Product] = (),
        categories: Iterable[Category] = (),
        users: Iterable[UserProfile] = (),
    ):
        self._lock = threading.Lock()
        self._products: Dict[str, Product] = {p.sku_id: p for p in products}
        self._categories: Dict[int, Category] = {c.id: c for c in categories}
        self._users: Dict[int, UserProfile] = {u.user_id: u for u in users}
        self._last_category_id = max(self._categories, default=0)

    @classmethod
    def with_sample_data(cls) -> "InMemoryCatalogStore":
        store = cls(
            products=[p.model_copy() for p in SAMPLE_PRODUCTS],
            categories=[c.model_copy() for c in SAMPLE_CATEGORIES],
            users=[u.model_copy() for u in SAMPLE_USERS],
        )
        logger.info(
            f"In-memory store seeded with {len(store._products)} products "
            f"and {len(store._categories)} categories"
        )
        return store

    def list_products(self) -> List[Product]:
        with self._lock:
            return [self._products[sku] for sku in sorted(self._products)]

    def get_product(self, sku_id: str) -> Optional[Product]:
        with self._lock:
            return self._products.get(sku_id)

    def save_product(self, product: Product) -> Product:
        with self._lock:
            self._products[product.sku_id] = product
        return product

    def delete_product(self, sku_id: str) -> Optional[Product]:
        with self._lock:
            return self._products.pop(sku_id, None)

    def list_categories(self) -> List[Category]:
        with self._lock:
            return [self._categories[cid] for cid in sorted(self._categories)]

    def get_category(self, category_id: int) -> Optional[Category]:
        with self._lock:
            return self._categories.get(category_id)

    def save_category(self, category: Category) -> Category:
        with self._lock:
            self._categories[category.id] = category
            self._last_category_id = max(self._last_category_id, category.id)
        return category

    def next_category_id(self) -> int:
        with self._lock:
            self._last_category_id += 1
            return self._last_category_id

    def get_user(self, user_id: int) -> Optional[UserProfile]:
        with self._lock:
            return self._users.get(user_id)

    def save_user(self, profile: UserProfile) -> UserProfile:
        with self._lock:
            self._users[profile.user_id] = profile
        return profile

    def health_check(self) -> bool:
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._products)
