# gateway/interfaces.py
"""
Storage-agnostic interfaces that define the contract between
business logic and storage implementations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from .models import Category, Product, UserProfile


class CatalogStoreInterface(ABC):
    """
    Abstract interface for catalog storage backends.
    Business logic depends only on this interface, not concrete implementations.
    """

    @abstractmethod
    def list_products(self) -> List[Product]:
        """
        Get all products ordered by SKU.

        Returns:
            List of Products
        """
        pass

    @abstractmethod
    def get_product(self, sku_id: str) -> Optional[Product]:
        """
        Get a product by its SKU.

        Returns:
            The Product, or None if it does not exist
        """
        pass

    @abstractmethod
    def save_product(self, product: Product) -> Product:
        """Insert or replace a product."""
        pass

    @abstractmethod
    def delete_product(self, sku_id: str) -> Optional[Product]:
        """
        Remove a product.

        Returns:
            The removed Product, or None if it did not exist
        """
        pass

    @abstractmethod
    def list_categories(self) -> List[Category]:
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        pass

    @abstractmethod
    def save_category(self, category: Category) -> Category:
        pass

    @abstractmethod
    def next_category_id(self) -> int:
        """Reserve the identifier for a new category."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[UserProfile]:
        pass

    @abstractmethod
    def save_user(self, profile: UserProfile) -> UserProfile:
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored products."""
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """
        Check if the storage backend is healthy and accessible.

        Returns:
            True if healthy, False otherwise
        """
        pass
