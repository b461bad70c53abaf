# services/gateway/tests/unit/test_catalog_service.py
"""
Unit tests for CatalogService business logic over the in-memory store.
"""

import pytest
from pydantic import ValidationError

from gateway.models import ProductUpdate, UserProfileUpdate
from libs.shop_common.models import PaginationParams
from libs.shop_common.status import OutcomeKey


@pytest.mark.unit
class TestProducts:
    def test_list_uses_default_page_size(self, catalog):
        result = catalog.list_products()
        assert len(result.items) == 10
        assert result.paginations.total_items == 12
        assert result.paginations.total_pages == 2

    def test_list_second_page(self, catalog):
        result = catalog.list_products(PaginationParams(page=2, page_size=10))
        assert [p.sku_id for p in result.items] == ["SKU-011", "SKU-012"]

    def test_get_missing_product_raises(self, catalog):
        with pytest.raises(KeyError):
            catalog.get_product("SKU-404")

    def test_update_without_changes_is_unchanged(self, catalog):
        result = catalog.update_product("SKU-001", ProductUpdate(price=99.99))
        assert result.status_key == OutcomeKey.UNCHANGED
        assert result.data.price == 99.99

    def test_empty_update_is_unchanged(self, catalog):
        result = catalog.update_product("SKU-001", ProductUpdate())
        assert result.status_key == OutcomeKey.UNCHANGED

    def test_update_with_changes(self, catalog, store):
        result = catalog.update_product("SKU-001", ProductUpdate(stock=3, name="Headphones"))
        assert result.status_key == OutcomeKey.SUCCESS
        assert result.data.stock == 3
        assert store.get_product("SKU-001").name == "Headphones"

    def test_update_rejects_unknown_categories(self, catalog):
        with pytest.raises(ValueError, match="Unknown category ids"):
            catalog.update_product("SKU-001", ProductUpdate(category_ids=[1, 99]))

    def test_null_for_required_field_is_not_stored(self, catalog, store):
        with pytest.raises(ValidationError):
            catalog.update_product("SKU-001", ProductUpdate(name=None))
        assert store.get_product("SKU-001").name == "Wireless Headphones"

    def test_delete(self, catalog):
        removed = catalog.delete_product("SKU-002")
        assert removed.name == "Bluetooth Speaker"
        with pytest.raises(KeyError):
            catalog.delete_product("SKU-002")


@pytest.mark.unit
class TestProfiles:
    def test_get_profile(self, catalog):
        assert catalog.get_profile(2).address == "Da Nang"

    def test_update_profile(self, catalog):
        result = catalog.update_profile(1, UserProfileUpdate(address="Ha Noi"))
        assert result.status_key == OutcomeKey.SUCCESS
        assert result.data.address == "Ha Noi"

    def test_same_values_are_unchanged(self, catalog):
        result = catalog.update_profile(1, UserProfileUpdate(name="Nguyen Van A"))
        assert result.status_key == OutcomeKey.UNCHANGED

    def test_optional_field_can_be_cleared(self, catalog):
        result = catalog.update_profile(1, UserProfileUpdate(phone=None))
        assert result.status_key == OutcomeKey.SUCCESS
        assert result.data.phone is None

    def test_missing_user(self, catalog):
        with pytest.raises(KeyError):
            catalog.update_profile(9, UserProfileUpdate(name="Nobody"))


@pytest.mark.unit
class TestCategories:
    def test_list_categories(self, catalog):
        result = catalog.list_categories(PaginationParams(page_size=3))
        assert [c.name for c in result.items] == ["Electronics", "Audio", "Home"]
        assert result.paginations.total_pages == 2

    def test_create_category(self, catalog):
        category = catalog.create_category("  Garden ", parent_id=3)
        assert category.id == 5
        assert category.name == "Garden"
        assert category.parent_id == 3

    def test_create_rejects_duplicate_names(self, catalog):
        with pytest.raises(ValueError, match="already exists"):
            catalog.create_category("audio")

    def test_create_rejects_empty_name(self, catalog):
        with pytest.raises(ValueError):
            catalog.create_category("   ")

    def test_create_with_missing_parent(self, catalog):
        with pytest.raises(KeyError):
            catalog.create_category("Garden", parent_id=42)

    def test_update_category(self, catalog):
        category = catalog.update_category(2, name="Hi-Fi")
        assert category.name == "Hi-Fi"
        assert category.parent_id == 1

    def test_category_cannot_be_its_own_parent(self, catalog):
        with pytest.raises(ValueError):
            catalog.update_category(2, parent_id=2)

    def test_update_missing_category(self, catalog):
        with pytest.raises(KeyError):
            catalog.update_category(99, name="Nothing")
