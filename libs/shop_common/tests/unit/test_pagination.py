import pytest

from libs.shop_common.models import PaginationParams
from libs.shop_common.pagination import paginate


@pytest.mark.unit
class TestPaginate:
    ITEMS = list(range(1, 24))

    def test_defaults(self):
        result = paginate(self.ITEMS)
        assert result.items == self.ITEMS
        assert result.paginations.current_page == 1
        assert result.paginations.page_size == 50
        assert result.paginations.total_pages == 1

    def test_second_page(self):
        result = paginate(self.ITEMS, PaginationParams(page=2, page_size=10))
        assert result.items == list(range(11, 21))
        assert result.paginations.total_pages == 3
        assert result.paginations.items_on_page == 10
        assert result.paginations.total_items == 23

    def test_page_is_clamped_to_last_page(self):
        result = paginate(self.ITEMS, PaginationParams(page=9, page_size=10))
        assert result.paginations.current_page == 3
        assert result.items == [21, 22, 23]

    def test_page_size_is_capped(self):
        result = paginate(self.ITEMS, PaginationParams(page_size=500), max_page_size=5)
        assert result.paginations.page_size == 5
        assert len(result.items) == 5

    def test_empty_sequence(self):
        result = paginate([], PaginationParams(page=3))
        assert result.items == []
        assert result.paginations.total_pages == 1
        assert result.paginations.current_page == 1

    def test_serializes_with_camel_case_metadata(self):
        dumped = paginate([1, 2], PaginationParams(page_size=1)).model_dump(by_alias=True)
        assert dumped == {
            "items": [1],
            "paginations": {
                "currentPage": 1,
                "totalPages": 2,
                "pageSize": 1,
                "totalItems": 2,
                "itemsOnPage": 1,
            },
        }

    def test_params_accept_camel_case(self):
        assert PaginationParams.model_validate({"pageSize": 7}).page_size == 7
