import math

import pytest

from app.core.schemas import PaginationMeta, success_response, total_pages


class TestTotalPages:
    @pytest.mark.parametrize(
        ("total_items", "per_page", "expected"),
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (15, 10, 2), (100, 1, 100)],
    )
    def test_should_match_ceiling_division(self, total_items, per_page, expected):
        assert total_pages(total_items, per_page) == expected
        assert expected == math.ceil(total_items / per_page)

    def test_should_return_zero_pages_when_no_items(self):
        assert total_pages(0, 25) == 0


class TestPaginationMeta:
    def test_should_serialize_with_camel_case_keys(self):
        meta = PaginationMeta.from_query(total=15, page=2, limit=10)

        assert meta.model_dump(by_alias=True) == {
            "currentPage": 2,
            "totalPages": 2,
            "totalItems": 15,
            "itemsPerPage": 10,
        }


class TestSuccessResponse:
    def test_should_wrap_data_in_envelope(self):
        response = success_response("Counts retrieved successfully", {"activeAds": 3})

        assert response.model_dump() == {
            "status": "success",
            "message": "Counts retrieved successfully",
            "data": {"activeAds": 3},
        }
