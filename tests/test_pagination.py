"""
Pagination metadata.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from snipshare.shared.schemas.common import PaginationMeta, PaginationParams


class TestPaginationMeta:

    def test_first_of_three_pages(self):
        meta = PaginationMeta.create(page=1, limit=10, total=25)
        assert meta.total_pages == 3
        assert meta.has_next is True
        assert meta.has_prev is False

    def test_last_page(self):
        meta = PaginationMeta.create(page=3, limit=10, total=25)
        assert meta.has_next is False
        assert meta.has_prev is True

    def test_page_past_the_end(self):
        meta = PaginationMeta.create(page=5, limit=10, total=25)
        assert meta.current_page == 5
        assert meta.has_next is False
        assert meta.has_prev is True

    def test_empty_listing(self):
        meta = PaginationMeta.create(page=1, limit=10, total=0)
        assert meta.total_pages == 0
        assert meta.has_next is False
        assert meta.has_prev is False

    def test_exact_multiple(self):
        assert PaginationMeta.create(page=1, limit=10, total=20).total_pages == 2

    def test_serializes_camel_case(self):
        body = PaginationMeta.create(page=2, limit=10, total=25).model_dump(by_alias=True)
        assert body == {
            "currentPage": 2,
            "totalPages": 3,
            "totalSnippets": 25,
            "hasNext": True,
            "hasPrev": True,
        }


class TestPaginationParams:

    def test_offset(self):
        assert PaginationParams(page=3, limit=10).offset == 20

    def test_defaults(self):
        params = PaginationParams()
        assert (params.page, params.limit, params.offset) == (1, 10, 0)

    @pytest.mark.parametrize("page,limit", [(0, 10), (1, 0), (1, 101)])
    def test_rejects_out_of_range(self, page, limit):
        with pytest.raises(PydanticValidationError):
            PaginationParams(page=page, limit=limit)
