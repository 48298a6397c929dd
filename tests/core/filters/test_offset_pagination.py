from typing import Any

from core.filters.offset_pagination import OffsetPagination
from core.utils.constants import MAX_LIMIT, MIN_LIMIT


class TestOffsetPagination:
    def test_paginate_first_page(self) -> None:
        items: list[dict[str, Any]] = [{"id": i} for i in range(50)]

        page, total, has_more = OffsetPagination.paginate(items, offset=0, limit=20)

        assert len(page) == 20
        assert total == 50
        assert has_more is True

    def test_paginate_last_page(self) -> None:
        items: list[dict[str, Any]] = [{"id": i} for i in range(50)]

        page, total, has_more = OffsetPagination.paginate(items, offset=40, limit=20)

        assert len(page) == 10
        assert has_more is False

    def test_paginate_offset_beyond_range(self) -> None:
        page, total, has_more = OffsetPagination.paginate([{"id": 1}], offset=100, limit=10)

        assert page == []
        assert total == 1
        assert has_more is False

    def test_validate(self) -> None:
        assert OffsetPagination.validate(limit=MIN_LIMIT, offset=0) == (True, "")
        assert "at least" in OffsetPagination.validate(limit=MIN_LIMIT - 1, offset=0)[1]
        assert "must not exceed" in OffsetPagination.validate(limit=MAX_LIMIT + 1, offset=0)[1]
        assert OffsetPagination.validate(limit=10, offset=-1) == (
            False,
            "Offset must be zero or a positive integer",
        )

    def test_next_offset(self) -> None:
        assert OffsetPagination.next_offset(20, 10, True) == 30
        assert OffsetPagination.next_offset(20, 10, False) is None
