from __future__ import annotations
import pytest
from linesheet.services.pagination import clamp_page, next_page, paginate, previous_page, total_pages_for


@pytest.mark.parametrize("count,size,expected", [(0, 9, 0), (1, 9, 1), (9, 9, 1), (10, 9, 2), (25, 10, 3)])
def test_total_pages(count, size, expected):
    assert total_pages_for(count, size) == expected


def test_total_pages_rejects_non_positive_size():
    with pytest.raises(ValueError):
        total_pages_for(5, 0)


def test_paginate_first_page():
    page = paginate(list(range(1, 26)), 10, 1)
    assert page.items == list(range(1, 11))
    assert page.total_pages == 3
    assert (page.range_start, page.range_end) == (1, 10)


def test_paginate_last_partial_page():
    page = paginate(list(range(1, 26)), 10, 3)
    assert page.items == [21, 22, 23, 24, 25]
    assert (page.range_start, page.range_end, page.total_items) == (21, 25, 25)


def test_paginate_clamps_out_of_range_page():
    page = paginate(list(range(12)), 9, 7)
    assert page.current_page == 2
    assert len(page.items) == 3


def test_paginate_empty():
    page = paginate([], 9, 1)
    assert page.items == []
    assert page.total_pages == 0
    assert page.current_page == 1
    assert (page.range_start, page.range_end) == (0, 0)


@pytest.mark.parametrize("page,total,expected", [(0, 3, 1), (2, 3, 2), (5, 3, 3), (4, 0, 1), (-1, 0, 1)])
def test_clamp_page(page, total, expected):
    assert clamp_page(page, total) == expected


def test_navigation_bounds():
    assert previous_page(1) == 1
    assert previous_page(3) == 2
    assert next_page(3, 3) == 3
    assert next_page(1, 3) == 2
    assert next_page(1, 0) == 1
