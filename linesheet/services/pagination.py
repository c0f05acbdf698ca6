from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

"""Paginator: fixed-size pages over a filtered sequence.

Pages are 1-based. Navigation never leaves [1, max(1, total_pages)].
"""

__all__ = [
    "Page",
    "total_pages_for",
    "clamp_page",
    "previous_page",
    "next_page",
    "paginate",
]

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    items: list[T]
    current_page: int
    total_pages: int
    range_start: int  # 1-based, 0 when empty
    range_end: int  # inclusive, 0 when empty
    total_items: int


def total_pages_for(count: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return math.ceil(count / page_size)


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(page, 1), max(1, total_pages))


def previous_page(page: int) -> int:
    return max(page - 1, 1)


def next_page(page: int, total_pages: int) -> int:
    return min(page + 1, max(1, total_pages))


def paginate(items: Sequence[T], page_size: int, current_page: int) -> Page[T]:
    """Slice ``items`` for ``current_page`` (clamped first).

    The display range is [start + 1, min(start + page_size, len(items))],
    reported as (0, 0) when there are no items.
    """
    count = len(items)
    total = total_pages_for(count, page_size)
    page = clamp_page(current_page, total)
    start = (page - 1) * page_size
    sliced = list(items[start:start + page_size])
    if count == 0:
        return Page(items=[], current_page=page, total_pages=0, range_start=0, range_end=0, total_items=0)
    return Page(
        items=sliced,
        current_page=page,
        total_pages=total,
        range_start=start + 1,
        range_end=min(start + page_size, count),
        total_items=count,
    )
