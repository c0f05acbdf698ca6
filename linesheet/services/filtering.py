from __future__ import annotations

from collections.abc import Sequence

from ..models.record import LineSheetRecord
from ..models.view_state import ALL

"""Filter engine: name search plus category/status equality filters.

Filtering is recomputed from scratch over the full batch on every change;
batches are tens to low hundreds of rows.
"""

__all__ = [
    "filter_records",
    "distinct_values",
]


def filter_records(
    records: Sequence[LineSheetRecord],
    search_term: str = "",
    category_filter: str = ALL,
    status_filter: str = ALL,
    all_sentinel: str = ALL,
) -> list[LineSheetRecord]:
    """Return the records matching every active filter, in batch order.

    - search_term: case-insensitive substring of ``name`` ("" matches all)
    - category_filter / status_filter: exact, case-sensitive equality unless
      the filter equals ``all_sentinel``
    """
    needle = search_term.lower()
    return [
        r
        for r in records
        if needle in r.get("name", "").lower()
        and (category_filter == all_sentinel or r.get("category", "") == category_filter)
        and (status_filter == all_sentinel or r.get("status", "") == status_filter)
    ]


def distinct_values(records: Sequence[LineSheetRecord], key: str) -> list[str]:
    """Distinct values of ``key`` across the batch, first-seen order."""
    # dict keeps insertion order
    return list(dict.fromkeys(r.get(key, "") for r in records))
