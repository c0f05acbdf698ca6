from __future__ import annotations

from dataclasses import dataclass

from .record import LineSheetRecord
from .view_state import ViewMode

"""PageView model: the render-ready output of the view-model.

Rendering collaborators (grid/table surfaces, the CLI) consume a PageView and
nothing else.
"""

__all__ = [
    "PageView",
]


@dataclass(frozen=True)
class PageView:
    """Current page of the filtered batch plus pagination and filter metadata.

    ``range_start``/``range_end`` are the 1-based bounds for the
    "Showing X-Y of Z items" line; both are 0 when nothing matches.
    ``margins`` is parallel to ``records`` for the internal variant and
    None otherwise.
    """
    variant: str
    records: list[LineSheetRecord]
    total_pages: int
    current_page: int
    range_start: int
    range_end: int
    filtered_count: int
    total_count: int
    categories: list[str]
    statuses: list[str]
    search_term: str
    category_filter: str
    status_filter: str
    view_mode: ViewMode | None = None
    margins: list[float] | None = None
    error: str | None = None

    @property
    def show_pagination(self) -> bool:
        return self.total_pages > 1

    @property
    def can_previous(self) -> bool:
        return self.current_page > 1

    @property
    def can_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def is_empty(self) -> bool:
        return self.filtered_count == 0
