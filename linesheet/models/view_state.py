from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .record import LineSheetRecord

"""ViewState model: the per-session state owned by the view-model.

State transitions never mutate a ViewState; the reducer in
services.view_model returns a new instance (dataclasses.replace).
"""

__all__ = [
    "ALL",
    "ViewMode",
    "ViewState",
]

# Filter sentinel meaning "no filtering on this dimension"
ALL = "All"


class ViewMode(Enum):
    """Client variant layout toggle."""
    GRID = "grid"
    TABLE = "table"


@dataclass(frozen=True)
class ViewState:
    """Everything a mounted line sheet view keeps between events."""
    records: tuple[LineSheetRecord, ...] = ()  # current batch
    search_term: str = ""
    category_filter: str = ALL
    status_filter: str = ALL
    current_page: int = 1  # 1-based, clamped to [1, max(1, total_pages)]
    view_mode: ViewMode = ViewMode.GRID  # client variant only
    error: str | None = None  # user-visible parse failure message
    generation: int = 0  # bumped on every begun upload (last-write-wins)
