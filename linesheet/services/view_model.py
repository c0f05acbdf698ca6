from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path

from ..config.loader import Settings, default_settings
from ..ingest.reader import IngestionParseError, parse_csv_bytes
from ..models.field_schema import SchemaVariant
from ..models.page_view import PageView
from ..models.record import LineSheetRecord
from ..models.view_state import ViewMode, ViewState
from .coercion import coerce_rows
from .filtering import distinct_values, filter_records
from .metrics import record_margin
from .pagination import clamp_page, next_page, paginate, previous_page, total_pages_for

"""View-model assembler.

State lives in an immutable ViewState. Every user-driven event is applied by
``reduce(state, event, schema, settings)``, which returns a new state and
keeps ``current_page`` inside [1, max(1, total_pages)]. ``build_page_view``
turns a state into the PageView a rendering surface draws.

LineSheetViewModel is the per-session container: it owns one ViewState,
runs uploads through reader -> coercion and dispatches events.
"""

__all__ = [
    "Ingested",
    "IngestionFailed",
    "SearchChanged",
    "CategoryChanged",
    "StatusChanged",
    "PageNext",
    "PagePrevious",
    "ViewModeChanged",
    "reduce",
    "build_page_view",
    "UploadTicket",
    "LineSheetViewModel",
]

logger = logging.getLogger(__name__)


# Events ---------------------------------------------------------------

@dataclass(frozen=True)
class Ingested:
    records: tuple[LineSheetRecord, ...]


@dataclass(frozen=True)
class IngestionFailed:
    message: str


@dataclass(frozen=True)
class SearchChanged:
    term: str


@dataclass(frozen=True)
class CategoryChanged:
    value: str


@dataclass(frozen=True)
class StatusChanged:
    value: str


@dataclass(frozen=True)
class PageNext:
    pass


@dataclass(frozen=True)
class PagePrevious:
    pass


@dataclass(frozen=True)
class ViewModeChanged:
    mode: ViewMode


Event = (
    Ingested | IngestionFailed | SearchChanged | CategoryChanged | StatusChanged
    | PageNext | PagePrevious | ViewModeChanged
)


def _filtered(state: ViewState, settings: Settings) -> list[LineSheetRecord]:
    return filter_records(
        state.records,
        state.search_term,
        state.category_filter,
        state.status_filter,
        all_sentinel=settings.all_sentinel,
    )


def _total_pages(state: ViewState, schema: SchemaVariant, settings: Settings) -> int:
    page_size = settings.for_variant(schema.name).page_size
    return total_pages_for(len(_filtered(state, settings)), page_size)


def _after_filter_change(state: ViewState, schema: SchemaVariant, settings: Settings) -> ViewState:
    if settings.for_variant(schema.name).reset_page_on_filter:
        return replace(state, current_page=1)
    return replace(state, current_page=clamp_page(state.current_page, _total_pages(state, schema, settings)))


def reduce(state: ViewState, event: Event, schema: SchemaVariant, settings: Settings | None = None) -> ViewState:
    """Apply one event to ``state`` and return the new state."""
    settings = settings or default_settings()

    if isinstance(event, Ingested):
        # fresh batch: page 1, default filters, error cleared
        return ViewState(
            records=tuple(event.records),
            category_filter=settings.all_sentinel,
            status_filter=settings.all_sentinel,
            view_mode=state.view_mode,
            generation=state.generation,
        )
    if isinstance(event, IngestionFailed):
        if settings.keep_batch_on_error:
            return replace(state, error=event.message)
        return ViewState(
            category_filter=settings.all_sentinel,
            status_filter=settings.all_sentinel,
            view_mode=state.view_mode,
            error=event.message,
            generation=state.generation,
        )
    if isinstance(event, SearchChanged):
        return _after_filter_change(replace(state, search_term=event.term), schema, settings)
    if isinstance(event, CategoryChanged):
        return _after_filter_change(replace(state, category_filter=event.value), schema, settings)
    if isinstance(event, StatusChanged):
        return _after_filter_change(replace(state, status_filter=event.value), schema, settings)
    if isinstance(event, PageNext):
        return replace(state, current_page=next_page(state.current_page, _total_pages(state, schema, settings)))
    if isinstance(event, PagePrevious):
        return replace(state, current_page=previous_page(state.current_page))
    if isinstance(event, ViewModeChanged):
        if not schema.has_view_mode:
            return state
        return replace(state, view_mode=event.mode)
    raise TypeError(f"unsupported event: {type(event).__name__}")


def build_page_view(state: ViewState, schema: SchemaVariant, settings: Settings | None = None) -> PageView:
    """Filter -> paginate the current batch into a render-ready PageView.

    Category/status option lists come from the full batch so the dropdowns
    always offer every value, whatever is currently filtered.
    """
    settings = settings or default_settings()
    filtered = _filtered(state, settings)
    page = paginate(filtered, settings.for_variant(schema.name).page_size, state.current_page)
    return PageView(
        variant=schema.name,
        records=page.items,
        total_pages=page.total_pages,
        current_page=page.current_page,
        range_start=page.range_start,
        range_end=page.range_end,
        filtered_count=page.total_items,
        total_count=len(state.records),
        categories=distinct_values(state.records, "category"),
        statuses=distinct_values(state.records, "status"),
        search_term=state.search_term,
        category_filter=state.category_filter,
        status_filter=state.status_filter,
        view_mode=state.view_mode if schema.has_view_mode else None,
        margins=[record_margin(r) for r in page.items] if schema.has_margin else None,
        error=state.error,
    )


@dataclass(frozen=True)
class UploadTicket:
    generation: int


class LineSheetViewModel:
    """Per-session view-model for one line sheet variant.

    All transitions run synchronously. When an upload is read
    asynchronously by the caller, ``begin_upload`` / ``complete_upload``
    make the newest upload win: results for an older ticket are dropped.
    """

    def __init__(self, schema: SchemaVariant, settings: Settings | None = None) -> None:
        self.schema = schema
        self.settings = settings or default_settings()
        self._state = ViewState(
            category_filter=self.settings.all_sentinel,
            status_filter=self.settings.all_sentinel,
        )

    @property
    def state(self) -> ViewState:
        return self._state

    def dispatch(self, event: Event) -> PageView:
        self._state = reduce(self._state, event, self.schema, self.settings)
        return self.view()

    def view(self) -> PageView:
        return build_page_view(self._state, self.schema, self.settings)

    # Upload handling ------------------------------------------------

    def begin_upload(self) -> UploadTicket:
        self._state = replace(self._state, generation=self._state.generation + 1)
        return UploadTicket(self._state.generation)

    def complete_upload(self, ticket: UploadTicket, data: bytes) -> PageView:
        """Parse ``data`` and install it unless a newer upload has begun."""
        if ticket.generation != self._state.generation:
            logger.debug(
                f"dropping stale upload generation={ticket.generation} current={self._state.generation}"
            )
            return self.view()
        try:
            rows = parse_csv_bytes(data)
        except IngestionParseError as e:
            logger.warning(f"upload rejected: {e}")
            return self.dispatch(IngestionFailed(self.settings.error_message))
        records = coerce_rows(rows, self.schema)
        logger.info(f"loaded {len(records)} {self.schema.name} line sheet items")
        return self.dispatch(Ingested(tuple(records)))

    def upload(self, data: bytes) -> PageView:
        return self.complete_upload(self.begin_upload(), data)

    def upload_file(self, path: Path) -> PageView:
        """File-picker path; OSError reading the file propagates."""
        return self.upload(path.read_bytes())

    # Convenience wrappers for rendering surfaces -----------------------

    def set_search(self, term: str) -> PageView:
        return self.dispatch(SearchChanged(term))

    def set_category(self, value: str) -> PageView:
        return self.dispatch(CategoryChanged(value))

    def set_status(self, value: str) -> PageView:
        return self.dispatch(StatusChanged(value))

    def next_page(self) -> PageView:
        return self.dispatch(PageNext())

    def previous_page(self) -> PageView:
        return self.dispatch(PagePrevious())

    def set_view_mode(self, mode: ViewMode) -> PageView:
        return self.dispatch(ViewModeChanged(mode))
