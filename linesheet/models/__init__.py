"""Domain models for the line sheet viewer.

Schema descriptors, coerced records, view state and the render-ready
page view handed to presentation collaborators.
"""

from .field_schema import CLIENT_SCHEMA, INTERNAL_SCHEMA, FieldKind, FieldSpec, SchemaVariant, get_schema
from .page_view import PageView
from .record import LineSheetRecord, RawRow
from .view_state import ViewMode, ViewState

__all__ = [
    # Schema descriptors
    "FieldKind",
    "FieldSpec",
    "SchemaVariant",
    "CLIENT_SCHEMA",
    "INTERNAL_SCHEMA",
    "get_schema",
    # Records
    "RawRow",
    "LineSheetRecord",
    # View
    "ViewMode",
    "ViewState",
    "PageView",
]
