from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..ingest.headers import normalize_header

"""Field schema descriptors for the two line sheet variants.

A SchemaVariant is the single source of truth for one presentation variant:
which columns are read, how each is coerced, the default applied when a cell
is missing or malformed, the page size and whether the margin metric applies.
The coercion, filtering and pagination services are generic over it.
"""

__all__ = [
    "FieldKind",
    "FieldSpec",
    "SchemaVariant",
    "CLIENT_SCHEMA",
    "INTERNAL_SCHEMA",
    "get_schema",
]


class FieldKind(Enum):
    """Coercion kind for a single column."""
    STRING = "string"
    INT = "int"
    FLOAT = "float"


@dataclass(frozen=True)
class FieldSpec:
    """One column of a line sheet record.

    ``key`` is the record attribute name (camelCase, as the source sheets
    spell it). The CSV column is matched on ``header_key``.
    """
    key: str
    kind: FieldKind = FieldKind.STRING
    default: object = ""

    @property
    def header_key(self) -> str:
        return normalize_header(self.key)


@dataclass(frozen=True)
class SchemaVariant:
    """Descriptor for a presentation variant (client / internal)."""
    name: str
    fields: tuple[FieldSpec, ...]
    page_size: int
    has_margin: bool = False  # internal view shows (production - factory) / factory
    has_view_mode: bool = False  # client view toggles grid/table

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(f.key for f in self.fields)

    def field(self, key: str) -> FieldSpec:
        for f in self.fields:
            if f.key == key:
                return f
        raise KeyError(f"schema '{self.name}' has no field '{key}'")


def _text(key: str) -> FieldSpec:
    return FieldSpec(key, FieldKind.STRING, "")


def _int(key: str) -> FieldSpec:
    return FieldSpec(key, FieldKind.INT, 0)


def _money(key: str) -> FieldSpec:
    return FieldSpec(key, FieldKind.FLOAT, 0.0)


CLIENT_SCHEMA = SchemaVariant(
    name="client",
    fields=(
        _text("name"),
        _money("balance"),
        _int("minOrderQuantity"),
        _text("sampleLeadTime"),
        _text("bulkLeadTime"),
        _text("status"),
        _text("sizes"),
        _text("fabricMaterial"),
        _text("category"),
        _text("imageUrl"),
    ),
    page_size=9,
    has_view_mode=True,
)

INTERNAL_SCHEMA = SchemaVariant(
    name="internal",
    fields=(
        _text("name"),
        _int("minOrderQuantity"),
        _money("sampleCost"),
        _money("productionCost"),
        _money("factoryCost"),
        _text("shipping"),
        _text("sampleLeadTime"),
        _text("bulkLeadTime"),
        _text("status"),
        _text("note"),
        _text("sizes"),
        _text("fabricMaterial"),
        _text("category"),
        _text("imageUrl"),
        _text("alibabaUrl"),
    ),
    page_size=10,
    has_margin=True,
)

_SCHEMAS = {s.name: s for s in (CLIENT_SCHEMA, INTERNAL_SCHEMA)}


def get_schema(name: str) -> SchemaVariant:
    try:
        return _SCHEMAS[name]
    except KeyError:
        raise KeyError(f"unknown line sheet variant: {name!r} (expected one of {sorted(_SCHEMAS)})") from None
