from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Mapping
from typing import Any

from ..models.field_schema import FieldKind, FieldSpec, SchemaVariant
from ..models.record import LineSheetRecord

"""Record coercion: RawRow -> LineSheetRecord.

Coercion is best effort and total. A cell that cannot be read as its field
kind takes the field default; nothing here raises for bad input. Numbers are
read from the leading numeric prefix of the cell, so "12 pcs" reads as 12 and
"12.9" as an integer field reads as 12 (truncated toward zero).
"""

__all__ = [
    "coerce_int",
    "coerce_float",
    "coerce_value",
    "coerce_row",
    "coerce_rows",
]

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def coerce_int(raw: str | None, default: int = 0) -> int:
    if raw is None:
        return default
    m = _INT_PREFIX.match(raw)
    if m is None:
        return default
    return int(m.group(1))


def coerce_float(raw: str | None, default: float = 0.0) -> float:
    if raw is None:
        return default
    m = _FLOAT_PREFIX.match(raw)
    if m is None:
        return default
    token = m.group(1).replace("Infinity", "inf")
    value = float(token)
    if math.isnan(value) or value == 0:
        # "-0" reads as the default too
        return default
    return value


def coerce_value(spec: FieldSpec, raw: str | None) -> Any:
    """Coerce one cell according to its field spec."""
    if spec.kind is FieldKind.INT:
        return coerce_int(raw, spec.default)  # type: ignore[arg-type]
    if spec.kind is FieldKind.FLOAT:
        return coerce_float(raw, spec.default)  # type: ignore[arg-type]
    return spec.default if raw is None else raw


def coerce_row(raw: Mapping[str, str], position: int, schema: SchemaVariant) -> LineSheetRecord:
    """Build a record of ``schema`` from a normalized row.

    ``position`` (1-based) becomes the record id; an ``id`` column in the
    file is ignored. Columns the schema does not know are dropped.
    """
    values = {spec.key: coerce_value(spec, raw.get(spec.header_key)) for spec in schema.fields}
    return LineSheetRecord(id=position, variant=schema.name, values=values)


def coerce_rows(rows: Iterable[Mapping[str, str]], schema: SchemaVariant) -> list[LineSheetRecord]:
    """Coerce a whole batch, numbering records 1..N in input order."""
    records = [coerce_row(raw, i, schema) for i, raw in enumerate(rows, start=1)]
    logger.debug(f"coerced {len(records)} rows as variant={schema.name}")
    return records
