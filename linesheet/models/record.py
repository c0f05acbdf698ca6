from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

"""LineSheetRecord model.

A LineSheetRecord is one coerced row of an ingested batch. The set of
attributes depends on the schema variant it was coerced with; every key of
that variant is present in ``values`` (missing cells carry the field
default), so attribute access never fails for a schema key.
"""

__all__ = [
    "RawRow",
    "LineSheetRecord",
]

# Normalized header key -> raw cell text, as produced by the CSV reader
RawRow = dict[str, str]


@dataclass(frozen=True)
class LineSheetRecord:
    """Typed line sheet item.

    ``id`` is the 1-based position within the batch, never read from the
    file. ``values`` maps schema keys (e.g. ``minOrderQuantity``) to coerced
    values.
    """
    id: int
    variant: str
    values: dict[str, Any] = field(default_factory=dict)

    # values is a dict, so records compare by value but are not hashable
    __hash__ = None

    def __getattr__(self, key: str) -> Any:
        # Only called for names not found normally (id / variant / values)
        values = self.__dict__.get("values")
        if values is not None and key in values:
            return values[key]
        raise AttributeError(f"{type(self).__name__} ({self.__dict__.get('variant')}) has no field '{key}'")

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)

    def to_dict(self) -> dict[str, Any]:
        """Flat mapping with ``id`` first, in schema order."""
        return {"id": self.id, **self.values}
