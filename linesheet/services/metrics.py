from __future__ import annotations

import math

from ..models.record import LineSheetRecord

"""Derived metrics for the internal line sheet.

Margin is computed at render time from the coerced costs and is never
stored on the record.
"""


def compute_margin(production_cost: float, factory_cost: float) -> float:
    """Markup of production cost over factory cost, in percent.

    Returns 0 when factory_cost is exactly 0, and when either cost is
    infinite (an "Infinity" cell). The result is otherwise unbounded and may
    be negative.
    """
    if factory_cost == 0:
        return 0.0
    margin = (production_cost - factory_cost) / factory_cost * 100
    return margin if math.isfinite(margin) else 0.0


def record_margin(record: LineSheetRecord) -> float:
    return compute_margin(record.get("productionCost", 0.0), record.get("factoryCost", 0.0))
