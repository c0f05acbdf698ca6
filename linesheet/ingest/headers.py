from __future__ import annotations

import re

"""Header key normalization shared by the CSV reader and the field schema."""

_WHITESPACE = re.compile(r"\s+")


def normalize_header(token: str) -> str:
    """Lower-case a header token and drop every whitespace character.

    "Min Order Quantity", "minOrderQuantity" and "MIN ORDER QUANTITY" all
    collapse to "minorderquantity".
    """
    return _WHITESPACE.sub("", token.lower())
