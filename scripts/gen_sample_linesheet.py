#!/usr/bin/env python3
"""Sample line sheet generator.

Writes a synthetic CSV for the client or internal variant, with header
spellings mixed the way hand-made sheets are ("Min Order Quantity",
"factoryCost", "FABRIC MATERIAL") and a sprinkling of malformed numeric cells,
for trying the viewer and for manual checks of larger batches.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

from linesheet.models.field_schema import FieldKind, get_schema

CATEGORIES = ["Tops", "Bottoms", "Dresses", "Outerwear", "Co-Ords"]
STATUSES = ["In Production", "Sampling", "Approved", "On Hold"]
MATERIALS = ["Cotton", "Linen", "Denim", "Silk", "Polyester Blend"]
SIZES = ["XS-L", "S-XL", "28-36", "One Size"]
NAMES = ["Shirt", "Blouse", "Jeans", "Trousers", "Wrap Dress", "Blazer", "Cardigan", "Co-Ord Set"]


def _display_header(key: str, i: int) -> str:
    """Vary header spelling: camelCase, Title Case with spaces, or UPPER."""
    words = "".join(f" {c}" if c.isupper() else c for c in key).split()
    style = i % 3
    if style == 0:
        return key
    if style == 1:
        return " ".join(w.capitalize() for w in words)
    return " ".join(w.upper() for w in words)


def generate_linesheet(variant: str, rows: int, seed: int = 42, bad_ratio: float = 0.05) -> pd.DataFrame:
    """Build a DataFrame of ``rows`` synthetic items for ``variant``.

    Roughly ``bad_ratio`` of numeric cells are replaced with text that the
    coercer turns into its default.
    """
    schema = get_schema(variant)
    rng = np.random.default_rng(seed)

    data: dict[str, list[str]] = {}
    for i, spec in enumerate(schema.fields):
        header = _display_header(spec.key, i)
        if spec.key == "name":
            values = [f"{rng.choice(MATERIALS)} {rng.choice(NAMES)} {n + 1}" for n in range(rows)]
        elif spec.key == "category":
            values = list(rng.choice(CATEGORIES, size=rows))
        elif spec.key == "status":
            values = list(rng.choice(STATUSES, size=rows))
        elif spec.key == "fabricMaterial":
            values = list(rng.choice(MATERIALS, size=rows))
        elif spec.key == "sizes":
            values = list(rng.choice(SIZES, size=rows))
        elif spec.key.endswith("LeadTime"):
            weeks = rng.integers(1, 12, size=rows)
            # bulk lead time is optional
            values = [f"{w} weeks" if spec.key == "sampleLeadTime" or rng.random() > 0.2 else "" for w in weeks]
        elif spec.kind is FieldKind.INT:
            values = [str(v) for v in rng.integers(10, 500, size=rows)]
        elif spec.kind is FieldKind.FLOAT:
            values = [f"{v:.2f}" for v in rng.uniform(0, 80, size=rows)]
        elif spec.key.endswith("Url"):
            values = [f"https://example.com/{spec.key.lower()}/{n + 1}" for n in range(rows)]
        else:
            values = ["" for _ in range(rows)]

        if spec.kind is not FieldKind.STRING:
            mask = rng.random(rows) < bad_ratio
            values = ["n/a" if bad else v for v, bad in zip(values, mask, strict=True)]
        data[header] = values

    return pd.DataFrame(data)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a synthetic line sheet CSV")
    parser.add_argument("--variant", choices=["client", "internal"], default="client")
    parser.add_argument("--rows", type=int, default=40, help="Number of items")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--output", type=Path, default=Path("data/sample_linesheet.csv"))
    args = parser.parse_args(argv)

    if args.rows < 0:
        print("rows must be >= 0", file=sys.stderr)
        return 1

    df = generate_linesheet(args.variant, args.rows, seed=args.seed)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)
    print(f"wrote {len(df)} {args.variant} rows to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
