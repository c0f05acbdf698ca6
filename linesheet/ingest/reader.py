from __future__ import annotations

import csv
import io
import logging
from pathlib import Path

import pandas as pd

from .headers import normalize_header

"""CSV reader: raw upload -> list of RawRow.

- The first non-empty line is the header row; header tokens are normalized
  (lower-case, no whitespace) so spelling variants map to one key.
- Empty lines are skipped. So are lines holding only whitespace: the pandas
  tokenizer drops them, and the field-count check treats them as blank too
  rather than as rows with too few fields.
- Values are kept verbatim as strings. pandas NA detection is disabled so
  cells such as "N/A" or "null" stay text; coercion decides what they mean.
- Any structural problem (unterminated quote, a row wider or narrower than
  the header) aborts the whole parse with IngestionParseError.
"""

__all__ = [
    "IngestionParseError",
    "parse_csv_text",
    "parse_csv_bytes",
    "read_csv_file",
]

logger = logging.getLogger(__name__)


class IngestionParseError(Exception):
    """Raised when the uploaded file is not structurally valid CSV."""


def _is_blank(record: list[str]) -> bool:
    return not record or (len(record) == 1 and not record[0].strip())


def _check_field_counts(text: str) -> None:
    # pandas pads short rows with "" when NA detection is off, so widths are
    # compared on the raw records instead
    width = None
    line_no = 0
    for record in csv.reader(io.StringIO(text)):
        if _is_blank(record):
            continue
        line_no += 1
        if width is None:
            width = len(record)
        elif len(record) < width:
            raise IngestionParseError(
                f"malformed CSV: too few fields in row {line_no} (expected {width}, got {len(record)})"
            )


def _read_frame(text: str) -> pd.DataFrame | None:
    try:
        return pd.read_csv(
            io.StringIO(text),
            header=None,  # header row applied manually after normalization
            dtype=str,
            keep_default_na=False,
            na_values=[],
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return None
    except pd.errors.ParserError as e:
        raise IngestionParseError(f"malformed CSV: {e}") from e


def parse_csv_text(text: str) -> list[dict[str, str]]:
    """Parse CSV text into rows keyed by normalized header.

    Returns an empty list for empty input or a header without data rows.
    """
    df = _read_frame(text)
    if df is None or df.empty:
        return []
    _check_field_counts(text)

    header = [normalize_header(str(c)) for c in df.iloc[0].tolist()]
    rows: list[dict[str, str]] = []
    for raw in df.iloc[1:].itertuples(index=False, name=None):
        row: dict[str, str] = {}
        for key, val in zip(header, raw, strict=True):
            if not key:
                continue
            row[key] = val  # duplicate keys: right-most column wins
        rows.append(row)
    logger.debug(f"parsed {len(rows)} rows columns={[h for h in header if h]}")
    return rows


def parse_csv_bytes(data: bytes) -> list[dict[str, str]]:
    """Decode an uploaded blob (UTF-8, BOM tolerated) and parse it."""
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise IngestionParseError(f"file is not UTF-8 text: {e}") from e
    return parse_csv_text(text)


def read_csv_file(path: Path) -> list[dict[str, str]]:
    """Read and parse a CSV file from disk.

    OSError (missing file, permissions) propagates unchanged; it is not a
    parse failure.
    """
    return parse_csv_bytes(path.read_bytes())
