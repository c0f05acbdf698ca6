from __future__ import annotations
import pytest
from pathlib import Path
from linesheet.ingest.headers import normalize_header
from linesheet.ingest.reader import IngestionParseError, parse_csv_bytes, parse_csv_text, read_csv_file


@pytest.mark.parametrize("token", ["Min Order Quantity", "minOrderQuantity", "MIN ORDER QUANTITY", " min\torder quantity "])
def test_normalize_header_variants_collapse(token):
    assert normalize_header(token) == "minorderquantity"


def test_parse_normalizes_header_keys():
    rows = parse_csv_text("Name,Min Order Quantity\nShirt,10\n")
    assert rows == [{"name": "Shirt", "minorderquantity": "10"}]


def test_parse_skips_empty_lines():
    rows = parse_csv_text("\n\nname\n\nA\n\nB\n")
    # first non-empty line is the header
    assert [r["name"] for r in rows] == ["A", "B"]


def test_parse_keeps_values_verbatim():
    rows = parse_csv_text('name,note,balance\n" Padded ",N/A,null\n')
    assert rows[0] == {"name": " Padded ", "note": "N/A", "balance": "null"}


def test_parse_quoted_commas():
    rows = parse_csv_text('name,sizes\n"Wrap Dress","S, M, L"\n')
    assert rows[0]["sizes"] == "S, M, L"


def test_parse_empty_input_returns_no_rows():
    assert parse_csv_text("") == []


def test_parse_header_only_returns_no_rows():
    assert parse_csv_text("name,category\n") == []


def test_parse_ignores_blank_header_tokens():
    rows = parse_csv_text("name,,category\nA,x,Tops\n")
    assert rows == [{"name": "A", "category": "Tops"}]


def test_duplicate_normalized_headers_rightmost_wins():
    rows = parse_csv_text("Name,NAME\nfirst,second\n")
    assert rows == [{"name": "second"}]


def test_parse_too_many_fields_raises():
    with pytest.raises(IngestionParseError):
        parse_csv_text("name,category\nA,Tops\nB,Tops,extra\n")


def test_parse_too_few_fields_raises():
    with pytest.raises(IngestionParseError, match="too few fields in row 2"):
        parse_csv_text("name,category,status\nA,Tops\n")


def test_parse_short_row_after_good_rows_raises():
    with pytest.raises(IngestionParseError, match="row 3"):
        parse_csv_text("name,category,status\nA,Tops,Sampling\n\nB,Tops\n")


def test_parse_trailing_empty_field_is_not_short():
    rows = parse_csv_text("name,category,status\nA,Tops,\n")
    assert rows == [{"name": "A", "category": "Tops", "status": ""}]


def test_parse_quoted_newline_counts_as_one_row():
    rows = parse_csv_text('name,note\nA,"line one\nline two"\n')
    assert rows == [{"name": "A", "note": "line one\nline two"}]


def test_parse_skips_whitespace_only_lines():
    rows = parse_csv_text("name,category\n   \nA,Tops\n")
    assert rows == [{"name": "A", "category": "Tops"}]


def test_parse_unterminated_quote_raises():
    with pytest.raises(IngestionParseError):
        parse_csv_text('name,category\n"Unclosed,Tops\n')


def test_parse_bytes_strips_bom():
    rows = parse_csv_bytes("\ufeffName\nShirt\n".encode("utf-8"))
    assert rows == [{"name": "Shirt"}]


def test_parse_bytes_rejects_non_utf8():
    with pytest.raises(IngestionParseError):
        parse_csv_bytes(b"name\n\xff\xfe\xfa\n")


def test_read_csv_file(write_csv):
    p = write_csv("Name,Category\nShirt,Tops\n")
    assert read_csv_file(p) == [{"name": "Shirt", "category": "Tops"}]


def test_read_csv_file_missing_propagates_oserror(temp_workdir: Path):
    with pytest.raises(OSError):
        read_csv_file(temp_workdir / "missing.csv")
