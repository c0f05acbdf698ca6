from .headers import normalize_header
from .reader import IngestionParseError, parse_csv_bytes, parse_csv_text, read_csv_file

__all__ = [
    "normalize_header",
    "IngestionParseError",
    "parse_csv_bytes",
    "parse_csv_text",
    "read_csv_file",
]
