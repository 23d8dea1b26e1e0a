"""Dataset loading and numeric normalization. The snapshot lives in data.store."""
from .loader import load_rows, rows_from_bytes
from .normalize import is_string_numeric, parse_numeric_strings
