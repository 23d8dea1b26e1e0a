"""
Numeric-text detection and row normalization.

The CSV arrives as all-text. A value is converted to a number only when five
independent parse checks agree it is a plain decimal or integer literal, which
keeps things like "1e3", " 5 ", "0x1F" or "4/5" as text.
"""
from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping

from program_review.planner.schemas import Row

# ---------------------------------------------------------------------------
# Browser-style numeric coercion helpers
# ---------------------------------------------------------------------------

_WHITESPACE = (
    " \t\n\v\f\r\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_PLAIN_NUMBER_RE = re.compile(r"[+-]?\d+(\.\d+)?", re.ASCII)
_DECIMAL_LITERAL_RE = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII
)
_RADIX_LITERALS = [
    (re.compile(r"0[xX][0-9a-fA-F]+"), 16),
    (re.compile(r"0[oO][0-7]+"), 8),
    (re.compile(r"0[bB][01]+"), 2),
]


def _literal_to_float(literal: str) -> float:
    unsigned = literal.lstrip("+-")
    value = math.inf if unsigned == "Infinity" else float(unsigned)
    return -value if literal.startswith("-") else value


def coerce_number(text: str) -> float:
    """Whole-string coercion: blank → 0, radix prefixes allowed, junk → NaN."""
    s = text.strip(_WHITESPACE)
    if not s:
        return 0.0
    for pattern, base in _RADIX_LITERALS:
        if pattern.fullmatch(s):
            return float(int(s[2:], base))
    if _DECIMAL_LITERAL_RE.fullmatch(s):
        return _literal_to_float(s)
    return math.nan


def parse_float_prefix(text: str) -> float:
    """Parse the longest leading decimal literal, NaN when there is none."""
    m = _DECIMAL_LITERAL_RE.match(text.lstrip(_WHITESPACE))
    if m is None:
        return math.nan
    return _literal_to_float(m.group(0))


# ---------------------------------------------------------------------------
# The five checks: all must pass
# ---------------------------------------------------------------------------

def _not_nan_value(text) -> bool:
    return not (isinstance(text, float) and math.isnan(text))


def _matches_plain_number(text: str) -> bool:
    return _PLAIN_NUMBER_RE.fullmatch(text) is not None


def _coerces_to_number(text: str) -> bool:
    return not math.isnan(coerce_number(text))


def _coerces_to_finite(text: str) -> bool:
    return math.isfinite(coerce_number(text))


def _equals_parsed_float(text: str) -> bool:
    return coerce_number(text) == parse_float_prefix(text)


NUMERIC_CHECKS = [
    _not_nan_value,
    _matches_plain_number,
    _coerces_to_number,
    _coerces_to_finite,
    _equals_parsed_float,
]


def is_string_numeric(text: str | None = "") -> bool:
    """True when `text` is unambiguously a plain integer/decimal literal."""
    if text is None:
        text = ""
    if not isinstance(text, str):
        return False
    return sum(1 for check in NUMERIC_CHECKS if check(text)) == len(NUMERIC_CHECKS)


def string_to_number(text: str = "") -> int | float:
    """Convert numeric text; integer literals stay ints."""
    try:
        return int(text)
    except ValueError:
        return float(text)


# ---------------------------------------------------------------------------
# Row normalization
# ---------------------------------------------------------------------------

def parse_numeric_strings(rows, keep_text: Iterable[str] = ()) -> list[Row]:
    """Return new rows with every numeric-text value converted to a number.

    Non-string values and non-numeric text pass through untouched, so the
    function is idempotent. Columns named in `keep_text` are never converted.
    Anything that is not a list of rows gives [].
    """
    if not isinstance(rows, (list, tuple)):
        return []
    keep_text = set(keep_text)
    out: list[Row] = []
    for row in rows:
        if not isinstance(row, Mapping):
            out.append({})
            continue
        out.append({
            key: string_to_number(value)
            if key not in keep_text and is_string_numeric(value) else value
            for key, value in row.items()
        })
    return out
