"""Helpers for loosely-structured holding records: tolerant field lookup and numeric coercion."""

import math
import re
from typing import Any, Mapping, Optional

_WHITESPACE = re.compile(r"\s+")


def normalize_key(key: Any) -> str:
    """Normalize a field name or display name: drop all whitespace and uppercase."""
    return _WHITESPACE.sub("", str(key)).upper()


def normalize_symbol(s: Optional[str]) -> Optional[str]:
    """Normalize symbol: strip whitespace and uppercase; None or empty -> None."""
    if s is None:
        return None
    stripped = str(s).strip().upper()
    return stripped if stripped else None


def lookup_field(record: Mapping[str, Any], *candidates: str) -> Any:
    """
    Return the value of the first candidate field present in record.

    Candidates are tried exactly, in order, first. If none matches, they are
    tried again ignoring case and whitespace (so "qty", "Qty" and " QTY " are
    the same field). Returns None when nothing matches.
    """
    for name in candidates:
        if name in record:
            return record[name]

    normalized = {}
    for key in record:
        normalized.setdefault(normalize_key(key), key)
    for name in candidates:
        key = normalized.get(normalize_key(name))
        if key is not None:
            return record[key]
    return None


def to_number(value: Any) -> Optional[float]:
    """
    Coerce a loosely-typed value to float.

    Accepts ints, floats and numeric strings (thousands separators allowed).
    Returns None for missing, boolean, blank, NaN/inf or unparseable values.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def number_field(record: Mapping[str, Any], *candidates: str, default: float = 0.0) -> float:
    """Tolerant numeric field lookup; missing or unparseable -> default."""
    number = to_number(lookup_field(record, *candidates))
    return default if number is None else number


def text_field(record: Mapping[str, Any], *candidates: str) -> Optional[str]:
    """Tolerant text field lookup; returns the stripped string or None when blank."""
    value = lookup_field(record, *candidates)
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def round2(value: float) -> float:
    """Round to 2 decimal places for monetary values."""
    return round(float(value), 2)


def round4(value: float) -> float:
    """Round to 4 decimal places for ratios."""
    return round(float(value), 4)
