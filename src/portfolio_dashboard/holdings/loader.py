"""
Holdings file loader.

The holdings file is hand-maintained JSON exported from spreadsheets, so it
often carries stray control characters, trailing commas, comment lines or
literal NaN. Strict parsing is tried first; on failure the text goes through
a repair pass and is parsed once more.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Union

from portfolio_dashboard.core.exceptions import HoldingsFileError

logger = logging.getLogger(__name__)

_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x19]")
_NAN = re.compile(r"\bNaN\b")
_TRAILING_COMMA = re.compile(r",(\s*[}\]])")
_COMMENT_LINE = re.compile(r"^[ \t]*(//|#).*$", re.MULTILINE)


def _null_constant(name: str) -> None:
    """NaN, Infinity and -Infinity are read as null."""
    return None


def sanitize_json_text(raw: str) -> str:
    """Best-effort repair of malformed JSON text."""
    text = raw.lstrip("\ufeff")
    text = _CONTROL_CHARS.sub("", text)
    text = _NAN.sub("null", text)
    text = _COMMENT_LINE.sub("", text)
    text = _TRAILING_COMMA.sub(r"\1", text)
    return text.strip()


def parse_holdings(raw: str) -> list[dict[str, Any]]:
    """Parse holdings text; a single top-level object becomes a one-element list."""
    try:
        parsed = json.loads(raw, parse_constant=_null_constant)
    except json.JSONDecodeError:
        logger.info("Holdings JSON is malformed, attempting repair")
        try:
            parsed = json.loads(sanitize_json_text(raw), parse_constant=_null_constant)
        except json.JSONDecodeError as exc:
            raise HoldingsFileError(f"Holdings file is not valid JSON after repair: {exc}") from exc

    records = parsed if isinstance(parsed, list) else [parsed]
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise HoldingsFileError(
                f"Holding #{index} is {type(record).__name__}, expected an object"
            )
    return records


def load_holdings(path: Union[str, Path]) -> list[dict[str, Any]]:
    """Read and parse the holdings file."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise HoldingsFileError(f"Cannot read holdings file {path}: {exc}") from exc

    holdings = parse_holdings(raw)
    logger.debug("Loaded %d holdings from %s", len(holdings), path)
    return holdings
