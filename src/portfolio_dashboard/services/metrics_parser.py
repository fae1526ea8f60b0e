"""
Best-effort extraction of P/E and earnings figures from a quote page.

Each heuristic is an independent attempt returning a number or None; the
first attempt that matches wins. A page that matches nothing yields nulls.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Sequence

from portfolio_dashboard.domain.views import SecondaryMetric

logger = logging.getLogger(__name__)

_NUMBER = r"([0-9]+(?:\.[0-9]+)?)"


@dataclass(frozen=True)
class PatternHeuristic:
    """A named regex whose first capture group is the figure."""

    name: str
    pattern: re.Pattern

    def extract(self, text: str) -> Optional[float]:
        match = self.pattern.search(text)
        if not match:
            return None
        try:
            return float(match.group(1))
        except (TypeError, ValueError):
            return None


def _labeled(name: str, label: str, stop: str = r"0-9\n") -> PatternHeuristic:
    """Label followed by anything except digits and stop characters, then a number."""
    return PatternHeuristic(name, re.compile(label + r"[^" + stop + r"]*" + _NUMBER, re.IGNORECASE))


def _json_field(name: str, key: str) -> PatternHeuristic:
    return PatternHeuristic(name, re.compile(r'"' + key + r'":\s*' + _NUMBER, re.IGNORECASE))


# Earnings labels must not run across minus signs or dashes (negative/placeholder values)
_EARNINGS_STOP = r"0-9\n\-–—"

PE_HEURISTICS: tuple[PatternHeuristic, ...] = (
    _labeled("pe_label", r"P/E"),
    _labeled("pe_ratio_label", r"PE ratio"),
    _json_field("pe_json", "PE_RATIO"),
)

EARNINGS_HEURISTICS: tuple[PatternHeuristic, ...] = (
    _labeled("earnings_label", r"Earnings", _EARNINGS_STOP),
    _labeled("eps_label", r"EPS", _EARNINGS_STOP),
    _json_field("eps_json", "EPS"),
    _labeled("recent_earnings_label", r"Recent earnings", _EARNINGS_STOP),
)

_DATA_BLOCK = re.compile(r"AF_initDataCallback\(([^<]+)\);")
_KEY_NUMBER = re.compile(r'"(\w+)":\s*' + _NUMBER)


def first_match(heuristics: Sequence[PatternHeuristic], text: str) -> Optional[float]:
    """Run heuristics in order and return the first figure found."""
    for heuristic in heuristics:
        value = heuristic.extract(text)
        if value is not None:
            logger.debug("Matched %s -> %s", heuristic.name, value)
            return value
    return None


def data_block_numbers(text: str) -> list[float]:
    """First key/number pair from each embedded AF_initDataCallback(...) block, in page order."""
    numbers = []
    for block in _DATA_BLOCK.findall(text):
        match = _KEY_NUMBER.search(block)
        if match:
            numbers.append(float(match.group(2)))
    return numbers


def parse_metrics(text: str) -> SecondaryMetric:
    """Extract P/E and earnings; either may be None."""
    if not text:
        return SecondaryMetric.empty()

    pe = first_match(PE_HEURISTICS, text)
    earnings = first_match(EARNINGS_HEURISTICS, text)

    if pe is None or earnings is None:
        for number in data_block_numbers(text):
            if pe is None:
                pe = number
            elif earnings is None:
                earnings = number
            else:
                break

    return SecondaryMetric(pe=pe, earnings=earnings)
