"""Symbol resolution: raw holding record -> primary exchange symbol."""

from typing import Any, Mapping, Optional, Sequence

from portfolio_dashboard.core.util import lookup_field, normalize_key, normalize_symbol, text_field
from portfolio_dashboard.domain.reference_data import EXCHANGE_SUFFIXES, SYMBOL_MAP

# Field spellings that carry an explicit ticker
TICKER_FIELDS = ("Symbol", "Ticker", "NSE/BSE", "NSE")

# Field spellings that carry the company display name
NAME_FIELDS = ("Particulars", "Name", "Company")


def display_name(holding: Mapping[str, Any]) -> str:
    """Return the holding's display name, or "" when it has none."""
    return text_field(holding, *NAME_FIELDS) or ""


class SymbolResolver:
    """
    Maps a holding to a symbol using, in order: an explicit ticker field, an
    exact name lookup, then a case/whitespace-insensitive name lookup.

    Resolved symbols are put in primary-exchange form (".NS" appended when no
    exchange suffix is present). Unresolvable holdings yield None.
    """

    def __init__(
        self,
        symbol_map: Optional[Mapping[str, str]] = None,
        default_suffix: str = ".NS",
    ):
        self._symbol_map = dict(SYMBOL_MAP if symbol_map is None else symbol_map)
        self._normalized_map = {}
        for name, symbol in self._symbol_map.items():
            self._normalized_map.setdefault(normalize_key(name), symbol)
        self._default_suffix = default_suffix

    def resolve(self, holding: Mapping[str, Any]) -> Optional[str]:
        symbol = self._explicit_symbol(holding) or self._lookup_name(display_name(holding))
        return self.to_exchange_symbol(symbol) if symbol else None

    def resolve_all(self, holdings: Sequence[Mapping[str, Any]]) -> list[Optional[str]]:
        """Resolve every holding; the result is index-aligned with the input."""
        return [self.resolve(h) for h in holdings]

    def to_exchange_symbol(self, symbol: str) -> str:
        symbol = symbol.strip()
        if symbol.upper().endswith(EXCHANGE_SUFFIXES):
            return symbol
        return f"{symbol}{self._default_suffix}"

    def _explicit_symbol(self, holding: Mapping[str, Any]) -> Optional[str]:
        value = lookup_field(holding, *TICKER_FIELDS)
        if isinstance(value, str):
            return normalize_symbol(value)
        return None

    def _lookup_name(self, name: str) -> Optional[str]:
        if not name:
            return None
        if name in self._symbol_map:
            return self._symbol_map[name]
        return self._normalized_map.get(normalize_key(name))
