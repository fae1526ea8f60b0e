"""Portfolio dashboard backend: holdings enriched with live quotes and valuation metrics."""

__version__ = "0.1.0"
