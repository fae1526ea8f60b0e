"""Static lookup tables for holdings that carry a company name but no ticker."""

# Display name -> primary exchange symbol
SYMBOL_MAP: dict[str, str] = {
    "TCS": "TCS.NS",
    "TCS Ltd": "TCS.NS",
    "ICICI Bank": "ICICIBANK.NS",
    "Bajaj Finance": "BAJFINANCE.NS",
    "HDFC Bank": "HDFCBANK.NS",
    "Infosys": "INFY.NS",
    "Reliance Industries": "RELIANCE.NS",
    "State Bank of India": "SBIN.NS",
    "Asian Paints": "ASIANPAINT.NS",
}

# Display name -> sector, used when the holding has no Sector/Industry field
SECTOR_MAP: dict[str, str] = {
    "HDFC Bank": "Banking",
    "ICICI Bank": "Banking",
    "State Bank of India": "Banking",
    "Bajaj Finance": "Financial Services",
    "TCS": "IT",
    "TCS Ltd": "IT",
    "Infosys": "IT",
    "Reliance Industries": "Energy",
    "Asian Paints": "Consumer Goods",
}

DEFAULT_SECTOR = "Unknown"

# Exchange suffixes recognized on primary symbols
EXCHANGE_SUFFIXES: tuple[str, ...] = (".NS", ".BO")
