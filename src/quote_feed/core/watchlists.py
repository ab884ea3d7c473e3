"""Preset symbol lists used by the dashboard collaborators."""

GLOBAL_INDICES: tuple[str, ...] = (
    "^GSPC",  # S&P 500
    "^DJI",  # Dow Jones
    "^IXIC",  # NASDAQ
    "^RUT",  # Russell 2000
    "^FTSE",  # FTSE 100
    "^GDAXI",  # DAX
    "^N225",  # Nikkei 225
)

CRYPTO_PAIRS: tuple[str, ...] = (
    "BTC-USD",
    "ETH-USD",
    "BNB-USD",
    "ADA-USD",
    "SOL-USD",
    "XRP-USD",
)

FOREX_PAIRS: tuple[str, ...] = (
    "EURUSD=X",
    "GBPUSD=X",
    "USDJPY=X",
    "USDCHF=X",
    "AUDUSD=X",
    "USDCAD=X",
)

DEFAULT_SYMBOLS: tuple[str, ...] = (
    # Major ETFs
    "SPY", "QQQ", "IWM", "DIA", "VTI", "VEA", "VWO",
    # Technology
    "AAPL", "MSFT", "GOOGL", "AMZN", "TSLA", "META", "NVDA", "NFLX", "ADBE", "CRM",
    # Financial
    "JPM", "BAC", "WFC", "GS", "C", "V", "MA", "AXP",
    # Healthcare
    "JNJ", "PFE", "UNH", "ABBV", "MRK", "TMO", "ABT",
    # Energy
    "XOM", "CVX", "COP", "SLB", "EOG", "KMI",
    # Consumer
    "KO", "PEP", "WMT", "HD", "MCD", "NKE", "SBUX",
    # Industrial
    "BA", "CAT", "GE", "UPS", "HON", "LMT",
    # Crypto
    "BTC-USD", "ETH-USD", "ADA-USD", "BNB-USD", "XRP-USD", "SOL-USD",
)
