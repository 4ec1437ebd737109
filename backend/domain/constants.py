"""
Domain — 集中管理所有常數與閾值。
避免散落在各模組中的 magic numbers / magic strings。
"""

import os as _os

# ---------------------------------------------------------------------------
# Persistent Data Directory
# ---------------------------------------------------------------------------
DATA_DIR = _os.getenv("DATA_DIR", "data")

# ---------------------------------------------------------------------------
# OANDA v20 Pricing API
# ---------------------------------------------------------------------------
OANDA_ENVIRONMENT = "practice"
OANDA_API_URLS: dict[str, str] = {
    "practice": "https://api-fxpractice.oanda.com",
    "live": "https://api-fxtrade.oanda.com",
}
OANDA_PRICING_PATH = "/v3/accounts/{account_id}/pricing"
OANDA_DEFAULT_INSTRUMENTS = [
    "EUR_USD",
    "GBP_USD",
    "USD_JPY",
    "AUD_USD",
    "USD_CAD",
    "USD_CHF",
    "NZD_USD",
]
OANDA_REQUEST_TIMEOUT = 10  # seconds

# ---------------------------------------------------------------------------
# Kibot Historical Data API
# ---------------------------------------------------------------------------
KIBOT_API_URL = "http://api.kibot.com/"
KIBOT_GUEST_USER = "guest"
KIBOT_GUEST_PASSWORD = "guest"
KIBOT_ASSET_TYPE = "forex"
KIBOT_DAILY_INTERVAL = "daily"
KIBOT_DATE_FORMAT = "%m/%d/%Y"  # MM/DD/YYYY
KIBOT_REQUEST_TIMEOUT = 30  # seconds
HISTORY_LOOKBACK_SECONDS = 31_536_000  # 365 days

# ---------------------------------------------------------------------------
# Rate Limits
# ---------------------------------------------------------------------------
PRICES_RATE_LIMIT = "30/minute"

# ---------------------------------------------------------------------------
# Error Codes (machine-readable, returned in HTTPException detail)
# ---------------------------------------------------------------------------
ERROR_CLIENT_NOT_FOUND = "CLIENT_NOT_FOUND"
ERROR_CLIENT_ALREADY_EXISTS = "CLIENT_ALREADY_EXISTS"
ERROR_PRICING_UNAVAILABLE = "PRICING_UNAVAILABLE"
ERROR_HISTORY_UNAVAILABLE = "HISTORY_UNAVAILABLE"

# ---------------------------------------------------------------------------
# Generic Error Messages (upstream details are logged, never returned)
# ---------------------------------------------------------------------------
GENERIC_PRICING_ERROR = "Pricing provider is unavailable, please try again later."
GENERIC_HISTORY_ERROR = "No historical data available for {symbol}."
