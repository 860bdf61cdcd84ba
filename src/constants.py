"""
Global Constants for the Taiwan Stock River Screener.
"""

# AI Configuration
GEMINI_MODEL_NAME = "gemini-3-pro-preview"

# Prompt / response limits
MAX_SCANNER_RESULTS = 10
NEWS_ITEM_COUNT = 6
LOG_EXCERPT_CHARS = 200

# Scan cards (order matters for the global scan)
CARD_MARKET = "market"
CARD_FINANCIAL = "financial"
CARD_LONG_TERM = "long_term"
CARD_NEWS = "news"
CARD_STOCK = "stock"

GLOBAL_SCAN_ORDER = (CARD_MARKET, CARD_FINANCIAL, CARD_LONG_TERM, CARD_NEWS)

GLOBAL_SCAN_ERROR_MESSAGE = "部分掃描發生錯誤，請檢查網路連線後重試。"
