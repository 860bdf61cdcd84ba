"""
市場設定模組
集中管理台股篩選所使用的股票池與掃描範圍。
"""

from enum import Enum
from typing import TypedDict


class ScanMode(str, Enum):
    """掃描模式"""

    FINANCIAL = "financial"
    BROAD_MARKET = "broad_market"


class ScanScope(TypedDict):
    """掃描範圍的型別定義"""

    name: str
    description: str
    tickers: list[str]


# 金融板塊股票池
FINANCIAL_STOCKS = [
    "2881", "2882", "2891", "2886", "2884", "2892", "2880", "2885", "2883", "2890",
    "2887", "2888", "5880", "2889", "2834", "2812", "2838", "2845", "2897", "5876",
    "2850", "2851", "6005",
]

# 大盤指數與核心 ETF
MARKET_TICKERS = ["^TWII", "0050.TW", "0056.TW", "006208.TW", "00878.TW"]

TW_SUFFIX = ".TW"
CURRENCY_SYMBOLS = {"TWD": "NT$", "USD": "$"}

SCAN_SCOPES: dict[str, ScanScope] = {
    ScanMode.FINANCIAL.value: {
        "name": "金融板塊",
        "description": f"金融板塊 [{', '.join(FINANCIAL_STOCKS)}]",
        "tickers": FINANCIAL_STOCKS,
    },
    ScanMode.BROAD_MARKET.value: {
        "name": "全台股市場",
        "description": "全台股市場 (篩選具有高流動性與強勁趨勢之金選標的)",
        "tickers": [],
    },
}


def get_scan_scope(broad_market: bool = False) -> ScanScope:
    """
    取得掃描範圍設定。

    Args:
        broad_market: True 表示全市場長線掃描，False 表示金融板塊掃描

    Returns:
        掃描範圍設定
    """
    mode = ScanMode.BROAD_MARKET if broad_market else ScanMode.FINANCIAL
    return SCAN_SCOPES[mode.value]


def normalize_tw_ticker(ticker: str) -> str:
    """代號未含交易所後綴時補上 .TW（例: 2881 -> 2881.TW）"""
    ticker = ticker.strip().upper()
    return ticker if "." in ticker else f"{ticker}{TW_SUFFIX}"


def format_price(price: float, currency: str = "TWD", decimals: int = 2) -> str:
    """
    依幣別格式化價格。

    Args:
        price: 價格
        currency: 幣別代碼
        decimals: 小數位數

    Returns:
        格式化後的價格字串
    """
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), f"{currency} ")
    return f"{symbol}{price:,.{decimals}f}"
