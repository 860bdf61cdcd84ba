"""
market_config 模組的測試
"""
import pytest

from src.market_config import (
    FINANCIAL_STOCKS,
    ScanMode,
    format_price,
    get_scan_scope,
    normalize_tw_ticker,
)


class TestScanScope:
    """掃描範圍設定的測試"""

    def test_financial_scope(self):
        scope = get_scan_scope()
        assert scope["name"] == "金融板塊"
        assert scope["tickers"] == FINANCIAL_STOCKS
        assert all(code in scope["description"] for code in FINANCIAL_STOCKS)

    def test_broad_market_scope(self):
        scope = get_scan_scope(broad_market=True)
        assert scope["name"] == "全台股市場"
        assert scope["tickers"] == []

    def test_mode_values(self):
        assert ScanMode.FINANCIAL.value == "financial"
        assert ScanMode.BROAD_MARKET.value == "broad_market"

    def test_financial_pool_has_no_duplicates(self):
        assert len(FINANCIAL_STOCKS) == len(set(FINANCIAL_STOCKS))


class TestNormalizeTicker:
    """normalize_tw_ticker 函式的測試"""

    @pytest.mark.parametrize("raw, expected", [
        ("2881", "2881.TW"),
        (" 2330 ", "2330.TW"),
        ("2881.TW", "2881.TW"),
        ("6488.two", "6488.TWO"),
        ("00878", "00878.TW"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_tw_ticker(raw) == expected


class TestFormatPrice:
    """format_price 函式的測試"""

    def test_twd(self):
        assert format_price(1234.5) == "NT$1,234.50"

    def test_usd(self):
        assert format_price(12.3456, "usd", decimals=1) == "$12.3"

    def test_unknown_currency(self):
        assert format_price(10, "JPY", decimals=0) == "JPY 10"
