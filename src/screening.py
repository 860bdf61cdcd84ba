"""
畫面用的衍生清單與標籤
排序、篩選與標籤都以模型回傳的欄位為準，不重新計算模型給的布林旗標。
"""
from typing import Optional

from src.models import MarketResult, ScannerResult

MARKET_STATUS_LABELS = {
    "crisis_buy": "鑽石買點 (極度便宜)",
    "overheated": "市場過熱 (風險警戒)",
    "neutral": "中性觀望",
}

CATEGORY_LABELS = {
    "Hype": "題材炒作",
    "Chips": "籌碼動向",
    "Community": "社群熱議",
    "Event": "產業行事曆",
    "Policy": "政策",
}

VALUATION_LABELS = {
    "cheap": "便宜",
    "fair": "合理",
    "expensive": "昂貴",
    "overvalued": "極度高估",
}


def sort_financial_results(results: Optional[list[ScannerResult]]) -> Optional[list[ScannerResult]]:
    """綠區標的優先，其次依 ROE 由高到低（回傳新清單）"""
    if results is None:
        return None
    return sorted(results, key=lambda s: (not s["isGreenZone"], -(s.get("roe") or 0)))


def count_green_zone(results: Optional[list[ScannerResult]]) -> int:
    return sum(1 for s in results or [] if s["isGreenZone"])


def filter_long_term_targets(results: Optional[list[ScannerResult]]) -> list[ScannerResult]:
    """長予策略：模型標記 isLongTermInvest 且散戶人數減少"""
    return [
        s for s in results or []
        if s["isLongTermInvest"] and s["retailCountCurrent"] < s["retailCountPrevious"]
    ]


def retail_change(stock: ScannerResult) -> tuple[float, Optional[float]]:
    """
    散戶人數變化。

    Returns:
        (人數差, 變化百分比)；上期人數為 0 時百分比為 None
    """
    diff = stock["retailCountCurrent"] - stock["retailCountPrevious"]
    previous = stock["retailCountPrevious"]
    pct = diff / previous * 100 if previous else None
    return diff, pct


def clamp_price_level(level: float) -> float:
    """限制在 0-100（位階儀表、板塊熱度）"""
    return min(max(level, 0), 100)


def market_status_label(market: MarketResult) -> str:
    status = market["status"]
    if status == "bull_pullback":
        if market["deviationFromQuarterly"] < 0:
            return "季線黃金進場 (生命線下)"
        return "季線支撐佈局 (接近生命線)"
    return MARKET_STATUS_LABELS.get(status, MARKET_STATUS_LABELS["neutral"])


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category)
