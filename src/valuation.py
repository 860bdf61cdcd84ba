"""
估值衍生欄位計算
模型只提供原始數字；本淨比、估值位階與安全評分在此計算。
"""
import math
from typing import Optional

from src.models import AnalysisResult, RawAnalysis, SafetyScore, StockInfo, ValuationStatus

SAFE_DIVIDEND_YEARS = 5
SAFE_ROE = 4
SAFE_AVG_ROE_3Y = 8


def compute_current_pb(current_price: Optional[float], bvps: Optional[float]) -> float:
    """
    目前本淨比 = 股價 / 每股淨值。
    每股淨值為 0 或缺值時不特別處理，直接回傳 inf / nan。
    """
    price = math.nan if current_price is None else float(current_price)
    if bvps is None:
        return math.nan
    if bvps == 0:
        if price == 0 or math.isnan(price):
            return math.nan
        return math.copysign(math.inf, price) * math.copysign(1.0, bvps)
    return price / bvps


def classify_valuation(current_pb: float, pb25: float, pb75: float, pb90: float) -> ValuationStatus:
    """
    依固定順序比較（皆為嚴格小於）：
    < pb25 便宜 → < pb75 合理 → < pb90 昂貴 → 其餘為高估。
    """
    if current_pb < pb25:
        return "cheap"
    if current_pb < pb75:
        return "fair"
    if current_pb < pb90:
        return "expensive"
    return "overvalued"


def score_safety(stock: StockInfo) -> SafetyScore:
    """連續配息 >= 5 年，且 ROE > 4 或三年平均 ROE > 8 時為 high，否則 low"""
    years = stock.get("consecutiveDividendYears") or 0
    roe = stock.get("roe") or 0
    avg_roe = stock.get("avgRoe3Y") or 0
    if years >= SAFE_DIVIDEND_YEARS and (roe > SAFE_ROE or avg_roe > SAFE_AVG_ROE_3Y):
        return "high"
    return "low"


def enrich_analysis(result: RawAnalysis) -> AnalysisResult:
    """
    加上 currentPB / status / safetyScore，回傳新的 dict（不修改輸入）。

    Args:
        result: 已通過結構驗證的個股分析

    Returns:
        含衍生欄位的 AnalysisResult
    """
    stock = result["stock"]
    current_pb = compute_current_pb(stock.get("currentPrice"), stock.get("bvps"))
    status = classify_valuation(current_pb, stock["pb25"], stock["pb75"], stock["pb90"])
    return {
        **result,
        "currentPB": current_pb,
        "status": status,
        "safetyScore": score_safety(stock),
    }
