"""
Data Models for Type Hinting
Model responses stay plain dictionaries (Streamlit renders them directly);
TypedDict gives them a shape and pydantic TypeAdapters validate them recursively.
"""
from typing import Literal, Optional

from pydantic import TypeAdapter
from typing_extensions import NotRequired, TypedDict

ValuationStatus = Literal["cheap", "fair", "expensive", "overvalued"]
SafetyScore = Literal["high", "medium", "low"]
MarketStatus = Literal["crisis_buy", "bull_pullback", "neutral", "overheated"]
NewsCategory = Literal["Hype", "Chips", "Community", "Event", "Policy"]
Sentiment = Literal["positive", "negative", "neutral"]
ImpactLevel = Literal["high", "medium", "low"]


class StockInfo(TypedDict):
    """個股基本面與 PB 分位數"""
    ticker: str
    name: str
    currentPrice: float
    bvps: float
    pb25: float
    pb50: float
    pb75: float
    pb90: float
    currency: str
    dividendYield: NotRequired[Optional[float]]
    consecutiveDividendYears: NotRequired[Optional[int]]
    isProfitable: NotRequired[Optional[bool]]
    roe: float
    avgRoe3Y: NotRequired[Optional[float]]
    isRoeStable: NotRequired[Optional[bool]]
    averageVolume20d: float
    isLiquid: bool


class ChartPoint(TypedDict):
    """河流圖的一個時間點"""
    date: str
    price: Optional[float]
    river25: Optional[float]
    river50: Optional[float]
    river75: Optional[float]
    river90: Optional[float]


class NarrativeStory(TypedDict):
    protagonist: str
    events: str
    actions: str


class AnalysisNarrative(TypedDict):
    conflictReason: str
    story: NarrativeStory
    outlook: str


class RawAnalysis(TypedDict):
    """Model output for a single-stock analysis, before derived fields."""
    stock: StockInfo
    chartData: list[ChartPoint]
    narrative: AnalysisNarrative


class AnalysisResult(RawAnalysis):
    currentPB: float
    status: ValuationStatus
    safetyScore: SafetyScore


class ScannerResult(TypedDict):
    """One screened ticker. The boolean flags are computed by the model."""
    ticker: str
    name: str
    currentPrice: float
    currentPB: float
    greenThreshold: Optional[float]
    gapToThreshold: Optional[float]
    isGreenZone: bool
    # 數值缺漏時為 null，單一缺值不作廢整批掃描
    dividendYield: Optional[float]
    consecutiveYears: Optional[float]
    roe: Optional[float]
    avgRoe3Y: Optional[float]
    eps: Optional[float]
    epsGrowth: Optional[float]
    isRoeStable: bool
    averageVolume20d: Optional[float]
    isLiquid: bool
    isSafe: bool
    isLongTermInvest: bool
    retailCountCurrent: float
    retailCountPrevious: float
    isRetailDecreasing: bool
    monthlyTrendDesc: str  # 月線收斂狀態說明
    dailyPullbackDesc: str  # 日線拉回狀態說明


class ScannerResponse(TypedDict):
    results: list[ScannerResult]


class MarketResult(TypedDict):
    """大盤 / ETF 位階"""
    ticker: str
    name: str
    currentPrice: float
    priceLevel: float  # 0-100
    deviationFromYearly: float
    deviationFromQuarterly: float
    drawdownFromHigh: float
    dividendYield: float
    status: MarketStatus
    signal: str
    description: str


class MarketResponse(TypedDict):
    results: list[MarketResult]


class SectorHeat(TypedDict):
    name: str
    intensity: float  # 0-100
    reason: str


class MarketPulse(TypedDict):
    trendSummary: str  # 整體市場氣氛總結
    hotSectors: list[SectorHeat]


class NewsItem(TypedDict):
    title: str
    summary: str
    category: NewsCategory
    sentiment: Sentiment
    impactLevel: ImpactLevel
    relatedTickers: list[str]
    keywords: list[str]


class NewsResponse(TypedDict):
    news: list[NewsItem]
    pulse: MarketPulse


# Validators for untrusted model output
RAW_ANALYSIS_ADAPTER = TypeAdapter(RawAnalysis)
SCANNER_RESPONSE_ADAPTER = TypeAdapter(ScannerResponse)
MARKET_RESPONSE_ADAPTER = TypeAdapter(MarketResponse)
NEWS_RESPONSE_ADAPTER = TypeAdapter(NewsResponse)
