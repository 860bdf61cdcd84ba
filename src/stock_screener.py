"""
台股篩選查詢模組
每個查詢：組出自然語言指令 → 呼叫 Gemini → 清理、驗證模型回應 → 回傳型別化結果。
"""

from src.constants import MAX_SCANNER_RESULTS, NEWS_ITEM_COUNT
from src.gemini_client import generate_text
from src.log_config import get_logger
from src.market_config import MARKET_TICKERS, get_scan_scope, normalize_tw_ticker
from src.models import (
    MARKET_RESPONSE_ADAPTER,
    NEWS_RESPONSE_ADAPTER,
    RAW_ANALYSIS_ADAPTER,
    SCANNER_RESPONSE_ADAPTER,
    AnalysisResult,
    MarketResult,
    NewsResponse,
    ScannerResult,
)
from src.prompts.screener_prompts import (
    LONG_TERM_STRATEGY_RULES,
    MARKET_NEWS_PROMPT_TEMPLATE,
    MARKET_STATUS_PROMPT_TEMPLATE,
    SCANNER_PROMPT_TEMPLATE,
    STOCK_ANALYSIS_PROMPT_TEMPLATE,
)
from src.response_parser import normalize_response
from src.valuation import enrich_analysis

logger = get_logger(__name__)

ANALYSIS_KEYS = ("stock", "chartData", "narrative")
RESULTS_KEYS = ("results",)
NEWS_KEYS = ("news", "pulse")

ANALYSIS_ERROR = "Invalid analysis data returned from model"
SCANNER_ERROR = "Invalid scanner data returned from model"
MARKET_ERROR = "Invalid market status data returned from model"
NEWS_ERROR = "Invalid news data returned from model"

MIN_SCANNER_RESULTS = 8


def analyze_stock(ticker: str) -> AnalysisResult:
    """
    個股河流圖分析。

    Args:
        ticker: 台股代號（例: "2881" 或 "2881.TW"）

    Returns:
        含 currentPB / status / safetyScore 的分析結果

    Raises:
        InvalidResponseShape: 模型回應缺少必要欄位
        TransportFault: Gemini 呼叫失敗
    """
    formatted_ticker = normalize_tw_ticker(ticker)
    prompt = STOCK_ANALYSIS_PROMPT_TEMPLATE.format(ticker=formatted_ticker)
    text = generate_text(prompt, RAW_ANALYSIS_ADAPTER.json_schema())
    result = normalize_response(text, ANALYSIS_KEYS, RAW_ANALYSIS_ADAPTER, ANALYSIS_ERROR)
    analysis = enrich_analysis(result)
    logger.info(
        f"Analyzed {formatted_ticker}: PB={analysis['currentPB']:.2f} "
        f"status={analysis['status']} safety={analysis['safetyScore']}"
    )
    return analysis


def scan_financial_stocks(broad_market: bool = False) -> list[ScannerResult]:
    """
    金融板塊估值掃描，或全市場長予投資掃描。

    Args:
        broad_market: True 時掃描全台股並套用長予策略條件

    Returns:
        模型篩出的標的清單（布林旗標原樣採用）
    """
    scope = get_scan_scope(broad_market)
    prompt = SCANNER_PROMPT_TEMPLATE.format(
        scope=scope["description"],
        strategy=LONG_TERM_STRATEGY_RULES if broad_market else "",
        min_count=MIN_SCANNER_RESULTS,
        max_count=MAX_SCANNER_RESULTS,
    )
    text = generate_text(prompt, SCANNER_RESPONSE_ADAPTER.json_schema())
    parsed = normalize_response(text, RESULTS_KEYS, SCANNER_RESPONSE_ADAPTER, SCANNER_ERROR)
    logger.info(f"{scope['name']} scan returned {len(parsed['results'])} rows")
    return parsed["results"]


def scan_market_status() -> list[MarketResult]:
    """大盤與核心 ETF 的位階判讀"""
    prompt = MARKET_STATUS_PROMPT_TEMPLATE.format(tickers=", ".join(MARKET_TICKERS))
    text = generate_text(prompt, MARKET_RESPONSE_ADAPTER.json_schema())
    parsed = normalize_response(text, RESULTS_KEYS, MARKET_RESPONSE_ADAPTER, MARKET_ERROR)
    return parsed["results"]


def fetch_market_news() -> NewsResponse:
    """市場題材、籌碼與社群熱議消息，以及板塊熱度總結"""
    prompt = MARKET_NEWS_PROMPT_TEMPLATE.format(count=NEWS_ITEM_COUNT)
    text = generate_text(prompt, NEWS_RESPONSE_ADAPTER.json_schema())
    return normalize_response(text, NEWS_KEYS, NEWS_RESPONSE_ADAPTER, NEWS_ERROR)
