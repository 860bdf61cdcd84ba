"""
Scan Service Module
Runs the dashboard scans: one card at a time, or all four cards in a fixed
sequence for the global scan.
"""
from typing import Callable, Iterable, Optional

from src.constants import (
    CARD_FINANCIAL,
    CARD_LONG_TERM,
    CARD_MARKET,
    CARD_NEWS,
    CARD_STOCK,
    GLOBAL_SCAN_ERROR_MESSAGE,
    GLOBAL_SCAN_ORDER,
)
from src.exceptions import AggregateFault
from src.log_config import get_logger
from src.scan_state import ScanCoordinator
from src.stock_screener import fetch_market_news, scan_financial_stocks, scan_market_status

logger = get_logger(__name__)

CARD_LABELS = {
    CARD_MARKET: "Market",
    CARD_FINANCIAL: "Financial",
    CARD_LONG_TERM: "Long term",
    CARD_NEWS: "News",
    CARD_STOCK: "Stock analysis",
}


def _resolve_runner(card: str) -> Callable[[], object]:
    """Looked up per call so the query functions can be patched in tests."""
    runners = {
        CARD_MARKET: scan_market_status,
        CARD_FINANCIAL: lambda: scan_financial_stocks(False),
        CARD_LONG_TERM: lambda: scan_financial_stocks(True),
        CARD_NEWS: fetch_market_news,
    }
    if card not in runners:
        raise AggregateFault(f"Unknown scan card: {card}")
    return runners[card]


def run_card_scan(
    card: str,
    coordinator: ScanCoordinator,
    runner: Optional[Callable[[], object]] = None,
) -> bool:
    """
    Runs one card's scan.
    Failures are logged and recorded as the card's error; the previous data is kept.

    Args:
        card: card key
        coordinator: state owner
        runner: query to run instead of the card's default (e.g. a single-stock analysis)

    Returns:
        True when the card received new data
    """
    if runner is None:
        runner = _resolve_runner(card)
    label = CARD_LABELS.get(card, card)
    token = coordinator.begin(card)
    applied = False
    try:
        data = runner()
        applied = coordinator.succeed(card, token, data)
        if not applied:
            logger.info(f"{label} scan result discarded: a newer request is pending")
    except Exception as e:
        logger.error(f"{label} scan failed: {e}")
        coordinator.fail(card, token, str(e))
    finally:
        # loading never outlives its own request
        state = coordinator.state(card)
        if state.loading and state.generation == token:
            coordinator.fail(card, token, "scan interrupted")
    return applied


def run_global_scan(
    coordinator: ScanCoordinator, order: Iterable[str] = GLOBAL_SCAN_ORDER
) -> dict[str, bool]:
    """
    Runs every card strictly one after another (market → financial → long term → news).
    Calls are never issued concurrently so the upstream API is not flooded.
    A failing card does not stop the following ones.

    Returns:
        {card: succeeded}
    """
    coordinator.global_error = None
    coordinator.global_loading = True
    outcome: dict[str, bool] = {}
    try:
        for card in order:
            logger.info(f"Global scan step: {CARD_LABELS.get(card, card)}")
            outcome[card] = run_card_scan(card, coordinator)
    except Exception as e:
        logger.error(f"Global scan encountered a critical error: {e}")
        coordinator.global_error = GLOBAL_SCAN_ERROR_MESSAGE
    finally:
        coordinator.global_loading = False
    return outcome
