"""
日誌設定模組
提供整個應用程式一致的 logging 設定。
"""
import logging
import os
import sys

LOG_LEVEL_ENV = "SCREENER_LOG_LEVEL"


def _resolve_level() -> int:
    """由環境變數決定日誌等級（無效值視為 INFO）"""
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    取得具名 logger。

    Args:
        name: logger 名稱（通常為 ``__name__``）

    Returns:
        已設定 handler 的 logging.Logger
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("[%(levelname)s] %(name)s: %(message)s")
        )
        logger.addHandler(handler)
        logger.setLevel(_resolve_level())
    return logger
