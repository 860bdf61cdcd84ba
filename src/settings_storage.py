"""
Settings Storage Module
將 API 金鑰與模型設定保存在本機 data/settings.json。
"""

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from src.constants import GEMINI_MODEL_NAME
from src.log_config import get_logger

logger = get_logger(__name__)

load_dotenv()

# 設定檔路徑（專案內 data 目錄）
SETTINGS_DIR = Path(__file__).parent.parent / "data"
SETTINGS_FILE = SETTINGS_DIR / "settings.json"

# 記憶體快取（減少檔案 I/O）
_settings_cache: Optional[dict] = None

_TRUTHY = {"1", "true", "yes", "on"}


def _ensure_dir():
    """建立設定目錄"""
    SETTINGS_DIR.mkdir(exist_ok=True)


def load_settings(force_reload: bool = False) -> dict:
    """
    讀取已保存的設定。
    有快取時略過檔案 I/O。

    Args:
        force_reload: True 時忽略快取重新讀取
    """
    global _settings_cache

    if _settings_cache is not None and not force_reload:
        return _settings_cache.copy()

    data = {}
    try:
        if SETTINGS_FILE.exists():
            with open(SETTINGS_FILE, "r", encoding="utf-8") as f:
                data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"設定讀取錯誤: {e}")

    _settings_cache = data
    return _settings_cache.copy()


def save_settings(settings: dict) -> bool:
    """
    保存設定，成功後更新快取。
    """
    global _settings_cache
    try:
        _ensure_dir()
        with open(SETTINGS_FILE, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=2, ensure_ascii=False)
        _settings_cache = settings.copy()
        return True
    except OSError as e:
        logger.error(f"設定保存錯誤: {e}")
        _settings_cache = None
        return False


def get_setting(key: str, default=None):
    """
    取得單一設定值。

    Args:
        key: 設定鍵
        default: 預設值

    Returns:
        設定值
    """
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value) -> bool:
    """保存單一設定值"""
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


# === 便利函式 ===


def get_gemini_api_key() -> str:
    """取得 Gemini API 金鑰（Streamlit secrets → 環境變數 → 本機設定）"""
    # 1. Streamlit secrets
    try:
        import streamlit as st

        if "GEMINI_API_KEY" in st.secrets:
            return st.secrets["GEMINI_API_KEY"]
    except Exception:
        # secrets.toml 不存在時 st.secrets 會拋出例外
        pass
    # 2. 環境變數
    env_key = os.getenv("GEMINI_API_KEY")
    if env_key:
        return env_key
    # 3. 本機設定
    return get_setting("gemini_api_key", "")


def set_gemini_api_key(api_key: str) -> bool:
    """保存 Gemini API 金鑰"""
    return set_setting("gemini_api_key", api_key)


def get_gemini_model_name() -> str:
    """取得 Gemini 模型名稱（環境變數優先）"""
    return os.getenv("GEMINI_MODEL_NAME") or get_setting("gemini_model_name", GEMINI_MODEL_NAME)


def use_search_grounding() -> bool:
    """是否要求模型使用網路搜尋（預設開啟）"""
    env_value = os.getenv("SCREENER_USE_SEARCH")
    if env_value is not None:
        return env_value.strip().lower() in _TRUTHY
    return bool(get_setting("use_search", True))
