import copy
from unittest.mock import MagicMock, patch

import pytest

ANALYSIS_PAYLOAD = {
    "stock": {
        "ticker": "2881.TW",
        "name": "富邦金",
        "currentPrice": 80.0,
        "bvps": 100.0,
        "pb25": 1.0,
        "pb50": 1.2,
        "pb75": 1.4,
        "pb90": 1.6,
        "currency": "TWD",
        "dividendYield": 4.5,
        "consecutiveDividendYears": 12,
        "isProfitable": True,
        "roe": 11.2,
        "avgRoe3Y": 10.1,
        "isRoeStable": True,
        "averageVolume20d": 25000,
        "isLiquid": True,
    },
    "chartData": [
        {"date": "2024-01", "price": 70.0, "river25": 90.0, "river50": 110.0, "river75": 130.0, "river90": 150.0},
        {"date": "2024-02", "price": 80.0, "river25": 100.0, "river50": 120.0, "river75": 140.0, "river90": 160.0},
    ],
    "narrative": {
        "conflictReason": "市場擔憂利差收斂",
        "story": {"protagonist": "外資", "events": "連續賣超", "actions": "逢低承接"},
        "outlook": "估值回歸",
    },
}

SCANNER_ROW = {
    "ticker": "2891",
    "name": "中信金",
    "currentPrice": 35.5,
    "currentPB": 1.1,
    "greenThreshold": 1.2,
    "gapToThreshold": -8.3,
    "isGreenZone": True,
    "dividendYield": 5.1,
    "consecutiveYears": 10,
    "roe": 12.5,
    "avgRoe3Y": 11.0,
    "eps": 3.2,
    "epsGrowth": 8.0,
    "isRoeStable": True,
    "averageVolume20d": 40000,
    "isLiquid": True,
    "isSafe": True,
    "isLongTermInvest": True,
    "retailCountCurrent": 9000,
    "retailCountPrevious": 10000,
    "isRetailDecreasing": True,
    "monthlyTrendDesc": "月線收斂向上",
    "dailyPullbackDesc": "回測20MA有守",
}

MARKET_ROW = {
    "ticker": "0050.TW",
    "name": "元大台灣50",
    "currentPrice": 180.0,
    "priceLevel": 62,
    "deviationFromYearly": 8.0,
    "deviationFromQuarterly": -1.5,
    "drawdownFromHigh": -6.0,
    "dividendYield": 2.8,
    "status": "bull_pullback",
    "signal": "季線附近佈局",
    "description": "回測季線支撐",
}

NEWS_PAYLOAD = {
    "news": [
        {
            "title": "AI 伺服器訂單爆發",
            "summary": "投信連買十天",
            "category": "Hype",
            "sentiment": "positive",
            "impactLevel": "high",
            "relatedTickers": ["2382", "3231"],
            "keywords": ["AI", "伺服器"],
        }
    ],
    "pulse": {
        "trendSummary": "資金全面湧入 AI 供應鏈",
        "hotSectors": [{"name": "半導體", "intensity": 92, "reason": "先進製程滿載"}],
    },
}


@pytest.fixture
def analysis_payload():
    return copy.deepcopy(ANALYSIS_PAYLOAD)


@pytest.fixture
def scanner_row():
    return copy.deepcopy(SCANNER_ROW)


@pytest.fixture
def market_row():
    return copy.deepcopy(MARKET_ROW)


@pytest.fixture
def news_payload():
    return copy.deepcopy(NEWS_PAYLOAD)


@pytest.fixture(autouse=True)
def mock_gemini_model():
    """Mock Gemini client for all tests."""
    with patch("src.gemini_client.genai.GenerativeModel") as mock_model_class, \
            patch("src.gemini_client.genai.configure"), \
            patch("src.gemini_client.get_gemini_api_key", return_value="test-key"), \
            patch("src.gemini_client.use_search_grounding", return_value=True):
        mock_instance = MagicMock()
        mock_instance.generate_content.return_value.text = "{}"
        mock_model_class.return_value = mock_instance
        yield mock_instance


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep settings reads and writes inside a temporary directory."""
    monkeypatch.setattr("src.settings_storage.SETTINGS_DIR", tmp_path)
    monkeypatch.setattr("src.settings_storage.SETTINGS_FILE", tmp_path / "settings.json")
    monkeypatch.setattr("src.settings_storage._settings_cache", None)
    for name in ("GEMINI_API_KEY", "GEMINI_MODEL_NAME", "SCREENER_USE_SEARCH"):
        monkeypatch.delenv(name, raising=False)
    yield tmp_path
