"""
settings_storage 模組的測試
設定檔由 conftest 的 isolated_settings 導向暫存目錄。
"""
import json

from src import settings_storage
from src.constants import GEMINI_MODEL_NAME


class TestSettingsFile:
    """設定檔讀寫的測試"""

    def test_missing_file_is_empty(self):
        assert settings_storage.load_settings() == {}

    def test_set_and_get(self, isolated_settings):
        assert settings_storage.set_setting("use_search", False) is True
        assert settings_storage.get_setting("use_search") is False
        saved = json.loads((isolated_settings / "settings.json").read_text(encoding="utf-8"))
        assert saved == {"use_search": False}

    def test_corrupt_file_is_ignored(self, isolated_settings):
        (isolated_settings / "settings.json").write_text("{broken", encoding="utf-8")
        assert settings_storage.load_settings(force_reload=True) == {}

    def test_cache_returns_copy(self):
        settings_storage.set_setting("a", 1)
        loaded = settings_storage.load_settings()
        loaded["a"] = 2
        assert settings_storage.get_setting("a") == 1


class TestGeminiSettings:
    """Gemini 相關設定的測試"""

    def test_api_key_from_env(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "env-key")
        assert settings_storage.get_gemini_api_key() == "env-key"

    def test_api_key_from_local_settings(self):
        settings_storage.set_gemini_api_key("saved-key")
        assert settings_storage.get_gemini_api_key() == "saved-key"

    def test_model_name_default(self):
        assert settings_storage.get_gemini_model_name() == GEMINI_MODEL_NAME

    def test_model_name_env_override(self, monkeypatch):
        settings_storage.set_setting("gemini_model_name", "from-file")
        monkeypatch.setenv("GEMINI_MODEL_NAME", "from-env")
        assert settings_storage.get_gemini_model_name() == "from-env"

    def test_search_defaults_on(self):
        assert settings_storage.use_search_grounding() is True

    def test_search_env_override(self, monkeypatch):
        monkeypatch.setenv("SCREENER_USE_SEARCH", "off")
        assert settings_storage.use_search_grounding() is False
        monkeypatch.setenv("SCREENER_USE_SEARCH", "Yes")
        assert settings_storage.use_search_grounding() is True

    def test_search_setting(self):
        settings_storage.set_setting("use_search", False)
        assert settings_storage.use_search_grounding() is False
