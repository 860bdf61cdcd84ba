"""
Gemini 用戶端模組
Gemini API 呼叫的唯一出入口：設定金鑰、附加輸出結構提示、要求網路搜尋。
"""

import json
from typing import Optional

import google.generativeai as genai

from src.exceptions import GeminiConfigError, TransportFault
from src.log_config import get_logger
from src.settings_storage import get_gemini_api_key, get_gemini_model_name, use_search_grounding

logger = get_logger(__name__)


def search_tools() -> list:
    """Google 搜尋工具（Gemini 2 以後的模型只接受 google_search）"""
    return [genai.protos.Tool(google_search=genai.protos.Tool.GoogleSearch())]


SCHEMA_INSTRUCTION = """
【輸出格式】
請只回傳一個符合下列 JSON Schema 的 JSON 物件，不要加入任何說明文字或註解：
{schema}
"""


def configure_gemini(api_key: Optional[str] = None) -> bool:
    """
    設定 Gemini API。

    Args:
        api_key: API 金鑰（省略時從 secrets / 環境變數 / 本機設定取得）

    Returns:
        設定成功時 True
    """
    key = api_key or get_gemini_api_key()
    if not key:
        return False
    genai.configure(api_key=key)
    return True


def build_prompt(prompt: str, schema_hint: Optional[dict] = None) -> str:
    """在提示詞後附加 JSON Schema 說明"""
    if not schema_hint:
        return prompt
    schema = json.dumps(schema_hint, ensure_ascii=False)
    return prompt + SCHEMA_INSTRUCTION.format(schema=schema)


def generate_text(
    prompt: str,
    schema_hint: Optional[dict] = None,
    use_search: Optional[bool] = None,
) -> str:
    """
    呼叫 Gemini 並回傳原始文字。

    Gemini 不接受「工具 + JSON mime type」同時使用，因此啟用網路搜尋時
    結構只以提示詞傳達；關閉搜尋時額外要求 application/json 輸出。

    Args:
        prompt: 自然語言指令
        schema_hint: 期望輸出的 JSON Schema
        use_search: 是否使用網路搜尋（None 時依設定）

    Returns:
        模型回傳的文字（未經驗證）

    Raises:
        GeminiConfigError: 未設定 API 金鑰
        TransportFault: 呼叫失敗（網路、配額、權限）
    """
    if not configure_gemini():
        raise GeminiConfigError("Gemini API key is not configured")

    if use_search is None:
        use_search = use_search_grounding()

    options = {}
    if use_search:
        options["tools"] = search_tools()
    else:
        options["generation_config"] = {"response_mime_type": "application/json"}

    model_name = get_gemini_model_name()
    model = genai.GenerativeModel(model_name)
    try:
        response = model.generate_content(build_prompt(prompt, schema_hint), **options)
        return response.text
    except Exception as e:
        logger.error(f"Gemini request failed ({model_name}): {e}")
        raise TransportFault(f"Gemini request failed: {e}") from e
