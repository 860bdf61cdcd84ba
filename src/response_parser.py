"""
模型回應正規化模組
模型回傳的文字不可信任：可能包含 Markdown 圍欄、前後說明文字、尾逗號或註解。
本模組將其清理、解析並驗證成結構化資料。
"""

import json
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from pydantic import TypeAdapter, ValidationError

from src.constants import LOG_EXCERPT_CHARS
from src.exceptions import DecodeFailure, InvalidResponseShape
from src.log_config import get_logger

logger = get_logger(__name__)

FENCE_MARKERS = ("```json", "```")


# --- 1. Sanitizer ---


def sanitize_response(text: Optional[str]) -> str:
    """
    將模型原始文字整理成可解析的 JSON 字串。

    1. 移除 ```json 與 ``` 圍欄（字面移除，非 Markdown 解析）
    2. 截取第一個 '{' 到最後一個 '}'（含）
    3. 刪除 // 行註解（字串內容不受影響）
    4. 刪除 '}' 或 ']' 前的尾逗號（字串內容不受影響）

    找不到成對大括號時保留原文，交由解析階段失敗。

    Args:
        text: 模型回傳的原始文字（可為 None）

    Returns:
        清理後的字串；輸入為空時回傳 ""
    """
    if not text:
        return ""

    cleaned = text
    for marker in FENCE_MARKERS:
        cleaned = cleaned.replace(marker, "")

    first_brace = cleaned.find("{")
    last_brace = cleaned.rfind("}")
    if first_brace != -1 and last_brace > first_brace:
        cleaned = cleaned[first_brace:last_brace + 1]

    cleaned = _strip_line_comments(cleaned)
    return _drop_trailing_commas(cleaned)


def _strip_line_comments(text: str) -> str:
    """字串外的 // 至行尾全部刪除"""
    out = []
    in_string = False
    escaped = False
    i = 0
    length = len(text)
    while i < length:
        ch = text[i]
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            i += 1
            continue

        if ch == '"':
            in_string = True
            out.append(ch)
            i += 1
        elif ch == "/" and text.startswith("//", i):
            newline = text.find("\n", i)
            i = length if newline == -1 else newline
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _drop_trailing_commas(text: str) -> str:
    """字串外、緊接（可隔空白）'}' 或 ']' 的逗號全部刪除"""
    out = []
    in_string = False
    escaped = False
    length = len(text)
    for i, ch in enumerate(text):
        if in_string:
            out.append(ch)
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue

        if ch == '"':
            in_string = True
        elif ch == ",":
            j = i + 1
            while j < length and text[j].isspace():
                j += 1
            if j < length and text[j] in "}]":
                continue
        out.append(ch)
    return "".join(out)


# --- 2. Decoder ---


def decode_json(text: Optional[str]) -> Optional[Any]:
    """
    嚴格 JSON 解析。失敗時記錄警告並回傳 None，不向呼叫端拋出例外。
    """
    if not text:
        logger.warning("Failed to parse JSON response: empty text")
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning(
            f"Failed to parse JSON response: {e} | excerpt: {text[:LOG_EXCERPT_CHARS]!r}"
        )
        return None


def parse_model_json(raw_text: Optional[str]) -> Optional[Any]:
    """Sanitize then decode raw model text. Returns None when nothing usable was found."""
    return decode_json(sanitize_response(raw_text))


# --- 3. Shape guard ---


@dataclass(frozen=True)
class ShapeValid:
    value: Any


@dataclass(frozen=True)
class ShapeInvalid:
    path: str
    reason: str


ShapeCheck = Union[ShapeValid, ShapeInvalid]


def require_keys(value: Any, keys: Iterable[str], message: str) -> dict:
    """
    確認頂層必要鍵皆存在。

    Args:
        value: 解析後的值（可為 None）
        keys: 必要的頂層鍵
        message: 失敗時的固定錯誤訊息

    Returns:
        原值（型別為 dict）

    Raises:
        InvalidResponseShape: 值不是物件或缺少任一鍵
    """
    if not isinstance(value, dict):
        raise InvalidResponseShape(message, path="", reason="not a JSON object")
    missing = [key for key in keys if value.get(key) is None]
    if missing:
        raise InvalidResponseShape(
            message, path=missing[0], reason=f"missing keys: {', '.join(missing)}"
        )
    return value


def validate_shape(value: Any, adapter: TypeAdapter) -> ShapeCheck:
    """
    遞迴驗證整棵資料樹，回傳 ShapeValid 或標示第一個缺陷位置的 ShapeInvalid。
    """
    try:
        return ShapeValid(adapter.validate_python(value))
    except ValidationError as e:
        first = e.errors()[0]
        path = ".".join(str(part) for part in first["loc"])
        return ShapeInvalid(path=path, reason=first["msg"])


def normalize_response(
    raw_text: Optional[str],
    required_keys: Iterable[str],
    adapter: TypeAdapter,
    message: str,
) -> dict:
    """
    模型文字 → 清理 → 解析 → 頂層鍵檢查 → 遞迴驗證。

    Raises:
        DecodeFailure: 清理後仍無法解析為 JSON
        InvalidResponseShape: 缺少必要鍵或結構不符
    """
    decoded = parse_model_json(raw_text)
    if decoded is None:
        raise DecodeFailure(message, path="", reason="response is not valid JSON")
    value = require_keys(decoded, required_keys, message)

    check = validate_shape(value, adapter)
    if isinstance(check, ShapeInvalid):
        logger.warning(f"{message}: {check.path or '<root>'} - {check.reason}")
        raise InvalidResponseShape(message, path=check.path, reason=check.reason)
    return check.value
