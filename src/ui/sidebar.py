"""
Sidebar UI module
Manages the sidebar layout, navigation and settings.
"""
import streamlit as st
from datetime import datetime

from src.gemini_client import configure_gemini
from src.settings_storage import (
    get_gemini_api_key,
    get_gemini_model_name,
    set_gemini_api_key,
    set_setting,
    use_search_grounding,
)


# 導覽選單定義
PAGES = {
    "dashboard": {"icon": "🚀", "name": "全域戰情室"},
    "scanner": {"icon": "🔬", "name": "金融掃描"},
    "market": {"icon": "📊", "name": "大盤指南"},
    "long_term": {"icon": "👑", "name": "長予投資"},
    "news": {"icon": "⚡", "name": "市場消息"},
    "stock": {"icon": "🌊", "name": "個股河流圖"},
}


def render_sidebar():
    """Renders the application sidebar with navigation and settings."""
    with st.sidebar:
        st.markdown("## 🏛️ 台股金融河流選股器")
        st.caption("量化選股 × 策略儀表板")

        _load_saved_settings()

        st.divider()

        # === 導覽 ===
        st.markdown("### 🧭 導覽")
        if "current_page" not in st.session_state:
            st.session_state.current_page = "dashboard"

        for page_id, page_info in PAGES.items():
            is_active = st.session_state.current_page == page_id
            if st.button(
                f"{page_info['icon']} {page_info['name']}",
                key=f"nav_{page_id}",
                use_container_width=True,
                type="primary" if is_active else "secondary",
            ):
                st.session_state.current_page = page_id
                st.session_state.global_error = None
                st.rerun()

        st.divider()

        _render_settings()

        st.divider()
        st.caption(f"📊 最後更新: {datetime.now().strftime('%H:%M')}")


def _load_saved_settings():
    """讀取已保存的設定"""
    saved_api_key = get_gemini_api_key()
    if saved_api_key and not st.session_state.get("gemini_configured"):
        if configure_gemini(saved_api_key):
            st.session_state.gemini_configured = True


def _render_settings():
    """設定區塊"""
    with st.expander("⚙️ 設定", expanded=not st.session_state.get("gemini_configured")):
        st.markdown("**🔑 API 設定**")

        saved_api_key = get_gemini_api_key()
        api_key = st.text_input(
            "Gemini API Key",
            type="password",
            value=saved_api_key if saved_api_key else "",
            help="所有 AI 掃描都需要此金鑰",
        )

        if api_key and api_key != saved_api_key:
            if configure_gemini(api_key):
                st.session_state.gemini_configured = True
                set_gemini_api_key(api_key)
                st.success("✅ API 設定完成（已保存）")
            else:
                st.error("❌ API 設定失敗")
        elif saved_api_key:
            st.caption("✅ 已設定")

        st.caption(f"模型: {get_gemini_model_name()}")

        current_search = use_search_grounding()
        search = st.toggle("使用網路搜尋", value=current_search, help="要求模型以 Google 搜尋取得最新數據")
        if search != current_search:
            set_setting("use_search", search)
