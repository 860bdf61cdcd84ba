"""
台股金融河流選股器 - 主程式
Streamlit 儀表板，側邊欄導覽方式
"""
import streamlit as st
import os
import sys

# 路徑設定
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.log_config import get_logger
from src.ui.styles import get_custom_css
from src.ui.sidebar import render_sidebar
from src.ui.dashboard_tab import render_dashboard_tab
from src.ui.scanner_tab import render_scanner_tab
from src.ui.market_tab import render_market_tab
from src.ui.long_term_tab import render_long_term_tab
from src.ui.news_tab import render_news_tab
from src.ui.stock_tab import render_stock_tab

logger = get_logger(__name__)

# 頁面設定
st.set_page_config(
    page_title="台股金融河流選股器",
    page_icon="🏛️",
    layout="wide",
    initial_sidebar_state="expanded"
)

PAGE_RENDERERS = {
    "dashboard": render_dashboard_tab,
    "scanner": render_scanner_tab,
    "market": render_market_tab,
    "long_term": render_long_term_tab,
    "news": render_news_tab,
    "stock": render_stock_tab,
}


def init_session_state():
    """初始化 session state"""
    defaults = {
        "gemini_configured": False,
        "current_page": "dashboard",
        "global_loading": False,
        "global_error": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def render_error_screen(e):
    """啟動錯誤時的備援畫面"""
    st.error("應用程式啟動時發生錯誤。")
    st.code(str(e), language="python")
    st.markdown("""
    ### 處理方式
    1. 重新整理頁面。
    2. 確認 Gemini API Key 設定是否正確。
    3. 稍後再試。
    """)


def main():
    """主函式"""
    try:
        init_session_state()

        st.markdown(get_custom_css(), unsafe_allow_html=True)

        render_sidebar()

        page = st.session_state.current_page
        PAGE_RENDERERS.get(page, render_dashboard_tab)()

    except Exception as e:
        logger.exception(f"Unhandled UI error: {e}")
        render_error_screen(e)


if __name__ == "__main__":
    main()
