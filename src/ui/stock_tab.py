"""
Stock Analysis Tab Module
個股 PB 河流圖、估值位階、安全評分與投資故事。
"""
import math

import streamlit as st

from src.constants import CARD_STOCK
from src.market_config import format_price, normalize_tw_ticker
from src.screening import VALUATION_LABELS
from src.services.scan_service import run_card_scan
from src.stock_screener import analyze_stock
from src.ui.components.river_chart import render_river_chart
from src.ui.session import get_coordinator

STATUS_COLORS = {
    "cheap": "green",
    "fair": "orange",
    "expensive": "orange",
    "overvalued": "red",
}


def render_stock_tab():
    """Renders the single-stock river chart analysis."""
    st.markdown("## 🌊 個股河流圖分析")

    col_input, col_btn = st.columns([2, 1])
    with col_input:
        ticker = st.text_input("台股代號", value="2881", placeholder="例: 2881, 2891, 2330")
    with col_btn:
        st.write("")
        analyze = st.button("🔍 開始分析", type="primary", use_container_width=True)

    if analyze and ticker.strip():
        if not st.session_state.get("gemini_configured"):
            st.toast("⚠️ 請先設定 Gemini API Key", icon="⚠️")
        else:
            formatted = normalize_tw_ticker(ticker)
            with st.spinner(f"{formatted} 分析中..."):
                run_card_scan(CARD_STOCK, get_coordinator(), runner=lambda: analyze_stock(formatted))

    state = get_coordinator().state(CARD_STOCK)
    if state.error:
        st.error(f"分析失敗: {state.error}")
    if not state.has_data:
        st.info("輸入代號後按下「開始分析」")
        return

    _render_analysis(state.data)


def _render_analysis(result):
    stock = result["stock"]
    status = result["status"]

    st.markdown(f"### {stock['name']} ({stock['ticker']})")
    st.markdown(
        f"估值位階: :{STATUS_COLORS[status]}[**{VALUATION_LABELS[status]}**]　"
        f"安全評分: **{'高' if result['safetyScore'] == 'high' else '低'}**"
    )

    pb = result["currentPB"]
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("目前股價", format_price(stock["currentPrice"], stock["currency"]))
    m2.metric("目前 PB", f"{pb:.2f}x" if math.isfinite(pb) else "N/A")
    m3.metric("ROE", f"{stock['roe']:.1f}%")
    m4.metric("連續配息", f"{stock.get('consecutiveDividendYears') or 0} 年")

    p1, p2, p3, p4 = st.columns(4)
    p1.metric("PB 25%", f"{stock['pb25']:.2f}")
    p2.metric("PB 50%", f"{stock['pb50']:.2f}")
    p3.metric("PB 75%", f"{stock['pb75']:.2f}")
    p4.metric("PB 90%", f"{stock['pb90']:.2f}")

    render_river_chart(result["chartData"], stock["name"])

    narrative = result["narrative"]
    with st.container(border=True):
        st.markdown("#### 📖 市場矛盾")
        st.markdown(narrative["conflictReason"])
        story = narrative["story"]
        st.markdown(f"**主角**: {story['protagonist']}")
        st.markdown(f"**事件**: {story['events']}")
        st.markdown(f"**行動**: {story['actions']}")
        st.markdown("#### 🔭 展望")
        st.markdown(narrative["outlook"])
