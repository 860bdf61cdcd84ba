"""
Market Guide Tab Module
大盤與核心 ETF 的季線乖離與位階。
"""
from html import escape

import streamlit as st

from src.constants import CARD_MARKET
from src.screening import clamp_price_level, market_status_label
from src.ui.session import get_coordinator, go_to

STATUS_ICONS = {
    "crisis_buy": "💎",
    "bull_pullback": "⚓",
    "overheated": "🔥",
    "neutral": "🔭",
}

# (寬度 %, 顏色)：崩盤區 / 中性 / 季線支撐區 / 中性 / 過熱區
GAUGE_SEGMENTS = [
    (25, "rgba(16,185,129,0.3)"),
    (25, "#e2e8f0"),
    (20, "rgba(59,130,246,0.4)"),
    (5, "#e2e8f0"),
    (25, "rgba(251,113,133,0.4)"),
]


def render_market_tab():
    """Renders the market guide."""
    st.markdown("## 📊 大盤指南：趨勢與乖離分析")
    st.caption("MACRO ANALYSIS ・ 位階判斷")
    st.markdown(
        "監控大盤與核心 ETF 的均線乖離率 (Bias)，判斷市場目前是處於「過熱風險區」、"
        "「合理支撐區」還是「恐慌超跌區」。"
    )

    state = get_coordinator().state(CARD_MARKET)
    if state.loading:
        st.info("分析大盤數據中...")
        return
    if not state.has_data:
        if st.button("請至戰情室啟動分析"):
            go_to("dashboard")
        return
    if state.error:
        st.warning(f"最近一次分析失敗，顯示先前結果: {state.error}")

    cols = st.columns(2)
    for i, market in enumerate(state.data):
        with cols[i % 2]:
            _render_market_card(market)


def _render_market_card(market):
    with st.container(border=True):
        icon = STATUS_ICONS.get(market["status"], STATUS_ICONS["neutral"])
        title_col, badge_col = st.columns([3, 2])
        with title_col:
            st.markdown(f"### {icon} {market['name']}")
            st.caption(market["ticker"])
        with badge_col:
            st.markdown(
                f'<span class="badge badge-{market["status"]}">{escape(market_status_label(market))}</span>',
                unsafe_allow_html=True,
            )

        st.markdown(_gauge_html(market["priceLevel"]), unsafe_allow_html=True)

        m1, m2, m3 = st.columns(3)
        m1.metric("季線乖離", f"{market['deviationFromQuarterly']:+.2f}%")
        m2.metric("年線乖離", f"{market['deviationFromYearly']:+.2f}%")
        m3.metric("距高點", f"{market['drawdownFromHigh']:+.2f}%")

        st.markdown(f"**{market['signal']}**")
        st.caption(market["description"])


def _gauge_html(level: float) -> str:
    """0-100 的位階儀表"""
    position = clamp_price_level(level)
    segments = "".join(
        f'<div style="width:{width}%;background:{color}"></div>' for width, color in GAUGE_SEGMENTS
    )
    return (
        '<div class="gauge-labels"><span>崩盤 (0%)</span>'
        '<span style="color:#3b82f6">季線支撐區 (50-70%)</span><span>過熱 (100%)</span></div>'
        f'<div class="gauge">{segments}'
        f'<div class="gauge-marker" style="left:{position}%"></div></div>'
    )
