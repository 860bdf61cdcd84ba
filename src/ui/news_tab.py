"""
Market News Tab Module
市場熱度、題材炒作與板塊脈動。
"""
from html import escape

import streamlit as st

from src.constants import CARD_NEWS
from src.screening import category_label, clamp_price_level
from src.ui.session import get_coordinator, go_to


def render_news_tab():
    """Renders the hype / chips / community news view."""
    st.markdown("## ⚡ 市場熱度 & 題材炒作")
    st.caption("MARKET INSIGHTS ・ 熱門題材")
    st.markdown(
        "「風口來了，豬都會飛。」系統自動蒐集市場中討論度最高、資金流入最明顯的題材與八卦，"
        "捕捉短線爆發力強的炒作標的。"
    )

    state = get_coordinator().state(CARD_NEWS)
    if state.loading:
        st.info("正在蒐集內線八卦與市場題材...")
        return
    if not state.has_data:
        st.caption("尚未蒐集")
        if st.button("返回戰情室啟動搜集"):
            go_to("dashboard")
        return
    if state.error:
        st.warning(f"最近一次蒐集失敗，顯示先前結果: {state.error}")

    _render_pulse(state.data["pulse"])
    st.divider()

    cols = st.columns(2)
    for i, item in enumerate(state.data["news"]):
        with cols[i % 2]:
            _render_news_item(item)


def _render_pulse(pulse):
    st.markdown("### 🌡️ 市場脈動")
    st.info(pulse["trendSummary"])
    if not pulse["hotSectors"]:
        return
    cols = st.columns(len(pulse["hotSectors"]))
    for col, sector in zip(cols, pulse["hotSectors"]):
        with col:
            intensity = clamp_price_level(sector["intensity"])
            st.markdown(f"**{sector['name']}**")
            st.progress(int(intensity), text=f"熱度 {intensity:.0f}")
            st.caption(sector["reason"])


def _render_news_item(item):
    with st.container(border=True):
        st.markdown(_news_meta_html(item), unsafe_allow_html=True)
        st.markdown(f"#### {item['title']}")
        st.markdown(f"> {item['summary']}")
        st.markdown(_keywords_html(item), unsafe_allow_html=True)


def _news_meta_html(item) -> str:
    """分類徽章、影響程度與多空標記"""
    trend = " 📈" if item["sentiment"] == "positive" else ""
    return (
        f'<div class="sentiment-{item["sentiment"]}">'
        f'<span class="badge badge-{item["category"]}">{escape(category_label(item["category"]))}</span>'
        f'<span class="card-caption">影響 {escape(item["impactLevel"])}</span>{trend}</div>'
    )


def _keywords_html(item) -> str:
    """關鍵字與相關個股標籤（模型文字一律跳脫）"""
    keywords = "".join(f'<span class="keyword">#{escape(kw)}</span>' for kw in item["keywords"])
    if item["relatedTickers"]:
        tickers = escape(", ".join(item["relatedTickers"]))
        keywords += f'<span class="keyword">📌 {tickers}</span>'
    return keywords
