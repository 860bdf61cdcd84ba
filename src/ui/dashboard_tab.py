"""
Global Dashboard Tab Module
一鍵全域掃描與四張摘要卡片。
"""
from html import escape

import streamlit as st

from src.constants import CARD_FINANCIAL, CARD_LONG_TERM, CARD_MARKET, CARD_NEWS
from src.screening import count_green_zone, filter_long_term_targets
from src.services.scan_service import run_global_scan
from src.ui.session import get_coordinator, go_to, trigger_card_scan


def render_dashboard_tab():
    """Renders the global dashboard."""
    coordinator = get_coordinator()

    st.markdown("## 🚀 全域投資戰情室")
    st.markdown(
        "一鍵啟動 AI 核心，同時執行「金融板塊估值」、「大盤位階判讀」、"
        "「長線趨勢掃描」與「市場題材蒐集」。"
    )

    if coordinator.global_error:
        st.error(coordinator.global_error, icon="⚠️")

    busy = coordinator.is_any_loading() or coordinator.global_loading
    label = "系統忙碌中..." if busy else "🚀 啟動全域掃描"
    if st.button(label, type="primary", disabled=busy, use_container_width=True):
        _run_global_scan()

    st.divider()

    cols = st.columns(4)
    with cols[0]:
        _render_card(
            CARD_FINANCIAL, "🔬 金融板塊掃描", "scanner", "掃描金融股中...",
            _financial_summary,
        )
    with cols[1]:
        _render_card(
            CARD_MARKET, "📊 大盤位階指南", "market", "分析大盤數據中...",
            _market_summary,
        )
    with cols[2]:
        _render_card(
            CARD_LONG_TERM, "👑 長予投資策略", "long_term", "正在掃描全市場...",
            _long_term_summary,
        )
    with cols[3]:
        _render_card(
            CARD_NEWS, "⚡ 市場題材風口", "news", "正在蒐集市場題材...",
            _news_summary,
        )


def _run_global_scan():
    """依序執行四項掃描（不並行）"""
    if not st.session_state.get("gemini_configured"):
        st.toast("⚠️ 請先設定 Gemini API Key", icon="⚠️")
        return
    with st.status("正在掃描全市場...", expanded=True) as status:
        st.write("大盤 → 金融 → 長予 → 消息，依序執行中")
        outcome = run_global_scan(get_coordinator())
        failed = [card for card, ok in outcome.items() if not ok]
        status.update(
            label="掃描完成" if not failed else f"掃描完成（{len(failed)} 項失敗）",
            state="complete" if not failed else "error",
        )
    st.rerun()


def _render_card(card: str, title: str, page: str, spinner_text: str, summary_fn):
    coordinator = get_coordinator()
    state = coordinator.state(card)

    with st.container(border=True):
        st.markdown(f'<div class="card-title">{title}</div>', unsafe_allow_html=True)

        if state.loading:
            st.caption("正在分析數據...")
        elif not state.has_data:
            st.caption("等待啟動")
        else:
            summary_fn(state.data)

        if state.error:
            st.caption(f"⚠️ 上次更新失敗: {state.error}")

        btn_col, detail_col = st.columns(2)
        with btn_col:
            if st.button(
                "🔄 更新數據",
                key=f"scan_{card}",
                disabled=state.loading,
                use_container_width=True,
                help="單獨更新此區塊數據",
            ):
                if not st.session_state.get("gemini_configured"):
                    st.toast("⚠️ 請先設定 Gemini API Key", icon="⚠️")
                else:
                    trigger_card_scan(card, spinner_text)
        with detail_col:
            if st.button("查看詳情", key=f"detail_{card}", use_container_width=True):
                go_to(page)


def _financial_summary(results):
    st.markdown(
        f'<div class="card-figure" style="color:#059669">{count_green_zone(results)} '
        f'<span class="card-caption">檔</span></div>'
        '<div class="card-caption">落入便宜區間 (Green Zone)</div>',
        unsafe_allow_html=True,
    )


def _market_summary(results):
    st.markdown(_market_summary_html(results), unsafe_allow_html=True)


def _market_summary_html(results) -> str:
    """前兩檔的狀態徽章與首檔訊號（模型文字一律跳脫）"""
    badges = "".join(
        f'<span class="badge badge-{m["status"]}">{escape(m["name"])}</span>' for m in results[:2]
    )
    signal = escape(results[0]["signal"]) if results else "數據分析完成"
    return f'{badges}<div class="card-caption" style="margin-top:0.5rem">{signal}</div>'


def _long_term_summary(results):
    st.markdown(
        f'<div class="card-figure" style="color:#d97706">{len(filter_long_term_targets(results))} '
        f'<span class="card-caption">檔</span></div>'
        '<div class="card-caption">符合月線收斂 + 散戶減碼</div>',
        unsafe_allow_html=True,
    )


def _news_summary(response):
    st.markdown(
        f'<div class="card-figure" style="color:#c026d3">{len(response["news"])} '
        f'<span class="card-caption">則</span></div>'
        '<div class="card-caption">熱門題材與籌碼動向</div>',
        unsafe_allow_html=True,
    )
