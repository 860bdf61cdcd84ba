"""
Long-term Strategy Tab Module
長予投資：月線收斂 + 日線回測 + 散戶減碼的金選標的。
"""
import streamlit as st

from src.constants import CARD_LONG_TERM
from src.screening import filter_long_term_targets, retail_change
from src.ui.session import get_coordinator, go_to


def render_long_term_tab():
    """Renders the long-term strategy targets."""
    st.markdown("## 👑 長予投資：金選標的清單")
    st.caption("PREMIUM STRATEGY ・ 高勝率回測")
    st.markdown(
        "篩選「月線趨勢向上且糾結」的多頭軌道股，並在「日線回測生命線」時進場。"
        "這是專為穩健投資者設計的長線保護短線策略。"
    )
    st.markdown("📈 月線收斂糾結　🎯 日線回測生命線　👥 散戶人數下降")

    state = get_coordinator().state(CARD_LONG_TERM)
    targets = filter_long_term_targets(state.data)

    st.markdown(f"### 符合長予策略標的 ({len(targets)})")

    if state.loading:
        st.info("正在掃描全市場...")
        return
    if not state.has_data:
        st.caption("尚未啟動掃描")
        if st.button("前往戰情室啟動"):
            go_to("dashboard")
        return
    if state.error:
        st.warning(f"最近一次掃描失敗，顯示先前結果: {state.error}")
    if not targets:
        st.info("目前查無符合標的")
        return

    cols = st.columns(3)
    for i, stock in enumerate(targets):
        with cols[i % 3]:
            _render_target(stock)


def _render_target(stock):
    diff, pct = retail_change(stock)
    with st.container(border=True):
        if stock["isRetailDecreasing"]:
            st.caption("🏅 Smart Money Choice")
        st.markdown(f"#### {stock['name']}")
        st.caption(stock["ticker"])

        st.metric(
            "籌碼面：散戶 (<50張) 動向",
            f"{diff:+,.0f}人",
            delta=f"{pct:.1f}%" if pct is not None else None,
            delta_color="inverse",
        )
        st.markdown(f"**月線篩選 (趨勢)**: {stock['monthlyTrendDesc'] or '符合收斂向上'}")
        st.markdown(f"**日線篩選 (買點)**: {stock['dailyPullbackDesc'] or '回測支撐有守'}")
