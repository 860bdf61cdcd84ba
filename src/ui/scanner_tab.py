"""
Financial Scanner Tab Module
金融板塊估值清單（綠區優先、ROE 由高到低）。
"""
import pandas as pd
import streamlit as st

from src.constants import CARD_FINANCIAL
from src.screening import count_green_zone, sort_financial_results
from src.ui.session import get_coordinator, go_to


def render_scanner_tab():
    """Renders the financial sector scanner."""
    st.markdown("## 🔬 金融板塊：估值河流圖掃描")
    st.caption("VALUE INVESTING ・ 穩定配息")
    st.markdown(
        "運用「本淨比 (PB Ratio) 河流圖」技術，自動過濾出目前股價處於歷史低檔區間，"
        "且具備長期穩定獲利與配息能力的優質金融股。"
    )
    st.markdown("🟢 股價 < PB 25分位 (便宜)　🟡 連續配息 > 5年　🔵 ROE 穩定成長")

    state = get_coordinator().state(CARD_FINANCIAL)
    sorted_results = sort_financial_results(state.data)

    header_col, count_col = st.columns([3, 1])
    with header_col:
        st.markdown("### 金融板塊估值清單")
    with count_col:
        if sorted_results is not None:
            st.metric("綠區標的", f"{count_green_zone(sorted_results)} 檔")

    if state.loading:
        st.info("掃描金融股中...")
        return
    if sorted_results is None:
        if st.button("請至戰情室啟動掃描"):
            go_to("dashboard")
        return
    if state.error:
        st.warning(f"最近一次掃描失敗，顯示先前結果: {state.error}")
    if not sorted_results:
        st.info("模型未回傳任何標的")
        return

    df = _build_table(sorted_results)
    st.dataframe(
        df.style.apply(_highlight_green_zone, axis=1),
        use_container_width=True,
        hide_index=True,
    )


def _build_table(results) -> pd.DataFrame:
    rows = []
    for s in results:
        rows.append({
            "標的": f"{s['name']} ({s['ticker']})",
            "現價": s["currentPrice"],
            "PB": f"{s['currentPB']:.2f}x",
            "ROE": _fmt(s["roe"], "{:.1f}%"),
            "殖利率": _fmt(s["dividendYield"], "{:.2f}%"),
            "連續配息": _fmt(s["consecutiveYears"], "{:.0f} 年"),
            "估值位階": "🟢 低檔便宜" if s["isGreenZone"] else "合理/偏高",
        })
    return pd.DataFrame(rows)


def _fmt(value, pattern: str) -> str:
    return "N/A" if value is None else pattern.format(value)


def _highlight_green_zone(row):
    color = "background-color: #ecfdf5" if row["估值位階"].startswith("🟢") else ""
    return [color] * len(row)
