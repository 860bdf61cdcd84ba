import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from src.models import ChartPoint

# (欄位, 名稱, 顏色, 填色)
RIVER_BANDS = [
    ("river25", "便宜價門檻", "#10b981", "rgba(16,185,129,0.10)"),
    ("river50", "歷史中位數 PB", "#f59e0b", None),
    ("river75", "昂貴價門檻", "#f97316", "rgba(245,158,11,0.10)"),
    ("river90", "極度高估門檻", "#ef4444", "rgba(239,68,68,0.10)"),
]


def build_river_figure(chart_data: list[ChartPoint], stock_name: str) -> go.Figure:
    """
    本淨比河流圖（PB 分位數帶 + 股價線）。
    """
    df = pd.DataFrame(chart_data)
    fig = go.Figure()

    # 分位數帶：由下往上，填色至前一條線
    for i, (column, name, color, fill) in enumerate(RIVER_BANDS):
        fig.add_trace(go.Scatter(
            x=df["date"], y=df[column],
            name=name,
            mode="lines",
            line=dict(color=color, width=1, dash="dash"),
            fill=("tozeroy" if i == 0 else "tonexty") if fill else None,
            fillcolor=fill,
            connectgaps=True,
        ))

    fig.add_trace(go.Scatter(
        x=df["date"], y=df["price"],
        name="目前的股價",
        mode="lines",
        line=dict(color="#2563eb", width=3),
        connectgaps=True,
    ))

    fig.update_layout(
        title=f"{stock_name} - 本淨比河流圖",
        template="plotly_white",
        height=420,
        margin=dict(l=0, r=0, t=40, b=0),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
    )
    return fig


def render_river_chart(chart_data: list[ChartPoint], stock_name: str):
    """河流圖；無資料時不顯示"""
    if not chart_data:
        return
    st.plotly_chart(build_river_figure(chart_data, stock_name), use_container_width=True)
