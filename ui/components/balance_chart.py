"""Running balance line chart."""
from __future__ import annotations
from typing import List

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from core.config import config
from core.utils import currency_symbol, format_short_date
from models.schema import BalancePoint


def balance_hovertemplate(currency: str | None = None) -> str:
    """Hover label showing the day and the balance in the given currency."""
    return f"%{{x|%b %d, %Y}}<br>{currency_symbol(currency)}%{{y:,.2f}}<extra></extra>"


def render_balance_chart(points: List[BalancePoint]) -> None:
    """
    Render the balance trend.

    Points are plotted as given; plotly draws straight segments between
    non-adjacent days. An empty series shows an explicit no-data message
    rather than a flat line.
    """
    if not points:
        st.info("No transaction data available")
        return

    df = pd.DataFrame([p.model_dump() for p in points])
    df["date"] = pd.to_datetime(df["date"])

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df["date"],
        y=df["cumulative_balance"],
        name="Balance",
        mode="lines+markers" if len(df) == 1 else "lines",
        line=dict(color="#fb923c", width=2, shape="spline"),
        hovertemplate=balance_hovertemplate(config.currency),
    ))

    fig.update_layout(
        height=260,
        margin=dict(l=0, r=0, t=10, b=0),
        showlegend=False,
        hovermode="x unified",
        xaxis=dict(showgrid=False, tickformat="%b %d, %Y"),
        yaxis=dict(visible=False),
        plot_bgcolor="white",
    )

    st.plotly_chart(fig, use_container_width=True)

    col1, col2 = st.columns(2)
    with col1:
        st.caption(format_short_date(points[0].date))
    with col2:
        st.caption(f"<div style='text-align: right'>{format_short_date(points[-1].date)}</div>", unsafe_allow_html=True)
