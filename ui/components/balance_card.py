"""Wallet summary card: available balance, trend chart and stat cards."""
from __future__ import annotations
from typing import List

import streamlit as st

from core.config import config
from core.logger import get_logger
from core.utils import format_currency
from models.schema import BalancePoint, Wallet
from .balance_chart import render_balance_chart

log = get_logger("ui/components/balance_card")

STAT_CARDS = [
    ("Ledger Balance", "ledger_balance", "Your current ledger balance"),
    ("Total Payout", "total_payout", "Total amount paid out"),
    ("Total Revenue", "total_revenue", "Total revenue generated"),
    ("Pending Payout", "pending_payout", "Payouts waiting to be processed"),
]


def render_stat_card(label: str, amount: float, tooltip: str | None = None) -> None:
    st.metric(label=label, value=format_currency(amount, config.currency), help=tooltip)


def render_balance_card(wallet: Wallet, points: List[BalancePoint]) -> None:
    """
    Render the wallet summary.

    Args:
        wallet: Wallet figures, displayed as-is
        points: Running balance series for the chart
    """
    with st.container(border=True):
        col1, col2 = st.columns([3, 1])
        with col1:
            st.caption("Available Balance")
            st.markdown(f"## {format_currency(wallet.balance, config.currency)}")
        with col2:
            if st.button("Withdraw", type="primary", use_container_width=True):
                log.info("Withdraw requested")
                st.toast("Withdrawals are not available in this dashboard yet.")

        render_balance_chart(points)

        cols = st.columns(len(STAT_CARDS))
        for col, (label, field, tooltip) in zip(cols, STAT_CARDS):
            with col:
                render_stat_card(label, getattr(wallet, field), tooltip)
