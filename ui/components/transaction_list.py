"""Filtered ledger with header, CSV export and one row per transaction."""
from __future__ import annotations
from typing import List

import pandas as pd
import streamlit as st

from core.config import config
from core.utils import (
    format_currency,
    format_date,
    get_transaction_subtitle,
    get_transaction_title,
)
from models.schema import Transaction


def render_transaction_item(transaction: Transaction) -> None:
    """Render a single ledger row."""
    is_withdrawal = transaction.type == "withdrawal"
    icon = "↗️" if is_withdrawal else "↙️"
    sign = "-" if is_withdrawal else ""

    col1, col2, col3 = st.columns([1, 6, 3])
    with col1:
        st.markdown(f"### {icon}")
    with col2:
        st.markdown(f"**{get_transaction_title(transaction)}**")
        subtitle = get_transaction_subtitle(transaction)
        if is_withdrawal and transaction.status == "successful":
            st.markdown(f":green[{subtitle}]")
        elif is_withdrawal and transaction.status == "pending":
            st.markdown(f":orange[{subtitle}]")
        else:
            st.caption(subtitle)
    with col3:
        st.markdown(
            f"<div style='text-align: right'><b>{sign}{format_currency(transaction.amount, config.currency)}</b></div>",
            unsafe_allow_html=True,
        )
        st.markdown(
            f"<div style='text-align: right; color: #56616B'>{format_date(transaction.date)}</div>",
            unsafe_allow_html=True,
        )


def transactions_to_frame(transactions: List[Transaction]) -> pd.DataFrame:
    """Flatten transactions for export."""
    rows = [
        {
            "date": t.day.isoformat() if t.day else t.date,
            "type": t.type,
            "status": t.status,
            "amount": t.amount,
            "title": get_transaction_title(t),
            "counterparty": get_transaction_subtitle(t),
            "payment_reference": t.payment_reference,
        }
        for t in transactions
    ]
    return pd.DataFrame(rows, columns=["date", "type", "status", "amount", "title", "counterparty", "payment_reference"])


def render_transaction_list(
    transactions: List[Transaction],
    descriptor: str,
    active_filter_count: int,
    excluded_count: int = 0,
) -> None:
    """
    Render the filtered ledger.

    Args:
        transactions: Already-filtered transactions, in display order
        descriptor: Date range phrase, e.g. "the last 7 days"
        active_filter_count: Number of active filter groups for the badge
        excluded_count: Records whose date could not be read
    """
    col1, col2 = st.columns([3, 1])
    with col1:
        st.markdown(f"## {len(transactions)} Transactions")
        st.caption(f"Your transactions for {descriptor}")
        if active_filter_count:
            st.caption(f"🔎 {active_filter_count} filter{'s' if active_filter_count != 1 else ''} applied")
    with col2:
        st.download_button(
            "Export list",
            data=transactions_to_frame(transactions).to_csv(index=False).encode("utf-8"),
            file_name="transactions.csv",
            mime="text/csv",
            use_container_width=True,
            disabled=not transactions,
        )

    if excluded_count:
        st.caption(f"⚠️ {excluded_count} transaction(s) have an unreadable date and are hidden when a date filter is active.")

    st.divider()

    if not transactions:
        st.info("No transactions found")
        return

    for transaction in transactions:
        render_transaction_item(transaction)
