"""Revenue page - wallet summary, balance trend and filterable ledger."""
from __future__ import annotations
import datetime as dt

import streamlit as st

from analytics import (
    build_balance_series,
    count_unparseable_dates,
    describe_date_range,
    filter_transactions,
)
from core.logger import get_logger
from ui.components import (
    render_balance_card,
    render_filter_sheet,
    render_header,
    render_transaction_list,
)
from ui.services import RevenueService, SessionManager

log = get_logger("ui/pages/revenue_page")


def render() -> None:
    """Render the revenue page."""
    SessionManager.init_session()

    with st.spinner("Loading transactions..."):
        data, error = RevenueService.load()

    if data is None:
        st.error(f"Could not load revenue data: {error}")
        if st.button("Retry"):
            SessionManager.clear_revenue_data()
            st.rerun()
        return

    today = dt.date.today()
    store = SessionManager.get_filter_store()
    criteria = store.current()

    render_header(data.user)
    render_filter_sheet(store, today)

    # Both derive from the full ledger; the chart ignores the active filters
    points = build_balance_series(data.transactions)
    filtered = filter_transactions(data.transactions, criteria)
    descriptor = describe_date_range(criteria.date_from, criteria.date_to, today)

    render_balance_card(data.wallet, points)
    st.write("")
    render_transaction_list(
        filtered,
        descriptor=descriptor,
        active_filter_count=store.active_filter_group_count(),
        excluded_count=count_unparseable_dates(data.transactions),
    )
