"""Session state management service."""
from __future__ import annotations
from typing import Optional

import streamlit as st

from analytics.filter_store import FilterStateStore
from core.logger import get_logger
from models.schema import RevenueData
from .query_params_location import QueryParamsLocation

log = get_logger("ui/services/session_manager")


class SessionManager:
    """Centralized session state management."""

    @staticmethod
    def init_session() -> None:
        """Initialize session-specific state."""
        if "filter_store" not in st.session_state:
            store = FilterStateStore(QueryParamsLocation())
            store.subscribe(lambda criteria: log.info(f"Filters changed: {criteria.model_dump(exclude_none=True)}"))
            st.session_state["filter_store"] = store
            log.info("Filter store created for session")

        if "revenue_data" not in st.session_state:
            st.session_state["revenue_data"] = None

        if "revenue_error" not in st.session_state:
            st.session_state["revenue_error"] = None

    @staticmethod
    def get_filter_store() -> FilterStateStore:
        """
        Get the session's filter store, re-synced with the URL.

        Reloading on every run picks up back/forward navigation and links
        opened in the same session.
        """
        SessionManager.init_session()
        store: FilterStateStore = st.session_state["filter_store"]
        store.reload()
        return store

    @staticmethod
    def get_revenue_data() -> Optional[RevenueData]:
        SessionManager.init_session()
        return st.session_state.get("revenue_data")

    @staticmethod
    def set_revenue_data(data: Optional[RevenueData]) -> None:
        st.session_state["revenue_data"] = data

    @staticmethod
    def get_revenue_error() -> Optional[str]:
        SessionManager.init_session()
        return st.session_state.get("revenue_error")

    @staticmethod
    def set_revenue_error(message: Optional[str]) -> None:
        st.session_state["revenue_error"] = message

    @staticmethod
    def clear_revenue_data() -> None:
        """Drop cached revenue data so the next run fetches again."""
        st.session_state["revenue_data"] = None
        st.session_state["revenue_error"] = None
        log.debug("Cleared cached revenue data")
