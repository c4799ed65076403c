"""Filter sheet: presets, date range, type and status multi-selects."""
from __future__ import annotations
import datetime as dt
from typing import Dict, List, Optional

import streamlit as st

from analytics.date_ranges import resolve_date_preset
from analytics.filter_store import FilterStateStore
from core.logger import get_logger
from models.filters import (
    CATEGORY_OPTIONS,
    DATE_PRESET_OPTIONS,
    STATUS_OPTIONS,
    validate_filter_form,
)

log = get_logger("ui/components/filter_sheet")

_CATEGORY_LABELS = dict(CATEGORY_OPTIONS)
_STATUS_LABELS = dict(STATUS_OPTIONS)
_PRESET_LABELS = dict(DATE_PRESET_OPTIONS)

_FIELD_LABELS = {
    "date_from": "From",
    "date_to": "To",
    "transaction_type": "Transaction Type",
    "transaction_status": "Transaction Status",
    "date_preset": "Date preset",
    "form": "Date Range",
}


def _selected(options: List[str], current) -> List[str]:
    return [o for o in options if current and o in current]


def render_filter_sheet(store: FilterStateStore, today: dt.date) -> None:
    """
    Render the filter form in the sidebar and apply it to the store.

    A chosen preset overrides the date inputs on Apply. Validation errors are
    shown next to the form and leave the store untouched.
    """
    criteria = store.current()
    preset_options: List[Optional[str]] = [None] + [p for p, _ in DATE_PRESET_OPTIONS]
    category_values = [tag for tag, _ in CATEGORY_OPTIONS]
    status_values = [status for status, _ in STATUS_OPTIONS]

    with st.sidebar:
        count = store.active_filter_group_count()
        st.subheader(f"Filter ({count})" if count else "Filter")

        with st.form("transaction_filters"):
            preset = st.radio(
                "Quick range",
                options=preset_options,
                index=preset_options.index(criteria.date_preset) if criteria.date_preset in preset_options else 0,
                format_func=lambda p: "Custom" if p is None else _PRESET_LABELS[p],
                horizontal=True,
            )

            col1, col2 = st.columns(2)
            with col1:
                date_from = st.date_input("From", value=criteria.date_from, format="YYYY-MM-DD")
            with col2:
                date_to = st.date_input("To", value=criteria.date_to, format="YYYY-MM-DD")

            transaction_type = st.multiselect(
                "Transaction Type",
                options=category_values,
                default=_selected(category_values, criteria.categories),
                format_func=lambda tag: _CATEGORY_LABELS[tag],
                placeholder="All types",
            )
            transaction_status = st.multiselect(
                "Transaction Status",
                options=status_values,
                default=_selected(status_values, criteria.statuses),
                format_func=lambda status: _STATUS_LABELS[status],
                placeholder="All statuses",
            )

            col1, col2 = st.columns(2)
            with col1:
                cleared = st.form_submit_button("Clear", use_container_width=True)
            with col2:
                applied = st.form_submit_button("Apply", type="primary", use_container_width=True)

        if cleared:
            store.clear_all()
            st.rerun()

        if applied:
            if preset is not None:
                date_from, date_to = resolve_date_preset(preset, today)

            values, errors = validate_filter_form({
                "date_from": date_from,
                "date_to": date_to,
                "transaction_type": transaction_type,
                "transaction_status": transaction_status,
                "date_preset": preset,
            })
            if errors:
                _render_errors(errors)
                log.info(f"Filter form rejected: fields={sorted(errors)}")
                return

            store.replace(values.to_criteria())
            st.rerun()


def _render_errors(errors: Dict[str, str]) -> None:
    for field, message in errors.items():
        st.error(f"{_FIELD_LABELS.get(field, field)}: {message}")
