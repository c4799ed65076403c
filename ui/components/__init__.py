"""UI components module."""
from .header import render_header
from .balance_card import render_balance_card, render_stat_card
from .balance_chart import render_balance_chart
from .filter_sheet import render_filter_sheet
from .transaction_list import render_transaction_list, render_transaction_item

__all__ = [
    "render_header",
    "render_balance_card",
    "render_stat_card",
    "render_balance_chart",
    "render_filter_sheet",
    "render_transaction_list",
    "render_transaction_item",
]
