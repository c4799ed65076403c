"""UI pages module."""
from .revenue_page import render as render_revenue_page

__all__ = ["render_revenue_page"]
