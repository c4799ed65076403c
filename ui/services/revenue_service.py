"""Revenue loading business logic service."""
from __future__ import annotations
from typing import Optional, Tuple

from api import TransactionSourceError, get_revenue_source
from api.services import RevenueSource
from core.config import config
from core.logger import get_logger
from models.schema import RevenueData
from .session_manager import SessionManager

log = get_logger("ui/services/revenue_service")


class RevenueService:
    """Fetches revenue data once per session."""

    @staticmethod
    def validate_config() -> Tuple[bool, Optional[str]]:
        """
        Validate that the configured source can be used.

        Returns:
            (is_valid, error_message)
        """
        if config.revenue_source == "api" and not config.api_base_url:
            return False, "API_BASE_URL is not configured."
        if config.revenue_source == "file" and not config.sample_data_file.is_file():
            return False, f"Sample data file not found: {config.sample_data_file}"
        return True, None

    @staticmethod
    def load(source: Optional[RevenueSource] = None) -> Tuple[Optional[RevenueData], Optional[str]]:
        """
        Return the session's revenue data, fetching it on first use.

        Args:
            source: Optional source override; defaults to the configured one

        Returns:
            (data, error_message); data is None when loading failed
        """
        cached = SessionManager.get_revenue_data()
        if cached is not None:
            return cached, None

        is_valid, error = RevenueService.validate_config()
        if source is None and not is_valid:
            log.warning(f"Revenue source not configured: {error}")
            SessionManager.set_revenue_error(error)
            return None, error

        try:
            data = (source or get_revenue_source()).load()
        except TransactionSourceError as e:
            log.error(f"Failed to load revenue data: {e}")
            SessionManager.set_revenue_error(str(e))
            return None, str(e)

        SessionManager.set_revenue_data(data)
        SessionManager.set_revenue_error(None)
        return data, None
