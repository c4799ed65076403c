"""UI services module."""
from .session_manager import SessionManager
from .revenue_service import RevenueService
from .query_params_location import QueryParamsLocation

__all__ = ["SessionManager", "RevenueService", "QueryParamsLocation"]
