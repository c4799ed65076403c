from .client import api, get_json, TransactionSourceError
from .services import (
    RevenueSource,
    ApiRevenueSource,
    FileRevenueSource,
    get_revenue_source,
    parse_transactions,
)
