from .filtering import filter_transactions, categories_to_types, count_unparseable_dates
from .balance import build_balance_series
from .date_ranges import describe_date_range, resolve_date_preset
from .filter_store import (
    FilterStateStore,
    FilterLocation,
    InMemoryLocation,
    criteria_to_params,
    params_to_criteria,
    count_active_filter_groups,
)
