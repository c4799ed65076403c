"""Filter location backed by the page URL query string."""
from __future__ import annotations
from typing import Any, Dict, Mapping, Optional

import streamlit as st

from analytics.filter_store import (
    FILTER_PARAM_KEYS,
    PARAM_TRANSACTION_STATUS,
    PARAM_TRANSACTION_TYPE,
    FilterLocation,
    ParamValue,
)
from core.logger import get_logger

log = get_logger("ui/services/query_params_location")

_LIST_KEYS = {PARAM_TRANSACTION_TYPE, PARAM_TRANSACTION_STATUS}


class QueryParamsLocation(FilterLocation):
    """
    Reads and writes the filter keys on ``st.query_params``.

    Only the filter keys are touched; any other query parameters on the page
    are left alone. List values become repeated keys
    (``?transactionType=store&transactionType=tipped``).
    """

    def __init__(self, query_params: Optional[Any] = None):
        self._query_params = query_params

    @property
    def _params(self):
        return self._query_params if self._query_params is not None else st.query_params

    def read(self) -> Dict[str, ParamValue]:
        qp = self._params
        result: Dict[str, ParamValue] = {}
        for key in FILTER_PARAM_KEYS:
            if key not in qp:
                continue
            values = [v for v in qp.get_all(key) if v]
            if not values:
                continue
            result[key] = values if key in _LIST_KEYS else values[-1]
        return result

    def write(self, params: Mapping[str, Optional[ParamValue]]) -> None:
        qp = self._params
        for key, value in params.items():
            if value is None:
                if key in qp:
                    del qp[key]
            else:
                qp[key] = value
        log.debug(f"Query params synced: keys={sorted(k for k, v in params.items() if v is not None)}")
