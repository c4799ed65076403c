"""
Filter state store.

Holds the single current FilterCriteria and mirrors it into a FilterLocation,
a flat string/string-list parameter map such as the page URL query string, so
that filters survive navigation and can be shared as links.

Persisted keys:
    dateFrom, dateTo        ISO calendar dates
    transactionType         repeated category tags
    transactionStatus       repeated status values
    datePreset              preset name
A missing key means unset; empty values are never written.
"""
from __future__ import annotations
from typing import Callable, Dict, List, Mapping, Optional, Union

from core.logger import get_logger
from core.utils import parse_day
from models.filters import (
    KNOWN_CATEGORIES,
    KNOWN_PRESETS,
    KNOWN_STATUSES,
    FilterCriteria,
)

log = get_logger("analytics/filter_store")

PARAM_DATE_FROM = "dateFrom"
PARAM_DATE_TO = "dateTo"
PARAM_TRANSACTION_TYPE = "transactionType"
PARAM_TRANSACTION_STATUS = "transactionStatus"
PARAM_DATE_PRESET = "datePreset"

FILTER_PARAM_KEYS = (
    PARAM_DATE_FROM,
    PARAM_DATE_TO,
    PARAM_TRANSACTION_TYPE,
    PARAM_TRANSACTION_STATUS,
    PARAM_DATE_PRESET,
)

ParamValue = Union[str, List[str]]
Listener = Callable[[FilterCriteria], None]


class FilterLocation:
    """
    Persisted, addressable home of the filter parameters.

    Implementations must support reading every filter key at once and writing
    a full parameter map in one call, where a ``None`` value removes the key.
    """

    def read(self) -> Dict[str, ParamValue]:
        raise NotImplementedError(f"{self.__class__.__name__}.read() must be implemented")

    def write(self, params: Mapping[str, Optional[ParamValue]]) -> None:
        raise NotImplementedError(f"{self.__class__.__name__}.write() must be implemented")


class InMemoryLocation(FilterLocation):
    """Dictionary-backed location for tests and headless use."""

    def __init__(self, initial: Optional[Mapping[str, ParamValue]] = None):
        self._params: Dict[str, ParamValue] = dict(initial or {})

    @property
    def params(self) -> Dict[str, ParamValue]:
        return self.read()

    def read(self) -> Dict[str, ParamValue]:
        return {k: list(v) if isinstance(v, list) else v for k, v in self._params.items()}

    def write(self, params: Mapping[str, Optional[ParamValue]]) -> None:
        for key, value in params.items():
            if value is None:
                self._params.pop(key, None)
            else:
                self._params[key] = list(value) if isinstance(value, list) else value


def criteria_to_params(criteria: FilterCriteria) -> Dict[str, Optional[ParamValue]]:
    """Serialize criteria to location parameters; ``None`` marks a key for removal."""
    return {
        PARAM_DATE_FROM: criteria.date_from.isoformat() if criteria.date_from else None,
        PARAM_DATE_TO: criteria.date_to.isoformat() if criteria.date_to else None,
        PARAM_TRANSACTION_TYPE: sorted(criteria.categories) if criteria.categories else None,
        PARAM_TRANSACTION_STATUS: sorted(criteria.statuses) if criteria.statuses else None,
        PARAM_DATE_PRESET: criteria.date_preset or None,
    }


def _as_list(value: object) -> List[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if v is not None and str(v).strip()]
    s = str(value).strip()
    return [s] if s else []


def _read_date(params: Mapping[str, object], key: str):
    values = _as_list(params.get(key))
    if not values:
        return None
    day = parse_day(values[0])
    if day is None:
        log.warning(f"Ignoring malformed date parameter: {key}={values[0]!r}")
    return day


def _read_tags(params: Mapping[str, object], key: str, known) -> Optional[frozenset]:
    values = _as_list(params.get(key))
    kept = frozenset(v for v in values if v in known)
    dropped = sorted(set(values) - kept)
    if dropped:
        log.debug(f"Ignoring unknown values for {key}: {dropped}")
    return kept or None


def params_to_criteria(params: Mapping[str, object]) -> FilterCriteria:
    """
    Parse location parameters into criteria.

    Unknown tags, statuses and presets are dropped and malformed dates are
    treated as absent, so a hand-edited or stale link never fails to load.
    """
    preset_values = _as_list(params.get(PARAM_DATE_PRESET))
    preset = preset_values[0] if preset_values else None
    if preset is not None and preset not in KNOWN_PRESETS:
        log.debug(f"Ignoring unknown date preset: {preset!r}")
        preset = None

    return FilterCriteria(
        date_from=_read_date(params, PARAM_DATE_FROM),
        date_to=_read_date(params, PARAM_DATE_TO),
        categories=_read_tags(params, PARAM_TRANSACTION_TYPE, KNOWN_CATEGORIES),
        statuses=_read_tags(params, PARAM_TRANSACTION_STATUS, KNOWN_STATUSES),
        date_preset=preset,
    )


def count_active_filter_groups(criteria: FilterCriteria) -> int:
    """
    Count independent filter groups constraining results.

    The date range counts once whether one or both bounds are set; category
    and status selections count when non-empty; a named preset counts once.
    """
    count = 0
    if criteria.has_date_bound:
        count += 1
    if criteria.categories:
        count += 1
    if criteria.statuses:
        count += 1
    if criteria.date_preset:
        count += 1
    return count


class FilterStateStore:
    """
    Single source of truth for the active filters.

    Every change builds a complete new FilterCriteria, writes all filter keys
    to the location in one call and then notifies subscribers.
    """

    def __init__(self, location: Optional[FilterLocation] = None):
        self._location = location if location is not None else InMemoryLocation()
        self._listeners: List[Listener] = []
        self._criteria = params_to_criteria(self._location.read())
        log.debug(f"Filter store hydrated: groups={count_active_filter_groups(self._criteria)}")

    def current(self) -> FilterCriteria:
        return self._criteria

    def update(self, **changes) -> FilterCriteria:
        """
        Merge the given fields into the current criteria.

        Fields not passed are left unchanged; a field passed as ``None`` is
        cleared.

        Raises:
            TypeError: If a key is not a FilterCriteria field
            pydantic.ValidationError: If a value has the wrong shape
        """
        unknown = sorted(set(changes) - set(FilterCriteria.model_fields))
        if unknown:
            raise TypeError(f"Unknown filter fields: {', '.join(unknown)}")

        merged = {**self._criteria.model_dump(), **changes}
        return self._replace(FilterCriteria.model_validate(merged))

    def replace(self, criteria: FilterCriteria) -> FilterCriteria:
        """Swap in a complete criteria object."""
        return self._replace(criteria)

    def clear_all(self) -> FilterCriteria:
        log.info("Clearing all filters")
        return self._replace(FilterCriteria())

    def reload(self) -> FilterCriteria:
        """Re-read the location, e.g. after back/forward navigation or opening a shared link."""
        criteria = params_to_criteria(self._location.read())
        if criteria != self._criteria:
            self._criteria = criteria
            self._notify(criteria)
        return self._criteria

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener called with each new criteria; returns an unsubscribe callable."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def active_filter_group_count(self) -> int:
        return count_active_filter_groups(self._criteria)

    def has_active_filters(self) -> bool:
        return self.active_filter_group_count() > 0

    def _replace(self, criteria: FilterCriteria) -> FilterCriteria:
        self._location.write(criteria_to_params(criteria))
        self._criteria = criteria
        log.debug(f"Filters updated: groups={count_active_filter_groups(criteria)}")
        self._notify(criteria)
        return criteria

    def _notify(self, criteria: FilterCriteria) -> None:
        for listener in list(self._listeners):
            listener(criteria)
