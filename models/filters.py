"""Filter criteria models, option catalogues and filter-form validation."""
from __future__ import annotations
import datetime as dt
from typing import Dict, FrozenSet, List, Literal, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

DatePreset = Literal["today", "last7days", "thisMonth", "last3months", "thisYear"]

# (tag, label) pairs in display order
CATEGORY_OPTIONS: List[Tuple[str, str]] = [
    ("store", "Store Transactions"),
    ("tipped", "Get Tipped"),
    ("withdrawals", "Withdrawals"),
    ("chargebacks", "Chargebacks"),
    ("cashbacks", "Cashbacks"),
    ("refer", "Refer & Earn"),
]

STATUS_OPTIONS: List[Tuple[str, str]] = [
    ("successful", "Successful"),
    ("pending", "Pending"),
    ("failed", "Failed"),
]

DATE_PRESET_OPTIONS: List[Tuple[str, str]] = [
    ("today", "Today"),
    ("last7days", "Last 7 days"),
    ("thisMonth", "This month"),
    ("last3months", "Last 3 months"),
    ("thisYear", "This year"),
]

# UI category tag -> underlying transaction type
CATEGORY_TYPE_MAP: Dict[str, str] = {
    "store": "deposit",
    "tipped": "deposit",
    "withdrawals": "withdrawal",
    "chargebacks": "chargeback",
    "cashbacks": "cashback",
    "refer": "referral",
}

KNOWN_CATEGORIES: FrozenSet[str] = frozenset(tag for tag, _ in CATEGORY_OPTIONS)
KNOWN_STATUSES: FrozenSet[str] = frozenset(status for status, _ in STATUS_OPTIONS)
KNOWN_PRESETS: FrozenSet[str] = frozenset(preset for preset, _ in DATE_PRESET_OPTIONS)


class FilterCriteria(BaseModel):
    """
    Immutable snapshot of the active filters.

    Every field is independently optional. ``None`` means the dimension is
    unset; an empty frozenset is a distinct, explicitly empty selection.
    Instances are frozen: callers replace criteria, they never mutate them.
    """
    date_from: Optional[dt.date] = None
    date_to: Optional[dt.date] = None
    categories: Optional[FrozenSet[str]] = None
    statuses: Optional[FrozenSet[str]] = None
    date_preset: Optional[DatePreset] = None

    model_config = {
        "frozen": True,
        "extra": "forbid",
    }

    @property
    def has_date_bound(self) -> bool:
        return self.date_from is not None or self.date_to is not None


class FilterFormValues(BaseModel):
    """Values submitted from the filter form, validated before they reach the store."""
    date_from: Optional[dt.date] = None
    date_to: Optional[dt.date] = None
    transaction_type: List[str] = Field(default_factory=list)
    transaction_status: List[str] = Field(default_factory=list)
    date_preset: Optional[DatePreset] = None

    model_config = {
        "extra": "forbid",
    }

    @field_validator("transaction_type")
    @classmethod
    def _known_categories(cls, value: List[str]) -> List[str]:
        unknown = [tag for tag in value if tag not in KNOWN_CATEGORIES]
        if unknown:
            raise ValueError(f"Unknown transaction type: {', '.join(unknown)}")
        return value

    @field_validator("transaction_status")
    @classmethod
    def _known_statuses(cls, value: List[str]) -> List[str]:
        unknown = [status for status in value if status not in KNOWN_STATUSES]
        if unknown:
            raise ValueError(f"Unknown transaction status: {', '.join(unknown)}")
        return value

    @model_validator(mode="after")
    def _validate_range(self) -> "FilterFormValues":
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValueError("Start date must be on or before end date")
        return self

    def to_criteria(self) -> FilterCriteria:
        # Empty selections are submitted as unset, matching the persisted form
        return FilterCriteria(
            date_from=self.date_from,
            date_to=self.date_to,
            categories=frozenset(self.transaction_type) or None,
            statuses=frozenset(self.transaction_status) or None,
            date_preset=self.date_preset,
        )


def validate_filter_form(raw: Dict[str, object]) -> Tuple[Optional[FilterFormValues], Dict[str, str]]:
    """
    Validate raw filter-form input.

    Returns:
        (values, errors) where ``errors`` maps a field name (or ``"form"`` for
        cross-field problems) to a message. ``values`` is None when invalid.
    """
    try:
        return FilterFormValues.model_validate(raw), {}
    except ValidationError as e:
        errors: Dict[str, str] = {}
        for err in e.errors():
            field = ".".join(str(part) for part in err.get("loc", ()) if not isinstance(part, int)) or "form"
            msg = str(err.get("msg", "Invalid value"))
            if msg.startswith("Value error, "):
                msg = msg[len("Value error, "):]
            errors.setdefault(field, msg)
        return None, errors
