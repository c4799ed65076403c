from __future__ import annotations
import datetime as dt
from functools import cached_property
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from core.utils import parse_day

TransactionType = Literal["deposit", "withdrawal", "chargeback", "cashback", "referral"]
TransactionStatus = Literal["successful", "pending", "failed"]


class TransactionMetadata(BaseModel):
    """Display enrichment attached to a ledger event. Never read by analytics."""
    name: Optional[str] = None
    type: Optional[str] = None
    email: Optional[str] = None
    quantity: Optional[int] = None
    country: Optional[str] = None
    product_name: Optional[str] = None

    model_config = {
        "extra": "ignore",
    }


class Transaction(BaseModel):
    amount: float = Field(ge=0, description="Absolute amount; direction captured by type")
    type: TransactionType
    status: TransactionStatus
    date: Optional[str] = Field(default=None, description="Raw date as supplied by the source")
    metadata: Optional[TransactionMetadata] = None
    payment_reference: Optional[str] = None

    model_config = {
        "extra": "ignore",
    }

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, value) -> Optional[str]:
        if value is None:
            return None
        if isinstance(value, (dt.date, dt.datetime)):
            return value.isoformat()
        return str(value)

    @field_validator("payment_reference", mode="before")
    @classmethod
    def _strip_reference(cls, value) -> Optional[str]:
        if value is None:
            return None
        s = str(value).strip()
        return s or None

    @cached_property
    def day(self) -> Optional[dt.date]:
        """Calendar day of the event, or None when ``date`` does not parse."""
        return parse_day(self.date)


class Wallet(BaseModel):
    balance: float = 0.0
    total_payout: float = 0.0
    total_revenue: float = 0.0
    pending_payout: float = 0.0
    ledger_balance: float = 0.0

    model_config = {
        "extra": "ignore",
    }


class User(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None

    model_config = {
        "extra": "ignore",
    }

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def _strip_names(cls, value) -> str:
        return str(value).strip() if value is not None else ""


class BalancePoint(BaseModel):
    """End-of-day running balance."""
    date: dt.date
    cumulative_balance: float

    model_config = {
        "frozen": True,
    }


class RevenueData(BaseModel):
    user: User = Field(default_factory=User)
    wallet: Wallet = Field(default_factory=Wallet)
    transactions: list[Transaction] = Field(default_factory=list)
