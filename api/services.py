"""
Revenue data sources.

Provides a unified interface for loading the user, wallet and transaction
ledger with support for:
- The revenue HTTP API (``GET /user``, ``/wallet``, ``/transactions``)
- A local JSON document with the same three objects (development/demo)

Transactions that fail schema validation are skipped and counted; they never
abort a load.
"""
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import httpx
from pydantic import ValidationError

from core.logger import get_logger
from models.schema import RevenueData, Transaction, User, Wallet
from .client import TransactionSourceError, get_json

log = get_logger("api/services")


def parse_transactions(records: Iterable[Any]) -> List[Transaction]:
    """
    Validate raw transaction records, dropping the ones that do not fit the schema.

    Records with an unparseable date are kept; analytics excludes them later.
    """
    transactions: List[Transaction] = []
    rejected = 0
    for idx, record in enumerate(records):
        try:
            transactions.append(Transaction.model_validate(record))
        except ValidationError as e:
            rejected += 1
            log.debug(f"Rejected transaction record #{idx}: {e.error_count()} errors")

    if rejected:
        log.warning(f"Skipped {rejected} malformed transaction records")
    return transactions


def _validate(model, payload: Any, what: str):
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        log.error(f"Invalid {what} payload: {e.error_count()} errors")
        raise TransactionSourceError(f"Invalid {what} payload") from e


class RevenueSource:
    """
    Abstract revenue source.

    Implementations return validated models and raise TransactionSourceError
    when the underlying data cannot be read.
    """

    def get_user(self) -> User:
        raise NotImplementedError(f"{self.__class__.__name__}.get_user() must be implemented")

    def get_wallet(self) -> Wallet:
        raise NotImplementedError(f"{self.__class__.__name__}.get_wallet() must be implemented")

    def get_transactions(self) -> List[Transaction]:
        raise NotImplementedError(f"{self.__class__.__name__}.get_transactions() must be implemented")

    def load(self) -> RevenueData:
        """Fetch user, wallet and ledger in one go."""
        data = RevenueData(
            user=self.get_user(),
            wallet=self.get_wallet(),
            transactions=self.get_transactions(),
        )
        log.info(f"Loaded revenue data: source={self.__class__.__name__} transactions={len(data.transactions)}")
        return data


class ApiRevenueSource(RevenueSource):
    """Revenue API over HTTP."""

    def __init__(self, client: Optional[httpx.Client] = None):
        self._client = client

    def get_user(self) -> User:
        return _validate(User, get_json("/user", self._client), "user")

    def get_wallet(self) -> Wallet:
        return _validate(Wallet, get_json("/wallet", self._client), "wallet")

    def get_transactions(self) -> List[Transaction]:
        payload = get_json("/transactions", self._client)
        if not isinstance(payload, list):
            log.error(f"Expected a list of transactions, got {type(payload).__name__}")
            raise TransactionSourceError("Invalid transactions payload")
        return parse_transactions(payload)


class FileRevenueSource(RevenueSource):
    """
    JSON file source.

    The document holds ``{"user": {...}, "wallet": {...}, "transactions": [...]}``.
    It is read once on first access.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._document: Optional[Dict[str, Any]] = None

    def _read(self) -> Dict[str, Any]:
        if self._document is None:
            if not self.path.is_file():
                error_msg = f"Revenue data file not found: {self.path}"
                log.error(error_msg)
                raise TransactionSourceError(error_msg)
            try:
                document = json.loads(self.path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as e:
                log.error(f"Failed to read revenue data file {self.path}: {e}")
                raise TransactionSourceError(f"Failed to read revenue data file: {e}") from e
            if not isinstance(document, dict):
                raise TransactionSourceError(f"Revenue data file must hold a JSON object: {self.path}")
            self._document = document
            log.info(f"Revenue data file loaded: path={self.path}")
        return self._document

    def get_user(self) -> User:
        return _validate(User, self._read().get("user") or {}, "user")

    def get_wallet(self) -> Wallet:
        return _validate(Wallet, self._read().get("wallet") or {}, "wallet")

    def get_transactions(self) -> List[Transaction]:
        records = self._read().get("transactions") or []
        if not isinstance(records, list):
            raise TransactionSourceError("Invalid transactions payload")
        return parse_transactions(records)


def get_revenue_source() -> RevenueSource:
    """
    Factory function to get the configured revenue source.

    - ``REVENUE_SOURCE=api``: ApiRevenueSource against ``API_BASE_URL``
    - otherwise: FileRevenueSource on ``SAMPLE_DATA_FILE``
    """
    from core.config import config

    if config.revenue_source == "api":
        log.info(f"Using API revenue source: base_url={config.api_base_url}")
        return ApiRevenueSource()

    log.info(f"Using file revenue source: path={config.sample_data_file}")
    return FileRevenueSource(config.sample_data_file)
