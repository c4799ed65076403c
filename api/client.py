"""Revenue API HTTP client singleton."""
from __future__ import annotations
from typing import Any, Optional

import httpx

from core.config import config as cfg
from core.logger import get_logger

log = get_logger("api/client")

_client: Optional[httpx.Client] = None


class TransactionSourceError(RuntimeError):
    """Raised when revenue data cannot be fetched or decoded."""


def api() -> httpx.Client:
    """
    Get or create the revenue API client singleton.

    Returns:
        httpx.Client: Client bound to ``API_BASE_URL`` with JSON headers

    Raises:
        TransactionSourceError: If ``API_BASE_URL`` is not configured
    """
    global _client

    if _client is None:
        if not cfg.api_base_url:
            error_msg = "API_BASE_URL is not configured"
            log.error(error_msg)
            raise TransactionSourceError(error_msg)

        log.info(f"Initializing revenue API client: base_url={cfg.api_base_url}")
        _client = httpx.Client(
            base_url=cfg.api_base_url,
            timeout=httpx.Timeout(cfg.api_timeout_s),
            headers={"Content-Type": "application/json"},
        )

    return _client


def get_json(path: str, client: Optional[httpx.Client] = None) -> Any:
    """
    GET a path and decode the JSON body.

    Args:
        path: Path relative to the API base URL, e.g. "/transactions"
        client: Optional client; defaults to the singleton

    Raises:
        TransactionSourceError: On transport errors, non-2xx responses or invalid JSON
    """
    http = client if client is not None else api()
    try:
        response = http.get(path)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        if status >= 500:
            log.error(f"Server error from revenue API: path={path} status={status}")
        else:
            log.warning(f"Revenue API request rejected: path={path} status={status}")
        raise TransactionSourceError(f"GET {path} failed with status {status}") from e
    except httpx.HTTPError as e:
        log.error(f"Revenue API request failed: path={path} error={type(e).__name__}: {e}")
        raise TransactionSourceError(f"GET {path} failed: {e}") from e

    try:
        return response.json()
    except ValueError as e:
        log.error(f"Revenue API returned invalid JSON: path={path}")
        raise TransactionSourceError(f"GET {path} returned invalid JSON") from e
