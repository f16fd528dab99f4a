from __future__ import annotations

import logging
import os
from typing import Any

import requests

from .constants import DEFAULT_GATEWAY, DEFAULT_TIMEOUT_SECONDS, ENV_GATEWAY, ENV_TIMEOUT
from .exceptions import ConfigurationError, RetrievalError

logger = logging.getLogger(__name__)


def _gateway(gateway: str | None) -> str:
    return (gateway or os.getenv(ENV_GATEWAY) or DEFAULT_GATEWAY).rstrip("/")


def _timeout(timeout: float | None) -> float:
    if timeout is not None:
        return timeout
    raw = os.getenv(ENV_TIMEOUT)
    if not raw:
        return DEFAULT_TIMEOUT_SECONDS
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{ENV_TIMEOUT} must be a number, got {raw!r}") from e


def fetch_bundle(
    tx_id: str,
    *,
    gateway: str | None = None,
    timeout: float | None = None,
    session: Any | None = None,
) -> bytes:
    """Download the raw bytes of a bundle transaction in one blocking GET."""
    if not tx_id:
        raise ConfigurationError("tx_id must be a non-empty string")
    url = f"{_gateway(gateway)}/{tx_id}"
    http = session or requests
    logger.info("fetching %s", url)
    try:
        resp = http.get(url, timeout=_timeout(timeout))
    except requests.RequestException as e:
        raise RetrievalError(f"failed to fetch {url}: {e}") from e
    if not 200 <= resp.status_code < 300:
        raise RetrievalError(f"failed to fetch {url}: HTTP {resp.status_code}")
    return resp.content
