from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from .bundle import parse_bundle
from .client import fetch_bundle
from .models import DataItem
from .output import write_items

logger = logging.getLogger(__name__)


def index_bundle(
    tx_id: str,
    output_path: str | Path,
    *,
    gateway: str | None = None,
    timeout: float | None = None,
    strict: bool = False,
    fetch: Callable[..., bytes] = fetch_bundle,
) -> list[DataItem]:
    """Fetch a bundle, decode it and write the items to ``output_path``."""
    raw = fetch(tx_id, gateway=gateway, timeout=timeout)
    logger.info("fetched %d bytes for %s", len(raw), tx_id)
    items = parse_bundle(raw, strict=strict)
    write_items(output_path, items)
    return items
