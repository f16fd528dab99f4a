from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .constants import COUNT_WIDTH, ENV_STRICT, HEADER_ENTRY_SIZE, HEADER_START, ID_LENGTH
from .exceptions import ParsingError
from .item import decode_data_item
from .models import DataItem
from .utils import b64u_encode, decode_uint

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderEntry:
    size_delta: int
    raw_id: bytes
    id: str

    @property
    def is_valid(self) -> bool:
        return any(self.raw_id)


def _strict_enabled(strict: bool) -> bool:
    return strict or os.getenv(ENV_STRICT) == "1"


def read_item_count(container: bytes) -> int:
    if len(container) < HEADER_START:
        raise ParsingError(
            f"container is {len(container)} bytes, shorter than the {HEADER_START} byte header"
        )
    return decode_uint(container[:COUNT_WIDTH])


def data_start(item_count: int) -> int:
    return HEADER_START + HEADER_ENTRY_SIZE * item_count


def read_header(container: bytes) -> list[HeaderEntry]:
    """Parse the header table, in container order."""
    item_count = read_item_count(container)
    end = data_start(item_count)
    if end > len(container):
        raise ParsingError(
            f"header table for {item_count} items ends at byte {end}, "
            f"container is {len(container)} bytes"
        )
    entries: list[HeaderEntry] = []
    for i in range(HEADER_START, end, HEADER_ENTRY_SIZE):
        delta = decode_uint(container[i : i + COUNT_WIDTH])
        raw_id = bytes(container[i + COUNT_WIDTH : i + COUNT_WIDTH + ID_LENGTH])
        entries.append(HeaderEntry(size_delta=delta, raw_id=raw_id, id=b64u_encode(raw_id)))
    return entries


def _check_partition(container: bytes, start: int, consumed: int) -> None:
    body = len(container) - start
    if consumed != body:
        raise ParsingError(f"item sizes sum to {consumed} bytes, container body is {body}")


def decode_bundle(
    container: bytes,
    *,
    bundled_in: str | None = None,
    block_height: int | None = None,
    timestamp: int | None = None,
    strict: bool = False,
) -> list[DataItem]:
    """Decode every valid data item of a bundle, in header order.

    Entries with an all-zero id are logged and skipped; their size still
    advances the running offset. The first structural error aborts the
    whole decode.
    """
    strict = _strict_enabled(strict)
    entries = read_header(container)
    start = data_start(len(entries))
    logger.info("bundle declares %d items", len(entries))

    items: list[DataItem] = []
    offset = 0
    for position, entry in enumerate(entries):
        if not entry.is_valid:
            logger.warning("invalid id at position %d, skipping", position)
            offset += entry.size_delta
            continue

        item_start = start + offset
        item_end = item_start + entry.size_delta
        if item_end > len(container):
            raise ParsingError(
                f"item {position} spans bytes [{item_start}, {item_end}), "
                f"container is {len(container)} bytes"
            )
        logger.debug("item %d at [%d, %d)", position, item_start, item_end)
        item = decode_data_item(container[item_start:item_end], strict=strict)
        item.id = entry.id
        item.position_index = position
        item.bundled_in = bundled_in
        item.block_height = block_height
        item.timestamp = timestamp
        items.append(item)
        offset += entry.size_delta

    if strict:
        _check_partition(container, start, offset)
    return items


def parse_bundle(container: bytes, *, strict: bool = False) -> list[DataItem]:
    """Decode a standalone bundle; it is not nested, so it has no context."""
    return decode_bundle(container, strict=strict)
