from __future__ import annotations

import logging

from .constants import (
    PRESENCE_FIELD_LENGTH,
    SIGNATURE_TYPE_WIDTH,
    TAG_COUNT_WIDTH,
    TAG_SIZE_WIDTH,
)
from .exceptions import ParsingError
from .models import DataItem
from .signatures import lookup
from .tags import decode_tags
from .utils import decode_uint, derive_address

logger = logging.getLogger(__name__)


class _Cursor:
    def __init__(self, data: bytes) -> None:
        self._data = data
        self.pos = 0

    def take(self, length: int, what: str) -> bytes:
        end = self.pos + length
        if end > len(self._data):
            raise ParsingError(
                f"data item truncated reading {what}: need {length} bytes at offset "
                f"{self.pos}, item is {len(self._data)} bytes"
            )
        chunk = self._data[self.pos : end]
        self.pos = end
        return chunk

    def skip_optional(self, what: str) -> bool:
        # Only a flag of exactly 1 carries a 32 byte value.
        present = self.take(1, f"{what} flag")[0] == 1
        if present:
            self.take(PRESENCE_FIELD_LENGTH, what)
        return present


def decode_data_item(data: bytes, *, strict: bool = False) -> DataItem:
    """Decode the body of a single data item.

    ``data`` must be exactly the item's byte range. Context fields of the
    returned item are left at their defaults.
    """
    cur = _Cursor(data)
    code = decode_uint(cur.take(SIGNATURE_TYPE_WIDTH, "signature type"))
    sig_type = lookup(code)
    signature = cur.take(sig_type.signature_length, "signature")
    logger.debug("signature (%s): %s", sig_type.name, bytes(signature).hex())
    owner = cur.take(sig_type.public_key_length, "owner")
    cur.skip_optional("target")
    cur.skip_optional("anchor")
    tag_count = decode_uint(cur.take(TAG_COUNT_WIDTH, "tag count"))
    tag_size = decode_uint(cur.take(TAG_SIZE_WIDTH, "tag size"))
    # The cursor moves by the declared size whatever the tag decoder consumed.
    block = cur.take(tag_size, "tags")
    tags = decode_tags(bytes(block), tag_count, strict=strict)
    return DataItem(
        signature_type=sig_type.name,
        owner_address=derive_address(bytes(owner)),
        tags=tags,
    )
