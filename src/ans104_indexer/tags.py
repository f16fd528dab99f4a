"""Decoder for the tag block of a data item.

Tags are stored as an Avro-encoded ``array<record{name: bytes, value: bytes}>``
without a container header, so the block is read with the schema directly.
"""

from __future__ import annotations

import io
import logging

from fastavro import parse_schema, schemaless_reader

from .exceptions import ParsingError
from .models import Tag

logger = logging.getLogger(__name__)

TAGS_SCHEMA = parse_schema(
    {
        "type": "array",
        "items": {
            "type": "record",
            "name": "Tag",
            "fields": [
                {"name": "name", "type": "bytes"},
                {"name": "value", "type": "bytes"},
            ],
        },
    }
)


def _text(raw: bytes, field: str) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParsingError(f"tag {field} is not valid UTF-8: {e}") from e


def decode_tags(block: bytes, count: int, *, strict: bool = False) -> list[Tag]:
    """Decode ``count`` tags from ``block``.

    A zero count short-circuits without looking at the block. Any structural
    problem raises ParsingError; a partial list is never returned.
    """
    if count == 0:
        return []
    try:
        records = schemaless_reader(io.BytesIO(block), TAGS_SCHEMA)
    # truncated varints surface as IndexError/TypeError depending on the reader build
    except (EOFError, ValueError, IndexError, TypeError) as e:
        raise ParsingError(f"malformed tag block: {e!r}") from e
    tags = [Tag(name=_text(r["name"], "name"), value=_text(r["value"], "value")) for r in records]
    if len(tags) != count:
        if strict:
            raise ParsingError(f"declared {count} tags, decoded {len(tags)}")
        logger.warning("declared %d tags, decoded %d", count, len(tags))
    return tags
