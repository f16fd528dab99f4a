from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path

from .exceptions import EncodingError, PersistenceError
from .models import DataItem


def to_json(items: Iterable[DataItem]) -> str:
    """Pretty-printed JSON array of item documents."""
    try:
        return json.dumps([item.to_dict() for item in items], indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise EncodingError(f"cannot serialise decoded bundle: {e}") from e


def write_items(path: str | Path, items: Iterable[DataItem]) -> None:
    contents = to_json(items)
    try:
        Path(path).write_text(contents, encoding="utf-8")
    except OSError as e:
        raise PersistenceError(f"cannot write {path}: {e}") from e
