from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Tag:
    name: str
    value: str

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "value": self.value}


@dataclass
class DataItem:
    """Metadata of one data item decoded from a bundle.

    ``owner_address`` is derived from the owner public key; the raw key and
    signature are not kept. The context fields (``bundled_in`` through
    ``id``) are filled in by the bundle walker right after decoding.
    """

    signature_type: str
    owner_address: str
    tags: list[Tag] = field(default_factory=list)
    bundled_in: str | None = None
    block_height: int | None = None
    timestamp: int | None = None
    position_index: int = 0
    id: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON document shape; unset context fields are left out."""
        doc: dict[str, Any] = {
            "signature_type": self.signature_type,
            "owner": self.owner_address,
            "tags": [t.to_dict() for t in self.tags],
        }
        for key in ("bundled_in", "block_height", "timestamp"):
            value = getattr(self, key)
            if value is not None:
                doc[key] = value
        doc["tx_pos"] = self.position_index
        doc["_id"] = self.id
        return doc
