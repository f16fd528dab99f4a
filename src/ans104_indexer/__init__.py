from .bundle import HeaderEntry, decode_bundle, parse_bundle, read_header, read_item_count
from .client import fetch_bundle
from .exceptions import (
    Ans104Error,
    ConfigurationError,
    EncodingError,
    ParsingError,
    PersistenceError,
    ReasonCode,
    RetrievalError,
    UnknownSignatureType,
    reason_code_for_exception,
)
from .indexer import index_bundle
from .item import decode_data_item
from .models import DataItem, Tag
from .output import to_json, write_items
from .signatures import SIGNATURE_TYPES, SignatureTypeSpec, lookup
from .tags import decode_tags
from .utils import b64u_decode, b64u_encode, decode_uint, derive_address, sha256_digest

__all__ = [
    "decode_bundle",
    "parse_bundle",
    "read_header",
    "read_item_count",
    "HeaderEntry",
    "decode_data_item",
    "decode_tags",
    "DataItem",
    "Tag",
    "SignatureTypeSpec",
    "SIGNATURE_TYPES",
    "lookup",
    "decode_uint",
    "b64u_encode",
    "b64u_decode",
    "sha256_digest",
    "derive_address",
    "fetch_bundle",
    "index_bundle",
    "to_json",
    "write_items",
    # exceptions
    "Ans104Error",
    "RetrievalError",
    "ConfigurationError",
    "ParsingError",
    "UnknownSignatureType",
    "PersistenceError",
    "EncodingError",
    "ReasonCode",
    "reason_code_for_exception",
    "__version__",
]
try:  # prefer single source of truth from installed metadata
    from importlib.metadata import version as _pkg_version

    __version__ = _pkg_version("ans104-indexer")
except Exception:  # pragma: no cover
    __version__ = "0.0.0"
