from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .exceptions import UnknownSignatureType


@dataclass(frozen=True)
class SignatureTypeSpec:
    code: int
    name: str
    signature_length: int
    public_key_length: int


_SPECS = (
    SignatureTypeSpec(1, "ARWEAVE", 512, 512),
    SignatureTypeSpec(2, "ED25519", 64, 32),
    SignatureTypeSpec(3, "ETHEREUM", 65, 65),
    SignatureTypeSpec(4, "SOLANA", 64, 32),
    SignatureTypeSpec(5, "INJECTEDAPTOS", 64, 32),
    # 32 signatures + 4 byte bitmap, 32 keys + 1 byte threshold
    SignatureTypeSpec(6, "MULTIAPTOS", 64 * 32 + 4, 32 * 32 + 1),
    SignatureTypeSpec(7, "TYPEDETHEREUM", 65, 42),
)

SIGNATURE_TYPES: Mapping[int, SignatureTypeSpec] = MappingProxyType({s.code: s for s in _SPECS})


def lookup(code: int) -> SignatureTypeSpec:
    """Return the spec for a signature-type code, or raise UnknownSignatureType."""
    try:
        return SIGNATURE_TYPES[code]
    except KeyError:
        raise UnknownSignatureType(code) from None
