from __future__ import annotations

import base64

from cryptography.hazmat.primitives import hashes

from .constants import MAX_UINT_BITS
from .exceptions import ParsingError


def decode_uint(data: bytes) -> int:
    """Little-endian unsigned integer of any width up to 32 bytes.

    Values that need more than 128 bits are rejected: no realistic count,
    size or code gets there, so such a field means the input is corrupt.
    """
    value = int.from_bytes(data, "little", signed=False)
    if value.bit_length() > MAX_UINT_BITS:
        raise ParsingError(f"integer field of {len(data)} bytes overflows {MAX_UINT_BITS} bits")
    return value


def b64u_encode(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def b64u_decode(data: str) -> bytes:
    pad = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + pad)


def sha256_digest(data: bytes) -> bytes:
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize()


def derive_address(public_key: bytes) -> str:
    """Owner address: base64url (no padding) of the SHA-256 of the raw key."""
    return b64u_encode(sha256_digest(public_key))
