from __future__ import annotations

import logging

import pytest
from ans104_indexer.exceptions import ParsingError, UnknownSignatureType
from ans104_indexer.item import decode_data_item
from ans104_indexer.models import Tag
from ans104_indexer.utils import derive_address
from bundle_builders import encode_tag_block, make_item, u

# ED25519 layout: 2 byte code + 64 signature + 32 owner, then the target flag.
ED25519_TARGET_FLAG = 2 + 64 + 32


def test_ed25519_without_tags() -> None:
    item = decode_data_item(make_item(2, owner=bytes(32)))
    assert item.signature_type == "ED25519"
    assert item.owner_address == "Zmh6rfhivXdsj8GLjp-OIAiXFIVu4jOzkCpZHQ1fKSU"
    assert item.tags == []
    assert item.id == "" and item.position_index == 0
    assert item.bundled_in is None and item.block_height is None and item.timestamp is None


@pytest.mark.parametrize(
    "code,name", [(1, "ARWEAVE"), (3, "ETHEREUM"), (4, "SOLANA"), (6, "MULTIAPTOS"), (7, "TYPEDETHEREUM")]
)
def test_field_widths_follow_signature_type(code: int, name: str) -> None:
    body = make_item(code, tags=[("app", "demo")])
    item = decode_data_item(body)
    assert item.signature_type == name
    assert item.tags == [Tag("app", "demo")]


def test_owner_address_derived_from_key() -> None:
    owner = bytes(range(65))
    item = decode_data_item(make_item(3, owner=owner))
    assert item.owner_address == derive_address(owner)


def test_target_and_anchor_present() -> None:
    body = make_item(2, target=b"\x11" * 32, anchor=b"\x22" * 32, tags=[("k", "v")])
    assert decode_data_item(body).tags == [Tag("k", "v")]


def test_flag_other_than_one_means_absent() -> None:
    body = bytearray(make_item(2, tags=[("k", "v")]))
    body[ED25519_TARGET_FLAG] = 2
    assert decode_data_item(bytes(body)).tags == [Tag("k", "v")]


def test_tag_block_padding_is_skipped() -> None:
    block = encode_tag_block([("a", "1")]) + b"\x00" * 7
    body = make_item(2, tag_block=block, tag_count=1, data=b"payload")
    assert decode_data_item(body).tags == [Tag("a", "1")]


def test_signature_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    body = make_item(2, signature=b"\xab" * 64)
    with caplog.at_level(logging.DEBUG, logger="ans104_indexer.item"):
        decode_data_item(body)
    assert "ab" * 64 in caplog.text


def test_zero_tag_count_skips_declared_block() -> None:
    body = make_item(2, tag_block=b"xyz", tag_count=0, data=b"payload")
    assert decode_data_item(body).tags == []


# --- failures ---


def test_unknown_signature_type() -> None:
    body = u(9, 2) + bytes(200)
    with pytest.raises(UnknownSignatureType):
        decode_data_item(body)


def test_body_shorter_than_signature_type_requires() -> None:
    body = make_item(2)[:50]
    with pytest.raises(ParsingError, match="signature"):
        decode_data_item(body)


def test_truncated_before_anchor_flag() -> None:
    body = make_item(2)[: ED25519_TARGET_FLAG + 1]
    with pytest.raises(ParsingError, match="anchor"):
        decode_data_item(body)


def test_tag_size_past_end_of_item() -> None:
    body = make_item(2, tags=[("app", "demo")])
    with pytest.raises(ParsingError, match="tags"):
        decode_data_item(body[:-2])


def test_empty_item() -> None:
    with pytest.raises(ParsingError):
        decode_data_item(b"")


def test_zero_tag_count_block_still_bounds_checked() -> None:
    body = make_item(2, tag_block=b"xyz", tag_count=0)
    with pytest.raises(ParsingError, match="tags"):
        decode_data_item(body[:-1])
