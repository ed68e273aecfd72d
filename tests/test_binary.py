"""Tests for the 9-bit length field helper and the bit/hex utilities."""
import pytest

from lldptlv.core.binary import (
    contains_bits,
    decode_length,
    encode_length,
    get_bit,
    hex_padded,
    hex_unpadded,
    tlv_size,
)
from lldptlv.errors import LengthOverflow, TruncatedTLV
from lldptlv.tlv.base import pack_header
from lldptlv.tlv.types import TLVType


@pytest.mark.parametrize(
    "byte0, byte1, expected",
    [
        (0x00, 0x00, 0),
        (0x00, 0xFF, 255),
        (0x06, 0x02, 2),
        (0x01, 0x00, 512),
        (0x01, 0xFF, 767),
        # Only the low bit of the type octet belongs to the length.
        (0xFE, 0x04, 4),
        (0xFF, 0x04, 516),
    ],
)
def test_decode_length(byte0, byte1, expected):
    assert decode_length(byte0, byte1) == expected


@pytest.mark.parametrize(
    "length, expected",
    [
        (0, (0, 0x00)),
        (255, (0, 0xFF)),
        (512, (1, 0x00)),
        (767, (1, 0xFF)),
    ],
)
def test_encode_length(length, expected):
    assert encode_length(length) == expected


@pytest.mark.parametrize("length", [0, 1, 128, 255, 512, 600, 767])
def test_length_roundtrip_in_representable_range(length):
    low_bit, length_byte = encode_length(length)
    assert decode_length(low_bit, length_byte) == length


@pytest.mark.parametrize("length", [256, 300, 511, 768, 1024, -1])
def test_encode_length_out_of_range(length):
    with pytest.raises(LengthOverflow):
        encode_length(length)


def test_tlv_size_includes_header():
    assert tlv_size(b"\x06\x02\x00\x78") == 4
    assert tlv_size(b"\x00\x00") == 2
    assert tlv_size(b"\xff\x01") == 2 + 512 + 1


def test_tlv_size_short_buffer():
    with pytest.raises(TruncatedTLV):
        tlv_size(b"\x06")


def test_get_bit():
    assert get_bit(0x8000, 15) is True
    assert get_bit(0x8000, 14) is False
    with pytest.raises(ValueError):
        get_bit(0x01, 16)


def test_contains_bits():
    assert contains_bits(0x005C, 0x0054)
    assert contains_bits(0xFFFF, 0xFFFF)
    assert contains_bits(0x0000, 0x0000)
    assert not contains_bits(0x0000, 0x0014)
    assert not contains_bits(0x7FFF, 0x8000)


def test_hex_helpers():
    assert hex_padded(b"\x2b\x06\x0a") == "2B060A"
    assert hex_unpadded(b"\x2b\x06\x0a") == "2B6A"
    assert hex_padded(b"") == ""


@pytest.mark.parametrize("length", [256, 300, 511])
def test_pack_header_rejects_unencodable_length(length):
    with pytest.raises(LengthOverflow):
        pack_header(TLVType.TTL, length)
