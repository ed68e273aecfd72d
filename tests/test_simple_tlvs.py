"""Tests for the End Of LLDPDU, TTL and string-valued TLVs."""
import pytest

from lldptlv.errors import (
    FixedLengthViolation,
    InvalidField,
    LengthOverflow,
    MalformedText,
    TruncatedTLV,
    TypeMismatch,
)
from lldptlv.tlv import (
    TLV,
    EndOfLLDPDUTLV,
    PortDescriptionTLV,
    SystemDescriptionTLV,
    SystemNameTLV,
    TLVType,
    TtlTLV,
)


# End Of LLDPDU

def test_eolldpdu_dump():
    assert EndOfLLDPDUTLV().to_bytes() == b"\x00\x00"


def test_eolldpdu_load():
    tlv = EndOfLLDPDUTLV.from_bytes(b"\x00\x00")
    assert tlv == EndOfLLDPDUTLV()
    assert tlv.type_of() is TLVType.END_OF_LLDPDU
    assert tlv.payload_length() == 0


def test_eolldpdu_nonzero_length():
    with pytest.raises(FixedLengthViolation):
        EndOfLLDPDUTLV.from_bytes(b"\x00\x01\x00")


def test_eolldpdu_display():
    assert str(EndOfLLDPDUTLV()) == "EndOfLLDPDUTLV"


# TTL

def test_ttl_dump():
    assert TtlTLV(120).to_bytes() == bytes([0x06, 0x02, 0x00, 0x78])
    assert TtlTLV(36575).to_bytes() == b"\x06\x02" + (36575).to_bytes(2, "big")


def test_ttl_load():
    tlv = TtlTLV.from_bytes(bytes([0x06, 0x02, 0x00, 0x78]))
    assert tlv.seconds == 120
    assert tlv.type_of() is TLVType.TTL
    assert tlv.payload_length() == 2


def test_ttl_load_invalid_length():
    with pytest.raises(FixedLengthViolation):
        TtlTLV.from_bytes(bytes([0x06, 0x03, 0x00, 0x78, 0x00]))


def test_ttl_load_short_length():
    with pytest.raises(FixedLengthViolation):
        TtlTLV.from_bytes(b"\x06\x01\x00\x78")


def test_ttl_load_truncated_buffer():
    with pytest.raises(TruncatedTLV):
        TtlTLV.from_bytes(b"\x06\x02\x00")


def test_ttl_wrong_type():
    with pytest.raises(TypeMismatch) as excinfo:
        TtlTLV.from_bytes(b"\x0e\x04\x00\x14\x00\x04")
    assert excinfo.value.expected == 3
    assert excinfo.value.actual == 7


def test_ttl_extended_length_rejected():
    with pytest.raises(LengthOverflow):
        TtlTLV.from_bytes(b"\x07\x02\x00\x78")


@pytest.mark.parametrize("seconds", [-1, 0x10000, "120"])
def test_ttl_out_of_range(seconds):
    with pytest.raises(InvalidField):
        TtlTLV(seconds)


def test_ttl_display():
    assert str(TtlTLV(36575)) == "TtlTLV(36575)"


# String-valued TLVs

@pytest.mark.parametrize(
    "cls, type_byte, name",
    [
        (PortDescriptionTLV, 0x08, "PortDescriptionTLV"),
        (SystemNameTLV, 0x0A, "SystemNameTLV"),
        (SystemDescriptionTLV, 0x0C, "SystemDescriptionTLV"),
    ],
)
def test_text_dump_load_display(cls, type_byte, name):
    tlv = cls("Unittest")
    assert tlv.payload_length() == 8
    assert tlv.to_bytes() == bytes([type_byte, 0x08]) + b"Unittest"
    assert str(tlv) == f'{name}("Unittest")'

    loaded = cls.from_bytes(bytes([type_byte, 0x12]) + b"YetAnotherUnittest")
    assert loaded.value == "YetAnotherUnittest"
    assert loaded.payload_length() == 18


def test_system_description_keeps_its_own_type():
    tlv = SystemDescriptionTLV.from_bytes(b"\x0c\x08Unittest")
    assert tlv.type_of() is TLVType.SYSTEM_DESCRIPTION


def test_text_length_counts_utf8_octets():
    tlv = SystemNameTLV("swütch")
    assert tlv.payload_length() == 7
    assert SystemNameTLV.from_bytes(tlv.to_bytes()) == tlv


def test_text_empty():
    tlv = PortDescriptionTLV("")
    assert tlv.to_bytes() == b"\x08\x00"
    assert PortDescriptionTLV.from_bytes(b"\x08\x00") == tlv


def test_text_invalid_utf8():
    with pytest.raises(MalformedText):
        SystemNameTLV.from_bytes(b"\x0a\x02\xff\xfe")


def test_text_shorter_than_length_field():
    with pytest.raises(MalformedText):
        SystemNameTLV.from_bytes(b"\x0a\x10short")


def test_text_trailing_bytes_ignored():
    assert SystemNameTLV.from_bytes(b"\x0a\x02ab\x00\x00").value == "ab"


def test_text_too_long():
    SystemNameTLV("x" * 255)
    with pytest.raises(LengthOverflow):
        SystemNameTLV("x" * 256)


def test_text_requires_str():
    with pytest.raises(InvalidField):
        PortDescriptionTLV(b"bytes")


def test_text_types_are_not_equal_across_kinds():
    assert PortDescriptionTLV("a") != SystemNameTLV("a")


# Base class

def test_incomplete_record_class_cannot_be_created():
    class HalfTLV(TLV):
        tlv_type = TLVType.SYSTEM_NAME

        @classmethod
        def from_bytes(cls, data):
            return cls()

        def payload(self):
            return b""

    with pytest.raises(TypeError):
        HalfTLV()


def test_tlv_base_is_abstract():
    with pytest.raises(TypeError):
        TLV()
