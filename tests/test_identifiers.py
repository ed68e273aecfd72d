"""Tests for the Chassis ID and Port ID TLVs."""
import ipaddress

import pytest

from lldptlv.errors import (
    AddressFamilyUnrecognized,
    InvalidField,
    LengthOverflow,
    MalformedText,
    TruncatedTLV,
    TypeMismatch,
)
from lldptlv.tlv import ChassisIdSubtype, ChassisIdTLV, PortIdSubtype, PortIdTLV, TLVType


def test_chassis_id_mac_dump():
    tlv = ChassisIdTLV(ChassisIdSubtype.MAC_ADDRESS, "00:11:22:33:44:55")
    assert tlv.type_of() is TLVType.CHASSIS_ID
    assert tlv.payload_length() == 7
    assert tlv.to_bytes() == b"\x02\x07\x04\x00\x11\x22\x33\x44\x55"


def test_chassis_id_mac_load():
    tlv = ChassisIdTLV.from_bytes(b"\x02\x07\x04\x00\x11\x22\x33\x44\x55")
    assert tlv.subtype is ChassisIdSubtype.MAC_ADDRESS
    assert tlv.value == "00:11:22:33:44:55"


@pytest.mark.parametrize("mac", ["AA-BB-CC-DD-EE-FF", "aabbccddeeff", b"\xaa\xbb\xcc\xdd\xee\xff"])
def test_chassis_id_mac_normalized(mac):
    assert ChassisIdTLV(4, mac).value == "aa:bb:cc:dd:ee:ff"


@pytest.mark.parametrize("mac", ["aa:bb:cc", "aa:bb:cc:dd:ee:gg", b"\x01\x02"])
def test_chassis_id_bad_mac(mac):
    with pytest.raises(InvalidField):
        ChassisIdTLV(ChassisIdSubtype.MAC_ADDRESS, mac)


def test_chassis_id_mac_wrong_length_on_wire():
    with pytest.raises(InvalidField):
        ChassisIdTLV.from_bytes(b"\x02\x04\x04\x00\x11\x22")


def test_chassis_id_network_address():
    tlv = ChassisIdTLV(ChassisIdSubtype.NETWORK_ADDRESS, "192.0.2.1")
    assert tlv.to_bytes() == b"\x02\x06\x05\x01\xc0\x00\x02\x01"
    loaded = ChassisIdTLV.from_bytes(tlv.to_bytes())
    assert loaded.value == ipaddress.IPv4Address("192.0.2.1")
    assert loaded == tlv


def test_chassis_id_network_address_unknown_family():
    with pytest.raises(AddressFamilyUnrecognized):
        ChassisIdTLV.from_bytes(b"\x02\x06\x05\x07\xc0\x00\x02\x01")


def test_chassis_id_text():
    tlv = ChassisIdTLV(ChassisIdSubtype.LOCALLY_ASSIGNED, "rack-7")
    assert tlv.to_bytes() == b"\x02\x07\x07rack-7"
    assert str(tlv) == 'ChassisIdTLV(7, "rack-7")'


def test_chassis_id_display_mac():
    tlv = ChassisIdTLV(ChassisIdSubtype.MAC_ADDRESS, "00:11:22:33:44:55")
    assert str(tlv) == 'ChassisIdTLV(4, "00:11:22:33:44:55")'


def test_chassis_id_unknown_subtype():
    with pytest.raises(InvalidField):
        ChassisIdTLV(0, "x")
    with pytest.raises(InvalidField):
        ChassisIdTLV.from_bytes(b"\x02\x02\x08x")


def test_chassis_id_empty():
    with pytest.raises(InvalidField):
        ChassisIdTLV(ChassisIdSubtype.INTERFACE_NAME, "")
    with pytest.raises(InvalidField):
        ChassisIdTLV.from_bytes(b"\x02\x01\x06")


def test_chassis_id_ceiling():
    ChassisIdTLV(ChassisIdSubtype.LOCALLY_ASSIGNED, "x" * 254)
    with pytest.raises(LengthOverflow):
        ChassisIdTLV(ChassisIdSubtype.LOCALLY_ASSIGNED, "x" * 255)


def test_chassis_id_invalid_utf8():
    with pytest.raises(MalformedText):
        ChassisIdTLV.from_bytes(b"\x02\x03\x07\xff\xfe")


def test_chassis_id_truncated():
    with pytest.raises(TruncatedTLV):
        ChassisIdTLV.from_bytes(b"\x02\x07\x04\x00\x11")


def test_port_id_interface_name():
    tlv = PortIdTLV(PortIdSubtype.INTERFACE_NAME, "eth0")
    assert tlv.type_of() is TLVType.PORT_ID
    assert tlv.to_bytes() == b"\x04\x05\x05eth0"
    assert str(tlv) == 'PortIdTLV(5, "eth0")'
    assert PortIdTLV.from_bytes(tlv.to_bytes()) == tlv


def test_port_id_agent_circuit_id():
    tlv = PortIdTLV(PortIdSubtype.AGENT_CIRCUIT_ID, b"\x00\x0a\xff")
    assert tlv.to_bytes() == b"\x04\x04\x06\x00\x0a\xff"
    assert str(tlv) == 'PortIdTLV(6, "000AFF")'
    assert PortIdTLV.from_bytes(tlv.to_bytes()).value == b"\x00\x0a\xff"


def test_port_id_network_address_v6():
    tlv = PortIdTLV(PortIdSubtype.NETWORK_ADDRESS, ipaddress.ip_address("2001:db8::1"))
    assert tlv.payload_length() == 1 + 1 + 16
    assert PortIdTLV.from_bytes(tlv.to_bytes()) == tlv
    assert str(tlv) == 'PortIdTLV(4, "2001:db8::1")'


def test_port_id_subtype_numbering_differs_from_chassis():
    # Subtype 3 is a MAC address for ports but a port component for chassis.
    assert PortIdTLV(3, "00:11:22:33:44:55").value == "00:11:22:33:44:55"
    assert ChassisIdTLV(3, "module 3").value == "module 3"


def test_port_id_wrong_type():
    with pytest.raises(TypeMismatch):
        PortIdTLV.from_bytes(b"\x02\x05\x05eth0")
