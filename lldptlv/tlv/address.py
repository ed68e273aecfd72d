"""
Network address helpers shared by the Management Address, Chassis ID and
Port ID TLVs.

On the wire an address is an IANA address family number followed by the raw
address octets. Only IPv4 and IPv6 are supported.
"""
from __future__ import annotations

import ipaddress
from enum import IntEnum
from typing import Union

from lldptlv.errors import AddressFamilyUnrecognized, InvalidField, TruncatedTLV

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class AddressFamily(IntEnum):
    IPV4 = 1
    IPV6 = 2


ADDRESS_OCTETS: dict[AddressFamily, int] = {
    AddressFamily.IPV4: 4,
    AddressFamily.IPV6: 16,
}


def coerce_address(value) -> IPAddress:
    """Accept an address object, its text form, or its 4 or 16 packed octets."""
    if isinstance(value, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return value
    if not isinstance(value, (str, bytes, bytearray)):
        raise InvalidField(f"Address must be str, bytes or an ipaddress object, got {type(value).__name__}")
    if isinstance(value, bytearray):
        value = bytes(value)
    try:
        return ipaddress.ip_address(value)
    except ValueError as exc:
        raise InvalidField(f"Not an IPv4 or IPv6 address: {value!r}") from exc


def family_of(address: IPAddress) -> AddressFamily:
    return AddressFamily.IPV4 if address.version == 4 else AddressFamily.IPV6


def parse_family(value: int) -> AddressFamily:
    try:
        return AddressFamily(value)
    except ValueError:
        raise AddressFamilyUnrecognized(value) from None


def pack_address(address: IPAddress) -> bytes:
    return bytes([family_of(address)]) + address.packed


def unpack_address(data: bytes) -> tuple[IPAddress, int]:
    """
    Parse ``family + address`` from the start of ``data``.

    Returns:
        ``(address, consumed_octets)``.
    """
    if not data:
        raise TruncatedTLV("Missing address family")
    family = parse_family(data[0])
    octets = ADDRESS_OCTETS[family]
    raw = data[1:1 + octets]
    if len(raw) < octets:
        raise TruncatedTLV(f"{family.name} address needs {octets} octets, got {len(raw)}")
    return ipaddress.ip_address(raw), 1 + octets
