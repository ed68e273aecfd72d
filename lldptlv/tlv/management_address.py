"""
Management Address TLV.

An address of the sending agent that higher layer entities can use to reach
it, e.g. the web interface of a switch::

    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-...-+-+
    |      8      |      Length     | Addr String | Addr Subtype|    Address    |
    |             |                 |  Length (1) |     (1)     |  (4 or 16)    |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-...-+-+

    +-+-+-+-+-+-+-+-+-+-+-...-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-...-+-+-+
    | IF Numbering| Interface Number| OID Length  |  Object Identifier|
    | Subtype (1) |       (4)       |     (1)     |   (0-128 octets)  |
    +-+-+-+-+-+-+-+-+-+-+-...-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-...-+-+-+

The address string length counts the subtype octet plus the address octets,
so it is 5 for IPv4 and 17 for IPv6. The OID is carried but not interpreted.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, ClassVar

from lldptlv.core.binary import hex_padded
from lldptlv.errors import InvalidField, OidOverflow, TruncatedTLV
from lldptlv.tlv.address import (
    ADDRESS_OCTETS,
    IPAddress,
    coerce_address,
    family_of,
    pack_address,
    parse_family,
)
from lldptlv.tlv.base import TLV, unpack_header
from lldptlv.tlv.types import TLVType

MAX_OID_LENGTH = 128
# address string length + interface subtype + interface number + oid length
FIXED_OCTETS = 1 + 1 + 4 + 1


class InterfaceNumbering(IntEnum):
    UNKNOWN = 1
    IF_INDEX = 2
    SYSTEM_PORT = 3


def _interface_numbering(value: Any) -> InterfaceNumbering:
    try:
        return InterfaceNumbering(value)
    except ValueError:
        raise InvalidField(f"Unknown interface numbering subtype {value!r}") from None


@dataclass(frozen=True)
class ManagementAddressTLV(TLV):
    address: IPAddress
    interface_number: int
    interface_subtype: InterfaceNumbering = InterfaceNumbering.UNKNOWN
    oid: bytes = field(default=b"")
    tlv_type: ClassVar[TLVType] = TLVType.MANAGEMENT_ADDRESS

    def __post_init__(self) -> None:
        object.__setattr__(self, "address", coerce_address(self.address))
        object.__setattr__(self, "interface_subtype", _interface_numbering(self.interface_subtype))
        if not isinstance(self.interface_number, int) or not 0 <= self.interface_number <= 0xFFFFFFFF:
            raise InvalidField(f"Interface number must be a 32-bit unsigned integer, got {self.interface_number!r}")
        if not isinstance(self.oid, (bytes, bytearray)):
            raise InvalidField(f"OID must be bytes, got {type(self.oid).__name__}")
        object.__setattr__(self, "oid", bytes(self.oid))
        if len(self.oid) > MAX_OID_LENGTH:
            raise OidOverflow(f"OID of {len(self.oid)} octets exceeds {MAX_OID_LENGTH}")

    @classmethod
    def from_bytes(cls, data: bytes) -> "ManagementAddressTLV":
        length, payload = unpack_header(data, cls.tlv_type)
        if len(payload) < 2:
            raise TruncatedTLV("Management Address TLV is missing the address header")

        address_string_length = payload[0]
        family = parse_family(payload[1])
        octets = ADDRESS_OCTETS[family]
        if address_string_length != octets + 1:
            raise InvalidField(
                f"Address string length {address_string_length} does not match {family.name} ({octets + 1})"
            )

        # Everything after the address sits at an offset set by its length.
        offset = 2 + octets
        if len(payload) < offset + 6:
            raise TruncatedTLV("Management Address TLV is truncated")
        address = coerce_address(payload[2:offset])
        interface_subtype = _interface_numbering(payload[offset])
        interface_number = int.from_bytes(payload[offset + 1:offset + 5], "big")

        oid_length = payload[offset + 5]
        if oid_length > MAX_OID_LENGTH:
            raise OidOverflow(f"OID length {oid_length} exceeds {MAX_OID_LENGTH}")
        oid = payload[offset + 6:offset + 6 + oid_length]
        if len(oid) < oid_length:
            raise OidOverflow(f"OID length {oid_length} but only {len(oid)} octets present")

        expected = offset + 6 + oid_length
        if length != expected:
            raise InvalidField(f"Length field {length} does not match the encoded fields ({expected})")

        return cls(address, interface_number, interface_subtype, oid)

    @property
    def family(self):
        return family_of(self.address)

    def payload(self) -> bytes:
        address = pack_address(self.address)
        return (
            bytes([len(address)])
            + address
            + bytes([self.interface_subtype])
            + self.interface_number.to_bytes(4, "big")
            + bytes([len(self.oid)])
            + self.oid
        )

    def payload_length(self) -> int:
        return FIXED_OCTETS + 1 + ADDRESS_OCTETS[self.family] + len(self.oid)

    def render(self) -> str:
        return f'ManagementAddressTLV("{self.address}", {self.interface_number}, "{hex_padded(self.oid)}")'

    def as_dict(self) -> dict[str, Any]:
        return {
            "type": self.tlv_type.name,
            "address": str(self.address),
            "interface_subtype": self.interface_subtype.name,
            "interface_number": self.interface_number,
            "oid": self.oid.hex(),
        }
