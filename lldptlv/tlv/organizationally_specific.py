"""
Organizationally Specific TLV.

Lets vendors and standards bodies define their own TLVs::

    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-...-+-+-+-+-+-+-+-+-+-+-+-...-+-+-+
    |     127     |      Length     |  OUI (3)  | Subtype (1) |    Value    |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-...-+-+-+-+-+-+-+-+-+-+-+-...-+-+-+

The value is opaque and passed through untouched.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from lldptlv.core.binary import hex_unpadded
from lldptlv.errors import InvalidField, TruncatedTLV
from lldptlv.tlv.base import TLV, unpack_header
from lldptlv.tlv.types import TLVType

OUI_LENGTH = 3
HEADER_OCTETS = OUI_LENGTH + 1


@dataclass(frozen=True)
class OrganizationallySpecificTLV(TLV):
    oui: bytes
    subtype: int
    value: bytes = b""
    tlv_type: ClassVar[TLVType] = TLVType.ORGANIZATIONALLY_SPECIFIC

    def __post_init__(self) -> None:
        if not isinstance(self.oui, (bytes, bytearray)) or len(self.oui) != OUI_LENGTH:
            raise InvalidField(f"OUI must be exactly {OUI_LENGTH} octets, got {self.oui!r}")
        if not isinstance(self.subtype, int) or not 0 <= self.subtype <= 0xFF:
            raise InvalidField(f"Subtype must fit in one octet, got {self.subtype!r}")
        if not isinstance(self.value, (bytes, bytearray)):
            raise InvalidField(f"Value must be bytes, got {type(self.value).__name__}")
        object.__setattr__(self, "oui", bytes(self.oui))
        object.__setattr__(self, "value", bytes(self.value))
        self._check_payload_ceiling()

    @classmethod
    def from_bytes(cls, data: bytes) -> "OrganizationallySpecificTLV":
        length, payload = unpack_header(data, cls.tlv_type)
        if length < HEADER_OCTETS:
            raise InvalidField(
                f"Organizationally Specific TLV needs at least {HEADER_OCTETS} octets, length is {length}"
            )
        if len(payload) < length:
            raise TruncatedTLV(f"Length field says {length} octets, only {len(payload)} present")
        return cls(payload[:OUI_LENGTH], payload[OUI_LENGTH], payload[HEADER_OCTETS:])

    def payload(self) -> bytes:
        return self.oui + bytes([self.subtype]) + self.value

    def payload_length(self) -> int:
        return HEADER_OCTETS + len(self.value)

    def render(self) -> str:
        return (
            f'OrganizationallySpecificTLV("{hex_unpadded(self.oui)}", {self.subtype}, '
            f'"{hex_unpadded(self.value)}")'
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "type": self.tlv_type.name,
            "oui": self.oui.hex(),
            "subtype": self.subtype,
            "value": self.value.hex(),
        }
