"""
End Of LLDPDU TLV.

Marks the end of an LLDPDU. It carries no payload, so the whole TLV is the
two octets ``00 00``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from lldptlv.errors import FixedLengthViolation
from lldptlv.tlv.base import TLV, unpack_header
from lldptlv.tlv.types import TLVType


@dataclass(frozen=True)
class EndOfLLDPDUTLV(TLV):
    tlv_type: ClassVar[TLVType] = TLVType.END_OF_LLDPDU

    @classmethod
    def from_bytes(cls, data: bytes) -> "EndOfLLDPDUTLV":
        length, _ = unpack_header(data, cls.tlv_type)
        if length != 0:
            raise FixedLengthViolation(f"End Of LLDPDU TLV must be empty, got length {length}")
        return cls()

    def payload(self) -> bytes:
        return b""

    def payload_length(self) -> int:
        return 0

    def render(self) -> str:
        return "EndOfLLDPDUTLV"

    def as_dict(self) -> dict[str, Any]:
        return {"type": self.tlv_type.name}
