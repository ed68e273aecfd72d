"""
Time To Live TLV.

Number of seconds the receiving agent should treat the sender's information
as valid::

    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |      3      |    Length = 2   |          TTL (seconds)        |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from lldptlv.errors import FixedLengthViolation, InvalidField, TruncatedTLV
from lldptlv.tlv.base import TLV, unpack_header
from lldptlv.tlv.types import TLVType

TTL_LENGTH = 2


@dataclass(frozen=True)
class TtlTLV(TLV):
    seconds: int
    tlv_type: ClassVar[TLVType] = TLVType.TTL

    def __post_init__(self) -> None:
        if not isinstance(self.seconds, int) or not 0 <= self.seconds <= 0xFFFF:
            raise InvalidField(f"TTL must be a 16-bit unsigned integer, got {self.seconds!r}")

    @classmethod
    def from_bytes(cls, data: bytes) -> "TtlTLV":
        length, payload = unpack_header(data, cls.tlv_type)
        if length != TTL_LENGTH:
            raise FixedLengthViolation(f"TTL TLV length must be {TTL_LENGTH}, got {length}")
        if len(payload) < TTL_LENGTH:
            raise TruncatedTLV("TTL TLV payload is truncated")
        return cls(int.from_bytes(payload, "big"))

    def payload(self) -> bytes:
        return self.seconds.to_bytes(TTL_LENGTH, "big")

    def payload_length(self) -> int:
        return TTL_LENGTH

    def render(self) -> str:
        return f"TtlTLV({self.seconds})"

    def as_dict(self) -> dict[str, Any]:
        return {"type": self.tlv_type.name, "seconds": self.seconds}
