"""
Envelope framing shared by all TLV records.

Every TLV starts with a two octet header::

     0                   1
     0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |   Type (7)  |   Length (9)    |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+

The low bit of the first octet is the high bit of the length field and adds
512 to the length octet. No record kind carries a payload long enough to
need it, so decoders reject it.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from lldptlv.core.binary import (
    HEADER_LENGTH,
    LENGTH_EXTENSION,
    MAX_PAYLOAD_LENGTH,
    decode_length,
    encode_length,
)
from lldptlv.errors import LengthOverflow, TruncatedTLV, TypeMismatch
from lldptlv.tlv.types import TLVType, type_tag


def pack_header(tlv_type: TLVType, length: int) -> bytes:
    low_bit, length_byte = encode_length(length)
    return bytes([(int(tlv_type) << 1) | low_bit, length_byte])


def unpack_header(data: bytes, expected: TLVType) -> tuple[int, bytes]:
    """
    Validate the header of ``data`` against ``expected`` and slice the payload.

    Octets beyond the declared length are ignored. The returned payload may be
    shorter than the declared length when ``data`` is truncated; each record
    decides which error that is.

    Returns:
        ``(declared_length, payload)``.
    """
    if len(data) < HEADER_LENGTH:
        raise TruncatedTLV("Buffer too short to contain a TLV header")
    tag = type_tag(data[0])
    if tag != expected:
        raise TypeMismatch(int(expected), tag)
    length = decode_length(data[0], data[1])
    if length >= LENGTH_EXTENSION:
        raise LengthOverflow(f"{expected.name} does not support extended length ({length})")
    return length, bytes(data[HEADER_LENGTH:HEADER_LENGTH + length])


class TLV(ABC):
    """
    Common behaviour of the concrete TLV records.

    Subclasses are frozen dataclasses. They set ``tlv_type`` and implement
    ``from_bytes``, ``payload``, ``render`` and ``as_dict``; ``payload_length``
    may be overridden when it is cheaper than building the payload.
    """
    tlv_type: ClassVar[TLVType]

    @classmethod
    @abstractmethod
    def from_bytes(cls, data: bytes) -> "TLV":
        """Parse one record from the head of ``data``."""

    @abstractmethod
    def payload(self) -> bytes:
        """Value octets, without the header."""

    def payload_length(self) -> int:
        return len(self.payload())

    @abstractmethod
    def render(self) -> str:
        ...

    @abstractmethod
    def as_dict(self) -> dict[str, Any]:
        ...

    def type_of(self) -> TLVType:
        return self.tlv_type

    def to_bytes(self) -> bytes:
        return pack_header(self.tlv_type, self.payload_length()) + self.payload()

    def _check_payload_ceiling(self) -> None:
        length = self.payload_length()
        if length > MAX_PAYLOAD_LENGTH:
            raise LengthOverflow(
                f"{type(self).__name__} payload of {length} octets exceeds {MAX_PAYLOAD_LENGTH}"
            )

    def __str__(self) -> str:
        return self.render()
