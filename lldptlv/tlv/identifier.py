"""
Identifier values carried by the Chassis ID and Port ID TLVs.

Both TLVs are ``subtype (1) + id (1-254 octets)``. The subtype decides how
the id octets are read; the four shapes are listed in ``IdKind``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, ClassVar

from lldptlv.core.binary import hex_padded
from lldptlv.errors import InvalidField, MalformedText, TruncatedTLV
from lldptlv.tlv.address import coerce_address, pack_address, unpack_address
from lldptlv.tlv.base import TLV, unpack_header

MAC_LENGTH = 6
_MAC_RE = re.compile(r"^[0-9a-fA-F]{2}([:-]?)(?:[0-9a-fA-F]{2}\1){4}[0-9a-fA-F]{2}$")


class IdKind(Enum):
    TEXT = "text"
    MAC = "mac"
    NETWORK = "network"
    OPAQUE = "opaque"


def format_mac(raw: bytes) -> str:
    return ":".join(f"{b:02x}" for b in raw)


def normalize_mac(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        if len(value) != MAC_LENGTH:
            raise InvalidField(f"MAC address must be {MAC_LENGTH} octets, got {len(value)}")
        return format_mac(bytes(value))
    if isinstance(value, str) and _MAC_RE.match(value):
        return format_mac(bytes.fromhex(re.sub(r"[:-]", "", value)))
    raise InvalidField(f"Not a MAC address: {value!r}")


def normalize_id(kind: IdKind, value: Any) -> Any:
    if kind is IdKind.MAC:
        return normalize_mac(value)
    if kind is IdKind.NETWORK:
        return coerce_address(value)
    if kind is IdKind.OPAQUE:
        if not isinstance(value, (bytes, bytearray)):
            raise InvalidField(f"Identifier must be bytes, got {type(value).__name__}")
        return bytes(value)
    if not isinstance(value, str):
        raise InvalidField(f"Identifier must be a str, got {type(value).__name__}")
    return value


def pack_id(kind: IdKind, value: Any) -> bytes:
    if kind is IdKind.MAC:
        return bytes.fromhex(value.replace(":", ""))
    if kind is IdKind.NETWORK:
        return pack_address(value)
    if kind is IdKind.OPAQUE:
        return value
    return value.encode("utf-8")


def unpack_id(kind: IdKind, raw: bytes) -> Any:
    if kind is IdKind.MAC:
        if len(raw) != MAC_LENGTH:
            raise InvalidField(f"MAC address must be {MAC_LENGTH} octets, got {len(raw)}")
        return format_mac(raw)
    if kind is IdKind.NETWORK:
        address, consumed = unpack_address(raw)
        if consumed != len(raw):
            raise InvalidField(f"Network address id has {len(raw) - consumed} trailing octets")
        return address
    if kind is IdKind.OPAQUE:
        return raw
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedText(f"Identifier is not valid UTF-8: {exc}") from exc


def render_id(kind: IdKind, value: Any) -> str:
    if kind is IdKind.OPAQUE:
        return hex_padded(value)
    return str(value)


@dataclass(frozen=True)
class IdentifierTLV(TLV):
    """Shared codec for the Chassis ID and Port ID TLVs."""
    subtype: IntEnum
    value: Any
    subtypes: ClassVar[type[IntEnum]]
    kinds: ClassVar[dict[int, IdKind]]

    def __post_init__(self) -> None:
        try:
            subtype = self.subtypes(self.subtype)
        except ValueError:
            raise InvalidField(f"Unknown {type(self).__name__} subtype {self.subtype!r}") from None
        object.__setattr__(self, "subtype", subtype)
        object.__setattr__(self, "value", normalize_id(self.kind, self.value))
        if not self.payload_length() > 1:
            raise InvalidField(f"{type(self).__name__} identifier must not be empty")
        self._check_payload_ceiling()

    @classmethod
    def from_bytes(cls, data: bytes):
        length, payload = unpack_header(data, cls.tlv_type)
        if length < 2:
            raise InvalidField(f"{cls.__name__} needs a subtype and at least one id octet, length is {length}")
        if len(payload) < length:
            raise TruncatedTLV(f"Length field says {length} octets, only {len(payload)} present")
        try:
            subtype = cls.subtypes(payload[0])
        except ValueError:
            raise InvalidField(f"Unknown {cls.__name__} subtype {payload[0]}") from None
        return cls(subtype, unpack_id(cls.kinds[subtype], payload[1:]))

    @property
    def kind(self) -> IdKind:
        return self.kinds[self.subtype]

    def payload(self) -> bytes:
        return bytes([self.subtype]) + pack_id(self.kind, self.value)

    def render(self) -> str:
        return f'{type(self).__name__}({int(self.subtype)}, "{render_id(self.kind, self.value)}")'

    def as_dict(self) -> dict[str, Any]:
        value = self.value.hex() if self.kind is IdKind.OPAQUE else str(self.value)
        return {"type": self.tlv_type.name, "subtype": self.subtype.name, "value": value}
