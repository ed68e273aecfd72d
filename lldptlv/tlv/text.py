"""
String-valued TLVs: Port Description, System Name and System Description.

All three share one layout, the UTF-8 encoded string filling the payload::

    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-...-+-+-+-+
    |  4 / 5 / 6  |      Length     |    String (0-255)   |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-...-+-+-+-+
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from lldptlv.errors import InvalidField, MalformedText
from lldptlv.tlv.base import TLV, unpack_header
from lldptlv.tlv.types import TLVType


@dataclass(frozen=True)
class _TextTLV(TLV):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidField(f"{type(self).__name__} value must be a str, got {type(self.value).__name__}")
        self._check_payload_ceiling()

    @classmethod
    def from_bytes(cls, data: bytes):
        length, payload = unpack_header(data, cls.tlv_type)
        if len(payload) != length:
            raise MalformedText(
                f"{cls.__name__} length field says {length} octets, payload has {len(payload)}"
            )
        try:
            value = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedText(f"{cls.__name__} payload is not valid UTF-8: {exc}") from exc
        return cls(value)

    def payload(self) -> bytes:
        return self.value.encode("utf-8")

    def payload_length(self) -> int:
        return len(self.payload())

    def render(self) -> str:
        return f'{type(self).__name__}("{self.value}")'

    def as_dict(self) -> dict[str, Any]:
        return {"type": self.tlv_type.name, "value": self.value}


@dataclass(frozen=True)
class PortDescriptionTLV(_TextTLV):
    """Alphanumeric description of the sending port, e.g. ``ifDescr``."""
    tlv_type: ClassVar[TLVType] = TLVType.PORT_DESCRIPTION


@dataclass(frozen=True)
class SystemNameTLV(_TextTLV):
    """Administratively assigned system name, e.g. ``sysName``."""
    tlv_type: ClassVar[TLVType] = TLVType.SYSTEM_NAME


@dataclass(frozen=True)
class SystemDescriptionTLV(_TextTLV):
    """Description of the system: hardware, OS and networking software."""
    tlv_type: ClassVar[TLVType] = TLVType.SYSTEM_DESCRIPTION
