"""
System Capabilities TLV.

Identifies the primary functions of the system and which of them are
enabled::

    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+
    |      7      |    Length = 4   |     System Capabilities (2)   |    Enabled Capabilities (2)   |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+

A capability can only be enabled if it is also supported. Bitmaps that
violate this are rejected both at construction and when decoding.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Any, ClassVar

from lldptlv.core.binary import contains_bits
from lldptlv.errors import CapabilityInvariantViolation, FixedLengthViolation, InvalidField, TruncatedTLV
from lldptlv.tlv.base import TLV, unpack_header
from lldptlv.tlv.types import TLVType

CAPABILITIES_LENGTH = 4


class SystemCapability(IntFlag):
    """
    Capability bits. Combine with ``|``, e.g. a WLAN router::

        SystemCapability.WLAN_AP | SystemCapability.ROUTER
    """
    OTHER = 1
    REPEATER = 2
    BRIDGE = 4
    WLAN_AP = 8
    ROUTER = 16
    TELEPHONE = 32
    DOCSIS_DEVICE = 64
    STATION_ONLY = 128
    C_VLAN_COMPONENT = 256
    S_VLAN_COMPONENT = 512
    TWO_PORT_MAC_RELAY = 1024


def _check_bitmap(name: str, value: Any) -> None:
    if not isinstance(value, int) or not 0 <= value <= 0xFFFF:
        raise InvalidField(f"{name} capabilities must be a 16-bit bitmap, got {value!r}")


@dataclass(frozen=True)
class SystemCapabilitiesTLV(TLV):
    supported: int
    enabled: int
    tlv_type: ClassVar[TLVType] = TLVType.SYSTEM_CAPABILITIES

    def __post_init__(self) -> None:
        _check_bitmap("supported", self.supported)
        _check_bitmap("enabled", self.enabled)
        object.__setattr__(self, "supported", int(self.supported))
        object.__setattr__(self, "enabled", int(self.enabled))
        if not contains_bits(self.supported, self.enabled):
            raise CapabilityInvariantViolation(
                f"Enabled capabilities 0x{self.enabled:04x} are not all supported (0x{self.supported:04x})"
            )

    @classmethod
    def from_bytes(cls, data: bytes) -> "SystemCapabilitiesTLV":
        length, payload = unpack_header(data, cls.tlv_type)
        if length != CAPABILITIES_LENGTH:
            raise FixedLengthViolation(
                f"System Capabilities TLV length must be {CAPABILITIES_LENGTH}, got {length}"
            )
        if len(payload) < CAPABILITIES_LENGTH:
            raise TruncatedTLV("System Capabilities TLV payload is truncated")
        supported = int.from_bytes(payload[0:2], "big")
        enabled = int.from_bytes(payload[2:4], "big")
        return cls(supported, enabled)

    @property
    def value(self) -> int:
        return (self.supported << 16) | self.enabled

    def supports(self, capabilities: int) -> bool:
        """True if every capability in ``capabilities`` is supported."""
        return contains_bits(self.supported, int(capabilities))

    def is_enabled(self, capabilities: int) -> bool:
        """True if every capability in ``capabilities`` is enabled."""
        return contains_bits(self.enabled, int(capabilities))

    def payload(self) -> bytes:
        return self.value.to_bytes(CAPABILITIES_LENGTH, "big")

    def payload_length(self) -> int:
        return CAPABILITIES_LENGTH

    def render(self) -> str:
        return f"SystemCapabilitiesTLV({self.supported}, {self.enabled})"

    def as_dict(self) -> dict[str, Any]:
        return {
            "type": self.tlv_type.name,
            "supported": self.supported,
            "enabled": self.enabled,
        }
