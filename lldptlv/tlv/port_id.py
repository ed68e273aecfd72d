"""
Port ID TLV.

Identifies the port the LLDPDU was sent from. Mandatory and second in every
LLDPDU. Same layout as the Chassis ID TLV with its own subtype table.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from lldptlv.tlv.identifier import IdentifierTLV, IdKind
from lldptlv.tlv.types import TLVType


class PortIdSubtype(IntEnum):
    INTERFACE_ALIAS = 1
    PORT_COMPONENT = 2
    MAC_ADDRESS = 3
    NETWORK_ADDRESS = 4
    INTERFACE_NAME = 5
    AGENT_CIRCUIT_ID = 6
    LOCALLY_ASSIGNED = 7


PORT_ID_KINDS: dict[int, IdKind] = {
    PortIdSubtype.INTERFACE_ALIAS: IdKind.TEXT,
    PortIdSubtype.PORT_COMPONENT: IdKind.TEXT,
    PortIdSubtype.MAC_ADDRESS: IdKind.MAC,
    PortIdSubtype.NETWORK_ADDRESS: IdKind.NETWORK,
    PortIdSubtype.INTERFACE_NAME: IdKind.TEXT,
    PortIdSubtype.AGENT_CIRCUIT_ID: IdKind.OPAQUE,
    PortIdSubtype.LOCALLY_ASSIGNED: IdKind.TEXT,
}


@dataclass(frozen=True)
class PortIdTLV(IdentifierTLV):
    tlv_type: ClassVar[TLVType] = TLVType.PORT_ID
    subtypes: ClassVar[type[IntEnum]] = PortIdSubtype
    kinds: ClassVar[dict[int, IdKind]] = PORT_ID_KINDS
