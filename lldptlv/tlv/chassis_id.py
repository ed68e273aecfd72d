"""
Chassis ID TLV.

Identifies the chassis of the sending LLDP agent. Mandatory and first in
every LLDPDU::

    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-...-+-+-+-+
    |      1      |      Length     | Subtype (1) |   Chassis ID    |
    +-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-+-...-+-+-+-+
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

from lldptlv.tlv.identifier import IdentifierTLV, IdKind
from lldptlv.tlv.types import TLVType


class ChassisIdSubtype(IntEnum):
    CHASSIS_COMPONENT = 1
    INTERFACE_ALIAS = 2
    PORT_COMPONENT = 3
    MAC_ADDRESS = 4
    NETWORK_ADDRESS = 5
    INTERFACE_NAME = 6
    LOCALLY_ASSIGNED = 7


CHASSIS_ID_KINDS: dict[int, IdKind] = {
    ChassisIdSubtype.CHASSIS_COMPONENT: IdKind.TEXT,
    ChassisIdSubtype.INTERFACE_ALIAS: IdKind.TEXT,
    ChassisIdSubtype.PORT_COMPONENT: IdKind.TEXT,
    ChassisIdSubtype.MAC_ADDRESS: IdKind.MAC,
    ChassisIdSubtype.NETWORK_ADDRESS: IdKind.NETWORK,
    ChassisIdSubtype.INTERFACE_NAME: IdKind.TEXT,
    ChassisIdSubtype.LOCALLY_ASSIGNED: IdKind.TEXT,
}


@dataclass(frozen=True)
class ChassisIdTLV(IdentifierTLV):
    tlv_type: ClassVar[TLVType] = TLVType.CHASSIS_ID
    subtypes: ClassVar[type[IntEnum]] = ChassisIdSubtype
    kinds: ClassVar[dict[int, IdKind]] = CHASSIS_ID_KINDS
