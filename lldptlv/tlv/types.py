from __future__ import annotations

from enum import IntEnum

from lldptlv.errors import UnknownTypeTag


class TLVType(IntEnum):
    """7-bit TLV type tags defined by IEEE 802.1AB."""
    END_OF_LLDPDU = 0
    CHASSIS_ID = 1
    PORT_ID = 2
    TTL = 3
    PORT_DESCRIPTION = 4
    SYSTEM_NAME = 5
    SYSTEM_DESCRIPTION = 6
    SYSTEM_CAPABILITIES = 7
    MANAGEMENT_ADDRESS = 8
    ORGANIZATIONALLY_SPECIFIC = 127


def type_tag(byte0: int) -> int:
    return (byte0 & 0b11111110) >> 1


def classify(byte0: int) -> TLVType:
    """
    Map the first octet of a TLV to its ``TLVType``.

    The low bit belongs to the length field and is ignored.

    Raises:
        UnknownTypeTag: if the 7-bit tag is not one of the defined types.
    """
    tag = type_tag(byte0)
    try:
        return TLVType(tag)
    except ValueError:
        raise UnknownTypeTag(tag) from None
