"""
LLDP TLV records and the dispatcher that decodes them.

Each record type lives in its own module and owns its payload layout. The
dispatcher picks the record class from the 7-bit type tag.
"""
from lldptlv.tlv.address import AddressFamily
from lldptlv.tlv.base import TLV, pack_header, unpack_header
from lldptlv.tlv.chassis_id import ChassisIdSubtype, ChassisIdTLV
from lldptlv.tlv.dispatch import (
    CODECS,
    TLVRecord,
    codec_for,
    decode,
    encode,
    encoded_length,
    from_bytes,
    render,
    to_bytes,
    type_of,
)
from lldptlv.tlv.end_of_lldpdu import EndOfLLDPDUTLV
from lldptlv.tlv.management_address import InterfaceNumbering, ManagementAddressTLV
from lldptlv.tlv.organizationally_specific import OrganizationallySpecificTLV
from lldptlv.tlv.port_id import PortIdSubtype, PortIdTLV
from lldptlv.tlv.system_capabilities import SystemCapabilitiesTLV, SystemCapability
from lldptlv.tlv.text import PortDescriptionTLV, SystemDescriptionTLV, SystemNameTLV
from lldptlv.tlv.ttl import TtlTLV
from lldptlv.tlv.types import TLVType, classify

__all__ = [
    "AddressFamily",
    "ChassisIdSubtype",
    "ChassisIdTLV",
    "CODECS",
    "EndOfLLDPDUTLV",
    "InterfaceNumbering",
    "ManagementAddressTLV",
    "OrganizationallySpecificTLV",
    "PortDescriptionTLV",
    "PortIdSubtype",
    "PortIdTLV",
    "SystemCapabilitiesTLV",
    "SystemCapability",
    "SystemDescriptionTLV",
    "SystemNameTLV",
    "TLV",
    "TLVRecord",
    "TLVType",
    "TtlTLV",
    "classify",
    "codec_for",
    "decode",
    "encode",
    "encoded_length",
    "from_bytes",
    "pack_header",
    "render",
    "to_bytes",
    "type_of",
    "unpack_header",
]
