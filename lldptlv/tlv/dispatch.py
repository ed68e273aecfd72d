"""
Envelope dispatcher: decode any TLV by its type tag, and the type-agnostic
operations over decoded records.
"""
from __future__ import annotations

import logging
from typing import Union

from lldptlv.config import get_settings
from lldptlv.errors import TLVError, TruncatedTLV
from lldptlv.logging import LOGGER_NAME, create_logger, preview
from lldptlv.tlv.base import TLV
from lldptlv.tlv.chassis_id import ChassisIdTLV
from lldptlv.tlv.end_of_lldpdu import EndOfLLDPDUTLV
from lldptlv.tlv.management_address import ManagementAddressTLV
from lldptlv.tlv.organizationally_specific import OrganizationallySpecificTLV
from lldptlv.tlv.port_id import PortIdTLV
from lldptlv.tlv.system_capabilities import SystemCapabilitiesTLV
from lldptlv.tlv.text import PortDescriptionTLV, SystemDescriptionTLV, SystemNameTLV
from lldptlv.tlv.ttl import TtlTLV
from lldptlv.tlv.types import TLVType, classify

TLVRecord = Union[
    EndOfLLDPDUTLV,
    ChassisIdTLV,
    PortIdTLV,
    TtlTLV,
    PortDescriptionTLV,
    SystemNameTLV,
    SystemDescriptionTLV,
    SystemCapabilitiesTLV,
    ManagementAddressTLV,
    OrganizationallySpecificTLV,
]

CODECS: dict[TLVType, type[TLV]] = {
    TLVType.END_OF_LLDPDU: EndOfLLDPDUTLV,
    TLVType.CHASSIS_ID: ChassisIdTLV,
    TLVType.PORT_ID: PortIdTLV,
    TLVType.TTL: TtlTLV,
    TLVType.PORT_DESCRIPTION: PortDescriptionTLV,
    TLVType.SYSTEM_NAME: SystemNameTLV,
    TLVType.SYSTEM_DESCRIPTION: SystemDescriptionTLV,
    TLVType.SYSTEM_CAPABILITIES: SystemCapabilitiesTLV,
    TLVType.MANAGEMENT_ADDRESS: ManagementAddressTLV,
    TLVType.ORGANIZATIONALLY_SPECIFIC: OrganizationallySpecificTLV,
}

_missing = set(TLVType) - set(CODECS)
if _missing:
    raise RuntimeError(f"No codec registered for {sorted(t.name for t in _missing)}")
del _missing


_settings = get_settings()
logger = create_logger(LOGGER_NAME, _settings.log_ring_size, _settings.log_level)
del _settings


def codec_for(tlv_type: TLVType) -> type[TLV]:
    return CODECS[tlv_type]


def decode(data: bytes) -> TLVRecord:
    """
    Decode the TLV at the start of ``data``.

    The type tag picks the record class, which then validates and parses the
    whole buffer. Octets past the declared length are ignored.

    Raises:
        TLVError: any subclass, unchanged from the record decoder.
    """
    try:
        if not data:
            raise TruncatedTLV("Cannot decode a TLV from an empty buffer")
        record = codec_for(classify(data[0])).from_bytes(data)
    except TLVError as exc:
        logger.debug(
            "tlv_decode_failed",
            extra={"details": {
                "error": type(exc).__name__,
                "message": str(exc),
                "raw": preview(data, get_settings().log_preview_bytes),
            }},
        )
        raise
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("tlv_decoded", extra={"details": record.as_dict()})
    return record


def encode(record: TLVRecord) -> bytes:
    return record.to_bytes()


def type_of(record: TLVRecord) -> TLVType:
    return record.type_of()


def encoded_length(record: TLVRecord) -> int:
    """Payload length of ``record``, excluding the two header octets."""
    return record.payload_length()


def render(record: TLVRecord) -> str:
    return record.render()


from_bytes = decode
to_bytes = encode
