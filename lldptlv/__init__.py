from lldptlv.config import CodecSettings, get_settings
from lldptlv.core.binary import decode_length, encode_length, tlv_size
from lldptlv.errors import (
    AddressFamilyUnrecognized,
    CapabilityInvariantViolation,
    FixedLengthViolation,
    InvalidField,
    LengthOverflow,
    MalformedText,
    OidOverflow,
    TLVError,
    TruncatedTLV,
    TypeMismatch,
    UnknownTypeTag,
)
from lldptlv.tlv import (
    AddressFamily,
    ChassisIdSubtype,
    ChassisIdTLV,
    EndOfLLDPDUTLV,
    InterfaceNumbering,
    ManagementAddressTLV,
    OrganizationallySpecificTLV,
    PortDescriptionTLV,
    PortIdSubtype,
    PortIdTLV,
    SystemCapabilitiesTLV,
    SystemCapability,
    SystemDescriptionTLV,
    SystemNameTLV,
    TLVRecord,
    TLVType,
    TtlTLV,
    classify,
    decode,
    encode,
    encoded_length,
    render,
    type_of,
)
from importlib.metadata import PackageNotFoundError, version

__all__ = [
    "AddressFamily",
    "AddressFamilyUnrecognized",
    "CapabilityInvariantViolation",
    "ChassisIdSubtype",
    "ChassisIdTLV",
    "CodecSettings",
    "EndOfLLDPDUTLV",
    "FixedLengthViolation",
    "InterfaceNumbering",
    "InvalidField",
    "LengthOverflow",
    "MalformedText",
    "ManagementAddressTLV",
    "OidOverflow",
    "OrganizationallySpecificTLV",
    "PortDescriptionTLV",
    "PortIdSubtype",
    "PortIdTLV",
    "SystemCapabilitiesTLV",
    "SystemCapability",
    "SystemDescriptionTLV",
    "SystemNameTLV",
    "TLVError",
    "TLVRecord",
    "TLVType",
    "TruncatedTLV",
    "TtlTLV",
    "TypeMismatch",
    "UnknownTypeTag",
    "classify",
    "decode",
    "decode_length",
    "encode",
    "encode_length",
    "encoded_length",
    "get_settings",
    "render",
    "tlv_size",
    "type_of",
]

try:
    __version__ = version("lldptlv")
except PackageNotFoundError:
    __version__ = "0.0.0"
