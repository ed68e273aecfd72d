from __future__ import annotations

from typing import Iterable

from lldptlv.errors import LengthOverflow, TruncatedTLV

HEADER_LENGTH = 2
# The low bit of the type octet extends the length field by 512.
LENGTH_EXTENSION = 512
MAX_LENGTH = 767
MAX_PAYLOAD_LENGTH = 255


def decode_length(byte0: int, byte1: int) -> int:
    length = byte1 & 0xFF
    if byte0 & 0x01:
        length += LENGTH_EXTENSION
    return length


def encode_length(length: int) -> tuple[int, int]:
    """
    Split a payload length into the type-octet low bit and the length octet.

    Returns:
        ``(low_bit, length_byte)``. ``low_bit`` is 1 iff ``length >= 512``.

    Raises:
        LengthOverflow: if ``length`` is outside 0-767, or in 256-511 where the
            length octet cannot carry it without the extension bit.
    """
    if length < 0 or length > MAX_LENGTH:
        raise LengthOverflow(f"Length {length} is outside the representable range 0-{MAX_LENGTH}")
    if MAX_PAYLOAD_LENGTH < length < LENGTH_EXTENSION:
        raise LengthOverflow(f"Length {length} falls in the gap 256-511 and cannot be encoded")
    low_bit = 1 if length >= LENGTH_EXTENSION else 0
    return low_bit, length & 0xFF


def tlv_size(data: bytes) -> int:
    """Total size in octets (header included) of the TLV at the head of ``data``."""
    if len(data) < HEADER_LENGTH:
        raise TruncatedTLV("Buffer too short to contain a TLV header")
    return decode_length(data[0], data[1]) + HEADER_LENGTH


def get_bit(value: int, bit_index: int, width: int = 16) -> bool:
    if bit_index < 0 or bit_index >= width:
        raise ValueError(f"bit_index must be between 0 and {width - 1}")
    return bool(value & (1 << bit_index))


def contains_bits(superset: int, subset: int, width: int = 16) -> bool:
    for bit in range(width):
        if get_bit(subset, bit, width) and not get_bit(superset, bit, width):
            return False
    return True


def hex_padded(data: Iterable[int] | bytes) -> str:
    return "".join(f"{b:02X}" for b in data)


def hex_unpadded(data: Iterable[int] | bytes) -> str:
    return "".join(f"{b:X}" for b in data)
