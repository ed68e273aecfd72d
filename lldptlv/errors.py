"""
Exceptions raised while constructing, decoding or encoding LLDP TLVs.

Every error derives from ``TLVError`` (itself a ``ValueError``), so callers
that only care about "this TLV is bad" can catch a single class and decide
whether to drop, log or resynchronize.
"""
from __future__ import annotations


class TLVError(ValueError):
    pass


class UnknownTypeTag(TLVError):
    def __init__(self, tag: int):
        self.tag = tag
        super().__init__(f"Unknown TLV type tag {tag}")


class TypeMismatch(TLVError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected TLV type {expected}, got {actual}")


class LengthOverflow(TLVError):
    pass


class FixedLengthViolation(TLVError):
    pass


class MalformedText(TLVError):
    pass


class CapabilityInvariantViolation(TLVError):
    pass


class OidOverflow(TLVError):
    pass


class AddressFamilyUnrecognized(TLVError):
    def __init__(self, family: int):
        self.family = family
        super().__init__(f"Unrecognized address family {family}")


class TruncatedTLV(TLVError):
    pass


class InvalidField(TLVError):
    pass


__all__ = [
    "TLVError",
    "UnknownTypeTag",
    "TypeMismatch",
    "LengthOverflow",
    "FixedLengthViolation",
    "MalformedText",
    "CapabilityInvariantViolation",
    "OidOverflow",
    "AddressFamilyUnrecognized",
    "TruncatedTLV",
    "InvalidField",
]
