"""
Exceptions raised by the c-hash library.

All of them derive from ChashError, which is a ValueError, so callers that
only care about "bad input" can catch a single type.
"""


class ChashError(ValueError):
    """Base class for every c-hash error."""


class InvalidInputError(ChashError):
    """Argument has the wrong type or shape (e.g. a non-binary bit-string)."""


class InvalidBitLengthError(InvalidInputError):
    """Bit-string length is not a multiple of 8."""


class UnsupportedLengthError(ChashError):
    """Requested c-hash length is not 160 or 288."""


class LengthMismatchError(ChashError):
    """A bit-string or encoded c-hash has the wrong length for this stage."""


class ChecksumLengthMismatchError(ChashError):
    """Checksum is not exactly 32 bits, or an offset table is not 32 entries."""
